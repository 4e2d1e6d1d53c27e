"""Standard PSO 2007 engine, its components and iteration phases."""
