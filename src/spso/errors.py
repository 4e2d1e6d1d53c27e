"""Exception types raised by the PSO solver.

Configuration and evaluation errors are fatal and surface to the caller.
Neighborhood lookup errors are absorbed by the engine and only logged.
"""


class PSOError(Exception):
    """Base class for all solver errors."""


class InvalidConfiguration(PSOError, ValueError):
    """Malformed or out-of-range parameters, or a malformed bounds provider."""


class NeighborhoodLookupFailure(PSOError, IndexError):
    """Informant lookup failed for a particle index."""


class EvaluationFailure(PSOError, RuntimeError):
    """The objective function could not produce a valid value."""
