"""Benchmark objectives for box-constrained minimization.

Every function takes a 1-D array and returns a Python float; the global
minimum of each is 0.
"""

import numpy as np


def sphere(x) -> float:
    x = np.asarray(x, dtype=np.float64)
    return float(np.dot(x, x))


def rosenbrock(x) -> float:
    x = np.asarray(x, dtype=np.float64)
    head, tail = x[:-1], x[1:]
    return float(np.sum(100.0 * (tail - head ** 2) ** 2 + (1.0 - head) ** 2))


def rastrigin(x) -> float:
    x = np.asarray(x, dtype=np.float64)
    return float(10.0 * x.size + np.sum(x ** 2 - 10.0 * np.cos(2.0 * np.pi * x)))


def ackley(x) -> float:
    x = np.asarray(x, dtype=np.float64)
    a, b, c = 20.0, 0.2, 2.0 * np.pi
    rms = np.sqrt(max(np.dot(x, x) / x.size, 0.0))  # clamp FP roundoff below 0
    return float(-a * np.exp(-b * rms) - np.exp(np.mean(np.cos(c * x))) + a + np.e)


def griewank(x) -> float:
    x = np.asarray(x, dtype=np.float64)
    i = np.arange(1, x.size + 1)
    return float(1.0 + np.dot(x, x) / 4000.0 - np.prod(np.cos(x / np.sqrt(i))))


# name -> objective and (lower, upper) applied to every variable
FUNCTIONS = {
    "sphere":     {"f": sphere,     "bounds": (-5.12, 5.12)},
    "rosenbrock": {"f": rosenbrock, "bounds": (-5.0, 10.0)},
    "rastrigin":  {"f": rastrigin,  "bounds": (-5.12, 5.12)},
    "ackley":     {"f": ackley,     "bounds": (-32.768, 32.768)},
    "griewank":   {"f": griewank,   "bounds": (-600.0, 600.0)},
}

# final best_f at or below the threshold counts as a successful run
SUCCESS_THRESHOLDS = {
    "sphere": 1e-8,
    "rosenbrock": 1e-4,
    "rastrigin": 1e-4,
    "ackley": 1e-4,
    "griewank": 1e-4,
}
