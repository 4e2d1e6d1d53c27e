"""Bounds providers: box limits plus objective evaluation.

The solver only talks to a problem through ``number_of_variables``,
``lower_limit``/``upper_limit`` and ``evaluate``. ``FunctionProblem`` adapts a
plain ``f(x) -> float`` with scalar or per-variable bounds to that contract.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, Union

import numpy as np

from spso.algorithm.components.particle import Particle
from spso.errors import EvaluationFailure, InvalidConfiguration
from spso.problems.functions import FUNCTIONS

Bound = Union[float, Sequence[float]]


class Problem(ABC):
    """Box-constrained single-objective minimization problem."""

    name: str = "problem"

    @abstractmethod
    def number_of_variables(self) -> int:
        ...

    @abstractmethod
    def lower_limit(self, d: int) -> float:
        ...

    @abstractmethod
    def upper_limit(self, d: int) -> float:
        ...

    @abstractmethod
    def evaluate(self, particle: Particle) -> float:
        """Compute the objective of ``particle``, store it on the particle and return it."""

    def lower_bounds(self) -> np.ndarray:
        return np.array([self.lower_limit(d) for d in range(self.number_of_variables())], dtype=float)

    def upper_bounds(self) -> np.ndarray:
        return np.array([self.upper_limit(d) for d in range(self.number_of_variables())], dtype=float)

    def create_particle(self, rng) -> Particle:
        """Sample an unevaluated particle uniformly inside the box."""
        return Particle(rng.uniform(self.lower_bounds(), self.upper_bounds()))

    def validate(self) -> None:
        """Raise InvalidConfiguration if the bounds are unusable."""
        try:
            n = self.number_of_variables()
        except Exception as exc:
            raise InvalidConfiguration(f"{self.name}: cannot read number of variables") from exc
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n <= 0:
            raise InvalidConfiguration(f"{self.name}: number of variables must be a positive int, got {n!r}.")
        try:
            lo, hi = self.lower_bounds(), self.upper_bounds()
        except Exception as exc:
            raise InvalidConfiguration(f"{self.name}: cannot read variable bounds") from exc
        if lo.shape != (n,) or hi.shape != (n,):
            raise InvalidConfiguration(f"{self.name}: bounds must have {n} entries.")
        if not (np.all(np.isfinite(lo)) and np.all(np.isfinite(hi))):
            raise InvalidConfiguration(f"{self.name}: bounds must be finite.")
        bad = np.where(lo > hi)[0]
        if bad.size:
            raise InvalidConfiguration(
                f"{self.name}: lower limit exceeds upper limit for variables {bad.tolist()}."
            )


class FunctionProblem(Problem):
    """
    Problem built from an objective callable and box bounds.

    Parameters
    ----------
    name : str
        Label used in logs and experiment output.
    func : callable
        ``func(x: np.ndarray) -> float``. Must not mutate ``x``.
    lower, upper : float or sequence of float
        Scalar bounds are broadcast to ``dim`` variables.
    dim : int, optional
        Required when both bounds are scalars.
    """

    def __init__(self,
                 name: str,
                 func: Callable[[np.ndarray], float],
                 lower: Bound,
                 upper: Bound,
                 dim: Optional[int] = None):
        self.name = name
        self.func = func
        lo = np.atleast_1d(np.asarray(lower, dtype=float))
        hi = np.atleast_1d(np.asarray(upper, dtype=float))
        if dim is None:
            dim = max(lo.size, hi.size)
            if lo.size == 1 and hi.size == 1 and np.ndim(lower) == 0 and np.ndim(upper) == 0:
                raise InvalidConfiguration(f"{name}: dim is required with scalar bounds.")
        if not isinstance(dim, int) or dim <= 0:
            raise InvalidConfiguration(f"{name}: dim must be a positive int, got {dim!r}.")
        try:
            self._lower = np.broadcast_to(lo, (dim,)).copy()
            self._upper = np.broadcast_to(hi, (dim,)).copy()
        except ValueError as exc:
            raise InvalidConfiguration(f"{name}: bounds do not match dim={dim}.") from exc
        self._dim = dim

    def number_of_variables(self) -> int:
        return self._dim

    def lower_limit(self, d: int) -> float:
        return float(self._lower[d])

    def upper_limit(self, d: int) -> float:
        return float(self._upper[d])

    def lower_bounds(self) -> np.ndarray:
        return self._lower.copy()

    def upper_bounds(self) -> np.ndarray:
        return self._upper.copy()

    def evaluate(self, particle: Particle) -> float:
        try:
            value = float(self.func(particle.position.copy()))
        except Exception as exc:
            raise EvaluationFailure(f"{self.name}: objective raised for {particle.position.tolist()}") from exc
        if not math.isfinite(value):
            raise EvaluationFailure(f"{self.name}: objective returned {value} for {particle.position.tolist()}")
        particle.objective = value
        return value

    def __repr__(self):
        return f"FunctionProblem(name={self.name!r}, dim={self._dim})"


def make_problem(name: str, dim: int) -> FunctionProblem:
    """Build one of the registered benchmark functions in ``dim`` dimensions."""
    try:
        meta = FUNCTIONS[name]
    except KeyError:
        valid = ", ".join(sorted(FUNCTIONS))
        raise InvalidConfiguration(f"Unknown function '{name}'. Choose from: {valid}.") from None
    lo, hi = meta["bounds"]
    return FunctionProblem(name, meta["f"], lo, hi, dim=dim)
