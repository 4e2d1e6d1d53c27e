"""Single-objective comparator and best-solution selection."""

from __future__ import annotations

from typing import Optional

from spso.algorithm.components.particle import Particle, best_solution_index


class ObjectiveComparator:
    """
    Order particles by objective value, lower is better.

    Returns -1 if ``a`` is preferred, 1 if ``b`` is preferred and 0 on ties.
    Particles without an objective rank after every evaluated particle.
    """

    def __init__(self, index: int = 0):
        # Only one objective is tracked per particle; index is kept for symmetry
        # with multi-objective comparators.
        if index != 0:
            raise ValueError("Only objective index 0 is supported.")
        self.index = index

    @staticmethod
    def _key(p: Particle) -> Optional[float]:
        return p.objective

    def __call__(self, a: Particle, b: Particle) -> int:
        fa, fb = self._key(a), self._key(b)
        if fa is None and fb is None:
            return 0
        if fa is None:
            return 1
        if fb is None:
            return -1
        if fa < fb:
            return -1
        if fa > fb:
            return 1
        return 0


__all__ = ["ObjectiveComparator", "best_solution_index"]
