"""Particle and Swarm containers.

A Particle is a decision vector plus its objective value. Snapshots stored as
personal or neighborhood bests are deep copies made with ``Particle.copy`` so
in-place updates of the live swarm never leak into memory.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Sequence

import numpy as np


class Particle:
    """Candidate solution: a position vector and its objective value."""

    __slots__ = ("position", "objective")

    def __init__(self, position, objective: Optional[float] = None):
        self.position = np.array(position, dtype=float)
        self.objective = objective

    @property
    def size(self) -> int:
        return int(self.position.size)

    def copy(self) -> "Particle":
        return Particle(self.position.copy(), self.objective)

    def __repr__(self):
        return f"Particle(position={self.position.tolist()}, objective={self.objective})"


def best_solution_index(particles: Sequence[Particle],
                        comparator: Callable[[Particle, Particle], int]) -> int:
    """Linear scan for the preferred particle; the first minimum wins ties."""
    if len(particles) == 0:
        raise ValueError("Cannot select the best of an empty collection.")
    best = 0
    for i in range(1, len(particles)):
        if comparator(particles[i], particles[best]) < 0:
            best = i
    return best


class Swarm:
    """
    Fixed-size ordered collection of particles.

    Indices ``0..len-1`` are stable identities for the whole run (they are the
    node ids of the neighborhood graph), so the container exposes no way to
    add or remove particles after construction.
    """

    def __init__(self, particles: Sequence[Particle]):
        if len(particles) == 0:
            raise ValueError("A swarm needs at least one particle.")
        self._particles: List[Particle] = list(particles)

    def __len__(self) -> int:
        return len(self._particles)

    def __getitem__(self, i: int) -> Particle:
        return self._particles[i]

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def objectives(self) -> np.ndarray:
        """Objective values in index order; unevaluated particles read as +inf."""
        return np.array(
            [np.inf if p.objective is None else p.objective for p in self._particles],
            dtype=float,
        )

    def best_index(self, comparator) -> int:
        return best_solution_index(self._particles, comparator)
