"""Adaptive random informant topology (SPSO 2007).

The graph is stored as an index arena: row ``i`` of an ``(n, K)`` int array
holds the informants of particle ``i``. Regeneration replaces the whole array.
"""

from __future__ import annotations

from typing import List

import numpy as np

from spso.errors import InvalidConfiguration, NeighborhoodLookupFailure


def random_informants(n_particles: int, k: int, rng) -> np.ndarray:
    """
    Draw a random fixed out-degree informant table.

    Parameters
    ----------
    n_particles : int
        Number of particles in the swarm (must be >= 1).
    k : int
        Informants per particle (must satisfy 1 <= k <= n_particles).
    rng : RandomSource
        Source of the draws.

    Returns
    -------
    table : (n_particles, k) int ndarray
        table[i] holds k distinct indices in [0, n_particles).

    Notes
    -----
    - Particle i may draw itself. Its own personal best always takes part in
      the neighborhood-best scan anyway (see ``AdaptiveRandomNeighborhood.informants``).
    """
    if not isinstance(n_particles, (int, np.integer)) or n_particles <= 0:
        raise InvalidConfiguration(f"n_particles must be a positive int, got {n_particles!r}.")
    if not isinstance(k, (int, np.integer)) or k <= 0:
        raise InvalidConfiguration(f"k must be a positive int, got {k!r}.")
    if k > n_particles:
        raise InvalidConfiguration(f"k={k} cannot exceed n_particles={n_particles}.")

    table = np.empty((n_particles, k), dtype=int)
    for i in range(n_particles):
        table[i] = rng.choice(n_particles, k)
    return table


class AdaptiveRandomNeighborhood:
    """Randomized informant graph that can be regenerated on demand."""

    def __init__(self, swarm_size: int, k: int, rng):
        self.swarm_size = swarm_size
        self.k = k
        self.rng = rng
        self.recompute_count = 0
        self._table = random_informants(swarm_size, k, rng)

    def neighbors_of(self, i: int) -> List[int]:
        """Return the informant indices drawn for particle ``i``."""
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise NeighborhoodLookupFailure(f"Particle index must be an int, got {i!r}.")
        if not 0 <= i < self.swarm_size:
            raise NeighborhoodLookupFailure(
                f"Particle index {i} out of range for a swarm of {self.swarm_size}."
            )
        return [int(j) for j in self._table[i]]

    def informants(self, i: int) -> List[int]:
        """Scan order for the neighborhood best: ``i`` first, then its informants."""
        return [int(i)] + [j for j in self.neighbors_of(i) if j != i]

    def recompute(self) -> None:
        """Discard the current graph and draw a fresh one with the same shape."""
        self._table = random_informants(self.swarm_size, self.k, self.rng)
        self.recompute_count += 1

    @property
    def table(self) -> np.ndarray:
        return self._table.copy()

    def __len__(self) -> int:
        return self.swarm_size
