"""Per-particle memory: personal bests, neighborhood bests and leader flags."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from spso.algorithm.components.particle import Particle, Swarm
from spso.errors import NeighborhoodLookupFailure

logger = logging.getLogger(__name__)


class SwarmMemory:
    """
    Best-so-far snapshots for every swarm index.

    ``self_leader[i]`` is True when ``neighborhood_best[i]`` is the very
    snapshot held in ``personal_best[i]``, i.e. particle i leads its own
    informant group. The velocity update branches on this flag.
    """

    def __init__(self, swarm: Swarm):
        n = len(swarm)
        self.personal_best: List[Particle] = [p.copy() for p in swarm]
        self.neighborhood_best: List[Optional[Particle]] = [None] * n
        self.self_leader = np.zeros(n, dtype=bool)

    def __len__(self) -> int:
        return len(self.personal_best)

    def update_personal_bests(self, swarm: Swarm) -> int:
        """Replace personal bests improved strictly by the current swarm."""
        improved = 0
        for i, particle in enumerate(swarm):
            if particle.objective < self.personal_best[i].objective:
                self.personal_best[i] = particle.copy()
                # the leader snapshot (if it was ours) is no longer our personal best
                self.self_leader[i] = False
                improved += 1
        return improved

    def neighborhood_best_of(self, i: int, neighborhood) -> Tuple[Particle, int]:
        """Best personal best among i's informants; the first minimum wins."""
        best_idx = None
        for j in neighborhood.informants(i):
            if best_idx is None or self.personal_best[j].objective < self.personal_best[best_idx].objective:
                best_idx = j
        return self.personal_best[best_idx], best_idx

    def update_neighborhood_bests(self, neighborhood, log: Optional[logging.Logger] = None) -> int:
        """
        Recompute every neighborhood best from the current personal bests.

        A failed lookup is logged and leaves that entry at its previous value.
        Returns the number of failed lookups.
        """
        log = log or logger
        failures = 0
        for i in range(len(self.personal_best)):
            try:
                best, leader = self.neighborhood_best_of(i, neighborhood)
            except NeighborhoodLookupFailure:
                log.error("Neighborhood lookup failed for particle %d", i, exc_info=True)
                failures += 1
                continue
            self.neighborhood_best[i] = best
            self.self_leader[i] = leader == i
        return failures
