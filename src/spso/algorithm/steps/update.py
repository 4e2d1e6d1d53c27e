"""Memory update phase: personal bests first, then neighborhood bests."""

from typing import Tuple


def update_phase(pso) -> Tuple[int, int]:
    """Return (number of improved personal bests, number of failed lookups)."""
    improved = pso.memory.update_personal_bests(pso.swarm)
    failures = pso.memory.update_neighborhood_bests(pso.neighborhood, pso.log)
    return improved, failures
