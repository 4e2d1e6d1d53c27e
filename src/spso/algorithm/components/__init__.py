from spso.algorithm.components.memory import SwarmMemory
from spso.algorithm.components.neighborhood import AdaptiveRandomNeighborhood, random_informants
from spso.algorithm.components.particle import Particle, Swarm

__all__ = [
    "Particle",
    "Swarm",
    "SwarmMemory",
    "AdaptiveRandomNeighborhood",
    "random_informants",
]
