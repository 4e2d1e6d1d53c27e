"""Constants and presets for the Standard PSO 2007 solver."""

import math


# ============= Update coefficients =============
# W: inertia weight applied to the previous velocity.
# C: confidence coefficient, upper bound of the two random multipliers r1, r2.
W = 1.0 / (2.0 * math.log(2.0))  # ~0.721
C = 0.5 + math.log(2.0)          # ~1.193


# ============= Default settings =============
DEFAULT_MAX_ITERATIONS = 80000
DEFAULT_PARTICLES_TO_INFORM = 3


def default_swarm_size(n_variables: int) -> int:
    """SPSO 2007 swarm size rule: 10 + 2*sqrt(D)."""
    return 10 + int(2.0 * math.sqrt(n_variables))


# ============= Presets =============

# Quick smoke test: small swarm, few iterations.
QUICK_TEST = {
    'swarm_size': 10,
    'max_iterations': 100,
    'number_of_particles_to_inform': 3,
}

# Default preset used by the grid runner.
DEFAULT = {
    'swarm_size': 40,
    'max_iterations': 1000,
    'number_of_particles_to_inform': 3,
}

# Long runs on harder landscapes.
INTENSIVE = {
    'swarm_size': 60,
    'max_iterations': 5000,
    'number_of_particles_to_inform': 3,
}

PRESETS = {
    'QUICK_TEST': QUICK_TEST,
    'DEFAULT': DEFAULT,
    'INTENSIVE': INTENSIVE,
}
