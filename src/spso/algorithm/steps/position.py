"""Position phase: move particles and absorb them at the box boundary."""

import numpy as np


def position_phase(pso) -> int:
    """
    Apply x <- x + v and clamp each coordinate to [lower, upper].

    A clamped coordinate also gets its velocity component zeroed; other
    coordinates of the same particle are untouched. Returns the number of
    clamped coordinates in this sweep.
    """
    lower, upper = pso.lower, pso.upper
    clamped = 0

    for i, particle in enumerate(pso.swarm):
        v = pso.velocity[i]
        x = particle.position + v

        below = x < lower
        above = x > upper
        x[below] = lower[below]
        x[above] = upper[above]
        hit = below | above
        v[hit] = 0.0

        particle.position = x
        particle.objective = None
        clamped += int(np.count_nonzero(hit))

    return clamped
