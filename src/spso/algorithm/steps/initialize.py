"""Initialization phase: seed the swarm, topology, velocities and memory.

Moves the engine from UNINITIALIZED to INITIALIZED. Every particle is sampled
uniformly in the box and evaluated before the neighborhood is drawn.
"""

from spso.algorithm.components.memory import SwarmMemory
from spso.algorithm.components.neighborhood import AdaptiveRandomNeighborhood
from spso.algorithm.components.particle import Swarm
from spso.algorithm.steps.evaluate import evaluate_particle


def initialize_phase(pso) -> None:
    problem = pso.problem
    rng = pso.rng
    n = pso.params.swarm_size

    particles = []
    for _ in range(n):
        particle = problem.create_particle(rng)
        evaluate_particle(pso, particle)
        particles.append(particle)
    pso.swarm = Swarm(particles)

    pso.neighborhood = AdaptiveRandomNeighborhood(n, pso.params.number_of_particles_to_inform, rng)

    # v0 = (U(lower, upper) - x0) / 2, per dimension
    lower, upper = pso.lower, pso.upper
    pso.velocity = [
        (rng.uniform(lower, upper) - particle.position) / 2.0 for particle in pso.swarm
    ]

    pso.memory = SwarmMemory(pso.swarm)
    pso.memory.update_neighborhood_bests(pso.neighborhood, pso.log)
