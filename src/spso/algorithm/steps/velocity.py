"""Velocity phase: SPSO 2007 velocity update for every particle.

For particle i with position x, velocity v, personal best p and neighborhood
best g, and r1, r2 drawn fresh from U[0, C):

    v <- W*v + r1*(p - x)                 if i leads its own neighborhood
    v <- W*v + r1*(p - x) + r2*(g - x)    otherwise
"""


def velocity_phase(pso) -> None:
    w, c = pso.params.w, pso.params.c
    memory = pso.memory
    rng = pso.rng

    for i, particle in enumerate(pso.swarm):
        r1 = rng.rand_double(0.0, c)
        r2 = rng.rand_double(0.0, c)

        x = particle.position
        local_best = memory.personal_best[i].position
        neighborhood_best = memory.neighborhood_best[i]

        if memory.self_leader[i] or neighborhood_best is None:
            pso.velocity[i] = w * pso.velocity[i] + r1 * (local_best - x)
        else:
            pso.velocity[i] = (w * pso.velocity[i]
                               + r1 * (local_best - x)
                               + r2 * (neighborhood_best.position - x))
