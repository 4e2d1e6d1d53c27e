import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from spso.algorithm import steps
from spso.algorithm.components.particle import Particle
from spso.algorithm.constants import C, W
from spso.algorithm.pso import StandardPSO2007
from spso.config import PSOParams
from spso.problems import FunctionProblem, sphere
from spso.random_source import RandomSource


class ScriptedRandom(RandomSource):
    """RandomSource whose scalar draws come from a fixed script."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def rand_double(self, low, high):
        return self.values.pop(0)


def _engine(problem, swarm_size, k, seed=0, iters=5):
    params = PSOParams(swarm_size=swarm_size, max_iterations=iters, number_of_particles_to_inform=k)
    pso = StandardPSO2007(problem, params, rng=RandomSource(seed))
    pso.initialize()
    return pso


def test_initial_velocity_is_half_distance_to_a_random_point(sphere2d):
    pso = _engine(sphere2d, 8, 3, seed=21)
    for particle, v in zip(pso.swarm, pso.velocity):
        target = particle.position + 2.0 * v
        assert np.all(target >= pso.lower - 1e-12)
        assert np.all(target <= pso.upper + 1e-12)


def test_self_leader_uses_cognitive_term_only(sphere2d):
    pso = _engine(sphere2d, 1, 1)
    assert pso.memory.self_leader[0]

    pbest = pso.memory.personal_best[0].position.copy()
    pso.swarm[0].position = pbest + np.array([1.0, -2.0])
    x = pso.swarm[0].position.copy()
    v0 = pso.velocity[0].copy()

    pso.rng = ScriptedRandom([0.3, 0.8])
    steps.velocity_phase(pso)

    np.testing.assert_allclose(pso.velocity[0], W * v0 + 0.3 * (pbest - x))


def test_distinct_leader_adds_social_term(sphere2d):
    pso = _engine(sphere2d, 2, 2)
    leader = Particle([0.5, 0.5], 0.5)
    pso.memory.neighborhood_best[0] = leader
    pso.memory.self_leader[0] = False
    pso.memory.self_leader[1] = True

    x = pso.swarm[0].position.copy()
    pbest = pso.memory.personal_best[0].position.copy()
    v0 = pso.velocity[0].copy()

    pso.rng = ScriptedRandom([0.25, 0.75, 0.1, 0.2])
    steps.velocity_phase(pso)

    expected = W * v0 + 0.25 * (pbest - x) + 0.75 * (leader.position - x)
    np.testing.assert_allclose(pso.velocity[0], expected)


def test_random_multipliers_stay_below_c(sphere2d):
    pso = _engine(sphere2d, 3, 2)
    draws = []
    original = pso.rng.rand_double

    def spy(low, high):
        value = original(low, high)
        draws.append((low, high, value))
        return value

    pso.rng.rand_double = spy
    steps.velocity_phase(pso)
    # two fresh draws per particle
    assert len(draws) == 6
    for low, high, value in draws:
        assert (low, high) == (0.0, pso.params.c)
        assert 0.0 <= value < C


def test_clamp_zeroes_only_the_clamped_dimension():
    problem = FunctionProblem("sphere", sphere, [-1.0, -1.0, -1.0], [1.0, 1.0, 1.0])
    pso = _engine(problem, 1, 1)
    pso.swarm[0].position = np.array([0.9, -0.9, 0.0])
    pso.velocity[0] = np.array([0.5, -0.5, 0.25])

    clamped = steps.position_phase(pso)

    assert clamped == 2
    np.testing.assert_allclose(pso.swarm[0].position, [1.0, -1.0, 0.25])
    np.testing.assert_allclose(pso.velocity[0], [0.0, 0.0, 0.25])
    assert pso.swarm[0].objective is None


@settings(max_examples=30, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10_000),
       half_width=st.floats(min_value=0.01, max_value=100.0))
def test_positions_stay_in_bounds_and_clamps_zero_velocity(seed, half_width):
    problem = FunctionProblem("sphere", sphere, -half_width, half_width, dim=3)
    pso = _engine(problem, 6, 2, seed=seed)
    for _ in range(5):
        steps.velocity_phase(pso)
        before = [p.position + v for p, v in zip(pso.swarm, pso.velocity)]
        steps.position_phase(pso)
        for raw, particle, v in zip(before, pso.swarm, pso.velocity):
            assert np.all(particle.position >= pso.lower)
            assert np.all(particle.position <= pso.upper)
            hit = (raw < pso.lower) | (raw > pso.upper)
            assert np.all(v[hit] == 0.0)
        steps.evaluate_phase(pso)
        steps.update_phase(pso)


def test_evaluate_phase_counts_evaluations(sphere2d):
    pso = _engine(sphere2d, 4, 2)
    assert pso.evaluations == 4
    steps.evaluate_phase(pso)
    assert pso.evaluations == 8
    for particle in pso.swarm:
        assert particle.objective == pytest.approx(sphere(particle.position))
