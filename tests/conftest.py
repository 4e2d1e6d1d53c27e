import pytest

from spso.config import PSOParams
from spso.problems import FunctionProblem, sphere
from spso.random_source import RandomSource


@pytest.fixture
def sphere2d():
    return FunctionProblem("sphere", sphere, -5.0, 5.0, dim=2)


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def small_params():
    return PSOParams(swarm_size=6, max_iterations=10, number_of_particles_to_inform=3)
