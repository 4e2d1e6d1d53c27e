"""Standard PSO 2007 solver for box-constrained single-objective minimization."""

__version__ = "0.1.0"

from spso.algorithm.components import AdaptiveRandomNeighborhood, Particle, Swarm, SwarmMemory
from spso.algorithm.pso import PSOState, StandardPSO2007, pso_run
from spso.config import PSOParams, validate_params
from spso.errors import EvaluationFailure, InvalidConfiguration, NeighborhoodLookupFailure, PSOError
from spso.problems import FunctionProblem, Problem, make_problem
from spso.random_source import RandomSource
from spso.selection import ObjectiveComparator, best_solution_index

__all__ = [
    "StandardPSO2007",
    "PSOState",
    "pso_run",
    "PSOParams",
    "validate_params",
    "Particle",
    "Swarm",
    "SwarmMemory",
    "AdaptiveRandomNeighborhood",
    "Problem",
    "FunctionProblem",
    "make_problem",
    "RandomSource",
    "ObjectiveComparator",
    "best_solution_index",
    "PSOError",
    "InvalidConfiguration",
    "NeighborhoodLookupFailure",
    "EvaluationFailure",
]
