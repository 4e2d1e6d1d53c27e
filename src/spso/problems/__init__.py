from spso.problems.base import FunctionProblem, Problem, make_problem
from spso.problems.functions import FUNCTIONS, SUCCESS_THRESHOLDS, ackley, griewank, rastrigin, rosenbrock, sphere

__all__ = [
    "Problem",
    "FunctionProblem",
    "make_problem",
    "FUNCTIONS",
    "SUCCESS_THRESHOLDS",
    "sphere",
    "rosenbrock",
    "rastrigin",
    "ackley",
    "griewank",
]
