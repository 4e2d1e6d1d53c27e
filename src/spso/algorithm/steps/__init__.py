from spso.algorithm.steps.evaluate import evaluate_particle, evaluate_phase
from spso.algorithm.steps.initialize import initialize_phase
from spso.algorithm.steps.position import position_phase
from spso.algorithm.steps.update import update_phase
from spso.algorithm.steps.velocity import velocity_phase

__all__ = [
    "initialize_phase",
    "velocity_phase",
    "position_phase",
    "evaluate_phase",
    "evaluate_particle",
    "update_phase",
]
