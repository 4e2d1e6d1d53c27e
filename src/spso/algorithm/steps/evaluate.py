"""Evaluation phase: re-evaluate every particle at its new position.

Any problem with the bounds provider surfaces as EvaluationFailure and aborts
the run; an unevaluated particle is never passed on to the memory update.
"""

import math
import numbers

from spso.errors import EvaluationFailure, PSOError


def evaluate_particle(pso, particle) -> float:
    """Evaluate one particle through the problem and check the stored objective."""
    try:
        pso.problem.evaluate(particle)
    except PSOError:
        raise
    except Exception as exc:
        raise EvaluationFailure(
            f"{pso.problem.name}: evaluation raised for {particle.position.tolist()}"
        ) from exc
    pso.evaluations += 1

    value = particle.objective
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise EvaluationFailure(
            f"{pso.problem.name}: evaluate() left objective={value!r} for {particle.position.tolist()}"
        )
    particle.objective = float(value)
    return particle.objective


def evaluate_phase(pso) -> None:
    for particle in pso.swarm:
        evaluate_particle(pso, particle)
