"""Standard PSO 2007 solver.

This module orchestrates the full SPSO 2007 loop:
- samples and evaluates the swarm, draws the adaptive random topology and
  seeds velocities and particle memory (initialize phase)
- updates velocities from personal and neighborhood bests (velocity phase)
- moves particles and absorbs them at the box boundary (position phase)
- re-evaluates the swarm (evaluate phase)
- refreshes personal and neighborhood bests (update phase)
- regenerates the topology whenever the best objective stagnates

The main entry point is the StandardPSO2007 class; ``pso_run`` wraps it in the
dict-returning style used by the experiment runner.
"""

from __future__ import annotations

import enum
import logging
import math
import time
from typing import Any, Dict, List, Optional

import numpy as np

from spso.algorithm import steps
from spso.algorithm.components.memory import SwarmMemory
from spso.algorithm.components.neighborhood import AdaptiveRandomNeighborhood
from spso.algorithm.components.particle import Particle, Swarm
from spso.config import PSOParams, validate_params
from spso.errors import InvalidConfiguration
from spso.logging.run_logger import RunLogger
from spso.problems.base import Problem
from spso.random_source import RandomSource
from spso.selection import ObjectiveComparator

logger = logging.getLogger(__name__)


class PSOState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    ITERATING = "iterating"
    TERMINATED = "terminated"


class StandardPSO2007:
    """Single-objective Standard PSO 2007 with an adaptive random topology."""

    def __init__(self,
                 problem: Problem,
                 params: PSOParams,
                 rng: Optional[RandomSource] = None,
                 run_logger: Optional[RunLogger] = None,
                 log: Optional[logging.Logger] = None):
        validate_params(params)
        if not isinstance(problem, Problem):
            raise InvalidConfiguration(f"problem must be a Problem, got {type(problem).__name__}.")
        problem.validate()

        self.problem = problem
        self.params = params
        self.rng = rng if rng is not None else RandomSource(params.seed)
        self.run_logger = run_logger
        self.log = log or logger
        self.comparator = ObjectiveComparator(0)

        self.lower = problem.lower_bounds()
        self.upper = problem.upper_bounds()

        self.state = PSOState.UNINITIALIZED
        self.iteration = 0
        self.evaluations = 0
        self.recomputations = 0
        self.clamps = 0
        self.lookup_failures = 0
        self.best_found_fitness = math.inf
        self.initial_best_fitness: Optional[float] = None
        self.best_found_curve: List[float] = []
        self.best_current_curve: List[float] = []

        self.swarm: Optional[Swarm] = None
        self.velocity: List[np.ndarray] = []
        self.memory: Optional[SwarmMemory] = None
        self.neighborhood: Optional[AdaptiveRandomNeighborhood] = None

        self._stop_requested = False
        self._start_time: Optional[float] = None

    # -----------------------------------------------
    @property
    def w(self) -> float:
        return self.params.w

    @property
    def c(self) -> float:
        return self.params.c

    def initialize(self) -> None:
        if self.state is not PSOState.UNINITIALIZED:
            raise RuntimeError(f"Cannot initialize from state {self.state.value}.")
        self._start_time = time.time()
        steps.initialize_phase(self)
        self.state = PSOState.INITIALIZED
        self.initial_best_fitness = float(np.min(self.swarm.objectives()))

        self.log.info("SwarmSize: %d | K: %d | variables: %d",
                      len(self.swarm), self.neighborhood.k, self.problem.number_of_variables())
        if self.run_logger is not None:
            self.run_logger.start_run(self.problem.name, self.problem.number_of_variables(),
                                      self.params, self.rng.seed)

    def step(self) -> float:
        """Run one full iteration and return the best objective of the swarm."""
        if self.state is PSOState.INITIALIZED:
            self.state = PSOState.ITERATING
        if self.state is not PSOState.ITERATING:
            raise RuntimeError(f"Cannot iterate from state {self.state.value}.")

        # 1) velocities, 2) positions with clamping, 3) evaluation
        steps.velocity_phase(self)
        self.clamps += steps.position_phase(self)
        steps.evaluate_phase(self)

        # 4) personal bests, 5) neighborhood bests
        _, failures = steps.update_phase(self)
        self.lookup_failures += failures

        self.iteration += 1

        best_current = float(np.min(self.swarm.objectives()))

        # Exact equality on purpose: the topology is redrawn only when the
        # swarm best is bit-for-bit unchanged.
        recomputed = best_current == self.best_found_fitness
        if recomputed:
            self.log.debug("Recomputing neighborhood at iteration %d", self.iteration)
            self.neighborhood.recompute()
            self.recomputations += 1

        if best_current < self.best_found_fitness:
            self.best_found_fitness = best_current

        self.best_current_curve.append(best_current)
        self.best_found_curve.append(self.best_found_fitness)

        log_every = self.params.log_every
        if log_every > 0 and self.iteration % log_every == 0:
            self.log.info("Iter %d/%d: Best=%.6g, BestFound=%.6g, Recomputations=%d",
                          self.iteration, self.params.max_iterations, best_current,
                          self.best_found_fitness, self.recomputations)

        if self.run_logger is not None:
            self.run_logger.log_iteration(
                iteration=self.iteration,
                best_current=best_current,
                best_found=self.best_found_fitness,
                recomputed=recomputed,
                evaluations=self.evaluations,
                clamps=self.clamps,
                runtime_ms=(time.time() - self._start_time) * 1000,
            )

        return best_current

    def run(self) -> Particle:
        """Iterate until max_iterations (or stop()) and return the best particle."""
        if self.state is PSOState.UNINITIALIZED:
            self.initialize()

        while self.iteration < self.params.max_iterations and not self._stop_requested:
            self.step()

        self.state = PSOState.TERMINATED
        best = self.best_particle()
        self.log.info("Finished after %d iterations (%d evaluations): best=%.6g",
                      self.iteration, self.evaluations, best.objective)
        return best

    def stop(self) -> None:
        """Request termination after the current sweep."""
        self._stop_requested = True

    @property
    def stopped_early(self) -> bool:
        return self._stop_requested and self.iteration < self.params.max_iterations

    def best_particle(self) -> Particle:
        """Snapshot of the best member of the current swarm (first minimum wins)."""
        if self.swarm is None:
            raise RuntimeError("The swarm has not been initialized.")
        return self.swarm[self.swarm.best_index(self.comparator)].copy()

    def result(self) -> Dict[str, Any]:
        best = self.best_particle()
        return {
            "best": best,
            "best_x": best.position.copy(),
            "best_f": float(best.objective),
            "initial_best_f": self.initial_best_fitness,
            "best_found_curve": np.array(self.best_found_curve, dtype=float),
            "best_current_curve": np.array(self.best_current_curve, dtype=float),
            "evals_used": int(self.evaluations),
            "iters_run": int(self.iteration),
            "recomputations": int(self.recomputations),
            "clamps": int(self.clamps),
            "stopped_early": bool(self.stopped_early),
        }


def pso_run(
    problem: Problem,
    params: PSOParams,
    rng: Optional[RandomSource] = None,
    run_logger: Optional[RunLogger] = None,
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """Run one SPSO 2007 trial and return best solution + convergence curve."""
    pso = StandardPSO2007(problem, params, rng=rng, run_logger=run_logger, log=log)
    pso.run()
    return pso.result()
