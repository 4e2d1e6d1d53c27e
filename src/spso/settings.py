"""Settings layer: default SPSO 2007 parameters and property-file overrides.

Defaults follow the SPSO 2007 recommendations (swarm size 10 + 2*sqrt(D),
K = 3). ``configure(properties)`` accepts string-valued overrides as read from a
``.properties`` file, with camelCase or snake_case keys.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from spso.algorithm.constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PARTICLES_TO_INFORM,
    default_swarm_size,
)
from spso.algorithm.pso import StandardPSO2007
from spso.config import PSOParams, validate_params
from spso.errors import InvalidConfiguration
from spso.logging.run_logger import RunLogger
from spso.problems.base import Problem, make_problem
from spso.random_source import RandomSource

# property key -> (PSOParams field, parser)
PROPERTY_KEYS = {
    "swarmSize": ("swarm_size", int),
    "maxIterations": ("max_iterations", int),
    "numberOfParticlesToInform": ("number_of_particles_to_inform", int),
    "seed": ("seed", int),
    "logEvery": ("log_every", int),
    "w": ("w", float),
    "c": ("c", float),
}
_SNAKE_KEYS = {field: (field, parser) for field, parser in PROPERTY_KEYS.values()}


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read a Java-style properties file.

    Supports ``key=value`` and ``key: value`` lines, ``#``/``!`` comments and
    blank lines. Values are returned as stripped strings.
    """
    props: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            line = raw.strip()
            if not line or line[0] in "#!":
                continue
            sep_positions = [p for p in (line.find("="), line.find(":")) if p >= 0]
            if not sep_positions:
                raise InvalidConfiguration(f"{path}:{lineno}: expected 'key=value', got {line!r}.")
            sep = min(sep_positions)
            key, value = line[:sep].strip(), line[sep + 1:].strip()
            if not key:
                raise InvalidConfiguration(f"{path}:{lineno}: empty property key.")
            props[key] = value
    return props


def parse_properties(properties: Mapping[str, str]) -> Dict[str, object]:
    """Translate string properties into typed PSOParams fields. Unknown keys are ignored."""
    out: Dict[str, object] = {}
    for key, raw in properties.items():
        entry = PROPERTY_KEYS.get(key) or _SNAKE_KEYS.get(key)
        if entry is None:
            continue
        field, parser = entry
        try:
            out[field] = parser(str(raw).strip())
        except ValueError:
            raise InvalidConfiguration(
                f"Property {key!r} expects {parser.__name__}, got {raw!r}."
            ) from None
    return out


class StandardPSO2007Settings:
    """Default SPSO 2007 configuration for one benchmark problem."""

    def __init__(self, problem_name: str, dim: int, problem: Optional[Problem] = None):
        self.problem_name = problem_name
        self.problem = problem if problem is not None else make_problem(problem_name, dim)

        n = self.problem.number_of_variables()
        self.swarm_size = default_swarm_size(n)
        self.max_iterations = DEFAULT_MAX_ITERATIONS
        self.number_of_particles_to_inform = DEFAULT_PARTICLES_TO_INFORM
        self.params = PSOParams(
            swarm_size=self.swarm_size,
            max_iterations=self.max_iterations,
            number_of_particles_to_inform=self.number_of_particles_to_inform,
        )

    def configure(self,
                  properties: Optional[Mapping[str, str]] = None,
                  run_logger: Optional[RunLogger] = None,
                  log: Optional[logging.Logger] = None) -> StandardPSO2007:
        """Build an engine from the defaults, optionally overridden by ``properties``."""
        if properties:
            overrides = parse_properties(properties)
            self.params = validate_params(PSOParams(**{**self.params.__dict__, **overrides}))
            self.swarm_size = self.params.swarm_size
            self.max_iterations = self.params.max_iterations
            self.number_of_particles_to_inform = self.params.number_of_particles_to_inform

        return StandardPSO2007(
            self.problem,
            self.params,
            rng=RandomSource(self.params.seed),
            run_logger=run_logger,
            log=log,
        )
