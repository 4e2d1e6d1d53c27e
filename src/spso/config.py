from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Optional

from spso.algorithm.constants import C, W
from spso.errors import InvalidConfiguration

"""
Dataclass definition for Standard PSO 2007 parameters.

`swarm_size`, `max_iterations` and `number_of_particles_to_inform` have no
defaults here: they are filled in by the settings layer, a preset or the CLI.
`w` and `c` default to the SPSO 2007 constants and are only overridden
explicitly.
"""
@dataclass(frozen=True)
class PSOParams:
    swarm_size: Optional[int] = None
    max_iterations: Optional[int] = None
    number_of_particles_to_inform: Optional[int] = None
    w: float = W
    c: float = C
    seed: Optional[int] = None
    log_every: int = 0


REQUIRED_FIELDS = ("swarm_size", "max_iterations", "number_of_particles_to_inform")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_params(p: PSOParams) -> PSOParams:
    """Raise InvalidConfiguration unless ``p`` describes a runnable configuration."""
    missing = [k for k in REQUIRED_FIELDS if getattr(p, k) is None]
    if missing:
        raise InvalidConfiguration(f"PSOParams missing required fields: {missing}")

    if not _is_int(p.swarm_size) or p.swarm_size <= 0:
        raise InvalidConfiguration(f"swarm_size must be a positive int, got {p.swarm_size!r}.")
    if not _is_int(p.max_iterations) or p.max_iterations <= 0:
        raise InvalidConfiguration(f"max_iterations must be a positive int, got {p.max_iterations!r}.")
    k = p.number_of_particles_to_inform
    if not _is_int(k) or not 1 <= k <= p.swarm_size:
        raise InvalidConfiguration(
            f"number_of_particles_to_inform must be an int in [1, {p.swarm_size}], got {k!r}."
        )
    for name in ("w", "c"):
        value = getattr(p, name)
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidConfiguration(f"{name} must be a finite number, got {value!r}.")
    if p.seed is not None and (not _is_int(p.seed) or p.seed < 0):
        raise InvalidConfiguration(f"seed must be a non-negative int or None, got {p.seed!r}.")
    if not _is_int(p.log_every) or p.log_every < 0:
        raise InvalidConfiguration(f"log_every must be a non-negative int, got {p.log_every!r}.")
    return p


def with_overrides(p: PSOParams, **overrides) -> PSOParams:
    """Return a copy of ``p`` with every non-None override applied."""
    d = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(d) - {f.name for f in dataclasses.fields(PSOParams)}
    if unknown:
        raise InvalidConfiguration(f"Unknown PSOParams fields: {sorted(unknown)}")
    return dataclasses.replace(p, **d)
