"""CSV sink for per-iteration SPSO 2007 traces.

One file per run. Every row carries the run columns (problem, dimension and
parameters, written once through ``start_run``) followed by the iteration
columns the engine reports after each sweep.
"""

from __future__ import annotations

import csv
import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from spso.config import PSOParams

RUN_FIELDS = ("problem", "n_variables", "swarm_size", "max_iterations", "k", "w", "c", "seed")
ITERATION_FIELDS = ("iteration", "best_current", "best_found", "recomputed",
                    "evaluations", "clamps", "runtime_ms")


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass
class RunLogger:
    """Buffer the iteration trace of one run and write it as CSV.

    ``metadata`` holds caller columns (e.g. the run index of a grid) that are
    repeated on every row ahead of the run and iteration columns.
    ``field_order`` overrides the column layout; unknown keys are left empty.
    """

    base_dir: Path
    filename: Optional[str] = None
    metadata: Optional[Dict[str, object]] = None
    field_order: Optional[Iterable[str]] = None

    _run: Dict[str, object] = field(default_factory=dict, init=False)
    _records: List[Dict[str, object]] = field(default_factory=list, init=False)
    _resolved_path: Optional[Path] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.metadata = dict(self.metadata) if self.metadata else {}

    def start_run(self, problem_name: str, n_variables: int,
                  params: PSOParams, seed: Optional[int]) -> None:
        """Record the run columns shared by every following row."""
        self._run = {
            "problem": problem_name,
            "n_variables": int(n_variables),
            "swarm_size": params.swarm_size,
            "max_iterations": params.max_iterations,
            "k": params.number_of_particles_to_inform,
            "w": params.w,
            "c": params.c,
            "seed": seed,
        }

    def log_iteration(self, iteration: int, best_current: float, best_found: float,
                      recomputed: bool, evaluations: int, clamps: int,
                      runtime_ms: float) -> None:
        """Buffer the state of the swarm after one sweep."""
        record: Dict[str, object] = dict(self.metadata)
        record.update(self._run)
        record.update(
            iteration=int(iteration),
            best_current=float(best_current),
            best_found=float(best_found),
            recomputed=int(bool(recomputed)),
            evaluations=int(evaluations),
            clamps=int(clamps),
            runtime_ms=float(runtime_ms),
        )
        self._records.append(record)

    @property
    def records(self) -> List[Dict[str, object]]:
        return list(self._records)

    def flush(self) -> Path:
        """Write buffered iterations to disk and return the file path."""
        if not self._records:
            raise RuntimeError("No iterations to write; the run never stepped.")

        path = self._resolve_path()
        with path.open('w', newline='') as handle:
            writer = csv.DictWriter(handle, fieldnames=self.fieldnames(),
                                    extrasaction='ignore', restval='')
            writer.writeheader()
            writer.writerows(self._records)
        return path

    def fieldnames(self) -> List[str]:
        if self.field_order:
            return list(self.field_order)
        names = list(self.metadata)
        if self._run:
            names += [f for f in RUN_FIELDS if f not in names]
        return names + [f for f in ITERATION_FIELDS if f not in names]

    def _resolve_path(self) -> Path:
        if self._resolved_path is None:
            filename = self.filename or f"spso_{_utcnow().strftime('%Y%m%dT%H%M%S')}.csv"
            self._resolved_path = self.base_dir / filename
        return self._resolved_path
