import csv

import pytest

from spso.config import PSOParams
from spso.logging import RunLogger
from spso.logging.run_logger import ITERATION_FIELDS, RUN_FIELDS


def _log_one(run_logger, iteration=1, recomputed=False):
    run_logger.log_iteration(iteration=iteration, best_current=2.5, best_found=2.5,
                             recomputed=recomputed, evaluations=10, clamps=3, runtime_ms=1.5)


def test_default_columns_are_the_iteration_trace(tmp_path):
    run_logger = RunLogger(base_dir=tmp_path)
    _log_one(run_logger)
    assert run_logger.fieldnames() == list(ITERATION_FIELDS)


def test_start_run_adds_run_columns(tmp_path):
    params = PSOParams(swarm_size=7, max_iterations=20, number_of_particles_to_inform=2)
    run_logger = RunLogger(base_dir=tmp_path, filename="trace.csv", metadata={"run": 4})
    run_logger.start_run("rastrigin", 3, params, seed=11)
    _log_one(run_logger, iteration=1)
    _log_one(run_logger, iteration=2, recomputed=True)
    path = run_logger.flush()

    assert path == tmp_path / "trace.csv"
    with path.open() as fh:
        reader = csv.DictReader(fh)
        rows = list(reader)
    assert reader.fieldnames == ["run", *RUN_FIELDS, *ITERATION_FIELDS]
    assert rows[0]["problem"] == "rastrigin"
    assert rows[0]["k"] == "2"
    assert rows[1]["seed"] == "11"
    assert [r["recomputed"] for r in rows] == ["0", "1"]


def test_field_order_override(tmp_path):
    run_logger = RunLogger(base_dir=tmp_path, filename="short.csv",
                           field_order=["iteration", "best_found", "missing"])
    _log_one(run_logger)
    with run_logger.flush().open() as fh:
        rows = list(csv.DictReader(fh))
    assert rows == [{"iteration": "1", "best_found": "2.5", "missing": ""}]


def test_flush_without_iterations_raises(tmp_path):
    with pytest.raises(RuntimeError):
        RunLogger(base_dir=tmp_path).flush()
