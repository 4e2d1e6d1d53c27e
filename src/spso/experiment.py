# experiment.py
from __future__ import annotations
import os, csv, json, time, zlib
from typing import Callable, Iterable, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from spso.algorithm.pso import pso_run
from spso.config import PSOParams
from spso.logging.run_logger import RunLogger
from spso.problems.base import make_problem
from spso.problems.functions import FUNCTIONS
from spso.random_source import RandomSource

"""
This file orchestrates runs and persists results in a reproducible way.
"""

RUNS_HEADER = ["func", "n", "run", "seed", "best_f", "best_x_json", "evals",
               "iters", "recomputations", "success", "time_s"]


def run_seed(seed0: int, fname: str, n: int, r: int) -> int:
    """Deterministic per-run seed (stable across interpreter sessions)."""
    key = f"{fname}|{n}|{r}".encode()
    return seed0 + (zlib.crc32(key) % (2**31 - 1))


def run_suite(
    *,
    outdir: str,
    dims: Iterable[int],
    runs: int,
    seed0: int,
    thresholds: Mapping[str, float | None],
    param_factory: Callable[[int], PSOParams],
    functions: Optional[Sequence[str]] = None,
    iteration_logs: bool = False,
):
    """
    Args (all required unless noted):
      outdir: output directory for CSVs and curves.
      dims: iterable of dimensions to test (e.g., [2, 10, 30]).
      runs: number of independent runs per (function, n).
      seed0: base integer seed to derive per-run RNG seeds deterministically.
      thresholds: dict mapping function name -> success threshold (float) or None.
                  If None, success is not computed (treated as 0 in CSV).
      param_factory: callable (n:int) -> PSOParams, producing fully-specified
                     parameters for dimension n.
      functions: optional subset of benchmark names (default: all).
      iteration_logs: if True, write one iteration-level CSV per run.
    Returns:
      (log_csv_path, summary_csv_path)
    """
    # --- Basic checks  ---
    if not isinstance(outdir, str) or not outdir:
        raise ValueError("outdir must be a non-empty string.")
    dims = list(dims)
    if not dims or not all(isinstance(n, int) and n > 0 for n in dims):
        raise ValueError("dims must be a non-empty iterable of positive ints.")
    if not isinstance(runs, int) or runs <= 0:
        raise ValueError("runs must be a positive int.")
    if not isinstance(seed0, int):
        raise ValueError("seed0 must be an int.")
    if not isinstance(thresholds, dict):
        raise ValueError("thresholds must be a dict mapping function name to float|None.")
    names = list(functions) if functions is not None else list(FUNCTIONS.keys())
    unknown = [f for f in names if f not in FUNCTIONS]
    if unknown:
        raise ValueError(f"Unknown functions: {unknown}")
    # Ensure every function has an entry (explicit None allowed)
    for fname in names:
        if fname not in thresholds:
            raise ValueError(f"Missing threshold for function '{fname}' in thresholds.")

    os.makedirs(outdir, exist_ok=True)
    curves_dir = os.path.join(outdir, "curves")
    os.makedirs(curves_dir, exist_ok=True)
    iter_dir = os.path.join(outdir, "iterations")

    log_path = os.path.join(outdir, "runs.csv")
    with open(log_path, "w", newline="") as fh:
        w = csv.writer(fh)
        w.writerow(RUNS_HEADER)

        for fname in names:
            thr = thresholds.get(fname, None)  # explicit per run_grid

            for n in dims:
                problem = make_problem(fname, n)
                for r in range(runs):
                    p = param_factory(n)
                    seed = run_seed(seed0, fname, n, r)
                    rng = RandomSource(seed)

                    run_logger = None
                    if iteration_logs:
                        run_logger = RunLogger(
                            base_dir=iter_dir,
                            filename=f"{fname}_n{n}_run{r}.csv",
                            metadata={"run": r},
                        )

                    # --- Run PSO ---
                    t0 = time.time()
                    res = pso_run(problem, p, rng=rng, run_logger=run_logger)
                    dt = time.time() - t0

                    if run_logger is not None:
                        run_logger.flush()

                    # --- Persist per-iteration curve ---
                    curve_path = os.path.join(curves_dir, f"{fname}_n{n}_run{r}.npy")
                    np.save(curve_path, res["best_found_curve"])

                    # --- Write result row ---
                    best_f = float(res["best_f"])
                    success = int(best_f <= thr) if thr is not None else 0
                    w.writerow([
                        fname,
                        n,
                        r,
                        seed,
                        best_f,
                        json.dumps([float(v) for v in res["best_x"]]),
                        int(res["evals_used"]),
                        int(res["iters_run"]),
                        int(res["recomputations"]),
                        success,
                        float(dt),
                    ])

    agg_path = os.path.join(outdir, "summary.csv")
    _aggregate(log_path, agg_path)
    return log_path, agg_path


def _aggregate(log_csv: str, out_csv: str):
    df = pd.read_csv(log_csv)
    g = df.groupby(["func", "n"], as_index=False)
    summ = g["best_f"].agg(mean="mean", median="median", min="min", max="max", std="std")
    sr = g["success"].mean().rename(columns={"success": "success_rate"})
    rc = g["recomputations"].mean().rename(columns={"recomputations": "mean_recomputations"})
    out = pd.merge(summ, sr, on=["func", "n"]).merge(rc, on=["func", "n"])
    out.to_csv(out_csv, index=False)
    return out
