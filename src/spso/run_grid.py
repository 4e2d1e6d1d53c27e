from __future__ import annotations
from pathlib import Path
import argparse, logging, os
from math import isfinite

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from spso.algorithm.constants import PRESETS
from spso.config import PSOParams, validate_params
from spso.experiment import run_suite
from spso.logging import configure_logging
from spso.problems.functions import FUNCTIONS, SUCCESS_THRESHOLDS
from spso.settings import load_properties, parse_properties

log = logging.getLogger(__name__)

DEFAULT_OUTDIR = Path("results")

# ---------- Plot helpers  ----------
def boxplot_from_runs(runs_csv: str, outpath: str):
    """Create a compact boxplot of final best fitness per (function, n)."""
    df = pd.read_csv(runs_csv)
    df["combo"] = df["func"] + "_n" + df["n"].astype(str)
    order = sorted(df["combo"].unique())
    data = [df.loc[df["combo"] == c, "best_f"].values for c in order]
    plt.figure()
    plt.boxplot(data, showfliers=False)
    plt.xticks(range(1, len(order) + 1), order, rotation=30, ha="right")
    plt.ylabel("Final best fitness")
    plt.title("SPSO 2007 final fitness across runs")
    os.makedirs(os.path.dirname(outpath) or ".", exist_ok=True)
    plt.savefig(outpath, bbox_inches="tight")
    plt.close()


def convergence_plot(curves_dir: str, outpath: str):
    """Plot the mean best-found curve per (function, n) on a log scale."""
    groups: dict[str, list[np.ndarray]] = {}
    for path in sorted(Path(curves_dir).glob("*.npy")):
        combo = path.stem.rsplit("_run", 1)[0]
        groups.setdefault(combo, []).append(np.load(path))
    if not groups:
        return
    plt.figure()
    for combo, curves in groups.items():
        length = min(len(c) for c in curves)
        mean = np.mean([c[:length] for c in curves], axis=0)
        plt.plot(np.arange(1, length + 1), np.maximum(mean, 1e-300), label=combo)
    plt.yscale("log")
    plt.xlabel("Iteration")
    plt.ylabel("Mean best-found fitness")
    plt.legend(fontsize="small")
    plt.savefig(outpath, bbox_inches="tight")
    plt.close()

# ---------- CLI ----------
def _parse_preset(value: str) -> str:
    """Return an uppercase preset name if it exists, else raise."""
    name = value.upper()
    if name not in PRESETS:
        valid = ", ".join(sorted(PRESETS))
        raise argparse.ArgumentTypeError(f"Unknown preset '{value}'. Choose from: {valid}.")
    return name


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="SPSO 2007 grid runner.")

    ap.add_argument("--outdir", default=str(DEFAULT_OUTDIR))
    ap.add_argument("--runs", type=int, default=10)
    ap.add_argument("--dims", type=int, nargs="+", default=[2, 10, 30])
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--preset", type=_parse_preset, default="DEFAULT",
                    help="Parameter profile (QUICK_TEST, DEFAULT, INTENSIVE).")
    ap.add_argument("--functions", nargs="+", choices=sorted(FUNCTIONS), default=None)
    ap.add_argument("--properties", type=Path, default=None,
                    help="Optional .properties file with parameter overrides.")

    # Optional manual overrides: use None so they only apply if explicitly set
    ap.add_argument("--iters", type=int, default=None)
    ap.add_argument("--swarm", type=int, default=None)
    ap.add_argument("--k", type=int, default=None, help="number of particles to inform")
    ap.add_argument("--w", type=float, default=None)
    ap.add_argument("--c", type=float, default=None)
    ap.add_argument("--log-every", dest="log_every", type=int, default=0)
    ap.add_argument("--iteration-logs", dest="iteration_logs", action="store_true",
                    help="Write an iteration-level CSV per run.")
    ap.add_argument("--no-boxplots", dest="no_boxplots", action="store_true")
    ap.add_argument("--verbose", action="store_true")
    return ap.parse_args(argv)

# ---------- Parameter profiles ----------
def make_param_factory(args):
    """
    Returns a callable (n:int) -> PSOParams with ALL fields filled.
    Precedence: preset < properties file < explicit CLI flags.
    """
    base = dict(PRESETS[args.preset])
    if args.properties is not None:
        base.update(parse_properties(load_properties(args.properties)))

    def factory(n: int) -> PSOParams:
        d = dict(base)
        if args.iters is not None: d["max_iterations"] = args.iters
        if args.swarm is not None: d["swarm_size"] = args.swarm
        if args.k is not None: d["number_of_particles_to_inform"] = args.k
        if args.w is not None and isfinite(args.w): d["w"] = args.w
        if args.c is not None and isfinite(args.c): d["c"] = args.c
        if args.log_every: d["log_every"] = args.log_every
        return validate_params(PSOParams(**d))

    return factory

def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    args.outdir = Path(args.outdir)
    args.outdir.mkdir(parents=True, exist_ok=True)

    param_factory = make_param_factory(args)
    # fail fast on a bad configuration, before any run starts
    param_factory(args.dims[0])

    runs_csv, summary_csv = run_suite(
        outdir=str(args.outdir),
        dims=tuple(args.dims),
        runs=args.runs,
        seed0=args.seed,
        thresholds=dict(SUCCESS_THRESHOLDS),
        param_factory=param_factory,
        functions=args.functions,
        iteration_logs=args.iteration_logs,
    )
    if not args.no_boxplots:
        boxplot_from_runs(runs_csv, str(args.outdir / "boxplot.png"))
        convergence_plot(str(args.outdir / "curves"), str(args.outdir / "convergence.png"))
    log.info("wrote: %s %s", runs_csv, summary_csv)
    return runs_csv, summary_csv

if __name__ == "__main__":
    main()
