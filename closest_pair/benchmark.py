"""
Benchmark harness: brute force vs divide and conquer.

For each (family, n, seed) the same point set goes to both solvers with fresh
operation counters. Results are checked for agreement, then summarised per
(family, n) and fitted on a log-log scale to estimate the growth exponent of
each operation count.

Outputs:
- a text report on stdout
- optional CSV with one row per instance (input for scripts/visualize.py)
"""

from __future__ import annotations

import argparse
import logging
import math
import time
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .brute_force import closest_pair_brute_force
from .counter import OperationCounter
from .divide_conquer import closest_pair_dc
from .generators import FAMILIES, generate
from .geometry import sort_by_x, sort_by_y

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [10, 50, 100, 500, 1000, 2000]
DEFAULT_FAMILIES = ["uniform", "clustered", "grid"]
DEFAULT_TOLERANCE = 1e-9


class AgreementError(RuntimeError):
    """The two solvers returned different distances for the same input."""


@dataclass
class BenchmarkConfig:
    sizes: List[int] = field(default_factory=lambda: list(DEFAULT_SIZES))
    families: List[str] = field(default_factory=lambda: list(DEFAULT_FAMILIES))
    seeds: int = 3
    # Brute force is skipped above this n; it is O(n^2).
    brute_force_limit: int = 5000
    tolerance: float = DEFAULT_TOLERANCE
    output: Optional[Path] = None


@dataclass
class BenchmarkRecord:
    family: str
    n: int
    seed: int
    dc_distance: float
    dc_basic_ops: int
    dc_distance_evals: int
    dc_ms: float
    brute_force_distance: Optional[float] = None
    brute_force_basic_ops: Optional[int] = None
    brute_force_distance_evals: Optional[int] = None
    brute_force_ms: Optional[float] = None


def run_instance(
    points: Sequence[Sequence[float]],
    family: str = "custom",
    seed: int = 0,
    run_brute_force: bool = True,
    tolerance: float = DEFAULT_TOLERANCE,
) -> BenchmarkRecord:
    """Run both solvers on one point set and check that they agree."""
    x_view = sort_by_x(points)
    y_view = sort_by_y(points)

    dc_counter = OperationCounter()
    t0 = time.perf_counter()
    dc_dist = closest_pair_dc(x_view, y_view, dc_counter)
    dc_ms = (time.perf_counter() - t0) * 1e3

    rec = BenchmarkRecord(
        family=family,
        n=len(points),
        seed=seed,
        dc_distance=dc_dist,
        dc_basic_ops=dc_counter.basic_ops,
        dc_distance_evals=dc_counter.distance_evals,
        dc_ms=dc_ms,
    )
    if not run_brute_force:
        return rec

    br_counter = OperationCounter()
    t0 = time.perf_counter()
    br_dist = closest_pair_brute_force(list(points), br_counter)
    rec.brute_force_ms = (time.perf_counter() - t0) * 1e3
    rec.brute_force_distance = br_dist
    rec.brute_force_basic_ops = br_counter.basic_ops
    rec.brute_force_distance_evals = br_counter.distance_evals

    if not math.isclose(dc_dist, br_dist, rel_tol=0.0, abs_tol=tolerance):
        raise AgreementError(
            f"{family} n={len(points)} seed={seed}: dc={dc_dist!r} brute_force={br_dist!r}"
        )
    return rec


def run_benchmark(config: BenchmarkConfig) -> List[BenchmarkRecord]:
    unknown = [f for f in config.families if f not in FAMILIES]
    if unknown:
        raise ValueError(f"unknown families {unknown}; choose from {sorted(FAMILIES)}")

    records: List[BenchmarkRecord] = []
    total = len(config.families) * len(config.sizes) * config.seeds
    done = 0
    for family in config.families:
        for n in config.sizes:
            for seed in range(config.seeds):
                done += 1
                if done == 1 or done % 10 == 0 or done == total:
                    logger.info("[%5d/%d] %s n=%d seed=%d", done, total, family, n, seed)
                points = generate(family, n, seed)
                records.append(
                    run_instance(
                        points,
                        family=family,
                        seed=seed,
                        run_brute_force=n <= config.brute_force_limit,
                        tolerance=config.tolerance,
                    )
                )
    return records


def records_frame(records: Sequence[BenchmarkRecord]) -> pd.DataFrame:
    columns = [f.name for f in fields(BenchmarkRecord)]
    df = pd.DataFrame([asdict(r) for r in records], columns=columns)
    # Skipped brute-force runs leave None; NaN keeps the columns numeric.
    for col in columns:
        if col != "family":
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def summarize(records: Sequence[BenchmarkRecord]) -> pd.DataFrame:
    """Mean and standard deviation of counts and timings per (family, n)."""
    df = records_frame(records)
    cols = [
        "dc_basic_ops", "dc_distance_evals", "dc_ms",
        "brute_force_basic_ops", "brute_force_distance_evals", "brute_force_ms",
    ]
    summary = df.groupby(["family", "n"])[cols].agg(["mean", "std"])
    summary.columns = [f"{c}_{stat}" for c, stat in summary.columns]
    return summary.reset_index()


def fit_scaling_law(n_values: np.ndarray, values: np.ndarray) -> Tuple[float, float, float]:
    """
    Fit V = a * n^b by linear regression in log-log space.
    Returns (a, b, r_squared).
    """
    log_n = np.log(np.asarray(n_values, dtype=float))
    log_v = np.log(np.asarray(values, dtype=float))

    coeffs = np.polyfit(log_n, log_v, 1)
    b = float(coeffs[0])
    a = float(np.exp(coeffs[1]))

    log_v_pred = coeffs[0] * log_n + coeffs[1]
    ss_res = np.sum((log_v - log_v_pred) ** 2)
    ss_tot = np.sum((log_v - np.mean(log_v)) ** 2)
    r_squared = float(1 - ss_res / ss_tot) if ss_tot > 0 else 0.0

    return a, b, r_squared


def growth_exponent(frame: pd.DataFrame, column: str) -> float:
    """
    Slope of log(column) against log(n), i.e. k in column ~ n^k.

    Rows with missing or non-positive values are ignored. Returns NaN when
    fewer than two distinct sizes remain.
    """
    data = frame[["n", column]].dropna()
    data = data[(data["n"] > 0) & (data[column] > 0)]
    data = data.groupby("n")[column].mean().reset_index()
    if len(data) < 2:
        return float("nan")
    _, slope, _ = fit_scaling_law(data["n"].to_numpy(), data[column].to_numpy())
    return slope


def write_csv(records: Sequence[BenchmarkRecord], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    records_frame(records).to_csv(path, index=False)


def format_report(records: Sequence[BenchmarkRecord]) -> str:
    df = records_frame(records)
    summary = summarize(records)

    def cell(value: float, fmt: str) -> str:
        return "--" if pd.isna(value) else format(value, fmt)

    lines: List[str] = []
    lines.append("CLOSEST PAIR BENCHMARK\n")
    lines.append(f"instances={len(df)}\n\n")
    for family in summary["family"].unique():
        rows = summary[summary["family"] == family]
        lines.append(f"{family.upper()}:\n")
        lines.append("n\t dc_ops\t bf_ops\t dc_dists\t bf_dists\t dc(ms)\t bf(ms)\n")
        for _, rec in rows.iterrows():
            lines.append(
                f"{int(rec['n'])}\t "
                f"{cell(rec['dc_basic_ops_mean'], '.0f')}\t "
                f"{cell(rec['brute_force_basic_ops_mean'], '.0f')}\t "
                f"{cell(rec['dc_distance_evals_mean'], '.0f')}\t "
                f"{cell(rec['brute_force_distance_evals_mean'], '.0f')}\t "
                f"{cell(rec['dc_ms_mean'], '.3f')}\t "
                f"{cell(rec['brute_force_ms_mean'], '.3f')}\n"
            )
        lines.append("\n")

    exponents: Dict[str, float] = {
        col: growth_exponent(df, col)
        for col in ["dc_basic_ops", "brute_force_basic_ops", "dc_distance_evals", "brute_force_distance_evals"]
    }
    lines.append("Growth exponents (count ~ n^k):\n")
    for col, k in exponents.items():
        lines.append(f"- {col}: {cell(k, '.2f')}\n")
    return "".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> BenchmarkConfig:
    ap = argparse.ArgumentParser(
        prog="closest-pair-bench",
        description="Compare brute force and divide-and-conquer closest pair.",
    )
    ap.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    ap.add_argument("--families", nargs="+", default=DEFAULT_FAMILIES, choices=sorted(FAMILIES))
    ap.add_argument("--seeds", type=int, default=3,
                    help="Number of random instances per (family, n).")
    ap.add_argument("--brute-force-limit", type=int, default=5000,
                    help="Skip brute force for n above this.")
    ap.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    ap.add_argument("--output", type=Path, default=None, help="CSV file for per-instance results.")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return BenchmarkConfig(
        sizes=list(args.sizes),
        families=list(args.families),
        seeds=int(args.seeds),
        brute_force_limit=int(args.brute_force_limit),
        tolerance=float(args.tolerance),
        output=args.output,
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    records = run_benchmark(config)
    print(format_report(records))
    if config.output is not None:
        write_csv(records, config.output)
        print(f"Wrote {config.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
