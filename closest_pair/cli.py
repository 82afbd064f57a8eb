"""
closest-pair: minimum point distance by divide and conquer and by brute force.

Standard input (or INPUT) holds the points:
    x-value y-value
    x-value y-value
    ...

stdout gets both distances; stderr gets one tab-separated line
    n  brute_force_basic_ops  dc_basic_ops
so the counts of many runs can be collected for complexity plots.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from .brute_force import closest_pair_brute_force
from .counter import OperationCounter
from .divide_conquer import closest_pair_dc
from .geometry import sort_by_x, sort_by_y
from .points_io import PointFormatError, load_points

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="closest-pair",
        description="Closest pair distance by divide and conquer and by brute force.",
    )
    ap.add_argument("input", nargs="?", default="-",
                    help="Point file of whitespace-separated 'x y' pairs ('-' for stdin).")
    ap.add_argument("--header", action="store_true",
                    help="Input starts with the number of points.")
    ap.add_argument("--precision", type=positive_int, default=6,
                    help="Significant digits of the printed distances.")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.input == "-":
            points = load_points(sys.stdin, header=args.header)
        else:
            points = load_points(args.input, header=args.header)
    except (PointFormatError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    n = len(points)
    if n < 2:
        logger.warning("%d point(s) given; no pair exists and both distances are reported as 0", n)

    dc_counter = OperationCounter()
    t0 = time.perf_counter()
    dc_dist = closest_pair_dc(sort_by_x(points), sort_by_y(points), dc_counter)
    t1 = time.perf_counter()

    br_counter = OperationCounter()
    br_dist = closest_pair_brute_force(list(points), br_counter)
    t2 = time.perf_counter()

    logger.info("n=%d dc=%.3fms brute_force=%.3fms", n, (t1 - t0) * 1e3, (t2 - t1) * 1e3)
    logger.debug("distance evaluations: dc=%d brute_force=%d",
                 dc_counter.distance_evals, br_counter.distance_evals)

    p = args.precision
    print(f"Minimum dc distance: {dc_dist:.{p}g}")
    print(f"Minimum brute force distance: {br_dist:.{p}g}")
    print(f"{n}\t{br_counter.basic_ops}\t{dc_counter.basic_ops}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
