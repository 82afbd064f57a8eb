#!/usr/bin/env python3
"""
Generate deterministic point datasets for benchmarking.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from closest_pair.generators import FAMILIES, generate
from closest_pair.points_io import write_points


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="points/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000, 2000, 5000, 10000, 20000, 50000, 100000],
    )
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES), choices=sorted(FAMILIES))
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    for n in args.sizes:
        for family in args.families:
            write_points(generate(family, n, args.seed), args.output / f"{family}_{n}.pts")

    print(f"Generated point sets in {args.output}")


if __name__ == "__main__":
    main()
