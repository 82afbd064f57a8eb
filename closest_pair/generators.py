"""
Deterministic point-set families for benchmarks and tests.

Every generator that draws random numbers seeds ``random.Random(seed + n)`` so a
(family, n, seed) triple always produces the same set.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, List

from .geometry import Point


def uniform_points(n: int, extent: float = 100.0, seed: int = 42) -> List[Point]:
    rng = random.Random(seed + n)
    return [(extent * rng.random(), extent * rng.random()) for _ in range(n)]


def clustered_points(
    n: int, clusters: int = 5, spread: float = 2.0, extent: float = 100.0, seed: int = 42
) -> List[Point]:
    """Gaussian blobs around ``clusters`` uniformly placed centres."""
    rng = random.Random(seed + n)
    centres = [(extent * rng.random(), extent * rng.random()) for _ in range(max(1, clusters))]
    points = []
    for i in range(n):
        cx, cy = centres[i % len(centres)]
        points.append((rng.gauss(cx, spread), rng.gauss(cy, spread)))
    return points


def circle_points(n: int, radius: float = 100.0) -> List[Point]:
    return [
        (
            radius * math.cos(2 * math.pi * i / n),
            radius * math.sin(2 * math.pi * i / n),
        )
        for i in range(n)
    ]


def grid_points(n: int, spacing: float = 1.0) -> List[Point]:
    """Row-major square grid; every neighbouring pair ties at ``spacing``."""
    side = max(1, math.ceil(math.sqrt(n)))
    return [(spacing * (i % side), spacing * (i // side)) for i in range(n)]


def collinear_points(n: int, step: float = 1.0) -> List[Point]:
    """Points on the diagonal y = x, ``step * sqrt(2)`` apart."""
    return [(step * i, step * i) for i in range(n)]


def duplicate_points(n: int, extent: float = 100.0, seed: int = 42) -> List[Point]:
    """Uniform points where one point appears twice, so the minimum is 0 for n >= 2."""
    points = uniform_points(n, extent=extent, seed=seed)
    if n < 2:
        return points
    rng = random.Random(seed + n + 1)
    src, dst = rng.sample(range(n), 2)
    points[dst] = points[src]
    return points


FAMILIES: Dict[str, Callable[[int, int], List[Point]]] = {
    "uniform": lambda n, seed: uniform_points(n, seed=seed),
    "clustered": lambda n, seed: clustered_points(n, seed=seed),
    "circle": lambda n, seed: circle_points(n),
    "grid": lambda n, seed: grid_points(n),
    "collinear": lambda n, seed: collinear_points(n),
    "duplicates": lambda n, seed: duplicate_points(n, seed=seed),
}


def generate(family: str, n: int, seed: int = 0) -> List[Point]:
    try:
        gen = FAMILIES[family]
    except KeyError:
        raise ValueError(f"unknown family {family!r}; choose from {sorted(FAMILIES)}") from None
    return gen(n, seed)
