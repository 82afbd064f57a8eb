"""
Point and distance primitives shared by both closest-pair solvers.

A point is a plain ``(x, y)`` tuple of floats. Solvers only index ``p[0]`` and
``p[1]``, so any 2-item sequence works as input.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .counter import OperationCounter

Point = Tuple[float, float]


def distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return math.sqrt(dx * dx + dy * dy)


def squared_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return dx * dx + dy * dy


def x_order(p: Sequence[float]) -> Tuple[float, float]:
    """Sort key: ascending x, ties broken by y."""
    return (p[0], p[1])


def y_order(p: Sequence[float]) -> Tuple[float, float]:
    """Sort key: ascending y, ties broken by x."""
    return (p[1], p[0])


def sort_by_x(points: Sequence[Sequence[float]]) -> List[Point]:
    return sorted(points, key=x_order)


def sort_by_y(points: Sequence[Sequence[float]]) -> List[Point]:
    return sorted(points, key=y_order)


def min_of_three(points: Sequence[Sequence[float]], counter: OperationCounter) -> float:
    """Smallest of the three pairwise distances of a 3-point set."""
    d01 = distance(points[0], points[1])
    d02 = distance(points[0], points[2])
    d12 = distance(points[1], points[2])
    counter.count_distance(3)
    return min(d01, d02, d12)
