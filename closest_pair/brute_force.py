"""
Exhaustive O(n^2) closest pair.

Used on its own as the reference answer for the divide-and-conquer solver.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .counter import OperationCounter
from .geometry import distance, min_of_three


def closest_pair_brute_force(
    points: Sequence[Sequence[float]], counter: Optional[OperationCounter] = None
) -> float:
    """
    Minimum pairwise distance of ``points`` (any order).

    Returns 0.0 for fewer than two points; that is a "no pair" sentinel, so
    callers must check the size before reading 0.0 as coincident points.
    Increments ``counter.basic_ops`` once per pair in the exhaustive scan.
    """
    if counter is None:
        counter = OperationCounter()

    n = len(points)
    if n < 2:
        return 0.0
    if n == 2:
        counter.count_distance()
        return distance(points[0], points[1])
    if n == 3:
        return min_of_three(points, counter)

    best = math.inf
    for i in range(n - 1):
        pi = points[i]
        for j in range(i + 1, n):
            counter.tick()
            counter.count_distance()
            d = distance(pi, points[j])
            if d < best:
                best = d
    return best
