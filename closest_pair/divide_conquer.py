"""
Closest Pair in O(n log n) Time

Divide and conquer over two views of the same point set (Levitin, EfficientClosestPair):
1. X-view sorted by (x, y) gives the split at the median index
2. Y-view sorted by (y, x) gives the strip around the split line in y-order
3. Each strip point is compared only with the following points whose y-gap is
   below the current minimum, which is O(1) candidates per point

Each recursive call builds its own partition lists; nothing is modified in place.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .counter import OperationCounter
from .geometry import distance, min_of_three, sort_by_x, sort_by_y, squared_distance, y_order


def closest_pair_dc(
    x_view: Sequence[Sequence[float]],
    y_view: Sequence[Sequence[float]],
    counter: Optional[OperationCounter] = None,
) -> float:
    """
    Minimum pairwise distance, given the point set sorted both ways.

    ``x_view`` must be sorted by ``x_order`` and ``y_view`` by ``y_order``, and
    both must hold the same points. The initial views are never re-sorted here;
    use ``closest_pair`` to build them from an unordered sequence.

    Returns 0.0 for fewer than two points.
    """
    if counter is None:
        counter = OperationCounter()

    n = len(x_view)
    if n < 2:
        return 0.0
    if n == 2:
        counter.count_distance()
        return distance(x_view[0], x_view[1])
    if n == 3:
        return min_of_three(x_view, counter)

    # Left-heavy split for odd n: n // 2 points left, the rest right.
    mid = n // 2
    left_x = list(x_view[:mid])
    right_x = list(x_view[mid:])
    counter.tick(n)

    # Same membership as the x halves, each re-sorted into y-order.
    left_y = sorted(left_x, key=y_order)
    right_y = sorted(right_x, key=y_order)

    dl = closest_pair_dc(left_x, left_y, counter)
    dr = closest_pair_dc(right_x, right_y, counter)
    d = min(dl, dr)
    m = x_view[mid - 1][0]

    strip: List[Sequence[float]] = [p for p in y_view if abs(p[0] - m) < d]
    if not strip:
        return d

    best_sq = d * d
    for i in range(len(strip) - 1):
        counter.tick()
        pi = strip[i]
        k = i + 1
        # Strip is y-sorted, so once the gap reaches the minimum it only grows.
        while k < len(strip) and (strip[k][1] - pi[1]) ** 2 < best_sq:
            counter.count_distance()
            dsq = squared_distance(strip[k], pi)
            if dsq < best_sq:
                best_sq = dsq
            k += 1
    return math.sqrt(best_sq)


def closest_pair(
    points: Sequence[Sequence[float]], counter: Optional[OperationCounter] = None
) -> float:
    """Build the x- and y-views of ``points`` and run ``closest_pair_dc``."""
    return closest_pair_dc(sort_by_x(points), sort_by_y(points), counter)
