"""Tests for point and distance primitives."""

import math

import pytest

from closest_pair.counter import OperationCounter
from closest_pair.geometry import (
    distance,
    min_of_three,
    sort_by_x,
    sort_by_y,
    squared_distance,
)


def test_distance_basics():
    assert distance((0, 0), (3, 4)) == 5.0
    assert distance((1.5, -2.0), (1.5, -2.0)) == 0.0
    assert squared_distance((0, 0), (3, 4)) == 25.0


@pytest.mark.parametrize(
    "a, b",
    [((0, 0), (1, 1)), ((-3.5, 2.25), (7.0, -1.0)), ((1e6, 1e-6), (-1e6, 0.0))],
)
def test_distance_is_symmetric(a, b):
    assert distance(a, b) == distance(b, a)
    assert distance(a, b) >= 0
    assert distance(a, b) == pytest.approx(math.hypot(a[0] - b[0], a[1] - b[1]))


def test_sort_orders_break_ties_on_other_coordinate():
    pts = [(1, 2), (0, 5), (1, 1), (0, 2)]
    assert sort_by_x(pts) == [(0, 2), (0, 5), (1, 1), (1, 2)]
    assert sort_by_y(pts) == [(1, 1), (0, 2), (1, 2), (0, 5)]


def test_sort_returns_new_list():
    pts = [(3, 0), (1, 0)]
    out = sort_by_x(pts)
    assert out is not pts
    assert pts == [(3, 0), (1, 0)]


def test_min_of_three_counts_distances():
    counter = OperationCounter()
    assert min_of_three([(0, 0), (0, 3), (4, 0)], counter) == 3.0
    assert counter.distance_evals == 3
    assert counter.basic_ops == 0
