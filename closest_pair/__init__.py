"""
Closest pair of points in the plane: brute force and divide and conquer.
"""

from .brute_force import closest_pair_brute_force
from .counter import OperationCounter
from .divide_conquer import closest_pair, closest_pair_dc
from .geometry import Point, distance, sort_by_x, sort_by_y, squared_distance

__all__ = [
    "OperationCounter",
    "Point",
    "closest_pair",
    "closest_pair_brute_force",
    "closest_pair_dc",
    "distance",
    "sort_by_x",
    "sort_by_y",
    "squared_distance",
]

__version__ = "0.1.0"
