"""Operation counting for empirical complexity comparisons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OperationCounter:
    """
    Tallies of work done by a solver.

    ``basic_ops`` follows each algorithm's own notion of a basic operation:
    pairs compared for brute force, points copied into partitions plus strip
    scans for divide and conquer. ``distance_evals`` counts every distance
    computation the same way in both solvers, so it is the one to compare
    across algorithms.

    Counts are a side channel only and never feed back into a result.
    """

    basic_ops: int = 0
    distance_evals: int = 0

    def tick(self, n: int = 1) -> None:
        self.basic_ops += n

    def count_distance(self, n: int = 1) -> None:
        self.distance_evals += n

    def reset(self) -> None:
        self.basic_ops = 0
        self.distance_evals = 0
