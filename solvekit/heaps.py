"""Heap-based algorithms: running medians, capital growth and smallest sums."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


class MedianFinder:
    """Running median of a stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # negated values: a max-heap of the lower half
        self._high: list[int] = []  # min-heap of the upper half

    def add_num(self, num: int) -> None:
        """Add a number to the stream."""
        heapq.heappush(self._high, -heapq.heappushpop(self._low, -num))
        if len(self._high) > len(self._low):
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Median of all numbers added so far."""
        if not self._low:
            raise ValueError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return (-self._low[0] + self._high[0]) / 2.0


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Final capital after picking at most ``k`` affordable projects greedily."""
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    index = 0
    for _ in range(k):
        while index < len(projects) and projects[index][0] <= w:
            heapq.heappush(available, -projects[index][1])
            index += 1
        if not available:
            break
        w -= heapq.heappop(available)
    return w


def k_smallest_pair_sums(a: Sequence[int], b: Sequence[int], k: int) -> list[int]:
    """The ``k`` smallest sums ``x + y`` with ``x`` from ``a`` and ``y`` from ``b``, ascending."""
    return heapq.nsmallest(k, (x + y for x in a for y in b))


def kth_smallest_matrix_sum(mat: Sequence[Sequence[int]], k: int) -> int:
    """The k-th smallest sum choosing one element from each row of ``mat``."""
    if not mat:
        raise ValueError("matrix must not be empty")
    sums = list(mat[0])
    for row in mat[1:]:
        sums = k_smallest_pair_sums(sums, row, k)
    if not 1 <= k <= len(sums):
        raise ValueError("k is out of range")
    return sums[k - 1]