"""Subset-sum problems over non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _reachable_sums(values: Iterable[int], limit: int) -> int:
    """Bit mask whose bit ``s`` is set when some subset sums to ``s <= limit``."""
    mask = (1 << (limit + 1)) - 1
    reach = 1
    for value in values:
        reach = (reach | (reach << value)) & mask
    return reach


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two subsets of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    return bool(_reachable_sums(nums, target) >> target & 1)


def last_stone_weight_ii(stones: Sequence[int]) -> int:
    """Smallest weight that can remain after smashing stones pairwise."""
    total = sum(stones)
    reach = _reachable_sums(stones, total // 2)
    return total - 2 * (reach.bit_length() - 1)