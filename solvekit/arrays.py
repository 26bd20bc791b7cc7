"""Algorithms over integer sequences: sums, windows, greedy matching and pricing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import groupby


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triplet of values that sums to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    last = len(values) - 1
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, last
        while j < k:
            total = first + values[j] + values[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
    return result


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = list(reversed(nums[pivot + 1 :]))


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    farthest = 0
    for i, step in enumerate(nums):
        if i > farthest:
            return False
        farthest = max(farthest, i + step)
    return True


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if any(value == 0 for value in row)}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one purchase followed by one sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two non-overlapping buy/sell transactions."""
    # free[cap]: best result when free to buy with ``cap`` transactions left;
    # holding[cap]: best result while holding a share with ``cap`` left.
    free = [0, 0, 0]
    holding = [0, 0, 0]
    for price in reversed(prices):
        next_free = [0, 0, 0]
        next_holding = [0, 0, 0]
        for cap in (1, 2):
            next_free[cap] = max(holding[cap] - price, free[cap])
            next_holding[cap] = max(price + free[cap - 1], holding[cap])
        free, holding = next_free, next_holding
    return free[2]


def min_candies(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and outranks lower-rated neighbours."""
    n = len(ratings)
    candies = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def count_subarray_ors(arr: Iterable[int]) -> int:
    """Number of distinct bitwise-OR values over all contiguous subarrays."""
    seen: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {value} | {value | other for other in ending_here}
        seen |= ending_here
    return len(seen)


def total_fruit(fruits: Sequence[int]) -> int:
    """Length of the longest contiguous run holding at most two fruit types."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        if len(counts) <= 2:
            best = max(best, right - left + 1)
        else:
            dropped = fruits[left]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            left += 1
    return best


def longest_ones_after_deletion(nums: Sequence[int]) -> int:
    """Longest run of ones after deleting exactly one element."""
    left = 0
    zeros = 0
    for value in nums:
        zeros += value == 0
        if zeros > 1:
            zeros -= nums[left] == 0
            left += 1
    return len(nums) - left - 1


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous subarray whose elements are all distinct."""
    seen: set[int] = set()
    left = 0
    current = 0
    best = 0
    for value in nums:
        while value in seen:
            current -= nums[left]
            seen.discard(nums[left])
            left += 1
        current += value
        seen.add(value)
        best = max(best, current)
    return best


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, else -1."""
    if not nums:
        raise ValueError("nums must not be empty")
    lowest = nums[0]
    best = -1
    for value in nums[1:]:
        if value > lowest:
            best = max(best, value - lowest)
        else:
            lowest = value
    return best


def max_color_distance(colors: Sequence[int]) -> int:
    """Largest index distance between two houses of different colours."""
    if not colors:
        return 0
    first, last = colors[0], colors[-1]
    end = len(colors) - 1
    distance = 0
    for i, colour in enumerate(colors):
        if colour != first:
            distance = max(distance, i)
        if colour != last:
            distance = max(distance, end - i)
    return distance


def partition_array(nums: Iterable[int], k: int) -> int:
    """Fewest groups such that each group's max minus min is at most ``k``."""
    count = 0
    start: int | None = None
    for value in sorted(nums):
        if start is None or value - start > k:
            start = value
            count += 1
    return count


def match_players_and_trainers(players: Iterable[int], trainers: Iterable[int]) -> int:
    """Most pairs where a player's ability does not exceed the trainer's capacity."""
    waiting = iter(sorted(players))
    player = next(waiting, None)
    count = 0
    for trainer in sorted(trainers):
        if player is None:
            break
        if player <= trainer:
            count += 1
            player = next(waiting, None)
    return count


def longest_max_and_subarray(nums: Sequence[int]) -> int:
    """Length of the longest run of the maximum value (the maximum bitwise AND)."""
    if not nums:
        raise ValueError("nums must not be empty")
    top = max(0, max(nums))
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == top),
        default=1,
    )


def min_swap_cost(basket1: Sequence[int], basket2: Sequence[int]) -> int:
    """Cheapest cost of swaps making both baskets equal, or -1 if impossible."""
    total = Counter(basket1) + Counter(basket2)
    if any(count % 2 for count in total.values()):
        return -1
    if not total:
        return 0
    smallest = min(total)
    first = Counter(basket1)
    to_swap = sorted(
        fruit
        for fruit, count in total.items()
        for _ in range(abs(first[fruit] - count // 2))
    )
    return sum(min(fruit, 2 * smallest) for fruit in to_swap[: len(to_swap) // 2])


def divide_array(nums: Iterable[int], k: int) -> list[list[int]]:
    """Split into sorted triplets each spanning at most ``k``; empty if impossible."""
    values = sorted(nums)
    groups = [values[i : i + 3] for i in range(0, len(values), 3)]
    if any(len(group) < 3 or group[2] - group[0] > k for group in groups):
        return []
    return groups


def max_unique_sum(nums: Sequence[int]) -> int:
    """Largest sum of distinct elements kept after deletions (at least one kept)."""
    if not nums:
        raise ValueError("nums must not be empty")
    if all(value < 0 for value in nums):
        return max(nums)
    return sum(value for value in set(nums) if value > 0)