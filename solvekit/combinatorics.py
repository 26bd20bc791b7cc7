"""Counting and digit puzzles: permutations, binomials and digit rearrangements."""

from __future__ import annotations

from math import comb, factorial

MOD = 10**9 + 7
_POWER_OF_TWO_LIMIT = 31


def get_permutation(n: int, k: int) -> str:
    """The k-th (1-based) permutation of the digits 1..n in lexicographic order."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= factorial(n):
        raise ValueError("k must lie between 1 and n!")
    remaining = list(range(1, n + 1))
    offset = k - 1
    parts: list[str] = []
    while remaining:
        index, offset = divmod(offset, factorial(len(remaining) - 1))
        parts.append(str(remaining.pop(index)))
    return "".join(parts)


def pascal_row(row: int) -> list[int]:
    """The ``row``-th (1-based) row of Pascal's triangle."""
    values = [1]
    current = 1
    for col in range(1, row):
        current = current * (row - col) // col
        values.append(current)
    return values


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, num_rows + 1)]


def count_good_arrays(n: int, m: int, k: int) -> int:
    """Arrays of length ``n`` over ``m`` values with exactly ``k`` equal
    adjacent pairs, modulo 1_000_000_007."""
    if not 0 <= k < n:
        raise ValueError("k must satisfy 0 <= k < n")
    return m * pow(m - 1, n - k - 1, MOD) * comb(n - 1, k) % MOD


def reordered_power_of_2(n: int) -> bool:
    """Tell whether the digits of ``n`` can be reordered into a power of two."""
    digits = sorted(str(n))
    return any(sorted(str(1 << i)) == digits for i in range(_POWER_OF_TWO_LIMIT))


def maximum_69_number(num: int) -> int:
    """Largest number reachable by turning at most one 6 into a 9."""
    return int(str(num).replace("6", "9", 1))


def min_max_difference(num: int) -> int:
    """Difference between the largest and smallest numbers reachable by
    remapping every occurrence of one digit to another."""
    text = str(num)
    to_raise = next((ch for ch in text if ch != "9"), None)
    to_drop = next((ch for ch in text if ch != "0"), None)
    highest = text.replace(to_raise, "9") if to_raise else text
    lowest = text.replace(to_drop, "0") if to_drop else text
    return int(highest) - int(lowest)