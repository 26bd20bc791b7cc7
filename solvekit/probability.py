"""Probability puzzles solved by dynamic programming."""

from __future__ import annotations

from functools import lru_cache

_SOUP_CERTAIN_ABOVE = 4451
_SERVING = 25


def soup_servings(n: int) -> float:
    """Probability that soup A empties first, plus half the chance both empty together."""
    if n > _SOUP_CERTAIN_ABOVE:
        return 1.0
    units = (n + _SERVING - 1) // _SERVING

    @lru_cache(maxsize=None)
    def chance(a: int, b: int) -> float:
        if a <= 0 and b <= 0:
            return 0.5
        if a <= 0:
            return 1.0
        if b <= 0:
            return 0.0
        return 0.25 * (
            chance(a - 4, b)
            + chance(a - 3, b - 1)
            + chance(a - 2, b - 2)
            + chance(a - 1, b - 3)
        )

    return chance(units, units)


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Probability of finishing with at most ``n`` points when drawing uniformly
    from 1..``max_pts`` until reaching at least ``k``."""
    if k == 0 or n >= k - 1 + max_pts:
        return 1.0
    window = [0.0] * max_pts
    window[0] = 1.0
    window_sum = 1.0
    result = 0.0
    for points in range(1, n + 1):
        prob = window_sum / max_pts
        if points < k:
            window_sum += prob
        else:
            result += prob
        slot = points % max_pts
        if points >= max_pts:
            window_sum -= window[slot]
        window[slot] = prob
    return result