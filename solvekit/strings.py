"""Algorithms over strings: palindromes, filtering, scoring and tagging."""

from __future__ import annotations

_VOWELS = frozenset("aeiouAEIOU")
_TAG_LIMIT = 100


def _ascii_upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def _ascii_lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring.

    Among several of the greatest length (two or more) the rightmost wins;
    with no palindrome longer than one character the first character is returned.
    """
    if not s:
        return ""
    n = len(s)
    best_start, best_len = 0, 1
    for center in range(2 * n - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < n and s[left] == s[right]:
            left -= 1
            right += 1
        length = right - left - 1
        start = left + 1
        if length >= 2 and (
            length > best_len or (length == best_len and start > best_start)
        ):
            best_start, best_len = start, length
    return s[best_start : best_start + best_len]


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    out: list[str] = []
    for ch in s:
        if len(out) > 1 and out[-1] == ch == out[-2]:
            continue
        out.append(ch)
    return "".join(out)


def _remove_pairs(chars: list[str], first: str, second: str) -> tuple[list[str], int]:
    stack: list[str] = []
    removed = 0
    for ch in chars:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
            removed += 1
        else:
            stack.append(ch)
    return stack, removed


def maximum_gain(s: str, x: int, y: int) -> int:
    """Most points from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    if x < y:
        x, y = y, x
        s = s.translate(str.maketrans("ab", "ba"))
    rest, high = _remove_pairs(list(s), "a", "b")
    _, low = _remove_pairs(rest, "b", "a")
    return high * x + low * y


def is_valid_word(s: str) -> bool:
    """At least three ASCII letters or digits, with a vowel and a consonant."""
    if len(s) < 3:
        return False
    vowels = consonants = 0
    for ch in s:
        if ch.isascii() and ch.isalpha():
            if ch in _VOWELS:
                vowels += 1
            else:
                consonants += 1
        elif not (ch.isascii() and ch.isdigit()):
            return False
    return vowels >= 1 and consonants >= 1


def kth_character(k: int) -> str:
    """The k-th (1-based) character of the string grown from "a" by appending
    a copy of itself with every character advanced by one."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return chr(ord("a") + bin(k - 1).count("1"))


def max_manhattan_distance(s: str, k: int) -> int:
    """Greatest Manhattan distance from the origin reached at any moment along
    the moves in ``s`` after changing at most ``k`` of them."""
    north = south = east = west = 0
    best = 0
    for steps, move in enumerate(s, start=1):
        if move == "N":
            north += 1
        elif move == "S":
            south += 1
        elif move == "E":
            east += 1
        elif move == "W":
            west += 1
        reach = abs(north - south) + abs(east - west) + 2 * k
        best = max(best, min(reach, steps))
    return best


def generate_tag(caption: str) -> str:
    """Camel-case hashtag from a caption, at most 100 characters long."""
    chars = ["#"]
    previous = ""
    for ch in caption:
        if ch != " ":
            chars.append(_ascii_upper(ch) if previous == " " else _ascii_lower(ch))
        previous = ch
    if len(chars) > 1:
        chars[1] = _ascii_lower(chars[1])
    return "".join(chars)[:_TAG_LIMIT]