"""Elementary arithmetic puzzles."""

from __future__ import annotations

from itertools import zip_longest

ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def _bit(char: str) -> int:
    if char not in ("0", "1"):
        raise ValueError(f"not a binary digit: {char!r}")
    return int(char)


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of 0 and 1."""
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + _bit(x) + _bit(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def supplies_count(n: int, m: int) -> int:
    """Return how many supplies cover an ``n`` by ``m`` grid of cells."""
    return ((n + 1) // 2) * ((m + 1) // 2)


def min_height(base: int, area: int) -> int:
    """Return the smallest whole height of a triangle with at least ``area``."""
    return -(-2 * area // base)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it is subtracted from that one and
    the pair is consumed together; unknown symbols count as zero.
    """
    values = [ROMAN_VALUES.get(char, 0) for char in s] + [0]
    result = 0
    i = 0
    while i < len(s):
        current, following = values[i], values[i + 1]
        if current < following:
            result += following - current
            i += 2
        else:
            result += current
            i += 1
    return result


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x`` by binary search."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x < 2:
        return x
    low, high, answer = 1, x, 0
    while low <= high:
        mid = (low + high) // 2
        if mid <= x // mid:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer