"""Recursive enumeration: balanced brackets and subset sums."""

from __future__ import annotations

from collections.abc import Sequence


def balanced_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` bracket pairs, '(' branches first."""
    if n < 0:
        raise ValueError("number of pairs must not be negative")
    results: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if len(prefix) == 2 * n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def count_subsets(values: Sequence[int], target: int) -> int:
    """Count subsets of ``values``, each element used at most once, summing to ``target``.

    A subset is counted as soon as its running sum hits the target.
    """

    def count(remaining: int, index: int) -> int:
        if remaining == 0:
            return 1
        if index == len(values):
            return 0
        return count(remaining - values[index], index + 1) + count(remaining, index + 1)

    return count(target, 0)


def count_combinations(values: Sequence[int], target: int) -> int:
    """Count multisets drawn from ``values``, with repetition, summing to ``target``."""
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for value in values:
        for total in range(value, target + 1):
            ways[total] += ways[total - value]
    return ways[target]