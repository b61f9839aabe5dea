"""Small array puzzles: palindromes, extremes, triplets and running sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import combinations, pairwise

WITHDRAWAL_FEE = 0.5


def atm(amount: int, balance: float) -> float | None:
    """Return the balance reported after an ATM withdrawal attempt.

    A multiple of five is always withdrawn together with the fee.
    Otherwise the unchanged balance is reported when the amount
    exceeds it, and nothing (None) is reported in any other case.
    """
    if amount % 5 == 0:
        return balance - amount - WITHDRAWAL_FEE
    if amount > balance:
        return balance
    return None


def check_palindrome(s: str) -> bool:
    """Return True when ``s`` reads the same in both directions."""
    return s == s[::-1]


def reverse_array(values: MutableSequence) -> None:
    """Reverse ``values`` in place."""
    values.reverse()


def compare_triplets(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Score two rating triplets against each other.

    Returns ``[points_for_a, points_for_b]``; equal ratings score nothing.
    """
    if len(a) < 3 or len(b) < 3:
        raise ValueError("each triplet needs three ratings")
    pairs = list(zip(a[:3], b[:3]))
    return [sum(x > y for x, y in pairs), sum(x < y for x, y in pairs)]


def how_many_games(price: int, budget: int, discount: int, minimum: int) -> int:
    """Count the games affordable when each purchase lowers the next price.

    The price drops by ``discount`` after every purchase but never below
    ``minimum``.
    """
    games = 0
    while budget >= price:
        if price <= 0:
            raise ValueError("game price must stay positive")
        games += 1
        budget -= price
        price = max(price - discount, minimum)
    return games


def largest(values: Sequence[int]) -> int:
    """Return the largest value, never less than zero."""
    return max((0, *values))


def max_ascending_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly ascending run of values."""
    if not values:
        raise ValueError("values must not be empty")
    best = 0
    current = values[0]
    for previous, value in pairwise(values):
        if value > previous:
            current += value
        else:
            best = max(best, current)
            current = value
    return max(best, current)


def second_largest(values: Sequence[int]) -> int:
    """Return the running runner-up maximum, starting from zero.

    The runner-up is taken from the largest value seen before each
    element, so the last element never counts towards it.
    """
    top = runner_up = 0
    for value in values:
        runner_up = max(runner_up, top)
        top = max(value, top)
    return runner_up


def tuples_same_product(nums: Sequence[int]) -> int:
    """Count ordered tuples (a, b, c, d) of distinct elements with a*b == c*d."""
    products = Counter(x * y for x, y in combinations(nums, 2))
    return 8 * sum(freq * (freq - 1) // 2 for freq in products.values())