"""Classic array and string logic problems."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import pairwise


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings.

    An empty input yields a single space.
    """
    if not strs:
        return " "
    prefix = strs[0]
    for word in strs[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def max_distance(s: str, k: int) -> int:
    """Return the largest Manhattan distance reachable with ``k`` changes.

    ``s`` is a walk of N, S, E and W steps; each change may redirect one step.
    """
    north = east = 0
    best = 0
    for steps, move in enumerate(s, start=1):
        if move == "N":
            north += 1
        elif move == "S":
            north -= 1
        elif move == "E":
            east += 1
        elif move == "W":
            east -= 1
        distance = abs(north) + abs(east)
        waste = steps - distance
        extra = min(2 * k, waste) if waste else 0
        best = max(best, distance + extra)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous subarray (0 when empty)."""
    if not nums:
        return 0
    best = current_max = current_min = nums[0]
    for num in nums[1:]:
        if num < 0:
            current_max, current_min = current_min, current_max
        current_max = max(num, current_max * num)
        current_min = min(num, current_min * num)
        best = max(best, current_max)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for num in nums[1:]:
        current = max(num, current + num)
        best = max(best, current)
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Return the number from 0..len(nums) that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping other values in order."""
    nonzero = [num for num in nums if num != 0]
    zeros = [num for num in nums if num == 0]
    nums[:] = nonzero + zeros


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one greater than ``digits``."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place and return the count of unique values.

    The first returned-count entries hold the unique values; the rest of
    the list is left as it was.
    """
    if not nums:
        return 0
    count = 1
    for previous, value in pairwise(list(nums)):
        if value != previous:
            nums[count] = value
            count += 1
    return count


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places in place."""
    n = len(nums)
    if not n:
        return
    k %= n
    nums[:] = list(nums[n - k:]) + list(nums[: n - k])


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or the maximum if there is none."""
    if not nums:
        raise ValueError("nums must not be empty")
    distinct = sorted(set(nums), reverse=True)
    return distinct[2] if len(distinct) >= 3 else distinct[0]