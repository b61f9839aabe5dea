"""Linear and binary search returning an index, or -1 when absent."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def binary_search(nums: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``nums``, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def linear_search(nums: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` in ``nums``, or -1."""
    return next((i for i, value in enumerate(nums) if value == target), NOT_FOUND)