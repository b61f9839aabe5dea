"""Classic in-place comparison sorts."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from typing import Any


def bubble_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by repeatedly swapping neighbours."""
    for end in range(len(nums) - 1, 0, -1):
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]


def insertion_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by inserting each value into the sorted prefix."""
    for i in range(1, len(nums)):
        key = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > key:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = key


def merge_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by sorting halves and merging them."""
    if len(nums) <= 1:
        return
    mid = len(nums) // 2
    left = list(nums[:mid])
    right = list(nums[mid:])
    merge_sort(left)
    merge_sort(right)
    nums[:] = list(heapq.merge(left, right))


def _partition(nums: MutableSequence[Any], low: int, high: int) -> int:
    pivot = nums[high]
    i, j = low, high - 1
    while i <= j:
        if nums[i] < pivot:
            i += 1
        else:
            nums[i], nums[j] = nums[j], nums[i]
            j -= 1
    nums[i], nums[high] = nums[high], nums[i]
    return i


def _quick_sort(nums: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        split = _partition(nums, low, high)
        if split - low < high - split:
            _quick_sort(nums, low, split - 1)
            low = split + 1
        else:
            _quick_sort(nums, split + 1, high)
            high = split - 1


def quick_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place around the last element as pivot."""
    _quick_sort(nums, 0, len(nums) - 1)


def selection_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place by moving each minimum to the front."""
    n = len(nums)
    for i in range(n - 1):
        smallest = min(range(i, n), key=nums.__getitem__)
        nums[i], nums[smallest] = nums[smallest], nums[i]