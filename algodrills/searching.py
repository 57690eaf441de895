"""Searching exercises over integer sequences."""

from __future__ import annotations

from typing import Iterable, Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the first index whose value is not below ``target``."""
    return next(
        (index for index, value in enumerate(nums) if target <= value), len(nums)
    )


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = nums[middle]
        if value < target:
            low = middle + 1
        elif value > target:
            high = middle - 1
        else:
            return middle
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of the first element greater than its neighbours.

    Falls back to 0 when there is no such element.
    """
    if len(nums) < 2:
        return 0
    last = len(nums) - 1
    for index, value in enumerate(nums):
        left_ok = index == 0 or nums[index - 1] < value
        right_ok = index == last or value > nums[index + 1]
        if left_ok and right_ok:
            return index
    return 0


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run summing to at least ``target``, or 0."""
    best = len(nums) + 1
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            best = min(best, right - left + 1)
            total -= nums[left]
            left += 1
    return 0 if best == len(nums) + 1 else best


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer not present in ``nums``."""
    expected = 1
    for value in sorted({n for n in nums if n >= 1}):
        if value != expected:
            break
        expected += 1
    return expected