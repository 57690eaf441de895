"""Exercises solved by testing membership in a set."""

from __future__ import annotations

from typing import Iterable, Sequence


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def missing_number(nums: Sequence[int]) -> int:
    """Return the smallest of 0..len(nums) absent from ``nums``, or -1."""
    present = set(nums)
    return next((i for i in range(len(nums) + 1) if i not in present), -1)


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return the values of 1..len(nums) that do not occur in ``nums``."""
    present = set(nums)
    return [i for i in range(1, len(nums) + 1) if i not in present]


def distribute_candies(candy_types: Sequence[int]) -> int:
    """Return the most kinds of candy one can eat while eating half of them."""
    return min(len(set(candy_types)), len(candy_types) // 2)


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose kind is one of ``jewels``."""
    kinds = set(jewels)
    return sum(stone in kinds for stone in stones)


def check_if_exist(arr: Iterable[int]) -> bool:
    """Tell whether some value is twice another value at a different index."""
    seen: set[int] = set()
    for num in arr:
        if 2 * num in seen or (num % 2 == 0 and num // 2 in seen):
            return True
        seen.add(num)
    return False


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    best = 0
    current = 0
    previous = None
    for num in sorted(set(nums)):
        current = current + 1 if previous is not None and num == previous + 1 else 1
        best = max(best, current)
        previous = num
    return best