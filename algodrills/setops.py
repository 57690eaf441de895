"""Exercises on membership across one or more collections."""

from __future__ import annotations

from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first pair of distinct indices whose values sum to ``target``.

    Raises ValueError if there is no such pair.
    """
    for i, first in enumerate(nums):
        for j, second in enumerate(nums):
            if i != j and first + second == target:
                return [i, j]
    raise ValueError(f"no two values sum to {target}")


def two_out_of_three(
    nums1: Iterable[int], nums2: Iterable[int], nums3: Iterable[int]
) -> list[int]:
    """Return, sorted, the values found in at least two of the three inputs."""
    sets = [set(nums1), set(nums2), set(nums3)]
    return sorted(
        value for value in set().union(*sets) if sum(value in s for s in sets) >= 2
    )


def find_difference(nums1: Iterable[int], nums2: Iterable[int]) -> list[list[int]]:
    """Return the distinct values only in ``nums1`` and those only in ``nums2``.

    Each list keeps the order of first appearance.
    """
    first = list(dict.fromkeys(nums1))
    second = list(dict.fromkeys(nums2))
    first_set, second_set = set(first), set(second)
    return [
        [value for value in first if value not in second_set],
        [value for value in second if value not in first_set],
    ]