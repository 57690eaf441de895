"""Exercises built on sorting and ordering."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

_MEDALS = {1: "Gold Medal", 2: "Silver Medal", 3: "Bronze Medal"}


def find_relative_ranks(scores: Sequence[int]) -> list[str]:
    """Give each score its place; the first three get medals."""
    place_of = {
        score: place
        for place, score in enumerate(sorted(scores, reverse=True), start=1)
    }
    return [_MEDALS.get(place_of[s], str(place_of[s])) for s in scores]


def sorted_squares(nums: Iterable[int]) -> list[int]:
    """Return the squares of ``nums`` in ascending order."""
    return sorted(n * n for n in nums)


def minimum_boxes(apple: Iterable[int], capacity: Sequence[int]) -> int:
    """Return how many of the largest boxes are needed to hold all apples.

    Returns the number of boxes if even all of them are not enough.
    """
    remaining = sum(apple)
    for used, size in enumerate(sorted(capacity, reverse=True)):
        if remaining <= 0:
            return used
        remaining -= size
    return len(capacity)


def height_checker(heights: Sequence[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Return ``names`` ordered by height, tallest first; ties keep input order."""
    if len(names) != len(heights):
        raise ValueError("names and heights must have the same length")
    order = sorted(range(len(names)), key=lambda i: -heights[i])
    return [names[i] for i in order]


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0, 1 and 2 in place in a single pass."""
    if any(n not in (0, 1, 2) for n in nums):
        raise ValueError("colours must be 0, 1 or 2")
    left, current, right = 0, 0, len(nums) - 1
    while current <= right:
        value = nums[current]
        if value == 0:
            nums[current], nums[left] = nums[left], 0
            left += 1
            current += 1
        elif value == 1:
            current += 1
        else:
            nums[current], nums[right] = nums[right], 2
            right -= 1


def maximum_units(box_types: Iterable[Sequence[int]], truck_size: int) -> int:
    """Return the most units that fit on a truck holding ``truck_size`` boxes.

    Each box type is a pair ``(number_of_boxes, units_per_box)``.
    """
    boxes_by_units: defaultdict[int, int] = defaultdict(int)
    for count, units in box_types:
        boxes_by_units[units] += count
    loaded = 0
    space = truck_size
    for units in sorted(boxes_by_units, reverse=True):
        if space <= 0:
            break
        taken = min(boxes_by_units[units], space)
        loaded += taken * units
        space -= taken
    return loaded