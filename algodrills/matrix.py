"""Exercises on grids and lists of points."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def flip_and_invert_image(image: Sequence[Sequence[int]]) -> list[list[int]]:
    """Mirror each row of a binary image and invert every pixel."""
    return [[int(not pixel) for pixel in reversed(row)] for row in image]


def min_time_to_visit_all_points(points: Sequence[Sequence[int]]) -> int:
    """Return the seconds needed to visit the points in order, moving diagonally."""
    return sum(
        max(abs(b[0] - a[0]), abs(b[1] - a[1])) for a, b in pairwise(points)
    )


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    size = len(mat)
    if any(len(row) != size for row in mat):
        raise ValueError("the matrix must be square")
    total = 0
    for index, row in enumerate(mat):
        mirror = size - 1 - index
        total += row[index]
        if mirror != index:
            total += row[mirror]
    return total


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest total held by one customer, never below zero."""
    return max([0, *(sum(account) for account in accounts)])