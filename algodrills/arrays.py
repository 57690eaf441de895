"""Exercises that rearrange or scan integer lists."""

from __future__ import annotations

from collections import Counter
from heapq import merge as _merge_sorted
from itertools import accumulate, pairwise
from typing import Iterable, Sequence

_BILLS = (5, 10, 20)


def remove_duplicates(nums: list[int]) -> int:
    """Keep one copy of each value of ``nums`` in place and return how many remain."""
    nums[:] = dict.fromkeys(nums)
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every ``val`` from ``nums`` in place and return the new length."""
    nums[:] = [num for num in nums if num != val]
    return len(nums)


def remove_duplicates_at_most_twice(nums: list[int]) -> int:
    """Keep at most two copies of each run of equal values, in place.

    Returns the number of values kept. The list keeps its length; the freed
    places at the end are filled with 0.
    """
    kept: list[int] = []
    for num in nums:
        if len(kept) < 2 or not (kept[-1] == num and kept[-2] == num):
            kept.append(num)
    padding = len(nums) - len(kept)
    nums[:] = kept + [0] * padding
    return len(kept)


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into the first ``m`` of ``nums1``.

    Both parts must be sorted; the result fills the first ``m + n`` places of
    ``nums1`` in place.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n cannot be negative")
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n places and nums2 at least n values")
    nums1[: m + n] = list(_merge_sorted(nums1[:m], nums2[:n]))


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums``, keeping the others in order."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_poisoned_duration(time_series: Sequence[int], duration: int) -> int:
    """Return the total time poisoned by attacks at the given sorted times."""
    if not time_series:
        raise ValueError("time_series must hold at least one attack")
    overlapping = sum(min(duration, later - earlier) for earlier, later in pairwise(time_series))
    return overlapping + duration


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit in the bed with no two adjacent."""
    previous_planted = False
    last = len(flowerbed) - 1
    for index, plot in enumerate(flowerbed):
        if n == 0:
            break
        if plot == 1:
            previous_planted = True
            continue
        if previous_planted:
            previous_planted = False
            continue
        if index < last and flowerbed[index + 1] == 1:
            continue
        n -= 1
        previous_planted = True
    return n == 0


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether every customer paying with ``bills`` can get change.

    Raises ValueError on a bill other than 5, 10 or 20.
    """
    fives = tens = 0
    for bill in bills:
        if bill not in _BILLS:
            raise ValueError(f"invalid bill: {bill}")
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def is_monotonic(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` never decreases or never increases."""
    steps = list(pairwise(nums))
    return all(a <= b for a, b in steps) or all(a >= b for a, b in steps)


def rearrange_barcodes(barcodes: Sequence[int]) -> list[int]:
    """Reorder ``barcodes`` so that no two neighbours are equal where possible."""
    length = len(barcodes)
    positions = [*range(0, length, 2), *range(1, length, 2)]
    ordered = (
        code
        for code, count in Counter(barcodes).most_common()
        for _ in range(count)
    )
    result = [0] * length
    for position, code in zip(positions, ordered):
        result[position] = code
    return result


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the first ``n`` values with the next ``n``: x1, y1, x2, y2, ..."""
    if n < 0 or len(nums) < 2 * n:
        raise ValueError("nums must hold at least 2 * n values")
    return [value for pair in zip(nums[:n], nums[n : 2 * n]) for value in pair]


def largest_altitude(gain: Iterable[int]) -> int:
    """Return the highest altitude reached from 0 by the given gains."""
    return max(0, *accumulate(gain)) if gain else 0