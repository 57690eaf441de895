"""Exercises solved by counting occurrences."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable, Sequence


def majority_element(nums: Sequence[int]) -> int:
    """Return the first value seen more than ``len(nums) // 2`` times, or 0."""
    half = len(nums) // 2
    counts: Counter[int] = Counter()
    for num in nums:
        counts[num] += 1
        if counts[num] > half:
            return num
    return 0


def is_anagram(s: str, t: str) -> bool:
    """Tell whether every character of ``s`` can be matched by its own one in ``t``."""
    return not Counter(s) - Counter(t)


def find_duplicate(nums: Iterable[int]) -> int:
    """Return the first value seen a second time; 1 if no value repeats."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return 1


def single_number_iii(nums: Iterable[int]) -> list[int]:
    """Return the values that appear exactly once, in order of first appearance."""
    return [num for num, count in Counter(nums).items() if count == 1]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Ties go to the value seen first. Places beyond the number of distinct
    values are filled with -1.
    """
    if k <= 0:
        return []
    ranked = [num for num, _ in Counter(nums).most_common(k)]
    return ranked + [-1] * (k - len(ranked))


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be built from the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)


def first_uniq_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def find_the_difference(s: str, t: str) -> str:
    """Return the first character of ``t`` that ``s`` has too few of, or a space."""
    available = Counter(s)
    used: Counter[str] = Counter()
    for char in t:
        used[char] += 1
        if used[char] > available[char]:
            return char
    return " "


def longest_palindrome(s: str) -> int:
    """Return the length of the longest palindrome that the letters of ``s`` make."""
    counts = Counter(s).values()
    paired = sum(count - count % 2 for count in counts)
    return paired + (1 if any(count % 2 for count in counts) else 0)


def find_lhs(nums: Iterable[int]) -> int:
    """Return the length of the longest subsequence whose max and min differ by 1."""
    counts = Counter(nums)
    return max(
        (counts[x] + counts[x + 1] for x in list(counts) if x + 1 in counts),
        default=0,
    )


def find_special_integer(arr: Sequence[int]) -> int:
    """Return the first value seen more than a quarter of ``len(arr)`` times, or -1."""
    threshold = len(arr) // 4
    counts: Counter[int] = Counter()
    for num in arr:
        counts[num] += 1
        if counts[num] > threshold:
            return num
    return -1


def num_identical_pairs(nums: Iterable[int]) -> int:
    """Count the index pairs ``i < j`` holding equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def sum_of_unique(nums: Iterable[int]) -> int:
    """Sum the values that appear exactly once."""
    return sum(num for num, count in Counter(nums).items() if count == 1)


def finding_users_active_minutes(logs: Iterable[Sequence[int]], k: int) -> list[int]:
    """Count users by their number of distinct active minutes.

    Entry ``j`` of the result holds how many users were active in exactly
    ``j + 1`` distinct minutes; users with more than ``k`` are left out.
    """
    if k < 0:
        raise ValueError("k cannot be negative")
    minutes: defaultdict[int, set[int]] = defaultdict(set)
    for user, minute in logs:
        minutes[user].add(minute)
    tally = [0] * k
    for active in minutes.values():
        if len(active) <= k:
            tally[len(active) - 1] += 1
    return tally


def dest_city(paths: Iterable[Sequence[str]]) -> str:
    """Return the city that is reached but never left.

    Raises ValueError if every city is also a departure.
    """
    departures: set[str] = set()
    destinations: list[str] = []
    for departure, destination in paths:
        departures.add(departure)
        destinations.append(destination)
    for city in destinations:
        if city not in departures:
            return city
    raise ValueError("no destination found")