"""Exercises on single strings and characters."""

from __future__ import annotations

import string
from typing import Iterable

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
_ASCII_LETTERS = frozenset(string.ascii_letters)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by every string; empty input gives ``""``."""
    items = list(strs)
    if not items:
        return ""
    prefix = items[0]
    for text in items[1:]:
        length = next(
            (i for i, (a, b) in enumerate(zip(prefix, text)) if a != b),
            min(len(prefix), len(text)),
        )
        prefix = prefix[:length]
    return prefix


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways.

    Case is ignored.
    """
    cleaned = [char.lower() for char in s if char in _ASCII_ALNUM]
    return cleaned == cleaned[::-1]


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for the numbers 1 to ``n``."""

    def word(number: int) -> str:
        if number % 15 == 0:
            return "FizzBuzz"
        if number % 3 == 0:
            return "Fizz"
        if number % 5 == 0:
            return "Buzz"
        return str(number)

    return [word(number) for number in range(1, n + 1)]


def detect_capital_use(word: str) -> bool:
    """Tell whether ``word`` is all capitals, all lower case or only capitalised.

    Raises ValueError on a character that is not an ASCII letter.
    """
    for position, char in enumerate(word):
        if char not in _ASCII_LETTERS:
            raise ValueError(f"invalid character {char!r} at position {position}")
    rest = word[1:]
    return word == word.upper() or rest == rest.lower()


def to_lower_case(s: str) -> str:
    """Turn the ASCII capitals of ``s`` into lower case, leaving the rest alone."""
    return s.translate(_TO_LOWER)


def defang_ip_addr(address: str) -> str:
    """Replace every ``.`` of an address with ``[.]``."""
    return address.replace(".", "[.]")