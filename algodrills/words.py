"""Exercises on sentences, words and lists of strings."""

from __future__ import annotations

import re
from typing import Iterable

_WORD = re.compile(r"[A-Za-z0-9]+")
_ROWS = tuple(
    frozenset(row + row.upper()) for row in ("qwertyuiop", "asdfghjkl", "zxcvbnm")
)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.strip(" ").rsplit(" ", 1)[-1])


def reverse_words(s: str) -> str:
    """Return the ASCII alphanumeric words of ``s`` in reverse order, one space apart."""
    return " ".join(reversed(_WORD.findall(s)))


def reverse_each_word(s: str) -> str:
    """Reverse the characters of every word, keeping words and spaces in place."""
    return " ".join(word[::-1] for word in s.split(" "))


def truncate_sentence(s: str, k: int) -> str:
    """Keep only the first ``k`` space-separated words of ``s``."""
    if k < 0:
        raise ValueError("k cannot be negative")
    return " ".join(s.split(" ")[:k])


def sort_sentence(s: str) -> str:
    """Rebuild a sentence whose words each end with their 1-based position digit."""
    table: dict[int, str] = {}
    for word in s.split(" "):
        if not word or not word[-1].isdigit() or not word[-1].isascii():
            raise ValueError(f"word {word!r} does not end with a position digit")
        table[int(word[-1])] = word[:-1]
    return " ".join(table[key] for key in sorted(table))


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first appearance of each character of ``key`` stands for the next
    letter of the alphabet; spaces are kept. Raises ValueError for a message
    character that the key does not cover.
    """
    table: dict[str, str] = {}
    for char in key:
        if char != " " and char not in table:
            table[char] = chr(ord("a") + len(table))

    def decode(char: str) -> str:
        if char == " ":
            return " "
        try:
            return table[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the key") from None

    return "".join(decode(char) for char in message)


def find_words(words: Iterable[str]) -> list[str]:
    """Return the words that can be typed using one keyboard row only."""
    return [
        word for word in words if word and any(set(word) <= row for row in _ROWS)
    ]


def num_unique_emails(emails: Iterable[str]) -> int:
    """Count distinct addresses, ignoring dots and anything after ``+`` locally."""
    addresses: set[tuple[str, str]] = set()
    for email in emails:
        local, at, domain = email.partition("@")
        if not at:
            raise ValueError(f"{email!r} has no '@'")
        local = local.split("+", 1)[0].replace(".", "")
        addresses.add((local, domain))
    return len(addresses)


def array_strings_are_equal(first: Iterable[str], second: Iterable[str]) -> bool:
    """Tell whether two lists of strings join to the same string."""
    return "".join(first) == "".join(second)