"""Exercises solved with a stack."""

from __future__ import annotations

from typing import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(text: str) -> bool:
    """Tell whether every bracket in ``text`` is closed in the right order.

    Raises ValueError on a character that is not a bracket.
    """
    stack: list[str] = []
    for char in text:
        if char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
        elif char in _OPENERS:
            stack.append(char)
        else:
            raise ValueError(f"character {char!r} is not allowed")
    return not stack


def cal_points(operations: Iterable[str]) -> int:
    """Score a baseball game record and return the total.

    An integer records a score, ``C`` cancels the last score, ``D`` doubles
    it and ``+`` adds the last two.
    """
    record: list[int] = []
    for operation in operations:
        if operation == "C":
            if not record:
                raise ValueError("no score to cancel")
            record.pop()
        elif operation == "D":
            if not record:
                raise ValueError("no score to double")
            record.append(record[-1] * 2)
        elif operation == "+":
            if len(record) < 2:
                raise ValueError("two scores are needed to add")
            record.append(record[-1] + record[-2])
        else:
            record.append(int(operation))
    return sum(record)


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions, in their order."""
    survivors: list[int] = []
    for incoming in asteroids:
        while True:
            if not survivors:
                survivors.append(incoming)
                break
            top = survivors[-1]
            same_direction = (top > 0 and incoming > 0) or (top < 0 and incoming < 0)
            moving_apart = top < 0 and incoming > 0
            if same_direction or moving_apart:
                survivors.append(incoming)
                break
            if top == -incoming:
                survivors.pop()
                break
            if abs(top) < abs(incoming):
                survivors.pop()
                continue
            break
    return survivors


def _typed(text: str) -> list[str]:
    stack: list[str] = []
    for char in text:
        if char != "#":
            stack.append(char)
        elif stack:
            stack.pop()
    return stack


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings are equal once ``#`` is taken as backspace."""
    return _typed(s) == _typed(t)


def remove_stars(text: str) -> str:
    """Remove each ``*`` together with the closest character to its left."""
    stack: list[str] = []
    for char in text:
        if char == "*":
            if not stack:
                raise ValueError("a star has no character to remove")
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, the days until a warmer one, or 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits