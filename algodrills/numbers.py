"""Exercises on integers, digits and numeric strings."""

from __future__ import annotations

from functools import reduce
from itertools import zip_longest
from math import isqrt
from operator import xor
from typing import Iterable, Sequence

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_PAIRS = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def roman_to_int(roman: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters are ignored."""
    total = 0
    index = 0
    while index < len(roman):
        pair = roman[index:index + 2]
        if pair in _ROMAN_PAIRS:
            total += _ROMAN_PAIRS[pair]
            index += 2
        else:
            total += _ROMAN_VALUES.get(roman[index], 0)
            index += 1
    return total


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one greater than ``digits``."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] != 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def title_to_number(title: str) -> int:
    """Return the column number of a spreadsheet column title such as ``AB``."""
    return reduce(lambda total, char: total * 26 + ord(char) - ord("A") + 1, title, 0)


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while n > 1:
        n = _digit_square_sum(n)
        if n in seen:
            return False
        seen.add(n)
    return True


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Repeatedly sum the digits of ``num`` until one digit remains."""
    while num >= 10:
        num = sum(int(digit) for digit in str(num))
    return num


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative integers written as decimal strings."""
    for text in (num1, num2):
        if text and not text.isdigit():
            raise ValueError(f"{text!r} is not a string of decimal digits")
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def construct_rectangle(area: int) -> list[int]:
    """Return ``[length, width]`` with the closest sides whose product is ``area``."""
    if area < 1:
        raise ValueError("the area must be positive")
    width = isqrt(area)
    while area % width:
        width -= 1
    return [area // width, width]


def _parse_complex(text: str) -> tuple[int, int]:
    real, sep, rest = text.partition("+")
    if not sep:
        raise ValueError(f"{text!r} is not of the form 'a+bi'")
    return int(real), int(rest[:-1])


def complex_number_multiply(num1: str, num2: str) -> str:
    """Multiply two complex numbers written as ``a+bi``."""
    a, b = _parse_complex(num1)
    c, d = _parse_complex(num2)
    return f"{a * c - b * d}+{a * d + b * c}i"


def maximum_69_number(num: int) -> int:
    """Turn the first 6 of ``num`` into a 9."""
    return int(str(num).replace("6", "9", 1))


def num_water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Return how many bottles can be drunk when empties are traded for full ones."""
    if num_exchange < 2:
        raise ValueError("at least two empty bottles must be needed for an exchange")
    if num_bottles < 0:
        raise ValueError("the number of bottles cannot be negative")
    drunk = num_bottles
    empties = num_bottles
    while empties >= num_exchange:
        full, left = divmod(empties, num_exchange)
        drunk += full
        empties = full + left
    return drunk


def is_same_after_reversals(num: int) -> bool:
    """Tell whether reversing the digits of ``num`` twice gives ``num`` back."""
    text = str(num)
    if len(text) == 1:
        return True
    once = text[::-1].lstrip("0")
    return int(once[::-1]) == num


def find_delayed_arrival_time(arrival_time: int, delayed_time: int) -> int:
    """Return the hour of arrival on a 24-hour clock after a delay."""
    if arrival_time < 0 or delayed_time < 0:
        raise ValueError("time cannot be negative")
    return (arrival_time + delayed_time) % 24


def separate_digits(nums: Iterable[int]) -> list[int]:
    """Return the digits of every number in ``nums``, in order."""
    digits: list[int] = []
    for num in nums:
        if num < 0:
            raise ValueError("numbers must not be negative")
        digits.extend(int(char) for char in str(num))
    return digits


def single_number(nums: Iterable[int]) -> int:
    """Return the one value that does not appear twice in ``nums``."""
    return reduce(xor, nums, 0)