"""Drills on booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

import unicodedata
from typing import Sequence


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply at this time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(c: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    category = unicodedata.category(c)
    if c.isalpha() or category == "Nl":
        return "Alphabetical!"
    if category in ("Nd", "No"):
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sequence[object]) -> str:
    """Comment on whether the array holds at least 100 items."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[int]) -> Sequence[int]:
    """The second to fourth items."""
    return values[1:4]


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second_of(numbers: Sequence[int]) -> int:
    """The second element of a tuple."""
    return numbers[1]