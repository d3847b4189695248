"""Drills on handing lists to functions and getting them back."""

from __future__ import annotations

from typing import Iterable

_FILLERS = (22, 44, 66)


def fill_vec(values: Iterable[int] | None = None) -> list[int]:
    """A new list holding the given numbers followed by 22, 44 and 66."""
    filled = list(values) if values is not None else []
    filled.extend(_FILLERS)
    return filled


def describe_vec(label: str, values: list[int]) -> str:
    """Describe a list's length and contents."""
    return f"{label} has length {len(values)} content `{values!r}`"


def add_twice(x: int) -> int:
    """Add 100 and then 1000 to x, one update after the other."""
    x += 100
    x += 1000
    return x