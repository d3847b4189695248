"""Drills on optional values."""

from __future__ import annotations

from typing import Sequence

from .messages import Point

_OPTION_COUNT = 5


def print_number(maybe_number: int | None) -> None:
    """Print a number that must be present."""
    if maybe_number is None:
        raise ValueError("no number to print")
    print(f"printing: {maybe_number}")


def option_numbers() -> list[int]:
    """Five numbers derived from their positions."""
    return [(i * 1235 + 2) // (4 * 16) for i in range(_OPTION_COUNT)]


def describe_word(optional_word: str | None) -> str:
    """Describe the word, or say that there is none."""
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def drain_integers(values: Sequence[int | None]) -> list[int]:
    """Take integers from the end until a missing one or the start is reached.

    Each integer taken is printed; they are returned in the order taken.
    """
    taken: list[int] = []
    for value in reversed(values):
        if value is None:
            break
        print(f"current value: {value}")
        taken.append(value)
    return taken


def describe_point(point: Point | None) -> str:
    """Describe the point's co-ordinates, or report that there is none."""
    if point is None:
        return "no match"
    return f"Co-ordinates are {point.x},{point.y} "