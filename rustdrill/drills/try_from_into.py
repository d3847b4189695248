"""Fallible conversion of integer triples and sequences into RGB colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

_MIN = 0
_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """The values cannot be turned into a colour."""


class BadLength(IntoColorError):
    """The sequence does not hold exactly three components."""

    def __init__(self) -> None:
        super().__init__("incorrect number of components")


class IntConversion(IntoColorError):
    """A component lies outside 0..=255."""

    def __init__(self, value: int) -> None:
        super().__init__(f"component {value} is outside {_MIN}..={_MAX}")
        self.value = value


def _check_range(values: Iterable[int]) -> None:
    for value in values:
        if not _MIN <= value <= _MAX:
            raise IntConversion(value)


def _from_triple(values: Sequence[int]) -> Color:
    if len(values) != 3:
        raise TypeError(f"expected exactly three components, got {len(values)}")
    _check_range(values)
    red, green, blue = values
    return Color(red, green, blue)


def color_from_tuple(values: tuple[int, int, int]) -> Color:
    """Build a colour from a tuple of three integers."""
    return _from_triple(tuple(values))


def color_from_array(values: Sequence[int]) -> Color:
    """Build a colour from a fixed array of three integers."""
    return _from_triple(list(values))


def color_from_slice(values: Iterable[int]) -> Color:
    """Build a colour from any number of integers; the range is checked first."""
    items = list(values)
    _check_range(items)
    if len(items) != 3:
        raise BadLength()
    red, green, blue = items
    return Color(red, green, blue)