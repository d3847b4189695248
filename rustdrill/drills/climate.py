"""Parsing "city,year,temperature" records with descriptive errors."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import _parse_int

_U32_MAX = 2**32 - 1
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


class ParseClimateError(ValueError):
    """The text is not a valid climate record."""


class EmptyInput(ParseClimateError):
    """The input text is empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLength(ParseClimateError):
    """The input does not have exactly three comma separated fields."""

    def __init__(self) -> None:
        super().__init__("incorrect number of fields")


class NoCity(ParseClimateError):
    """The city field is empty."""

    def __init__(self) -> None:
        super().__init__("no city name")


class InvalidYear(ParseClimateError):
    """The year is not an unsigned 32-bit integer."""

    def __init__(self, inner: ValueError) -> None:
        super().__init__(f"error parsing year: {inner}")
        self.inner = inner


class InvalidTemperature(ParseClimateError):
    """The temperature is not a floating point number."""

    def __init__(self, inner: ValueError) -> None:
        super().__init__(f"error parsing temperature: {inner}")
        self.inner = inner


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def parse_climate(s: str) -> Climate:
    """Parse "city,year,temp" into a Climate, raising a ParseClimateError."""
    fields = s.split(",")
    if len(fields) != 3:
        raise EmptyInput() if not s else BadLength()
    city, year_text, temp_text = fields
    if not city:
        raise NoCity()
    try:
        year = _parse_int(year_text, 0, _U32_MAX)
    except ValueError as err:
        raise InvalidYear(err) from err
    try:
        temp = _parse_float(temp_text)
    except ValueError as err:
        raise InvalidTemperature(err) from err
    return Climate(city=city, year=year, temp=temp)