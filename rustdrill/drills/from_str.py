"""Parsing a person from "name,age" text, with an error for each failure."""

from __future__ import annotations

import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Person:
    """A named person of a given age."""

    name: str
    age: int


class ParsePersonError(ValueError):
    """The text does not describe a person."""


class EmptyInput(ParsePersonError):
    """The input text is empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLength(ParsePersonError):
    """The input does not have exactly two comma separated fields."""

    def __init__(self) -> None:
        super().__init__("incorrect number of fields")


class NoName(ParsePersonError):
    """The name field is empty."""

    def __init__(self) -> None:
        super().__init__("no name")


class InvalidAge(ParsePersonError):
    """The age field is not an unsigned integer."""


def _parse_unsigned(text: str) -> int:
    if not text:
        raise InvalidAge("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise InvalidAge("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise InvalidAge("number too large to fit in target type")
    return value


def parse_person(s: str) -> Person:
    """Parse "name,age" into a Person, raising a ParsePersonError subclass."""
    if not s:
        raise EmptyInput()
    fields = s.split(",")
    if len(fields) != 2:
        raise BadLength()
    name, age = fields
    if not name:
        raise NoName()
    return Person(name=name, age=_parse_unsigned(age))