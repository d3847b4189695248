"""Drills on reporting errors: messages, parse failures and custom error types."""

from __future__ import annotations

import re
from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_DIGITS = re.compile(r"[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a decimal integer that must lie within [low, high].

    A leading "+" is always accepted and a leading "-" only when negative
    values are allowed. Raises ValueError with a message naming the failure.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign, digits = 1, text
    if text[0] == "+" or (text[0] == "-" and low < 0):
        if len(text) == 1:
            raise ValueError("invalid digit found in string")
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]
    if not _DIGITS.fullmatch(digits):
        raise ValueError("invalid digit found in string")
    value = sign * int(digits)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """The text for a name tag; an empty name is refused with ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity of items, fee included.

    Raises ValueError when the quantity is not a 32-bit integer and
    OverflowError when the cost does not fit in one.
    """
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError(f"cost of {quantity} items overflows")
    return cost


def remaining_tokens(tokens: int, user_input: str) -> int:
    """Spend tokens on the typed quantity and return what is left.

    Unparsable input costs -1. A purchase that is too expensive leaves the
    tokens untouched. The outcome is printed.
    """
    try:
        cost = total_cost(user_input)
    except ValueError:
        cost = -1
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(Exception):
    """A value cannot become a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer.

    `cause` holds the underlying error: a CreationError when the number was
    out of range, a ValueError when the text was not a number at all.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(s, _I64_MIN, _I64_MAX)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err