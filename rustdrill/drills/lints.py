"""Drills that satisfy common lint warnings."""

from __future__ import annotations

import sys


def nearly_equal(x: float, y: float) -> bool:
    """Whether two floats differ by less than machine epsilon."""
    return abs(y - x) < sys.float_info.epsilon


def add_optional(res: int, option: int | None) -> int:
    """Add the optional value to res when it is present."""
    if option is not None:
        res += option
    return res