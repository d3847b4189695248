"""Drills on maps and lists: filling fruit baskets and doubling numbers."""

from __future__ import annotations

import enum
from typing import Iterable, MutableMapping

_NEW_FRUIT_COUNT = 6


def fruit_basket() -> dict[str, int]:
    """A basket of several kinds of fruit with at least five pieces in total."""
    return {
        "banana": 2,
        "ap": 2,
        "sc": 2,
        "we": 2,
        "rt": 2,
        "cv": 2,
    }


class Fruit(enum.Enum):
    """The kinds of fruit a basket may hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add every kind of fruit that is missing, leaving present kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as a fixed tuple and as a growable list."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every number multiplied by two."""
    return [value * 2 for value in values]