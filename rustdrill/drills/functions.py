"""Drills on calling functions, parameters and return values."""

from __future__ import annotations


def call_me(num: int | None = None) -> None:
    """Announce a call, or ring `num` times when a count is given."""
    if num is None:
        print("Called.")
        return
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    """Whether num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num