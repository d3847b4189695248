"""Quiz drills: pricing, string handling, doubling and greeting."""

from __future__ import annotations


def calculate_apple_price(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(val: str) -> str:
    """Greet the given text."""
    return "Hello " + val