"""Conditional expression drills."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a >= b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"