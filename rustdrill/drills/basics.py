"""Drills on variables, mutation, shadowing, constants and macros."""

from __future__ import annotations

NUMBER = 3
SPELLED_NUMBER = "T-H-R-E-E"


def value_report(x: object) -> str:
    """Describe the value held by x."""
    return f"x has the value {x}"


def ten_check(x: int) -> str:
    """Say whether x is ten."""
    return "Ten!" if x == 10 else "Not ten!"


def reassignment_lines(first: object, second: object) -> list[str]:
    """The lines printed before and after a variable is reassigned."""
    return [f"Number {first}", f"Number {second}"]


def shadowing_lines(number: int) -> list[str]:
    """The lines printed when a spelled-out number is shadowed by an integer."""
    return [
        f"Spell a Number : {SPELLED_NUMBER}",
        f"Number plus two is : {number + 2}",
    ]


def constant_line() -> str:
    """The line printed for the module constant."""
    return f"Number {NUMBER}"


def macro_message(value: object = None) -> str:
    """The message printed by the macro, with or without an argument."""
    if value is None:
        return "Check out my macro!"
    return f"Look at this other macro: {value}"