"""Sharing read-only data between threads, and a recursive cons list."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


def _offset_sum(numbers: Sequence[int], offset: int, step: int) -> int:
    return sum(numbers[offset::step])


def offset_sums(numbers: Iterable[int] = range(100), workers: int = 8) -> list[int]:
    """Sum every `workers`-th number, one thread per offset.

    Returns the sums ordered by offset and prints one line for each.
    """
    if workers < 1:
        raise ValueError("at least one worker is needed")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        sums = list(
            pool.map(lambda offset: _offset_sum(shared, offset, workers), range(workers))
        )
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __iter__(self) -> Iterator[int]:
        return iter(())


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.value
            node = node.rest


def create_empty_list() -> Nil:
    """A list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A list holding a single item."""
    return Cons(7, Nil())