"""Converting "name,age" text into a person, falling back to a default."""

from __future__ import annotations

from dataclasses import dataclass

from .from_str import ParsePersonError, parse_person


@dataclass(frozen=True)
class Person:
    """A named person of a given age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, s: str) -> Person:
        """Parse "name,age"; any malformed input yields the default person."""
        try:
            parsed = parse_person(s)
        except ParsePersonError:
            return cls.default()
        return cls(name=parsed.name, age=parsed.age)