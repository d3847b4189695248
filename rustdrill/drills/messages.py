"""Messages as a closed set of variants, and a state that reacts to them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    position: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new RGB colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """Colour, position and quit flag, updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(position=position):
                self.position = position
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")