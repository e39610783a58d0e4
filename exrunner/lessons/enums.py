"""Messages as a family of types and a state that processes them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class MessageKind(enum.Enum):
    """The kinds of message there are."""

    QUIT = "quit"
    ECHO = "echo"
    MOVE = "move"
    CHANGE_COLOR = "change_color"


@dataclass(frozen=True)
class Point:
    """A position on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to an RGB triple."""

    color: tuple[int, int, int]
    kind = MessageKind.CHANGE_COLOR


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str
    kind = MessageKind.ECHO


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point
    kind = MessageKind.MOVE


@dataclass(frozen=True)
class Quit:
    """Stop."""

    kind = MessageKind.QUIT


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """The state that messages act upon."""

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
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")