"""Basic building blocks shared by every actor in the level."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional, TextIO

MESSAGE_DURATION = 15.0


@dataclass(frozen=True)
class Vector:
    """An immutable point or offset in level space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)


class Color(enum.Enum):
    """Colours used for on-screen messages."""

    GREEN = "green"
    ORANGE = "orange"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"
    SILVER = "silver"
    RED = "red"
    BLUE = "blue"


@dataclass(frozen=True)
class DebugMessage:
    """One message shown on screen for a limited time."""

    text: str
    color: Color
    duration: float = MESSAGE_DURATION


class Screen:
    """Collects the messages actors show, optionally echoing them to a stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.messages: list[DebugMessage] = []
        self._stream = stream

    def show(self, text: str, color: Color) -> DebugMessage:
        """Record a message and return it."""
        message = DebugMessage(text, Color(color))
        self.messages.append(message)
        if self._stream is not None:
            print(text, file=self._stream)
        return message

    def texts(self) -> list[str]:
        """The text of every message shown so far, oldest first."""
        return [message.text for message in self.messages]


@dataclass
class Patrol:
    """A back-and-forth route along the Y axis between ``start`` and ``end``.

    The route first travels towards ``end`` (decreasing Y), then returns
    to ``start``. Reaching either end costs one call without movement,
    in which the direction flips.
    """

    start: Vector
    end: Vector
    step: float
    current: Optional[Vector] = None
    forward: bool = True

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = self.start

    def advance(self) -> Vector:
        """Take one step along the route and return the new position."""
        y = self.current.y
        if self.forward:
            if y > self.end.y:
                self.current = replace(self.current, y=y - self.step)
            else:
                self.forward = False
        else:
            if y < self.start.y:
                self.current = replace(self.current, y=y + self.step)
            else:
                self.forward = True
        return self.current


class Actor:
    """Something placed in the level that can show messages on a screen."""

    def __init__(self, screen: Screen, location: Vector = Vector()) -> None:
        self.screen = screen
        self.location = location
        self.has_begun_play = False
        self.age = 0.0

    def begin_play(self) -> None:
        """Start the actor's life in the level; may happen only once."""
        if self.has_begun_play:
            raise RuntimeError(f"{type(self).__name__} has already begun play")
        self.has_begun_play = True

    def tick(self, delta_time: float) -> None:
        """Advance the actor's clock by ``delta_time`` seconds."""
        self.age += delta_time