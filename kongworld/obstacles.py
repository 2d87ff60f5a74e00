"""Platforms and ladders that make up the level."""

from __future__ import annotations

from kongworld.core import Color
from kongworld.enemies import PatrollingActor


class Obstacle(PatrollingActor):
    """A piece of scenery with a back-and-forth route.

    The route is laid out when play begins. By default it spans no
    distance, so the obstacle keeps its place.
    """

    def move(self) -> None:
        """Take one step along the route."""
        super().move()


class Platform(Obstacle):
    """A platform that stays where it is."""

    def move(self) -> None:
        self.screen.show("Esta plataforma no se movera", Color.SILVER)


class MovingPlatform(Platform):
    """A platform that travels along its route."""

    def move(self) -> None:
        Obstacle.move(self)
        self.screen.show("Esta plataforma empezara moverse", Color.SILVER)


class SlipperyPlatform(Platform):
    """A platform with a slippery surface."""


class Ladder(Obstacle):
    """A ladder of a given height."""

    height: float = 0.0

    def move(self) -> None:
        """Take one step along the route."""
        super().move()

    def set_height(self, height: float) -> None:
        """Set and announce the ladder's height."""
        self.height = height
        self.screen.show(
            f"La escalera tendra una altura de {self.height:.1f} m", Color.MAGENTA
        )


class MovingLadder(Ladder):
    """A ladder that is able to move."""

    def move(self) -> None:
        self.screen.show("Esta escalera es capaz de moverse", Color.MAGENTA)

    def set_height(self, height: float) -> None:
        """Set and announce the ladder's height."""
        self.height = height
        self.screen.show(
            f"La escalera tendra una altura de {self.height:.1f} m", Color.MAGENTA
        )