"""Barrels thrown by the ape, and the static barrel fireballs come out of."""

from __future__ import annotations

from kongworld.core import Color
from kongworld.enemies import PatrollingActor


class Barrel(PatrollingActor):
    """A common barrel with a speed and a back-and-forth route.

    The route is laid out when play begins. By default it spans no
    distance, so a barrel keeps its place.
    """

    speed: float = 0.0

    def spawn(self) -> None:
        """Announce that the barrel is being thrown."""
        self.screen.show(
            "Los barriles estan siendo lanzandos por Donkey Kong", Color.GREEN
        )

    def set_speed(self, speed: float) -> None:
        """Set and announce the barrel's speed."""
        self.speed = speed
        self.screen.show(
            f"Los barriles tendran una velocidad de {self.speed:.0f} m/s", Color.GREEN
        )

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self.screen.show("Los barriles comenzaron a moverse", Color.GREEN)


class BlueBarrel(Barrel):
    """A rarer, faster barrel."""

    def spawn(self) -> None:
        """Announce that a blue barrel is being thrown."""
        self.screen.show("Un barril azul sera lanzado", Color.ORANGE)

    def set_speed(self, speed: float) -> None:
        """Set and announce the blue barrel's speed."""
        self.speed = speed
        self.screen.show(
            f"El barril azul tendra una velocidad de {self.speed:.0f} m/s",
            Color.ORANGE,
        )

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self.screen.show("Un barril azul comenzo a moverse", Color.ORANGE)


class JumpingBarrel(Barrel):
    """A barrel that bounces as it rolls."""

    def spawn(self) -> None:
        """Announce that a jumping barrel appeared."""
        self.screen.show("El barril que salta spawneo", Color.YELLOW)

    def set_speed(self, speed: float) -> None:
        """Set and announce the jumping barrel's speed."""
        self.speed = speed
        self.screen.show(
            f"El barril tendra una velocidad de {self.speed:.0f} m/s", Color.YELLOW
        )

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self.screen.show("Un barril que salta empezo a moverse", Color.YELLOW)


class StaticBarrel(Barrel):
    """The barrel that marks where fireballs come from."""

    def spawn(self) -> None:
        """Announce that the static barrel appears."""
        self.screen.show("El barril estatico hara su aparicion", Color.YELLOW)