"""Power-ups, pickups and level bookkeeping: score, time limit, princess."""

from __future__ import annotations

from typing import ClassVar

from kongworld.core import Actor, Color


class DoubleScore(Actor):
    """A power-up that multiplies the points the player earns."""

    bonus: float = 0.0

    def apply_bonus(self, value: float) -> None:
        """Set and announce the bonus this power-up grants."""
        self.bonus = value
        self.screen.show(
            f"El power up es una puntuacion doble {self.bonus:.0f}", Color.GREEN
        )


class ExtraSpeed(DoubleScore):
    """A power-up that makes the player faster."""

    def apply_bonus(self, value: float) -> None:
        """Set the bonus and announce the extra speed."""
        self.bonus = value
        self.screen.show("El power up es velocidad extra", Color.GREEN)


class Princess(Actor):
    """The princess waiting at the top of the level."""

    def level_complete(self) -> None:
        """Announce that the level has been completed."""
        self.screen.show(
            "Completaste el nivel puedes pasar a la siguiente ronda", Color.RED
        )


class Hammer(Actor):
    """A hammer that lets the player smash barrels for a while."""

    speed: float = 3.0
    duration: float = 12.0

    def destroy_barrels(self) -> None:
        """Announce that a barrel was smashed."""
        self.screen.show("Destruiste un barril con el martillo", Color.GREEN)


class TimeLimit(Actor):
    """The time the player has to finish the level."""

    LEVEL_TIME: ClassVar[float] = 100.0

    level_time: float = LEVEL_TIME

    def announce(self) -> None:
        """Show the time allowed for the level."""
        self.screen.show(
            f"El tiempo para completar el nivel es {self.level_time:.2f}",
            Color.YELLOW,
        )


class Score(Actor):
    """The player's running score."""

    points: float = 0.0

    def begin_play(self) -> None:
        super().begin_play()
        self.points = 0.0

    def add(self, points: float) -> float:
        """Add ``points`` to the score, announce it and return the total."""
        self.points += points
        self.screen.show(f"tu puntaje actual es {self.points:.2f}", Color.GREEN)
        return self.points

    def extra_life(self) -> None:
        """Announce that an extra life was earned."""
        self.screen.show("obtuviste una vida extra", Color.GREEN)