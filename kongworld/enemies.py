"""Enemies that patrol the level and harass the player."""

from __future__ import annotations

from typing import ClassVar, Optional

from kongworld.core import Actor, Color, Patrol, Vector


class PatrollingActor(Actor):
    """An actor that walks back and forth along a route laid out when play begins.

    ``PATROL_SPAN`` is the offset from the starting point to the far end of
    the route; ``None`` means the actor has no route at all. The default
    route spans no distance, so the actor keeps its place.
    """

    COLOR: ClassVar[Color] = Color.GREEN
    PATROL_SPAN: ClassVar[Optional[Vector]] = Vector()
    PATROL_STEP: ClassVar[float] = 0.0

    patrol: Optional[Patrol] = None

    def begin_play(self) -> None:
        super().begin_play()
        if self.PATROL_SPAN is not None:
            self.patrol = Patrol(
                start=self.location,
                end=self.location + self.PATROL_SPAN,
                step=self.PATROL_STEP,
            )

    def _say(self, text: str) -> None:
        self.screen.show(text, self.COLOR)

    def move(self) -> None:
        """Take one step along the route."""
        if self.patrol is None:
            raise RuntimeError(
                f"{type(self).__name__} has no route; its patrol route is laid "
                "out by begin_play, call begin_play first"
            )
        self.location = self.patrol.advance()


_PATROL_SPAN = Vector(0.0, -840.0, 0.0)


class Enemy(PatrollingActor):
    """An enemy with a state and, once play begins, an optional patrol route.

    A plain enemy has no attack and ignores state changes; subclasses
    give it both.
    """

    PATROL_SPAN = None
    PATROL_STEP = 2.0

    state: str = ""

    def attack(self) -> None:
        """Attack the player; a plain enemy does nothing."""

    def move(self) -> None:
        """Take one step along the patrol route."""
        super().move()

    def set_state(self, state: str) -> None:
        """Change the enemy's state; a plain enemy ignores it."""


class Kong(Enemy):
    """The big ape who throws barrels."""

    COLOR = Color.YELLOW
    PATROL_SPAN = _PATROL_SPAN

    throw_speed: float = 0.0

    def attack(self) -> None:
        """Announce the ape's attack."""
        self._say("Donkey Kong esta atacando")

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self._say("Donkey Kong se esta moviendo")

    def set_state(self, state: str) -> None:
        """Change and announce the ape's state."""
        self.state = state
        self._say(f"Donkey Kong tiene su estado en {self.state}")

    def throw_barrel(self, speed: float) -> None:
        """Throw barrels at the given speed."""
        self.throw_speed = speed
        self._say(
            f"Donkey Kong te esta lanza barriles a una velocidad de {self.throw_speed:.0f}"
        )


class Porcupine(Enemy):
    """An enemy that fires spines."""

    COLOR = Color.BLUE
    PATROL_SPAN = _PATROL_SPAN

    speed: float = 600.0
    spine_count: int = 0
    spine_speed: float = 0.0

    def attack(self) -> None:
        """Announce the porcupine's attack."""
        self._say("El puerco spin te esta atacando")

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self._say("Puerco spin se esta moviendo")

    def set_state(self, state: str) -> None:
        """Change and announce the porcupine's state."""
        self.state = state
        self._say(f"Puerco spin esta {self.state} y te atacara")

    def throw_spines(self, count: int) -> None:
        """Fire ``count`` spines; fractional counts are truncated."""
        self.spine_count = int(count)
        self._say(f"El puerco spin te lanzara {self.spine_count:d} espinas")

    def set_spine_speed(self, speed: float) -> None:
        """Set the speed at which spines fly."""
        self.spine_speed = speed
        self._say(f"Las espinas tendran una velocidad de {self.spine_speed:.0f} m/s")


class Skunk(Enemy):
    """An enemy that poisons food and the player."""

    COLOR = Color.RED
    PATROL_SPAN = _PATROL_SPAN

    venom: float = 0.0

    def attack(self) -> None:
        """Announce the skunk's attack."""
        self._say("El Zorrillo empezara a atacar")

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self._say("Zorrillo se esta moviendo")

    def set_state(self, state: str) -> None:
        """Change and announce the skunk's state."""
        self.state = state
        self._say(f"Zorrillo tiene su estado en {self.state}")

    def infect_food(self, venom: float) -> None:
        """Poison a power-up with the given amount of venom."""
        self.venom = venom
        self._say("El Zorrillo acaba de infectar la comida")

    def infect_player(self, venom: float) -> None:
        """Poison the player with the given amount of venom."""
        self.venom = venom
        self._say("El Zorrillo acaba de infectar a Mario")


class Fireball(Enemy):
    """A fireball that comes out of the static barrel."""

    COLOR = Color.CYAN
    PATROL_SPAN = _PATROL_SPAN

    speed: float = 400.0

    def appear(self) -> None:
        """Announce that fireballs are coming out."""
        self._say("Bolitas de fuego empezaran a salir del barril estatico")

    def move(self) -> None:
        """Take one step along the route and announce it."""
        super().move()
        self._say("Bolita de fuego se esta moviendo")


class Lives(Enemy):
    """Tracks how many lives the player has left."""

    COLOR = Color.YELLOW
    STARTING_LIVES: ClassVar[int] = 3

    remaining: int = STARTING_LIVES

    def begin_play(self) -> None:
        super().begin_play()
        self.remaining = self.STARTING_LIVES

    def set_remaining(self, lives: int) -> None:
        """Set and announce the number of lives left; fractions are truncated."""
        self.remaining = int(lives)
        self._say(f"Aun te quedan {self.remaining:d} vidas")