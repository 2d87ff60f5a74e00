"""The game mode that populates the level and puts every actor through its paces."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TypeVar

from kongworld.barrels import Barrel, BlueBarrel, JumpingBarrel, StaticBarrel
from kongworld.character import PlayerCharacter
from kongworld.core import Actor, Screen, Vector
from kongworld.enemies import Fireball, Kong, Porcupine, Skunk
from kongworld.items import DoubleScore, ExtraSpeed, Hammer, Princess, Score, TimeLimit
from kongworld.obstacles import (
    Ladder,
    MovingLadder,
    MovingPlatform,
    Platform,
    SlipperyPlatform,
)

ACTOR_LOCATION = Vector(1206.68, -1460.0, 550.0)
ITEM_LOCATION = Vector(1545.68, -1460.0, 550.0)

A = TypeVar("A", bound=Actor)


class GameMode(Actor):
    """Sets up the level: spawns every actor and exercises its behaviour."""

    def __init__(self, screen: Screen) -> None:
        super().__init__(screen, Vector())
        self.pawn_class = PlayerCharacter
        self.actors: list[Actor] = []

    def _spawn(self, actor_class: type[A], location: Vector) -> A:
        actor = actor_class(self.screen, location)
        actor.begin_play()
        self.actors.append(actor)
        return actor

    def begin_play(self) -> None:
        super().begin_play()

        self.kong = self._spawn(Kong, ACTOR_LOCATION)
        self.kong.attack()
        self.kong.move()
        self.kong.set_state("MUY ENOJADO")
        self.kong.throw_barrel(700.0)

        self.porcupine = self._spawn(Porcupine, ACTOR_LOCATION)
        self.porcupine.attack()
        self.porcupine.move()
        self.porcupine.set_state("de muy mal humor")
        self.porcupine.throw_spines(8)
        self.porcupine.set_spine_speed(543.0)

        self.skunk = self._spawn(Skunk, ACTOR_LOCATION)
        self.skunk.attack()
        self.skunk.move()
        self.skunk.set_state("de muy mal humor")
        self.skunk.infect_food(32.0)
        self.skunk.infect_player(40.0)

        self.fireball = self._spawn(Fireball, ACTOR_LOCATION)
        self.fireball.appear()
        self.fireball.move()

        self.barrel = self._spawn(Barrel, ACTOR_LOCATION)
        self.barrel.spawn()
        self.barrel.set_speed(600.0)
        self.barrel.move()

        self.blue_barrel = self._spawn(BlueBarrel, ACTOR_LOCATION)
        self.blue_barrel.spawn()
        self.blue_barrel.set_speed(800.0)
        self.blue_barrel.move()

        self.jumping_barrel = self._spawn(JumpingBarrel, ACTOR_LOCATION)
        self.jumping_barrel.spawn()
        self.jumping_barrel.set_speed(600.0)
        self.jumping_barrel.move()

        self.static_barrel = self._spawn(StaticBarrel, ACTOR_LOCATION)
        self.static_barrel.spawn()

        self.platform = self._spawn(Platform, ACTOR_LOCATION)
        self.platform.move()

        self.moving_platform = self._spawn(MovingPlatform, ACTOR_LOCATION)
        self.moving_platform.move()

        self.slippery_platform = self._spawn(SlipperyPlatform, ACTOR_LOCATION)

        self.ladder = self._spawn(Ladder, ACTOR_LOCATION)
        self.ladder.set_height(0.5)

        self.moving_ladder = self._spawn(MovingLadder, ACTOR_LOCATION)
        self.moving_ladder.move()
        self.moving_ladder.set_height(0.5)

        self.extra_speed = self._spawn(ExtraSpeed, ITEM_LOCATION)
        self.extra_speed.apply_bonus(32.0)

        self.double_score = self._spawn(DoubleScore, ITEM_LOCATION)
        self.double_score.apply_bonus(2.0)

        self.princess = self._spawn(Princess, ITEM_LOCATION)
        self.princess.level_complete()

        self.hammer = self._spawn(Hammer, ITEM_LOCATION)
        self.hammer.destroy_barrels()

        self.time_limit = self._spawn(TimeLimit, ITEM_LOCATION)
        self.time_limit.announce()

        self.score = self._spawn(Score, ITEM_LOCATION)
        self.score.add(54)
        self.score.extra_life()

    def tick(self, delta_time: float) -> None:
        """Advance the game mode and every spawned actor by ``delta_time``."""
        super().tick(delta_time)
        for actor in self.actors:
            actor.tick(delta_time)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up the level and print every message shown while doing so."""
    parser = argparse.ArgumentParser(
        prog="kongworld", description="Populate the level and show its messages."
    )
    parser.parse_args(argv)
    game = GameMode(Screen(stream=sys.stdout))
    game.begin_play()
    return 0


if __name__ == "__main__":
    sys.exit(main())