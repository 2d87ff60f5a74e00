# kongworld

A small arcade world of barrels, ladders and platforms. Every actor in it
(the ape who throws barrels, the porcupine, the skunk, fireballs, barrels,
platforms, ladders, power-ups, the princess, the hammer, the level timer and
the score) reports what it does as a coloured message on a shared `Screen`.
The message texts are in Spanish.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Run

```
kongworld
```

This creates a `GameMode`, spawns every actor, has each one perform its
actions once and prints the messages they produce, one per line, in order.
The command takes no options besides `--help`.

## Use as a library

```python
from kongworld.core import Screen, Vector
from kongworld.enemies import Kong
from kongworld.barrels import BlueBarrel
from kongworld.items import Score
from kongworld.game import GameMode

screen = Screen()

kong = Kong(screen, Vector(1206.68, -1460.0, 550.0))
kong.begin_play()          # lays out the patrol route
kong.throw_barrel(700.0)
kong.move()

barrel = BlueBarrel(screen, Vector(0.0, 0.0, 0.0))
barrel.spawn()
barrel.set_speed(800.0)

score = Score(screen, Vector(0.0, 0.0, 0.0))
score.begin_play()
score.add(54)              # returns the running total

for text in screen.texts():
    print(text)

game = GameMode(Screen())
game.begin_play()
game.tick(0.016)           # advances the game mode and every spawned actor
```

A `Screen` keeps every `DebugMessage` (text, `Color`, duration) in its
`messages` list; give it a stream, as in `Screen(stream=sys.stdout)`, to
have each text printed as it is shown.

### Movement

Actors that move follow a `Patrol` along the Y axis, laid out by
`begin_play()`. `Kong`, `Porcupine`, `Skunk` and `Fireball` patrol 840
units towards negative Y in steps of 2, then back to where they started,
and around again; each turn at an end takes one `move()` without
movement. Barrels and obstacles have a route of zero length, so their
`move()` leaves them where they are. `Platform.move()` and
`MovingLadder.move()` only show a message. Calling `move()` on an actor
that has no route (before `begin_play()`, or on a plain `Enemy` or
`Lives`) raises `RuntimeError`, as does calling `begin_play()` twice.

### Modules

- `kongworld.core`: `Vector`, `Color`, `DebugMessage`, `Screen`, `Patrol`, `Actor`
- `kongworld.enemies`: `PatrollingActor`, `Enemy`, `Kong`, `Porcupine`, `Skunk`, `Fireball`, `Lives`
- `kongworld.barrels`: `Barrel`, `BlueBarrel`, `JumpingBarrel`, `StaticBarrel`
- `kongworld.obstacles`: `Obstacle`, `Platform`, `MovingPlatform`, `SlipperyPlatform`, `Ladder`, `MovingLadder`
- `kongworld.character`: `PlayerCharacter`, `MovementSettings`, `CameraBoom`, `InputBindings`, `InputEvent`
- `kongworld.items`: `DoubleScore`, `ExtraSpeed`, `Princess`, `Hammer`, `TimeLimit`, `Score`
- `kongworld.game`: `GameMode`, `main`

## What it does not do

kongworld is a model of the level's actors, not a playable game. It draws
nothing and plays no sound, reads no keyboard, controller or touch input
(`PlayerCharacter` only records jump state and pending movement when its
handlers are called), has no real-time loop of its own, no collisions,
physics or gravity, and no rules for losing lives, winning or moving on to
another level. `GameMode` records `PlayerCharacter` as its `pawn_class` but
does not create one.