"""The player's side-scrolling character and its input bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from kongworld.core import Vector

RIGHT = Vector(0.0, -1.0, 0.0)


class InputEvent(enum.Enum):
    """When an input binding fires."""

    PRESSED = "pressed"
    RELEASED = "released"


@dataclass
class MovementSettings:
    """How the character walks, jumps and turns."""

    orient_rotation_to_movement: bool = True
    rotation_rate_yaw: float = 720.0
    gravity_scale: float = 2.0
    air_control: float = 0.8
    jump_z_velocity: float = 1000.0
    ground_friction: float = 3.0
    max_walk_speed: float = 600.0
    max_fly_speed: float = 600.0


@dataclass
class CameraBoom:
    """The arm that holds the side-view camera beside the character."""

    target_arm_length: float = 500.0
    socket_offset: Vector = Vector(0.0, 0.0, 75.0)
    relative_yaw: float = 180.0
    uses_absolute_rotation: bool = True
    collision_test: bool = False


@dataclass
class InputBindings:
    """The actions, axes and touch events the character responds to."""

    actions: dict[tuple[str, InputEvent], Callable[[], None]] = field(
        default_factory=dict
    )
    axes: dict[str, Callable[[float], Vector]] = field(default_factory=dict)
    touch: dict[InputEvent, Callable[[int, Vector], None]] = field(
        default_factory=dict
    )


class PlayerCharacter:
    """The character the player controls, seen from the side."""

    def __init__(self) -> None:
        self.capsule_radius = 42.0
        self.capsule_half_height = 96.0
        self.use_controller_rotation_pitch = False
        self.use_controller_rotation_yaw = False
        self.use_controller_rotation_roll = False
        self.camera_boom = CameraBoom()
        self.camera_uses_pawn_control_rotation = False
        self.movement = MovementSettings()
        self.pending_input = Vector()
        self.is_jumping = False

    def input_bindings(self) -> InputBindings:
        """Map the game's inputs onto this character's handlers."""
        return InputBindings(
            actions={
                ("Jump", InputEvent.PRESSED): self.jump,
                ("Jump", InputEvent.RELEASED): self.stop_jumping,
            },
            axes={"MoveRight": self.move_right},
            touch={
                InputEvent.PRESSED: self.touch_started,
                InputEvent.RELEASED: self.touch_stopped,
            },
        )

    def move_right(self, value: float) -> Vector:
        """Add sideways movement input scaled by ``value``; return the total."""
        self.pending_input = self.pending_input + Vector(
            RIGHT.x * value, RIGHT.y * value, RIGHT.z * value
        )
        return self.pending_input

    def jump(self) -> None:
        """Start jumping."""
        self.is_jumping = True

    def stop_jumping(self) -> None:
        """Stop jumping."""
        self.is_jumping = False

    def touch_started(self, finger_index: int, location: Vector) -> None:
        """Jump on any touch."""
        self.jump()

    def touch_stopped(self, finger_index: int, location: Vector) -> None:
        """Stop jumping when the touch ends."""
        self.stop_jumping()