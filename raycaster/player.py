"""The player's position, heading, held keys and movement through the map."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from .constants import HEIGHT, PI, TWO_PI, WIDTH
from .worldmap import has_wall_at

MOVE_SPEED = 1
ROTATE_SPEED = 0.03


@dataclass
class Player:
    """Where the player stands, where it looks and which controls are held."""

    x: float = WIDTH // 2
    y: float = HEIGHT // 2
    angle: float = PI / 2
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    left_rotate: bool = False
    right_rotate: bool = False
    rays: list[Any] = field(default_factory=list)

    def reset(self) -> None:
        """Put the player at the screen centre facing down, with no keys held."""
        self.x = WIDTH // 2
        self.y = HEIGHT // 2
        self.angle = PI / 2
        self.key_up = False
        self.key_down = False
        self.key_left = False
        self.key_right = False
        self.left_rotate = False
        self.right_rotate = False

    def move(self, grid: Sequence[str]) -> None:
        """Apply one frame of rotation and movement.

        The step is taken only if its destination is not inside a wall.
        """
        if self.left_rotate:
            self.angle -= ROTATE_SPEED
        if self.right_rotate:
            self.angle += ROTATE_SPEED
        if self.angle > TWO_PI:
            self.angle = 0.0
        if self.angle < 0:
            self.angle = TWO_PI

        cos_angle = math.cos(self.angle)
        sin_angle = math.sin(self.angle)
        dx = float(self.x)
        dy = float(self.y)

        if self.key_up:
            dx += cos_angle * MOVE_SPEED
            dy += sin_angle * MOVE_SPEED
        if self.key_down:
            dx -= cos_angle * MOVE_SPEED
            dy -= sin_angle * MOVE_SPEED
        if self.key_left:
            dx += sin_angle * MOVE_SPEED
            dy -= cos_angle * MOVE_SPEED
        if self.key_right:
            dx -= sin_angle * MOVE_SPEED
            dy += cos_angle * MOVE_SPEED

        if not has_wall_at(dx, dy, grid):
            self.x = dx
            self.y = dy