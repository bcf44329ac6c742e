"""Casting rays through the tile map to find the nearest wall along each."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from .constants import HEIGHT, NUM_RAYS, PI, TILE_SIZE, TWO_PI, WIDTH
from .worldmap import has_wall_at

FOV = PI / 3.0


@dataclass
class Ray:
    """Where one ray met a wall, and which way it was heading."""

    ray_angle: float = 0.0
    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    distance: float = math.inf
    was_hit_vertical: bool = False
    is_facing_up: bool = False
    is_facing_down: bool = False
    is_facing_left: bool = False
    is_facing_right: bool = False
    wall_hit_content: int = 0


def normalize_angle(angle: float) -> float:
    """Bring an angle into [0, TWO_PI)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle += TWO_PI
    return angle


def _div(a: float, b: float) -> float:
    """Floating division that yields infinities or NaN instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _in_screen(x: float, y: float) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def cast_ray(player: Any, ray_angle: float, grid: Sequence[str]) -> Ray:
    """Cast one ray from the player's position and return where it hit."""
    ray_angle = normalize_angle(ray_angle)
    px = float(player.x)
    py = float(player.y)

    facing_down = 0 < ray_angle < PI
    facing_up = not facing_down
    facing_right = ray_angle < 0.5 * PI or ray_angle > 1.5 * PI
    facing_left = not facing_right
    tan_angle = math.tan(ray_angle)

    # Crossings of horizontal grid lines.
    yintercept = math.floor(py / TILE_SIZE) * TILE_SIZE
    if facing_down:
        yintercept += TILE_SIZE
    xintercept = px + _div(yintercept - py, tan_angle)
    ystep = -TILE_SIZE if facing_up else TILE_SIZE
    xstep = _div(TILE_SIZE, tan_angle)
    if (facing_left and xstep > 0) or (facing_right and xstep < 0):
        xstep = -xstep

    horz_hit: tuple[float, float] | None = None
    next_x, next_y = xintercept, yintercept
    while _in_screen(next_x, next_y):
        y_check = next_y - 1 if facing_up else next_y
        if has_wall_at(next_x, y_check, grid):
            horz_hit = (next_x, next_y)
            break
        next_x += xstep
        next_y += ystep

    # Crossings of vertical grid lines.
    vert_xintercept = math.floor(px / TILE_SIZE) * TILE_SIZE
    if facing_right:
        vert_xintercept += TILE_SIZE
    vert_yintercept = py + (vert_xintercept - px) * tan_angle
    vert_xstep = -TILE_SIZE if facing_left else TILE_SIZE
    vert_ystep = TILE_SIZE * tan_angle
    if (facing_up and vert_ystep > 0) or (facing_down and vert_ystep < 0):
        vert_ystep = -vert_ystep

    vert_hit: tuple[float, float] | None = None
    next_x, next_y = vert_xintercept, vert_yintercept
    while _in_screen(next_x, next_y):
        x_check = next_x - 1 if facing_left else next_x
        if has_wall_at(x_check, next_y, grid):
            vert_hit = (next_x, next_y)
            break
        next_x += vert_xstep
        next_y += vert_ystep

    horz_dist = (
        math.hypot(horz_hit[0] - px, horz_hit[1] - py) if horz_hit else math.inf
    )
    vert_dist = (
        math.hypot(vert_hit[0] - px, vert_hit[1] - py) if vert_hit else math.inf
    )

    if horz_dist < vert_dist and horz_hit is not None:
        hit_x, hit_y = horz_hit
        distance = horz_dist
        vertical = False
    else:
        hit_x, hit_y = vert_hit if vert_hit is not None else (0.0, 0.0)
        distance = vert_dist
        vertical = True

    return Ray(
        ray_angle=ray_angle,
        wall_hit_x=hit_x,
        wall_hit_y=hit_y,
        distance=distance,
        was_hit_vertical=vertical,
        is_facing_up=facing_up,
        is_facing_down=facing_down,
        is_facing_left=facing_left,
        is_facing_right=facing_right,
    )


def cast_all_rays(player: Any, grid: Sequence[str]) -> list[Ray]:
    """Cast NUM_RAYS rays across the field of view, left to right.

    The rays are stored on player.rays and also returned.
    """
    angle_step = FOV / NUM_RAYS
    ray_angle = player.angle - FOV / 2
    rays = []
    for _ in range(NUM_RAYS):
        rays.append(cast_ray(player, ray_angle, grid))
        ray_angle += angle_step
    player.rays = rays
    return rays