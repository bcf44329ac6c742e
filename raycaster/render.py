"""Drawing one frame: walls projected from the cast rays, then ceiling and floor."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

from .constants import TILE_SIZE
from .draw import Image
from .player import Player
from .ray import FOV, cast_all_rays
from .texture import WallTextures
from .worldmap import get_map

CEILING_COLOR = 0x003333
FLOOR_COLOR = 0x006666
MIN_DISTANCE = 0.0001


@dataclass
class Game:
    """Everything one frame needs: the image, the player, the map and textures.

    present, if set, is called with the finished image at the end of each frame.
    """

    textures: WallTextures
    image: Image = field(default_factory=Image)
    player: Player = field(default_factory=Player)
    grid: list[str] = field(default_factory=get_map)
    present: Callable[[Image], None] | None = None


def _projection_distance(width: int) -> float:
    return (width / 2.0) / math.tan(FOV / 2.0)


def render_3d_walls(game: Game) -> None:
    """Draw one column per cast ray: ceiling, textured wall slice, then floor."""
    image = game.image
    player = game.player
    dist_proj_plane = _projection_distance(image.width)
    half = image.height // 2

    for column, ray in enumerate(player.rays):
        # Correct the fisheye effect by using the distance perpendicular to the view.
        perp_dist = ray.distance * math.cos(ray.ray_angle - player.angle)
        if perp_dist < MIN_DISTANCE:
            perp_dist = MIN_DISTANCE
        proj_wall_h = (TILE_SIZE / perp_dist) * dist_proj_plane
        wall_h = int(proj_wall_h) if math.isfinite(proj_wall_h) else 0

        top = half - wall_h // 2
        bottom = half + wall_h // 2

        hit = ray.wall_hit_y if ray.was_hit_vertical else ray.wall_hit_x
        tex = game.textures.select(ray)
        tex_x = int(math.fmod(hit, TILE_SIZE)) if math.isfinite(hit) else 0
        tex_x = int(tex_x * tex.width / TILE_SIZE)

        top = max(top, 0)
        bottom = min(bottom, image.height - 1)

        for y in range(top):
            image.put_pixel(column, y, CEILING_COLOR)

        span = bottom - top + 1
        for y in range(top, bottom + 1):
            tex_y = int((y - top) * tex.height / span)
            image.put_pixel(column, y, tex.texel(tex_x, tex_y))

        for y in range(bottom + 1, image.height):
            image.put_pixel(column, y, FLOOR_COLOR)


def render(game: Game) -> None:
    """Produce one frame, then advance the player by one step."""
    game.image.clear()
    cast_all_rays(game.player, game.grid)
    render_3d_walls(game)
    game.player.move(game.grid)
    if game.present is not None:
        game.present(game.image)