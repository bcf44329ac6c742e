"""Wall textures: loading them from image files and sampling their pixels."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Iterable

from PIL import Image as PILImage


@dataclass
class Texture:
    """A width x height grid of 0xRRGGBB colours, stored row by row."""

    width: int
    height: int
    pixels: array = field(repr=False)

    def __init__(self, width: int, height: int, pixels: Iterable[int]) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"texture size must be positive, got {width}x{height}")
        data = array("I", pixels)
        if len(data) != width * height:
            raise ValueError(
                f"expected {width * height} pixels for {width}x{height}, got {len(data)}"
            )
        self.width = width
        self.height = height
        self.pixels = data

    def texel(self, x: int, y: int) -> int:
        """The colour at (x, y), with coordinates clamped to the texture."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return self.pixels[y * self.width + x]


@dataclass
class WallTextures:
    """One texture for each compass face of a wall."""

    north: Texture
    south: Texture
    east: Texture
    west: Texture

    def select(self, ray: Any) -> Texture:
        """The texture for the wall face a ray struck."""
        if ray.was_hit_vertical:
            return self.west if ray.is_facing_right else self.east
        return self.north if ray.is_facing_down else self.south


def load_texture(path: str | PathLike[str]) -> Texture:
    """Read an image file into a Texture; raises OSError if it cannot be read."""
    with PILImage.open(path) as img:
        rgb = img.convert("RGB")
        width, height = rgb.size
        raw = rgb.tobytes()
    colours = (
        (r << 16) | (g << 8) | b for r, g, b in zip(raw[0::3], raw[1::3], raw[2::3])
    )
    return Texture(width, height, colours)