"""The tile map of the world and wall lookups within it."""

from __future__ import annotations

from typing import Sequence

from .constants import HEIGHT, TILE_SIZE, WIDTH

_LAYOUT = (
    "111111111111111",
    "100000000000001",
    "100000000000001",
    "100000100000001",
    "100000000000001",
    "100000010000001",
    "100001000000001",
    "100000000000001",
    "100000000000001",
    "111111111111111",
)


def get_map() -> list[str]:
    """A fresh copy of the built-in map; '1' is wall, '0' is floor."""
    return list(_LAYOUT)


def has_wall_at(x: float, y: float, grid: Sequence[str]) -> bool:
    """True if the world point (x, y) lies in a wall tile or outside the world."""
    if x < 0 or x >= WIDTH or y < 0 or y >= HEIGHT:
        return True
    if not grid:
        return True
    row = int(y / TILE_SIZE)
    col = int(x / TILE_SIZE)
    if row >= len(grid) or col >= len(grid[0]):
        return True
    line = grid[row]
    if col >= len(line):
        return True
    return line[col] != "0"