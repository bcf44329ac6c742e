"""Starting the game: loading its assets and running the window loop."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .constants import HEIGHT, WIDTH  # noqa: E402
from .controls import Key, key_press, key_release  # noqa: E402
from .draw import Image  # noqa: E402
from .player import Player  # noqa: E402
from .render import Game, render  # noqa: E402
from .texture import WallTextures, load_texture  # noqa: E402
from .worldmap import get_map  # noqa: E402

TITLE = "Game"

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def init(texture_dir: str | os.PathLike[str] = "textures") -> Game:
    """Build a game with a fresh image, player and map, loading the wall textures.

    Raises OSError when a texture file is missing or unreadable.
    """
    directory = Path(texture_dir)
    textures = WallTextures(
        north=load_texture(directory / "north.xpm"),
        south=load_texture(directory / "south.xpm"),
        east=load_texture(directory / "east.xpm"),
        west=load_texture(directory / "west.xpm"),
    )
    return Game(textures=textures, image=Image(WIDTH, HEIGHT), player=Player(),
                grid=get_map())


def _key_for(pygame_key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _PYGAME_KEYS.get(pygame_key)


def _to_rgb(image: Image) -> bytes:
    """The image as packed RGB bytes, row by row."""
    bgra = image.tobytes()
    rgb = bytearray(3 * image.width * image.height)
    rgb[0::3] = bgra[2::4]
    rgb[1::3] = bgra[1::4]
    rgb[2::3] = bgra[0::4]
    return bytes(rgb)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(description="First-person ray-cast maze walker.")
    parser.add_argument(
        "--textures",
        default="textures",
        help="directory holding north.xpm, south.xpm, east.xpm and west.xpm",
    )
    args = parser.parse_args(argv)

    try:
        game = init(args.textures)
    except OSError as err:
        print(f"error: cannot load textures: {err}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)

        def present(image: Image) -> None:
            surface = pygame.image.frombuffer(
                _to_rgb(image), (image.width, image.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        game.present = present
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = _key_for(event.key)
                    if key is not None:
                        key_press(key, game.player)
                elif event.type == pygame.KEYUP:
                    key = _key_for(event.key)
                    if key is not None:
                        key_release(key, game.player)
            if running:
                render(game)
    finally:
        pygame.quit()
    return 0