"""Keyboard handling that sets and clears the player's movement flags."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .constants import XK_A, XK_D, XK_LEFT, XK_RIGHT, XK_S, XK_W


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = XK_W
    A = XK_A
    S = XK_S
    D = XK_D
    LEFT = XK_LEFT
    RIGHT = XK_RIGHT


_BINDINGS = {
    Key.W: "key_up",
    Key.S: "key_down",
    Key.A: "key_left",
    Key.D: "key_right",
    Key.LEFT: "left_rotate",
    Key.RIGHT: "right_rotate",
}


def _set_flag(keycode: int, player: Any, value: bool) -> None:
    flag = _BINDINGS.get(keycode)
    if flag is not None:
        setattr(player, flag, value)


def key_press(keycode: int, player: Any) -> None:
    """Turn on the player flag bound to keycode; other keys are ignored."""
    _set_flag(keycode, player, True)


def key_release(keycode: int, player: Any) -> None:
    """Turn off the player flag bound to keycode; other keys are ignored."""
    _set_flag(keycode, player, False)