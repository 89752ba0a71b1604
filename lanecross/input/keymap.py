from __future__ import annotations

"""Keyboard adapter: raw key codes to direction / restart tokens."""

import pygame

from game_engine import RESTART

# Browser keyCode values, kept so recorded key logs stay readable
KEYCODE_DIRECTIONS = {
    37: "left",
    38: "up",
    39: "right",
    40: "down",
}

PYGAME_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_UP: "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_a: "left",
    pygame.K_w: "up",
    pygame.K_d: "right",
    pygame.K_s: "down",
    pygame.K_RETURN: RESTART,
    pygame.K_KP_ENTER: RESTART,
}


def translate_keycode(code: int) -> str | None:
    return KEYCODE_DIRECTIONS.get(code)


def translate_key(key: int) -> str | None:
    """Map a pygame key constant to a token, or None for keys the game ignores."""
    return PYGAME_KEYS.get(key)
