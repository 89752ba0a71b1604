#!/usr/bin/env python3
from __future__ import annotations
"""
LANECROSS — cross the stone lanes without touching a bug.
Arrow keys / WASD to hop, Enter to play again, Esc to quit.

Requirements:
    pip install pygame
"""

import sys

import pygame

from game_engine import GameState, WIDTH, HEIGHT
from lanecross.config.schema import Settings
from lanecross.input.keymap import translate_key
from lanecross.render.resources import ALL_IMAGES, Resources
from lanecross.render.scene import draw_board, draw_hud, load_fonts


class MissingDisplayError(RuntimeError):
    pass


def frame_dt(elapsed_ms: int, max_dt: float) -> float:
    """Seconds since the last frame, clamped so a stall cannot teleport hazards."""
    return min(max(elapsed_ms, 0) / 1000.0, max_dt)


def new_game(settings: Settings) -> GameState:
    return GameState(
        seed=settings.seed,
        ruleset=settings.ruleset,
        hazard_count=settings.hazard_count,
        margin=settings.collision_margin,
    )


def handle_events(state: GameState, events) -> bool:
    """Feed key-up events to the game. Returns False when the window should close."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        if event.type == pygame.KEYUP:
            token = translate_key(event.key)
            if token is not None:
                state.handle_key(token)
    return True


def main(settings: Settings) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as exc:
        pygame.quit()
        raise MissingDisplayError(f"Cannot open a game window: {exc}") from exc
    pygame.display.set_caption("LANECROSS")
    clock = pygame.time.Clock()

    fonts = load_fonts()
    resources = Resources(settings.paths.assets_dir)
    resources.load(ALL_IMAGES)

    state = new_game(settings)
    blink = 0
    running = True

    while running:
        dt = frame_dt(clock.tick(settings.fps), settings.max_dt)
        blink += 1

        # ── Events ──────────────────────
        running = handle_events(state, pygame.event.get())

        # ── Update ──────────────────────
        state.step(dt)

        # ── Draw ────────────────────────
        draw_board(screen, resources)
        state.render(screen, resources)
        draw_hud(screen, state, fonts, blink)

        pygame.display.flip()

    print(f"[play] {state.rounds} round(s), {state.wins} win(s), {state.deaths} death(s)")
    pygame.quit()


if __name__ == "__main__":
    from lanecross.config.loader import load_settings

    main(load_settings())
    sys.exit(0)
