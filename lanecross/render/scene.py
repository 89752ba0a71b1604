from __future__ import annotations

"""Board and HUD drawing for the pygame front end."""

import pygame

from game_engine import CELL_H, CELL_W, COLS, DEAD, HEIGHT, WIN, WIDTH
from lanecross.render.resources import GRASS_BLOCK, STONE_BLOCK, WATER_BLOCK

# Top to bottom: goal row, three hazard lanes, two safe rows
ROW_IMAGES = [WATER_BLOCK, STONE_BLOCK, STONE_BLOCK, STONE_BLOCK, GRASS_BLOCK, GRASS_BLOCK]

C_BG = (255, 255, 255)
C_TEXT = (20, 20, 30)
C_WHITE = (255, 255, 255)
C_DIM = (200, 200, 210)
C_WIN = (255, 215, 0)
C_LOSE = (255, 65, 85)


def load_fonts() -> dict[str, pygame.font.Font]:
    try:
        return {
            "hud": pygame.font.SysFont("Courier New", 22, bold=True),
            "title": pygame.font.SysFont("Courier New", 48, bold=True),
            "sub": pygame.font.SysFont("Courier New", 17),
        }
    except Exception:
        return {
            "hud": pygame.font.SysFont(None, 22),
            "title": pygame.font.SysFont(None, 48),
            "sub": pygame.font.SysFont(None, 17),
        }


def draw_board(surface, resources) -> None:
    surface.fill(C_BG)
    for row, image in enumerate(ROW_IMAGES):
        for col in range(COLS):
            surface.blit(resources.get(image), (col * CELL_W, row * CELL_H))


def draw_hud(surface, state, fonts, blink: int = 0) -> None:
    player = state.player
    text = f"SCORE {player.score:03d}   ROUND {state.rounds}"
    hud = fonts["hud"].render(text, True, C_TEXT)
    surface.blit(hud, (8, 14))

    if player.status not in (WIN, DEAD):
        return

    dim = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    dim.fill((0, 0, 0, 155))
    surface.blit(dim, (0, 0))

    label, color = ("YOU WIN", C_WIN) if player.status == WIN else ("GAME OVER", C_LOSE)
    t = fonts["title"].render(label, True, color)
    surface.blit(t, (WIDTH // 2 - t.get_width() // 2, HEIGHT // 2 - 80))

    sc = fonts["hud"].render(f"score {player.score}", True, C_WHITE)
    surface.blit(sc, (WIDTH // 2 - sc.get_width() // 2, HEIGHT // 2 - 10))

    if blink % 60 < 42:
        h = fonts["sub"].render("press Enter to play again", True, C_DIM)
        surface.blit(h, (WIDTH // 2 - h.get_width() // 2, HEIGHT // 2 + 40))
