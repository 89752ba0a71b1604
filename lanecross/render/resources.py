from __future__ import annotations

"""Image cache for entity sprites and terrain blocks."""

from pathlib import Path

import pygame

from game_engine import CELL_W, GEM_SPRITES, HAZARD_SPRITE, PLAYER_SPRITE

# Sprite sheet images are 101x171 with transparent padding above the block
SPRITE_W, SPRITE_H = CELL_W, 171

WATER_BLOCK = "images/water-block.png"
STONE_BLOCK = "images/stone-block.png"
GRASS_BLOCK = "images/grass-block.png"

ALL_IMAGES = [
    WATER_BLOCK, STONE_BLOCK, GRASS_BLOCK,
    HAZARD_SPRITE, PLAYER_SPRITE, *GEM_SPRITES.values(),
]

C_WATER = (70, 130, 220)
C_STONE = (150, 150, 150)
C_GRASS = (70, 170, 70)
C_EDGE = (40, 40, 40)
C_BUG = (200, 40, 40)
C_BOY = (240, 200, 150)
C_SHIRT = (60, 90, 200)
C_GEMS = {
    GEM_SPRITES[1]: (60, 110, 255),
    GEM_SPRITES[2]: (40, 200, 90),
    GEM_SPRITES[3]: (255, 150, 30),
}
C_BLOCKS = {WATER_BLOCK: C_WATER, STONE_BLOCK: C_STONE, GRASS_BLOCK: C_GRASS}


def draw_placeholder(path: str) -> pygame.Surface:
    """Draw a stand-in sprite for an image that is not on disk."""
    surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
    if path in C_BLOCKS:
        pygame.draw.rect(surf, C_BLOCKS[path], (0, 50, SPRITE_W, 121), border_radius=6)
        pygame.draw.rect(surf, C_EDGE, (0, 50, SPRITE_W, 121), 1, border_radius=6)
    elif path == HAZARD_SPRITE:
        pygame.draw.ellipse(surf, C_BUG, (8, 80, 85, 55))
        pygame.draw.ellipse(surf, C_EDGE, (70, 95, 25, 25))
        pygame.draw.circle(surf, (255, 255, 255), (85, 103), 4)
    elif path == PLAYER_SPRITE:
        pygame.draw.circle(surf, C_BOY, (50, 85), 20)
        pygame.draw.rect(surf, C_SHIRT, (32, 105, 36, 30), border_radius=6)
    elif path in C_GEMS:
        cx, cy = SPRITE_W // 2, 110
        points = [(cx, cy - 28), (cx + 22, cy), (cx, cy + 28), (cx - 22, cy)]
        pygame.draw.polygon(surf, C_GEMS[path], points)
        pygame.draw.polygon(surf, C_EDGE, points, 1)
    else:
        pygame.draw.rect(surf, (255, 0, 255), (0, 50, SPRITE_W, 121))
    return surf


class Resources:
    """Loads images once and hands out cached surfaces by path."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self._cache: dict[str, pygame.Surface] = {}

    def load(self, paths) -> None:
        for path in paths:
            self.get(path)

    def get(self, path: str) -> pygame.Surface:
        if path not in self._cache:
            file = self.root / path
            if file.exists():
                image = pygame.image.load(str(file))
                if pygame.display.get_surface() is not None:
                    image = image.convert_alpha()
                self._cache[path] = image
            else:
                self._cache[path] = draw_placeholder(path)
        return self._cache[path]

    def __contains__(self, path: str) -> bool:
        return path in self._cache
