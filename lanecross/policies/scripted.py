from __future__ import annotations

"""Scripted players for headless runs."""

import random

from game_engine import DIRECTIONS, HAZARD_LANES, GameState


class UpPolicy:
    """Walks straight up, ignoring traffic."""

    name = "up"

    def __init__(self, seed=None):
        pass

    def decide(self, state: GameState) -> str | None:
        return "up"


class RandomPolicy:
    name = "random"

    def __init__(self, seed=None):
        self.rng = random.Random(seed)
        self.tokens = sorted(DIRECTIONS)

    def decide(self, state: GameState) -> str | None:
        return self.rng.choice(self.tokens)


class CautiousPolicy:
    """Steps up only when the lane ahead has no hazard within ``min_gap`` columns."""

    name = "cautious"

    def __init__(self, seed=None, min_gap=1.6):
        self.min_gap = min_gap

    def decide(self, state: GameState) -> str | None:
        player = state.player
        ahead = player.y - 1
        if ahead in HAZARD_LANES and state.nearest_hazard_gap(ahead) < self.min_gap:
            # Also back off if the current lane is about to be hit
            if player.y in HAZARD_LANES and state.nearest_hazard_gap(player.y) < self.min_gap:
                return "down"
            return None
        return "up"
