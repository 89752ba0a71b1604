from __future__ import annotations

from typing import Protocol

from game_engine import GameState


class Policy(Protocol):
    name: str

    def decide(self, state: GameState) -> str | None: ...
