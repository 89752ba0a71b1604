from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SimSummary:
    policy: str
    ruleset: str
    n_sims: int
    win_rate: float
    death_rate: float
    avg_frames: float
    std_frames: float
    avg_score: float
    runs: list[dict[str, Any]] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "policy": self.policy,
            "ruleset": self.ruleset,
            "n_sims": self.n_sims,
            "win_rate": self.win_rate,
            "death_rate": self.death_rate,
            "avg_frames": self.avg_frames,
            "std_frames": self.std_frames,
            "avg_score": self.avg_score,
        }
