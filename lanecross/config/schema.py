from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

RulesetName = Literal["standard", "classic"]


@dataclass(frozen=True)
class Paths:
    project_dir: Path
    assets_dir: Path
    results_dir: Path

    results_json: Path
    replay_jsonl: Path

    def ensure_dirs(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class Settings:
    ruleset: str
    paths: Paths

    fps: int
    max_dt: float
    hazard_count: int
    collision_margin: float
    seed: int | None

    sims_per_policy: int
    sim_workers: int
    batch_size: int
    max_frames: int
    default_policy: str

    def with_overrides(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)

    @property
    def classic(self) -> bool:
        return self.ruleset == "classic"
