from __future__ import annotations

from pathlib import Path

import config as legacy_config

from .schema import Paths, Settings


def from_legacy_config() -> Settings:
    project_dir = Path(getattr(legacy_config, "PROJECT_DIR", Path(__file__).resolve().parents[2]))
    paths = Paths(
        project_dir=project_dir,
        assets_dir=Path(getattr(legacy_config, "ASSETS_DIR", project_dir / "assets")),
        results_dir=Path(legacy_config.RESULTS_DIR),
        results_json=Path(legacy_config.RESULTS_JSON),
        replay_jsonl=Path(legacy_config.REPLAY_JSONL),
    )
    return Settings(
        ruleset=str(getattr(legacy_config, "RULESET", "standard")),
        paths=paths,
        fps=int(getattr(legacy_config, "FPS", 60)),
        max_dt=float(getattr(legacy_config, "MAX_DT", 0.1)),
        hazard_count=int(getattr(legacy_config, "HAZARD_COUNT", 9)),
        collision_margin=float(getattr(legacy_config, "COLLISION_MARGIN", 0.1)),
        seed=None,
        sims_per_policy=int(getattr(legacy_config, "SIMS_PER_POLICY", 50)),
        sim_workers=int(getattr(legacy_config, "SIM_WORKERS", 1)),
        batch_size=int(getattr(legacy_config, "BATCH_SIZE", 10)),
        max_frames=int(getattr(legacy_config, "MAX_FRAMES", 7200)),
        default_policy=str(getattr(legacy_config, "DEFAULT_POLICY", "cautious")),
    )
