from __future__ import annotations

from game_engine import RULESETS

from .defaults import from_legacy_config
from .schema import Settings


def load_settings(
    *,
    ruleset: str | None = None,
    seed: int | None = None,
    ensure_dirs: bool = True,
) -> Settings:
    """Load runtime settings, defaulting to values from the legacy config module."""
    settings = from_legacy_config()
    if ruleset is not None:
        settings = settings.with_overrides(ruleset=ruleset)
    if seed is not None:
        settings = settings.with_overrides(seed=seed)
    if settings.ruleset not in RULESETS:
        raise ValueError(f"Unknown ruleset: {settings.ruleset!r}. Expected one of {list(RULESETS)}")
    if not 0.0 <= settings.collision_margin < 1.0:
        raise ValueError(f"collision_margin must be in [0, 1), got {settings.collision_margin}")
    if ensure_dirs:
        settings.paths.ensure_dirs()
    return settings
