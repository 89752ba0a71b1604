from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from game_engine import RULESETS
from lanecross.config.schema import Settings
from lanecross.policies.registry import available_policies


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(Check("ruleset", settings.ruleset in RULESETS, f"ruleset={settings.ruleset}"))
    checks.append(Check("policy", settings.default_policy in available_policies(), f"policy={settings.default_policy}"))
    checks.append(Check("margin", 0.0 <= settings.collision_margin < 1.0, f"margin={settings.collision_margin}"))
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation summaries"))

    paths = settings.paths
    # Missing art is fine: placeholder sprites are drawn instead
    checks.append(Check("assets_dir", True, f"{paths.assets_dir} ({'found' if paths.assets_dir.exists() else 'placeholders'})"))
    checks.append(Check("results_dir", paths.results_dir.exists(), str(paths.results_dir)))
    return checks
