from __future__ import annotations

from lanecross.policies.base import Policy
from lanecross.policies.scripted import CautiousPolicy, RandomPolicy, UpPolicy

_POLICIES = {
    "up": UpPolicy,
    "random": RandomPolicy,
    "cautious": CautiousPolicy,
}


def load_policy(name: str, seed: int | None = None) -> Policy:
    try:
        return _POLICIES[name](seed=seed)
    except KeyError as exc:
        raise ValueError(f"Unknown policy: {name!r}. Expected one of {sorted(_POLICIES)}") from exc


def available_policies() -> list[str]:
    return sorted(_POLICIES)
