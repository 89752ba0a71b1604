from __future__ import annotations

"""Batch simulation runner (package-native)."""

import multiprocessing
import random
import time
from itertools import islice
from pathlib import Path
from typing import Any

import numpy as np

from lanecross.config.schema import Settings
from lanecross.core.contracts import SimSummary
from lanecross.core.results import save_result_json


def _run_seed_batch(args):
    """Worker function: run one batch of seeds for one policy."""
    from simulator import simulate_batch

    policy_name, ruleset, max_frames, hazard_count, margin, seeds = args
    return simulate_batch(
        policy_name, seeds, ruleset=ruleset, max_frames=max_frames,
        hazard_count=hazard_count, margin=margin,
    )


def _chunked(items, chunk_size):
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    it = iter(items)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


def aggregate_runs(policy: str, ruleset: str, runs: list[dict[str, Any]]) -> SimSummary:
    if not runs:
        raise ValueError("Cannot aggregate an empty list of runs")
    outcomes = np.array([r["outcome"] for r in runs])
    frames = np.array([r["frames_alive"] for r in runs], dtype=float)
    scores = np.array([r["score"] for r in runs], dtype=float)
    return SimSummary(
        policy=policy,
        ruleset=ruleset,
        n_sims=len(runs),
        win_rate=float(np.mean(outcomes == "win")),
        death_rate=float(np.mean(outcomes == "dead")),
        avg_frames=float(np.mean(frames)),
        std_frames=float(np.std(frames)),
        avg_score=float(np.mean(scores)),
        runs=runs,
    )


def run_simulations(
    settings: Settings,
    policy: str,
    *,
    n_sims: int | None = None,
    batch_size: int | None = None,
    seed: int | None = None,
) -> SimSummary:
    """Run repeated rounds for one policy and aggregate metrics."""
    n_sims = settings.sims_per_policy if n_sims is None else n_sims
    if n_sims <= 0:
        raise ValueError(f"n_sims must be > 0, got {n_sims}")
    batch_size = batch_size or settings.batch_size
    seed = settings.seed if seed is None else seed

    common = (
        policy, settings.ruleset, settings.max_frames,
        settings.hazard_count, settings.collision_margin,
    )
    all_runs: list[dict[str, Any]] = []
    seeds = random.Random(seed).sample(range(100_000), n_sims)

    for batch_idx, batch_seeds in enumerate(_chunked(seeds, batch_size)):
        worker_count = min(len(batch_seeds), settings.sim_workers)
        if worker_count <= 1:
            all_runs.extend(_run_seed_batch((*common, batch_seeds)))
        else:
            seeds_per_worker = max(1, (len(batch_seeds) + worker_count - 1) // worker_count)
            args_list = [
                (*common, seed_chunk)
                for seed_chunk in _chunked(batch_seeds, seeds_per_worker)
            ]
            with multiprocessing.Pool(processes=worker_count) as pool:
                batch_results = pool.map(_run_seed_batch, args_list)
            for worker_runs in batch_results:
                all_runs.extend(worker_runs)

        wins = sum(1 for r in all_runs if r["outcome"] == "win")
        print(
            f"  [simulate] Batch {batch_idx + 1} complete "
            f"({len(all_runs)}/{n_sims} rounds, wins so far: {wins})"
        )

    return aggregate_runs(policy, settings.ruleset, all_runs)


def save_summary(path: Path, settings: Settings, label: str, summary: SimSummary) -> Path:
    payload = summary.as_dict()
    payload["outcomes"] = [r["outcome"] for r in summary.runs]
    payload["frames_alive"] = [r["frames_alive"] for r in summary.runs]
    payload["scores"] = [r["score"] for r in summary.runs]
    return save_result_json(path, {"label": label, **payload})


def run_and_report(settings: Settings, policy: str, *, n_sims: int | None = None) -> SimSummary:
    """Run one policy, print a short report and save the versioned summary."""
    print("\n" + "=" * 50)
    print(f"SIMULATION: policy={policy} ruleset={settings.ruleset}")
    print("=" * 50)
    start = time.time()
    summary = run_simulations(settings, policy, n_sims=n_sims)
    print(f"  Time: {time.time() - start:.1f}s")

    save_summary(settings.paths.results_json, settings, policy, summary)

    fps = settings.fps
    print(f"  Win rate:   {summary.win_rate:.1%}")
    print(f"  Death rate: {summary.death_rate:.1%}")
    print(
        f"  Round length: avg = {summary.avg_frames:.0f} frames "
        f"({summary.avg_frames / fps:.1f}s, +/- {summary.std_frames / fps:.1f}s)"
    )
    print(f"  Avg score:  {summary.avg_score:.2f}")
    return summary
