from __future__ import annotations

from pathlib import Path

from lanecross.config.loader import load_settings
from lanecross.core.doctor import run_doctor
from lanecross.core.results import load_result_json, write_replay_jsonl
from lanecross.policies.registry import load_policy


def _settings(args):
    return load_settings(ruleset=args.ruleset, seed=getattr(args, "seed", None))


def cmd_play(args):
    from lanecross.app.game import MissingDisplayError, main as play

    settings = _settings(args)
    try:
        play(settings)
    except MissingDisplayError as exc:
        print(f"[play] {exc}")
        raise SystemExit(1)


def cmd_simulate(args):
    from lanecross.simulation.runner import run_and_report

    settings = _settings(args)
    if args.workers is not None:
        settings = settings.with_overrides(sim_workers=args.workers)
    policy = args.policy or settings.default_policy
    try:
        load_policy(policy)
    except ValueError as exc:
        print(f"[simulate] {exc}")
        raise SystemExit(2)
    try:
        run_and_report(settings, policy, n_sims=args.sims)
    except ValueError as exc:
        print(f"[simulate] {exc}")
        raise SystemExit(2)


def cmd_replay(args):
    from simulator import simulate

    settings = _settings(args)
    seed = settings.seed if settings.seed is not None else 0
    policy = args.policy or settings.default_policy
    try:
        result = simulate(load_policy(policy, seed=seed), seed=seed,
                          ruleset=settings.ruleset, max_frames=settings.max_frames,
                          hazard_count=settings.hazard_count,
                          margin=settings.collision_margin)
    except ValueError as exc:
        print(f"[replay] {exc}")
        raise SystemExit(2)
    n = write_replay_jsonl(settings.paths.replay_jsonl, result["frames"])
    print(f"[replay] {result['outcome']} after {result['frames_alive']} frames; "
          f"wrote {n} frames to {settings.paths.replay_jsonl}")


def cmd_doctor(args):
    settings = _settings(args)
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")


def cmd_report(args):
    settings = _settings(args)
    path = Path(settings.paths.results_json)
    if not path.exists():
        print(f"[report] Missing simulation summary: {path}")
        return
    data = load_result_json(path)
    print(f"\n{str(data.get('label', 'summary')).upper()} ({path})")
    print(f"  schema_version: {data.get('schema_version', 'n/a')}")
    print(f"  ruleset: {data.get('ruleset', settings.ruleset)}")
    for key in ("n_sims", "win_rate", "death_rate", "avg_frames", "std_frames", "avg_score"):
        if key in data:
            print(f"  {key}: {data[key]}")
