"""Tests for the lanecross command line."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanecross.ui.cli import commands
from lanecross.ui.cli.main import build_parser


class TestParser:
    def test_simulate_args(self):
        args = build_parser().parse_args(["simulate", "--policy", "up", "--sims", "3", "--ruleset", "classic"])
        assert args.func is commands.cmd_simulate
        assert args.policy == "up"
        assert args.sims == 3
        assert args.ruleset == "classic"

    def test_unknown_policy_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["simulate", "--policy", "teleport"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestReport:
    def test_missing_summary(self, tmp_path, monkeypatch, capsys):
        from lanecross.config.loader import load_settings

        base = load_settings(ensure_dirs=False)
        paths = base.paths.__class__(
            project_dir=tmp_path,
            assets_dir=tmp_path / "assets",
            results_dir=tmp_path / "results",
            results_json=tmp_path / "results" / "summary.json",
            replay_jsonl=tmp_path / "results" / "replay.jsonl",
        )
        monkeypatch.setattr(commands, "_settings", lambda args: base.with_overrides(paths=paths))
        commands.cmd_report(build_parser().parse_args(["report"]))
        assert "[report] Missing" in capsys.readouterr().out

    def test_replay_writes_jsonl(self, tmp_path, monkeypatch, capsys):
        from lanecross.config.loader import load_settings

        base = load_settings(ensure_dirs=False)
        paths = base.paths.__class__(
            project_dir=tmp_path,
            assets_dir=tmp_path / "assets",
            results_dir=tmp_path / "results",
            results_json=tmp_path / "results" / "summary.json",
            replay_jsonl=tmp_path / "results" / "replay.jsonl",
        )
        settings = base.with_overrides(paths=paths, seed=3, max_frames=300, hazard_count=0)
        monkeypatch.setattr(commands, "_settings", lambda args: settings)
        commands.cmd_replay(build_parser().parse_args(["replay", "--policy", "up"]))
        assert paths.replay_jsonl.exists()
        first = json.loads(paths.replay_jsonl.read_text().splitlines()[0])
        assert first["hazards"] == []
        assert "[replay]" in capsys.readouterr().out
