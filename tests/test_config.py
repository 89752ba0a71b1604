"""Tests for settings loading and result files."""

import dataclasses
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanecross.config.loader import load_settings
from lanecross.core.doctor import run_doctor
from lanecross.core.results import load_result_json, save_result_json, write_replay_jsonl


class TestSettings:
    def test_defaults(self):
        s = load_settings(ensure_dirs=False)
        assert s.ruleset == "standard"
        assert s.fps == 60
        assert 0.0 <= s.collision_margin < 1.0
        assert s.seed is None

    def test_overrides(self):
        s = load_settings(ruleset="classic", seed=5, ensure_dirs=False)
        assert s.classic
        assert s.seed == 5

    def test_unknown_ruleset(self):
        with pytest.raises(ValueError):
            load_settings(ruleset="arcade", ensure_dirs=False)

    def test_frozen(self):
        s = load_settings(ensure_dirs=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.ruleset = "classic"
        assert s.with_overrides(fps=30).fps == 30
        assert s.fps == 60


class TestResults:
    def test_roundtrip_adds_schema(self, tmp_path):
        path = save_result_json(tmp_path / "r.json", {"win_rate": 0.25})
        assert load_result_json(path) == {"schema_version": 1, "win_rate": 0.25}

    def test_legacy_file_gets_version_zero(self, tmp_path):
        path = tmp_path / "old.json"
        path.write_text(json.dumps({"win_rate": 1.0}))
        assert load_result_json(path)["schema_version"] == 0

    def test_replay_jsonl(self, tmp_path):
        n = write_replay_jsonl(tmp_path / "replay" / "r.jsonl", [{"frame": 0}, {"frame": 2}])
        assert n == 2
        lines = (tmp_path / "replay" / "r.jsonl").read_text().splitlines()
        assert [json.loads(line)["frame"] for line in lines] == [0, 2]


class TestDoctor:
    def test_checks(self):
        checks = {c.name: c for c in run_doctor(load_settings(ensure_dirs=False))}
        assert checks["ruleset"].ok
        assert checks["policy"].ok
        assert checks["numpy"].ok
