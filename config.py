"""Shared configuration for LaneCross."""
from pathlib import Path
import multiprocessing as _mp

from game_engine import FPS, HAZARD_COUNT, COLLISION_MARGIN

# Directories
PROJECT_DIR = Path(__file__).parent
ASSETS_DIR = PROJECT_DIR / "assets"
RESULTS_DIR = PROJECT_DIR / "results"

# ── Ruleset: "standard" (status + gems) or "classic" (instant reset, no gems) ──
RULESET = "standard"

# Game settings come from the headless engine constants to avoid drift.
MAX_DT = 0.1  # seconds; longer stalls are clamped so hazards cannot tunnel

# Simulation settings
SIMS_PER_POLICY = 50
SIM_WORKERS = max(1, _mp.cpu_count() - 2)
BATCH_SIZE = 10
MAX_FRAMES = FPS * 120
DEFAULT_POLICY = "cautious"

# File paths
RESULTS_JSON = RESULTS_DIR / "simulation_summary.json"
REPLAY_JSONL = RESULTS_DIR / "replay.jsonl"
