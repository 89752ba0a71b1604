from __future__ import annotations

import argparse

from game_engine import RULESETS
from lanecross.policies.registry import available_policies
from lanecross.ui.cli import commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LaneCross")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--ruleset", choices=list(RULESETS), default=None)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Play in a game window")
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run scripted rounds headlessly")
    sub.add_argument("--policy", choices=available_policies(), default=None)
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--workers", type=int, default=None)
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("replay", parents=[common_parent], help="Record one scripted round as JSONL")
    sub.add_argument("--policy", choices=available_policies(), default=None)
    sub.set_defaults(func=commands.cmd_replay)

    sub = subparsers.add_parser("doctor", parents=[common_parent], help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    sub = subparsers.add_parser("report", parents=[common_parent], help="Print the saved simulation summary")
    sub.set_defaults(func=commands.cmd_report)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
