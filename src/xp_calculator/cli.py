"""Command-line entry point for :mod:`xp_calculator`.

Example
-------
python -m xp_calculator.cli --profile exceptional --daily 3 --curve-preset flat-rate
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Sequence

from xp_calculator.data import CalculatorConfig, CalculatorResult, LevelCurveConfig, Placement
from xp_calculator.io import dumps_result_pretty, load_config_from_json
from xp_calculator.levels import format_formula, level_table
from xp_calculator.main import run_calculator
from xp_calculator.profiles import CURVE_PRESETS, PLAYER_PROFILES, default_config, get_curve_preset, get_profile


def _print_summary(result: CalculatorResult, *, show_levels: int) -> None:
    config = result.config
    summary = result.summary
    lp = summary.level_progress

    print(f"{config.profile.name} Player")
    dist = ", ".join(
        f"{p.value}={round(config.profile.distribution.probability(p) * 100)}%" for p in Placement
    )
    print(f"- Distribution: {dist}")
    print(
        f"- Schedule: daily={config.schedule.daily} weekly={config.schedule.weekly} "
        f"monthly={config.schedule.monthly}"
    )
    print(f"- Formula: {format_formula(config.curve)}")

    print("\nYear summary")
    print(f"- Total games/year: {summary.total_games_per_year:,}")
    print(f"- Total points/year: {summary.total_points_per_year:,}")
    print(f"- Final level: {summary.final_level}")
    print(f"- Avg points/month: {summary.avg_points_per_month:,}")
    print(f"- Avg points/game: {summary.avg_points_per_game:,}")
    print(f"- Avg points/day: {summary.avg_points_per_day:,}")
    print(f"- Games per day: {summary.games_per_day}")
    print(
        f"- Progress: level {lp.current_level}, {lp.xp_in_level:,}/{lp.xp_needed_for_next:,} XP "
        f"({lp.progress_percent:.1f}%) to level {lp.current_level + 1}"
    )
    print(f"- Game markers: {len(result.annotations)}")

    n = max(0, int(show_levels))
    if n:
        print(f"\nLevel requirements (first {n}):")
        for level, xp, xp_to_next in level_table(config.curve, max_level=n):
            nxt = f"{xp_to_next:,}" if xp_to_next is not None else "-"
            print(f"- Level {level}: {xp:,} XP (next: {nxt})")


def _points_value(text: str) -> float:
    """Parse a points value, keeping whole numbers as ``int``."""

    value = float(text)
    return int(value) if value.is_integer() else value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xp_calculator")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file (default: built-in defaults)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PLAYER_PROFILES),
        default=None,
        help="Player profile (overrides the config file)",
    )
    for cadence in ("daily", "weekly", "monthly"):
        parser.add_argument(f"--{cadence}", type=int, default=None, help=f"{cadence.capitalize()} games scheduled")
    for placement in Placement:
        parser.add_argument(
            f"--{placement.value}",
            type=_points_value,
            default=None,
            help=f"Points per day for {placement.value}",
        )

    curve_group = parser.add_mutually_exclusive_group()
    curve_group.add_argument(
        "--curve-preset",
        choices=sorted(CURVE_PRESETS),
        default=None,
        help="Level-curve preset",
    )
    curve_group.add_argument(
        "--coefficients",
        type=float,
        nargs=4,
        metavar=("A", "B", "C", "MULTIPLIER"),
        default=None,
        help="Level-curve coefficients: XP = (A*L^2 + B*L + C) * MULTIPLIER",
    )

    parser.add_argument(
        "--out-json",
        type=Path,
        default=None,
        help="Write the full result (series, markers, summary, level table) to this path",
    )
    parser.add_argument(
        "--show-levels",
        type=int,
        default=0,
        help="Print the first N rows of the level requirements table (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def _apply_overrides(config: CalculatorConfig, args: argparse.Namespace) -> CalculatorConfig:
    if args.profile is not None:
        config = dataclasses.replace(config, profile=get_profile(args.profile))

    schedule_overrides = {k: getattr(args, k) for k in ("daily", "weekly", "monthly") if getattr(args, k) is not None}
    if schedule_overrides:
        config = dataclasses.replace(config, schedule=dataclasses.replace(config.schedule, **schedule_overrides))

    points_overrides = {p.value: getattr(args, p.value) for p in Placement if getattr(args, p.value) is not None}
    if points_overrides:
        config = dataclasses.replace(config, points=dataclasses.replace(config.points, **points_overrides))

    if args.curve_preset is not None:
        config = dataclasses.replace(config, curve=get_curve_preset(args.curve_preset))
    elif args.coefficients is not None:
        a, b, c, multiplier = args.coefficients
        config = dataclasses.replace(config, curve=LevelCurveConfig(a=a, b=b, c=c, multiplier=multiplier))

    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = load_config_from_json(args.config) if args.config is not None else default_config()
        config = _apply_overrides(config, args)
        result = run_calculator(config, log_level=getattr(logging, args.log_level))
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    _print_summary(result, show_levels=args.show_levels)

    out_json: Path | None = args.out_json
    if out_json is not None:
        out_json.parent.mkdir(parents=True, exist_ok=True)
        out_json.write_text(dumps_result_pretty(result), encoding="utf-8")
        print(f"\nWrote result to {out_json}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
