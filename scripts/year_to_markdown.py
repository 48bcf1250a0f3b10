from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, List, Mapping, Optional


def _format_number(value: Any) -> str:
    # Keep integers as integers for readability.
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)
    if abs(v - round(v)) < 1e-9:
        return f"{int(round(v)):,}"
    return f"{v:,.2f}".rstrip("0").rstrip(".")


def _format_percent(value: Any) -> str:
    try:
        return f"{round(float(value) * 100)}%"
    except (TypeError, ValueError):
        return ""


def _summary_table(summary: Mapping[str, Any]) -> str:
    rows = [
        ("Total games / year", summary.get("total_games_per_year")),
        ("Total points / year", summary.get("total_points_per_year")),
        ("Final level", summary.get("final_level")),
        ("Avg points / month", summary.get("avg_points_per_month")),
        ("Avg points / game", summary.get("avg_points_per_game")),
        ("Avg points / day", summary.get("avg_points_per_day")),
        ("Games per day", summary.get("games_per_day")),
    ]

    lines = ["| Metric | Value |", "|---|---:|"]
    for label, value in rows:
        lines.append(f"| {label} | {_format_number(value) if value is not None else ''} |")
    return "\n".join(lines)


def _distribution_table(distribution: Mapping[str, Any]) -> str:
    headers = ["1st", "2nd", "3rd", "Participation"]
    keys = ["first", "second", "third", "participation"]
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "---:|" * len(headers),
        "| " + " | ".join(_format_percent(distribution.get(k)) for k in keys) + " |",
    ]
    return "\n".join(lines)


def _progress_line(progress: Mapping[str, Any]) -> str:
    level = int(progress.get("current_level", 0))
    xp_in = _format_number(progress.get("xp_in_level", 0))
    xp_needed = _format_number(progress.get("xp_needed_for_next", 0))
    pct = float(progress.get("progress_percent", 0.0))
    return f"- Level {level}: {xp_in} / {xp_needed} XP ({pct:.1f}%) towards level {level + 1}"


def _snapshot_table(series: Mapping[str, Any]) -> str:
    """One row per labelled day (every two weeks)."""

    days = series.get("days") or []
    labels = series.get("labels") or []
    points = series.get("cumulative_points") or []
    levels = series.get("levels") or []

    lines = ["| Day | Date | Cumulative XP | Level |", "|---:|---|---:|---:|"]
    for day, label, pts, lvl in zip(days, labels, points, levels):
        if not label:
            continue
        lines.append(f"| {day} | {label} | {_format_number(pts)} | {lvl} |")
    return "\n".join(lines)


def _marker_counts(annotations: List[Mapping[str, Any]]) -> str:
    counts: dict[tuple[str, str], int] = {}
    for a in annotations:
        key = (str(a.get("cadence", "")), str(a.get("placement", "")))
        counts[key] = counts.get(key, 0) + 1

    if not counts:
        return "_No weekly or monthly games scheduled._"

    lines = ["| Cadence | Placement | Games |", "|---|---|---:|"]
    for (cadence, placement), n in sorted(counts.items()):
        lines.append(f"| {cadence} | {placement} | {n} |")
    return "\n".join(lines)


def _level_table(level_curve: Mapping[str, Any], *, max_rows: int) -> str:
    rows = list(level_curve.get("table") or [])[:max_rows]
    lines = ["| Level | XP required | XP to next |", "|---:|---:|---:|"]
    for row in rows:
        nxt = row.get("xp_to_next")
        lines.append(
            f"| {row.get('level')} | {_format_number(row.get('xp_required'))} | "
            f"{_format_number(nxt) if nxt is not None else '-'} |"
        )
    return "\n".join(lines)


def year_json_to_markdown(result: Mapping[str, Any], *, level_rows: int = 20) -> str:
    config = result.get("config") or {}
    summary = result.get("summary") or {}
    level_curve = result.get("level_curve") or {}

    lines: List[str] = []
    profile_name = config.get("profile_name") or config.get("profile") or ""
    lines.append(f"# XP Calculator – {profile_name} Player")
    lines.append("")

    formula = level_curve.get("formula")
    if formula:
        lines.append(f"- **Level formula**: `{formula}`")
    schedule = config.get("schedule") or {}
    if schedule:
        lines.append(
            f"- **Schedule**: daily={schedule.get('daily', 0)}, weekly={schedule.get('weekly', 0)}, "
            f"monthly={schedule.get('monthly', 0)}"
        )
    lines.append("")

    lines.append("## Year summary")
    lines.append("")
    lines.append(_summary_table(summary))
    lines.append("")

    progress = summary.get("level_progress")
    if progress:
        lines.append("## Level progress")
        lines.append("")
        lines.append(_progress_line(progress))
        lines.append("")

    lines.append("## Distribution model")
    lines.append("")
    lines.append(_distribution_table(config.get("distribution") or {}))
    lines.append("")

    lines.append("## Fortnightly snapshot")
    lines.append("")
    lines.append(_snapshot_table(result.get("series") or {}))
    lines.append("")

    lines.append("## Game markers")
    lines.append("")
    lines.append(_marker_counts(list(result.get("annotations") or [])))
    lines.append("")

    if level_rows > 0 and level_curve.get("table"):
        lines.append("## Level requirements")
        lines.append("")
        lines.append(_level_table(level_curve, max_rows=level_rows))
        lines.append("")

    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Convert an XP calculator result.json to a markdown report")
    parser.add_argument("result_json", type=Path, help="Path to result.json")
    parser.add_argument("--out", type=Path, default=None, help="Optional output markdown path")
    parser.add_argument("--level-rows", type=int, default=20, help="Rows of the level table to include")

    args = parser.parse_args(argv)

    result = json.loads(args.result_json.read_text(encoding="utf-8-sig"))
    md = year_json_to_markdown(result, level_rows=args.level_rows)

    if args.out is None:
        print(md)
    else:
        args.out.write_text(md, encoding="utf-8")


if __name__ == "__main__":
    main()
