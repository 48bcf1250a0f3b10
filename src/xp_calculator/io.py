"""I/O utilities for the XP calculator.

This module owns:
- JSON configuration parsing and validation
- JSON export of a :class:`~xp_calculator.data.CalculatorResult`

Keeping this separate from :mod:`xp_calculator.data` makes the core model easy
to test and reuse.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Mapping

from xp_calculator.chart import build_chart_payload
from xp_calculator.constants import LEVEL_TABLE_MAX_LEVEL
from xp_calculator.data import (
    CalculatorConfig,
    CalculatorResult,
    LevelCurveConfig,
    PlacementDistribution,
    PlayerProfile,
    PointsConfig,
    ScheduleConfig,
)
from xp_calculator.levels import format_formula, formula_samples, level_table
from xp_calculator.profiles import custom_profile, default_config, get_curve_preset, get_profile


def _require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a JSON object")
    return value


def _parse_int(obj: Mapping[str, Any], key: str, default: int, field_name: str) -> int:
    raw = obj.get(key, default)
    if (
        isinstance(raw, bool)
        or not isinstance(raw, (int, float))
        or (isinstance(raw, float) and not math.isfinite(raw))
        or int(raw) != raw
    ):
        raise ValueError(f"{field_name}.{key} must be an integer (got {raw!r})")
    return int(raw)


def _parse_float(obj: Mapping[str, Any], key: str, default: float, field_name: str) -> float:
    raw = obj.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{field_name}.{key} must be a number (got {raw!r})")
    return raw


def _parse_probability(obj: Mapping[str, Any], key: str) -> float:
    if key not in obj:
        raise ValueError(f"distribution missing key {key!r}")
    raw = obj[key]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"distribution.{key} must be a number (got {raw!r})")
    try:
        return float(raw)
    except OverflowError as e:
        raise ValueError(f"distribution.{key} is out of range (got {raw!r})") from e


def parse_schedule(obj: Mapping[str, Any], *, base: ScheduleConfig) -> ScheduleConfig:
    obj = _require_mapping(obj, "schedule")
    return ScheduleConfig(
        daily=_parse_int(obj, "daily", base.daily, "schedule"),
        weekly=_parse_int(obj, "weekly", base.weekly, "schedule"),
        monthly=_parse_int(obj, "monthly", base.monthly, "schedule"),
    )


def parse_points(obj: Mapping[str, Any], *, base: PointsConfig) -> PointsConfig:
    obj = _require_mapping(obj, "points")
    return PointsConfig(
        first=_parse_float(obj, "first", base.first, "points"),
        second=_parse_float(obj, "second", base.second, "points"),
        third=_parse_float(obj, "third", base.third, "points"),
        participation=_parse_float(obj, "participation", base.participation, "points"),
    )


def parse_curve(value: Any, *, base: LevelCurveConfig) -> LevelCurveConfig:
    """Parse a curve given either as a preset key or as coefficients."""

    if isinstance(value, str):
        return get_curve_preset(value)

    obj = _require_mapping(value, "curve")
    return LevelCurveConfig(
        a=_parse_float(obj, "a", base.a, "curve"),
        b=_parse_float(obj, "b", base.b, "curve"),
        c=_parse_float(obj, "c", base.c, "curve"),
        multiplier=_parse_float(obj, "multiplier", base.multiplier, "curve"),
    )


def parse_profile(raw: Mapping[str, Any], *, base: PlayerProfile) -> PlayerProfile:
    """Resolve ``profile`` (a key) and an optional custom ``distribution``."""

    profile = base
    if "profile" in raw:
        key = raw["profile"]
        if not isinstance(key, str):
            raise ValueError(f"profile must be a string (got {key!r})")
        profile = get_profile(key)

    if "distribution" not in raw:
        return profile

    dist_obj = _require_mapping(raw["distribution"], "distribution")
    distribution = PlacementDistribution(
        first=_parse_probability(dist_obj, "first"),
        second=_parse_probability(dist_obj, "second"),
        third=_parse_probability(dist_obj, "third"),
        participation=_parse_probability(dist_obj, "participation"),
    )

    namespace = raw.get("seed_namespace", profile.seed_offsets.weekly)
    if isinstance(namespace, bool) or not isinstance(namespace, int):
        raise ValueError(f"seed_namespace must be an integer (got {namespace!r})")

    return custom_profile(distribution=distribution, seed_namespace=namespace)


def parse_config(raw: Mapping[str, Any], *, base: CalculatorConfig | None = None) -> CalculatorConfig:
    """Build a :class:`CalculatorConfig` from a JSON-like mapping.

    Every section is optional; missing values come from ``base`` (the default
    configuration if not given).
    """

    raw = _require_mapping(raw, "config")
    base = base or default_config()

    return CalculatorConfig(
        profile=parse_profile(raw, base=base.profile),
        schedule=parse_schedule(raw["schedule"], base=base.schedule) if "schedule" in raw else base.schedule,
        points=parse_points(raw["points"], base=base.points) if "points" in raw else base.points,
        curve=parse_curve(raw["curve"], base=base.curve) if "curve" in raw else base.curve,
    )


def load_config_from_json(path: str | Path) -> CalculatorConfig:
    """Load a :class:`~xp_calculator.data.CalculatorConfig` from JSON.

    Expected format (all keys optional)::

        {
          "profile": "average",
          "schedule": {"daily": 2, "weekly": 3, "monthly": 1},
          "points": {"first": 5, "second": 3, "third": 2, "participation": 1},
          "curve": {"a": 0.035, "b": 2.5, "c": 10, "multiplier": 0.5}
        }
    """

    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    return parse_config(raw)


def config_to_json_dict(config: CalculatorConfig) -> Dict[str, Any]:
    return {
        "profile": config.profile.key,
        "profile_name": config.profile.name,
        "distribution": config.profile.distribution.as_dict(),
        "seed_offsets": asdict(config.profile.seed_offsets),
        "schedule": asdict(config.schedule),
        "points": asdict(config.points),
        "curve": asdict(config.curve),
    }


def result_to_json_dict(
    result: CalculatorResult,
    *,
    level_table_max_level: int = LEVEL_TABLE_MAX_LEVEL,
) -> Dict[str, Any]:
    """Convert a result into a JSON-serialisable dict.

    Includes the config, the yearly summary, the day series, the chart
    payload and the level requirements table.
    """

    curve = result.config.curve
    series = result.series

    return {
        "config": config_to_json_dict(result.config),
        "summary": asdict(result.summary),
        "series": {
            "days": list(series.days),
            "labels": list(series.labels),
            "daily_points": list(series.daily_points),
            "cumulative_points": list(series.cumulative_points),
            "levels": list(series.levels),
        },
        "annotations": [
            {
                "key": e.key,
                "day": e.day,
                "cadence": e.cadence.value,
                "game_index": e.game_index,
                "placement": e.placement.value,
            }
            for e in result.annotations
        ],
        "chart": build_chart_payload(series=series, events=result.annotations, profile=result.config.profile),
        "level_curve": {
            "formula": format_formula(curve),
            "samples": [{"level": level, "xp": xp} for level, xp in formula_samples(curve)],
            "table": [
                {"level": level, "xp_required": xp, "xp_to_next": xp_to_next}
                for level, xp, xp_to_next in level_table(curve, max_level=level_table_max_level)
            ],
        },
    }


def dumps_result_pretty(result: CalculatorResult, **kwargs: Any) -> str:
    return json.dumps(result_to_json_dict(result, **kwargs), indent=2)
