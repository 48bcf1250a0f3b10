"""Shipped player profiles and level-curve presets."""

from __future__ import annotations

import difflib
from typing import Mapping

from xp_calculator.data import (
    CalculatorConfig,
    LevelCurveConfig,
    PlacementDistribution,
    PlayerProfile,
    PointsConfig,
    ScheduleConfig,
    SeedOffsets,
)

DEFAULT_PROFILE_KEY = "average"
DEFAULT_CURVE_PRESET_KEY = "level-500-10k"


PLAYER_PROFILES: Mapping[str, PlayerProfile] = {
    "wins-everything": PlayerProfile(
        key="wins-everything",
        name="Wins Everything",
        description="Elite player with exceptional skill",
        distribution=PlacementDistribution(first=1.0, second=0.0, third=0.0, participation=0.0),
        seed_offsets=SeedOffsets.for_namespace(1),
    ),
    "exceptional": PlayerProfile(
        key="exceptional",
        name="Exceptional",
        description="Above average competitive player",
        distribution=PlacementDistribution(first=0.50, second=0.25, third=0.25, participation=0.0),
        seed_offsets=SeedOffsets.for_namespace(2),
    ),
    "average": PlayerProfile(
        key="average",
        name="Average",
        description="Typical casual player",
        distribution=PlacementDistribution(first=0.20, second=0.20, third=0.30, participation=0.30),
        seed_offsets=SeedOffsets.for_namespace(3),
    ),
    "looser": PlayerProfile(
        key="looser",
        name="Looser",
        description="Struggling or new player",
        distribution=PlacementDistribution(first=0.0, second=0.0, third=0.0, participation=1.0),
        seed_offsets=SeedOffsets.for_namespace(4),
    ),
}


# Quick presets for the XP formula. "example" has negative b and c, so the
# curve is clamped to 1 XP for the first few levels.
CURVE_PRESETS: Mapping[str, LevelCurveConfig] = {
    "example": LevelCurveConfig(a=65, b=-165, c=-6750, multiplier=0.82),
    "linear-growth": LevelCurveConfig(a=10, b=50, c=100, multiplier=1.0),
    "pure-quadratic": LevelCurveConfig(a=25, b=0, c=0, multiplier=1.0),
    "flat-rate": LevelCurveConfig(a=0, b=100, c=0, multiplier=1.0),
    "level-500-10k": LevelCurveConfig(a=0.035, b=2.5, c=10, multiplier=0.5),
}


def _unknown_key_error(kind: str, key: str, known: Mapping[str, object]) -> ValueError:
    matches = difflib.get_close_matches(key, list(known), n=3, cutoff=0.6)
    hint = f" Did you mean: {', '.join(repr(m) for m in matches)}?" if matches else ""
    return ValueError(f"Unknown {kind} {key!r}. Known: {sorted(known)}.{hint}")


def get_profile(key: str) -> PlayerProfile:
    try:
        return PLAYER_PROFILES[key]
    except KeyError:
        raise _unknown_key_error("player profile", key, PLAYER_PROFILES) from None


def get_curve_preset(key: str) -> LevelCurveConfig:
    try:
        return CURVE_PRESETS[key]
    except KeyError:
        raise _unknown_key_error("curve preset", key, CURVE_PRESETS) from None


def custom_profile(
    *,
    distribution: PlacementDistribution,
    seed_namespace: int,
    name: str = "Custom",
) -> PlayerProfile:
    """Build a profile from an arbitrary distribution and seed namespace."""

    return PlayerProfile(
        key="custom",
        name=name,
        description="Custom placement distribution",
        distribution=distribution,
        seed_offsets=SeedOffsets.for_namespace(seed_namespace),
    )


def default_config() -> CalculatorConfig:
    """Configuration the calculator starts with."""

    return CalculatorConfig(
        profile=PLAYER_PROFILES[DEFAULT_PROFILE_KEY],
        schedule=ScheduleConfig(),
        points=PointsConfig(),
        curve=CURVE_PRESETS[DEFAULT_CURVE_PRESET_KEY],
    )
