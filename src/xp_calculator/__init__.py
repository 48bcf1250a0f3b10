"""Yearly XP and level progression calculator.

Simulates one year of game completions (daily, weekly, monthly) for a player
profile, accrues placement points day by day, and converts the running total
into levels using a quadratic level curve. The output is a day series plus
per-game chart markers and summary statistics for an external chart renderer.
"""

from .data import (
    AnnotationEvent,
    CalculatorConfig,
    CalculatorResult,
    Cadence,
    DaySeries,
    InvalidConfigurationError,
    LevelCurveConfig,
    LevelProgress,
    Placement,
    PlacementDistribution,
    PlayerProfile,
    PointsConfig,
    ScheduleConfig,
    SeedOffsets,
    YearSummary,
)
from .annotations import generate_annotations
from .levels import level_from_total_xp, progress, total_xp_to_reach_level, xp_for_level
from .main import calculate, run_calculator
from .profiles import CURVE_PRESETS, PLAYER_PROFILES, default_config
from .roller import roll_placement
from .session import CalculatorSession
from .simulate import simulate_year
from .stats import summarise_year

__all__ = [
    "AnnotationEvent",
    "CalculatorConfig",
    "CalculatorResult",
    "CalculatorSession",
    "Cadence",
    "CURVE_PRESETS",
    "DaySeries",
    "InvalidConfigurationError",
    "LevelCurveConfig",
    "LevelProgress",
    "PLAYER_PROFILES",
    "Placement",
    "PlacementDistribution",
    "PlayerProfile",
    "PointsConfig",
    "ScheduleConfig",
    "SeedOffsets",
    "YearSummary",
    "calculate",
    "default_config",
    "generate_annotations",
    "level_from_total_xp",
    "progress",
    "roll_placement",
    "run_calculator",
    "simulate_year",
    "summarise_year",
    "total_xp_to_reach_level",
    "xp_for_level",
]
