"""Domain data model for the XP calculator.

This module is intentionally *pure*: it defines the core enums and dataclasses
used throughout the project, with no dependency on input file formats.

Simulation lives in :mod:`xp_calculator.simulate`, level arithmetic in
:mod:`xp_calculator.levels`, and JSON parsing in :mod:`xp_calculator.io`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence

from xp_calculator.constants import (
    DAILY_DURATION_DAYS,
    DISTRIBUTION_SUM_TOLERANCE,
    MONTHLY_DURATION_DAYS,
    WEEKLY_DURATION_DAYS,
)


class InvalidConfigurationError(ValueError):
    """Raised when a configuration cannot produce a finite level curve."""


def _is_finite_number(value: object) -> bool:
    """True for a real (non-bool) number that fits a finite float."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False


class Placement(str, Enum):
    """Outcome rank of a single simulated game, in band order."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    PARTICIPATION = "participation"

    @property
    def initial(self) -> str:
        return self.value[0].upper()


class Cadence(str, Enum):
    """Recurrence class of a scheduled game type."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def duration_days(self) -> int:
        return _CADENCE_DURATIONS[self]


_CADENCE_DURATIONS: Dict[Cadence, int] = {
    Cadence.DAILY: DAILY_DURATION_DAYS,
    Cadence.WEEKLY: WEEKLY_DURATION_DAYS,
    Cadence.MONTHLY: MONTHLY_DURATION_DAYS,
}


@dataclass(frozen=True, slots=True)
class PlacementDistribution:
    """Probability of each placement for a single game."""

    first: float
    second: float
    third: float
    participation: float

    def __post_init__(self) -> None:
        for placement in Placement:
            p = getattr(self, placement.value)
            if not _is_finite_number(p) or p < 0:
                raise ValueError(f"PlacementDistribution.{placement.value} must be a finite number >= 0")

        total = self.first + self.second + self.third + self.participation
        if abs(total - 1.0) > DISTRIBUTION_SUM_TOLERANCE:
            raise ValueError(f"PlacementDistribution probabilities must sum to 1.0 (got {total!r})")

    def probability(self, placement: Placement) -> float:
        return float(getattr(self, placement.value))

    def as_dict(self) -> Dict[str, float]:
        return {p.value: self.probability(p) for p in Placement}


@dataclass(frozen=True, slots=True)
class SeedOffsets:
    """Seed namespace for a profile.

    Weekly games are rolled with ``occurrence * 1000 + game_index + weekly`` and
    monthly games with ``occurrence * 10000 + game_index + monthly``.
    """

    weekly: int
    monthly: int

    @classmethod
    def for_namespace(cls, namespace: int) -> "SeedOffsets":
        return cls(weekly=int(namespace), monthly=100 * int(namespace))


@dataclass(frozen=True, slots=True)
class PlayerProfile:
    """A named placement distribution preset."""

    key: str
    name: str
    description: str
    distribution: PlacementDistribution
    seed_offsets: SeedOffsets


@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    """Games scheduled per cadence (per day, per week, per 30-day period)."""

    daily: int = 2
    weekly: int = 3
    monthly: int = 1

    def __post_init__(self) -> None:
        for cadence in Cadence:
            count = getattr(self, cadence.value)
            if not isinstance(count, int):
                raise ValueError(f"ScheduleConfig.{cadence.value} must be an integer")
            if count < 0:
                raise ValueError(f"ScheduleConfig.{cadence.value} must be >= 0")

    def count(self, cadence: Cadence) -> int:
        return int(getattr(self, cadence.value))


@dataclass(frozen=True, slots=True)
class PointsConfig:
    """Points awarded per placement per cadence-day."""

    first: float = 5
    second: float = 3
    third: float = 2
    participation: float = 1

    def __post_init__(self) -> None:
        for placement in Placement:
            if not _is_finite_number(getattr(self, placement.value)):
                raise ValueError(f"PointsConfig.{placement.value} must be a finite number")

    def per_day(self, placement: Placement) -> float:
        return getattr(self, placement.value)

    def points_for(self, placement: Placement, duration_days: int) -> float:
        """Points for one game; participation does not scale with duration."""

        if placement is Placement.PARTICIPATION:
            return self.participation
        return self.per_day(placement) * duration_days


@dataclass(frozen=True, slots=True)
class LevelCurveConfig:
    """Coefficients of ``XP(level) = floor(max(1, (a*L^2 + b*L + c) * multiplier))``."""

    a: float = 0.035
    b: float = 2.5
    c: float = 10
    multiplier: float = 0.5

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "multiplier"):
            value = getattr(self, name)
            if not _is_finite_number(value):
                raise InvalidConfigurationError(f"LevelCurveConfig.{name} must be a finite number (got {value!r})")


@dataclass(frozen=True, slots=True)
class CalculatorConfig:
    """Full configuration snapshot; every change produces a new instance."""

    profile: PlayerProfile
    schedule: ScheduleConfig
    points: PointsConfig
    curve: LevelCurveConfig


@dataclass(frozen=True, slots=True)
class DaySeries:
    """Simulated year: one entry per day, day 1 first."""

    cumulative_points: tuple[float, ...]
    levels: tuple[int, ...]
    labels: tuple[str, ...]
    daily_points: tuple[float, ...]

    def __post_init__(self) -> None:
        n = len(self.cumulative_points)
        if not (len(self.levels) == len(self.labels) == len(self.daily_points) == n):
            raise ValueError("DaySeries sequences must all have the same length")

    def __len__(self) -> int:
        return len(self.cumulative_points)

    @property
    def days(self) -> Sequence[int]:
        return tuple(range(1, len(self) + 1))

    @property
    def final_points(self) -> float:
        return self.cumulative_points[-1] if self.cumulative_points else 0

    @property
    def final_level(self) -> int:
        return self.levels[-1] if self.levels else 0

    def points_on(self, day: int) -> float:
        if day < 1 or day > len(self):
            raise KeyError(f"No data for day {day}")
        return self.cumulative_points[day - 1]

    def level_on(self, day: int) -> int:
        if day < 1 or day > len(self):
            raise KeyError(f"No data for day {day}")
        return self.levels[day - 1]


@dataclass(frozen=True, slots=True)
class AnnotationEvent:
    """One individually rolled weekly/monthly game, for chart markers only."""

    day: int
    cadence: Cadence
    game_index: int
    placement: Placement

    @property
    def key(self) -> str:
        return f"{self.cadence.value}_{self.day}_{self.game_index}"


@dataclass(frozen=True, slots=True)
class LevelProgress:
    current_level: int
    xp_in_level: float
    xp_needed_for_next: int
    progress_percent: float


@dataclass(frozen=True, slots=True)
class YearSummary:
    """Derived scalars shown next to the chart."""

    total_games_per_year: int
    total_points_per_year: float
    final_level: int
    avg_points_per_month: int
    avg_points_per_game: int
    avg_points_per_day: int
    games_per_day: int
    level_progress: LevelProgress


@dataclass(frozen=True, slots=True)
class CalculatorResult:
    config: CalculatorConfig
    series: DaySeries
    annotations: tuple[AnnotationEvent, ...]
    summary: YearSummary
