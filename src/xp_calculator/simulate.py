"""Day-by-day simulation of one year of point accrual.

Daily games are frequent, so their points come from splitting the day's
effective game count across the placement distribution. Weekly and monthly
games are rolled one by one with :func:`xp_calculator.roller.roll_placement`,
using the seeds from :func:`weekly_seed` / :func:`monthly_seed` so that chart
markers (:mod:`xp_calculator.annotations`) can reproduce the same rolls.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import List

from xp_calculator.constants import (
    DAILY_VARIATION_AMPLITUDE,
    DAILY_VARIATION_BASE,
    DAILY_VARIATION_FREQUENCY,
    DAYS_IN_YEAR,
    DAYS_PER_MONTH,
    DEFAULT_SEASONAL_MULTIPLIER,
    LABEL_ANCHOR_DATE,
    LABEL_STRIDE_DAYS,
    MONTH_ABBREVIATIONS,
    MONTHLY_INTERVAL_DAYS,
    MONTHLY_SEED_STRIDE,
    SUMMER_MONTHS,
    SUMMER_MULTIPLIER,
    WEEKLY_INTERVAL_DAYS,
    WEEKLY_PARTICIPATION_RATE,
    WEEKLY_SEED_STRIDE,
    WINTER_MULTIPLIER,
)
from xp_calculator.data import (
    Cadence,
    DaySeries,
    LevelCurveConfig,
    Placement,
    PlacementDistribution,
    PointsConfig,
    ScheduleConfig,
    SeedOffsets,
)
from xp_calculator.levels import LevelScanner
from xp_calculator.roller import roll_placement

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round halves towards +infinity (not Python's round-half-to-even)."""

    return math.floor(value + 0.5)


def month_index(day: int) -> int:
    """0-indexed approximate month for a 1-indexed day."""

    return math.floor((day - 1) / DAYS_PER_MONTH)


def seasonal_multiplier(month: int) -> float:
    low, high = SUMMER_MONTHS
    if low <= month <= high:
        return SUMMER_MULTIPLIER
    if month >= 10 or month <= 1:
        return WINTER_MULTIPLIER
    return DEFAULT_SEASONAL_MULTIPLIER


def daily_variation(day: int) -> float:
    """Smooth per-day wobble in [0.70, 1.00]."""

    return DAILY_VARIATION_BASE + math.sin(day * DAILY_VARIATION_FREQUENCY) * DAILY_VARIATION_AMPLITUDE


def effective_daily_games(daily_games: int, day: int) -> int:
    seasonal = seasonal_multiplier(month_index(day))
    return round_half_up(daily_games * WEEKLY_PARTICIPATION_RATE * seasonal * daily_variation(day))


def effective_weekly_games(weekly_games: int, day: int) -> int:
    seasonal = seasonal_multiplier(month_index(day))
    return round_half_up(weekly_games * seasonal * daily_variation(day))


def effective_monthly_games(monthly_games: int, day: int) -> int:
    # No daily variation for monthly games.
    return round_half_up(monthly_games * seasonal_multiplier(month_index(day)))


def is_weekly_completion_day(day: int) -> bool:
    return day % WEEKLY_INTERVAL_DAYS == 0


def is_monthly_completion_day(day: int) -> bool:
    return day % MONTHLY_INTERVAL_DAYS == 0


def weekly_seed(occurrence: int, game_index: int, seed_offsets: SeedOffsets) -> int:
    """Seed for game ``game_index`` of the ``occurrence``-th week (1-indexed)."""

    return occurrence * WEEKLY_SEED_STRIDE + game_index + seed_offsets.weekly


def monthly_seed(occurrence: int, game_index: int, seed_offsets: SeedOffsets) -> int:
    """Seed for game ``game_index`` of the ``occurrence``-th 30-day period (1-indexed)."""

    return occurrence * MONTHLY_SEED_STRIDE + game_index + seed_offsets.monthly


def statistical_points(
    game_count: int,
    distribution: PlacementDistribution,
    points: PointsConfig,
    duration_days: int,
) -> float:
    """Points for ``game_count`` games split by expected placement.

    First/second/third counts are floored; participation takes the remainder.
    """

    firsts = math.floor(game_count * distribution.first)
    seconds = math.floor(game_count * distribution.second)
    thirds = math.floor(game_count * distribution.third)
    participations = game_count - firsts - seconds - thirds

    return (
        firsts * points.points_for(Placement.FIRST, duration_days)
        + seconds * points.points_for(Placement.SECOND, duration_days)
        + thirds * points.points_for(Placement.THIRD, duration_days)
        + participations * points.points_for(Placement.PARTICIPATION, duration_days)
    )


def day_label(day: int) -> str:
    """Chart label for ``day``: a short date every two weeks, else empty."""

    if day % LABEL_STRIDE_DAYS != 1:
        return ""
    d = LABEL_ANCHOR_DATE + timedelta(days=day - 1)
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def _points_for_day(
    day: int,
    *,
    schedule: ScheduleConfig,
    points: PointsConfig,
    distribution: PlacementDistribution,
    seed_offsets: SeedOffsets,
) -> float:
    total: float = 0

    if schedule.daily > 0:
        count = effective_daily_games(schedule.daily, day)
        total += statistical_points(count, distribution, points, Cadence.DAILY.duration_days)

    if schedule.weekly > 0 and is_weekly_completion_day(day):
        occurrence = day // WEEKLY_INTERVAL_DAYS
        for game_index in range(effective_weekly_games(schedule.weekly, day)):
            placement = roll_placement(weekly_seed(occurrence, game_index, seed_offsets), distribution)
            total += points.points_for(placement, Cadence.WEEKLY.duration_days)

    if schedule.monthly > 0 and is_monthly_completion_day(day):
        occurrence = day // MONTHLY_INTERVAL_DAYS
        for game_index in range(effective_monthly_games(schedule.monthly, day)):
            placement = roll_placement(monthly_seed(occurrence, game_index, seed_offsets), distribution)
            total += points.points_for(placement, Cadence.MONTHLY.duration_days)

    return total


def simulate_year(
    *,
    schedule: ScheduleConfig,
    points: PointsConfig,
    distribution: PlacementDistribution,
    seed_offsets: SeedOffsets,
    curve: LevelCurveConfig,
    days: int = DAYS_IN_YEAR,
) -> DaySeries:
    """Simulate cumulative points and level for days 1..days.

    Parameters
    ----------
    schedule:
        Games per cadence.
    points:
        Points per placement per cadence-day.
    distribution:
        Placement probabilities used both for the daily split and for rolls.
    seed_offsets:
        Seed namespace of the active profile.
    curve:
        Level curve used to convert the running total into a level.

    Returns
    -------
    DaySeries
        Fresh series; the running total never resets.
    """

    if days < 1:
        raise ValueError("days must be >= 1")

    scanner = LevelScanner(curve)

    cumulative: float = 0
    daily_points: List[float] = []
    cumulative_points: List[float] = []
    levels: List[int] = []
    labels: List[str] = []

    for day in range(1, days + 1):
        gained = _points_for_day(
            day,
            schedule=schedule,
            points=points,
            distribution=distribution,
            seed_offsets=seed_offsets,
        )
        cumulative += gained

        daily_points.append(gained)
        cumulative_points.append(cumulative)
        levels.append(scanner.level_for(cumulative))
        labels.append(day_label(day))

    logger.debug(
        "Simulated %d days: total_points=%s final_level=%d",
        days,
        cumulative,
        levels[-1],
    )

    return DaySeries(
        cumulative_points=tuple(cumulative_points),
        levels=tuple(levels),
        labels=tuple(labels),
        daily_points=tuple(daily_points),
    )
