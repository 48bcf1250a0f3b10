"""Yearly summary statistics derived from a simulated :class:`DaySeries`."""

from __future__ import annotations

from xp_calculator.constants import DAYS_IN_YEAR, MONTHS_PER_YEAR, WEEKS_PER_YEAR
from xp_calculator.data import DaySeries, LevelCurveConfig, ScheduleConfig, YearSummary
from xp_calculator.levels import progress
from xp_calculator.simulate import round_half_up


def total_games_per_year(schedule: ScheduleConfig) -> int:
    """Nominal game count: 365 days, 52 weeks, 12 months."""

    return schedule.daily * DAYS_IN_YEAR + schedule.weekly * WEEKS_PER_YEAR + schedule.monthly * MONTHS_PER_YEAR


def summarise_year(
    *,
    series: DaySeries,
    schedule: ScheduleConfig,
    curve: LevelCurveConfig,
) -> YearSummary:
    """Build the summary shown next to the chart.

    Notes
    -----
    ``avg_points_per_game`` is 0 when no games are scheduled.
    """

    total_games = total_games_per_year(schedule)
    total_points = series.final_points

    avg_per_game = round_half_up(total_points / total_games) if total_games > 0 else 0

    return YearSummary(
        total_games_per_year=total_games,
        total_points_per_year=total_points,
        final_level=series.final_level,
        avg_points_per_month=round_half_up(total_points / MONTHS_PER_YEAR),
        avg_points_per_game=avg_per_game,
        avg_points_per_day=round_half_up(total_points / DAYS_IN_YEAR),
        games_per_day=round_half_up(total_games / DAYS_IN_YEAR),
        level_progress=progress(curve, total_points),
    )
