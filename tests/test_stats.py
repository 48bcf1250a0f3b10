from __future__ import annotations

import math

from xp_calculator.data import DaySeries, LevelCurveConfig, ScheduleConfig
from xp_calculator.levels import progress
from xp_calculator.stats import summarise_year, total_games_per_year


CURVE = LevelCurveConfig()


def _series_ending_at(total: float) -> DaySeries:
    return DaySeries(
        cumulative_points=(0,) * 364 + (total,),
        levels=(0,) * 364 + (7,),
        labels=("",) * 365,
        daily_points=(0,) * 364 + (total,),
    )


def test_total_games_per_year_is_nominal() -> None:
    assert total_games_per_year(ScheduleConfig(daily=2, weekly=3, monthly=1)) == 730 + 156 + 12
    assert total_games_per_year(ScheduleConfig(daily=0, weekly=0, monthly=0)) == 0


def test_summary_with_no_games_defines_average_per_game_as_zero() -> None:
    series = _series_ending_at(0)
    summary = summarise_year(series=series, schedule=ScheduleConfig(daily=0, weekly=0, monthly=0), curve=CURVE)

    assert summary.total_games_per_year == 0
    assert summary.total_points_per_year == 0
    assert summary.avg_points_per_game == 0
    assert summary.avg_points_per_month == 0
    assert summary.avg_points_per_day == 0
    assert summary.games_per_day == 0
    assert summary.level_progress.current_level == 0
    assert summary.level_progress.xp_needed_for_next == 6
    assert summary.level_progress.progress_percent == 0


def test_summary_averages_round_half_up() -> None:
    series = _series_ending_at(30)
    summary = summarise_year(series=series, schedule=ScheduleConfig(daily=0, weekly=0, monthly=1), curve=CURVE)

    assert summary.total_games_per_year == 12
    # 30 / 12 = 2.5 rounds up, not to even.
    assert summary.avg_points_per_game == 3
    assert summary.avg_points_per_month == 3
    assert summary.avg_points_per_day == 0


def test_summary_uses_last_day_of_series() -> None:
    series = _series_ending_at(1000)
    summary = summarise_year(series=series, schedule=ScheduleConfig(daily=1, weekly=0, monthly=0), curve=CURVE)

    assert summary.total_points_per_year == 1000
    assert summary.final_level == 7
    assert summary.avg_points_per_month == 83
    assert summary.avg_points_per_day == 3
    assert summary.avg_points_per_game == 3
    assert summary.games_per_day == 1
    assert summary.level_progress == progress(CURVE, 1000)
    assert math.isclose(
        summary.level_progress.progress_percent,
        summary.level_progress.xp_in_level / summary.level_progress.xp_needed_for_next * 100,
    )
