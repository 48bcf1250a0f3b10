from __future__ import annotations

import math

import pytest

from xp_calculator.data import Cadence, DaySeries, LevelCurveConfig, Placement, PointsConfig, ScheduleConfig
from xp_calculator.levels import level_from_total_xp
from xp_calculator.profiles import PLAYER_PROFILES
from xp_calculator.roller import roll_placement
from xp_calculator.simulate import (
    daily_variation,
    day_label,
    effective_monthly_games,
    effective_weekly_games,
    month_index,
    round_half_up,
    seasonal_multiplier,
    simulate_year,
    statistical_points,
    weekly_seed,
)


CURVE = LevelCurveConfig(a=0.035, b=2.5, c=10, multiplier=0.5)


def _simulate(profile_key: str, schedule: ScheduleConfig, points: PointsConfig) -> DaySeries:
    profile = PLAYER_PROFILES[profile_key]
    return simulate_year(
        schedule=schedule,
        points=points,
        distribution=profile.distribution,
        seed_offsets=profile.seed_offsets,
        curve=CURVE,
    )


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(1.49) == 1
    assert round_half_up(0.0) == 0


def test_month_index() -> None:
    assert month_index(1) == 0
    assert month_index(31) == 0
    assert month_index(32) == 1
    assert month_index(365) == 11


def test_seasonal_multiplier() -> None:
    expected = {0: 1.2, 1: 1.2, 2: 1.0, 4: 1.0, 5: 0.8, 6: 0.8, 7: 0.8, 8: 1.0, 9: 1.0, 10: 1.2, 11: 1.2}
    for month, value in expected.items():
        assert seasonal_multiplier(month) == value


def test_daily_variation_stays_in_range() -> None:
    for day in range(1, 366):
        v = daily_variation(day)
        assert 0.7 - 1e-12 <= v <= 1.0 + 1e-12
    assert math.isclose(daily_variation(1), 0.85 + math.sin(0.1) * 0.15)


def test_statistical_points_floors_podium_and_gives_remainder_to_participation() -> None:
    avg = PLAYER_PROFILES["average"].distribution
    points = PointsConfig(first=5, second=3, third=2, participation=1)

    # 10 games -> 2 first, 2 second, 3 third, 3 participation
    assert statistical_points(10, avg, points, 1) == 2 * 5 + 2 * 3 + 3 * 2 + 3 * 1
    # Duration scales everything except participation.
    assert statistical_points(10, avg, points, 7) == 2 * 35 + 2 * 21 + 3 * 14 + 3 * 1
    # 3 games -> every podium bucket floors to 0
    assert statistical_points(3, avg, points, 1) == 3
    assert statistical_points(0, avg, points, 1) == 0


def test_day_label() -> None:
    assert day_label(1) == "Jan 1"
    assert day_label(2) == ""
    assert day_label(15) == "Jan 15"
    assert day_label(43) == "Feb 12"
    assert day_label(365) == "Dec 30"


def test_simulate_year_with_nothing_scheduled() -> None:
    series = _simulate("average", ScheduleConfig(daily=0, weekly=0, monthly=0), PointsConfig())

    assert len(series) == 365
    assert series.cumulative_points == (0,) * 365
    assert series.daily_points == (0,) * 365
    # Level for 0 XP.
    assert set(series.levels) == {level_from_total_xp(CURVE, 0)}
    assert series.final_level == 0


def test_simulate_year_labels_are_sparse() -> None:
    series = _simulate("average", ScheduleConfig(daily=0, weekly=0, monthly=0), PointsConfig())

    non_empty = [i + 1 for i, label in enumerate(series.labels) if label]
    assert non_empty == list(range(1, 366, 14))
    assert series.labels[0] == "Jan 1"
    assert series.labels[14] == "Jan 15"


def test_daily_only_wins_everything_matches_direct_recomputation() -> None:
    points = PointsConfig(first=5, second=0, third=0, participation=0)
    series = _simulate("wins-everything", ScheduleConfig(daily=1, weekly=0, monthly=0), points)

    expected = 0
    for day in range(1, 366):
        month = math.floor((day - 1) / 30.44)
        if 5 <= month <= 7:
            seasonal = 0.8
        elif month >= 10 or month <= 1:
            seasonal = 1.2
        else:
            seasonal = 1.0
        variation = 0.85 + math.sin(day * 0.1) * 0.15
        games = math.floor(1 * (5 / 7) * seasonal * variation + 0.5)
        expected += games * 5

    assert series.final_points == expected
    assert series.cumulative_points[-1] == expected
    assert all(a <= b for a, b in zip(series.cumulative_points, series.cumulative_points[1:]))


def test_weekly_game_only_lands_on_every_seventh_day() -> None:
    points = PointsConfig(first=5, second=3, third=2, participation=1)
    series = _simulate("wins-everything", ScheduleConfig(daily=0, weekly=1, monthly=0), points)

    for day in range(1, 366):
        gained = series.daily_points[day - 1]
        if day % 7 == 0:
            # One game, first place, scaled by the 7-day duration.
            assert gained == 5 * 7
        else:
            assert gained == 0

    assert series.final_points == 52 * 35


def test_monthly_participation_is_not_scaled_by_duration() -> None:
    points = PointsConfig(first=5, second=3, third=2, participation=4)
    series = _simulate("looser", ScheduleConfig(daily=0, weekly=0, monthly=1), points)

    for day in range(1, 366):
        expected = 4 if day % 30 == 0 else 0
        assert series.daily_points[day - 1] == expected
    assert series.final_points == 12 * 4


def test_monthly_effective_count_ignores_daily_variation() -> None:
    points = PointsConfig(first=5, second=3, third=2, participation=1)
    series = _simulate("wins-everything", ScheduleConfig(daily=0, weekly=0, monthly=2), points)

    for day in range(30, 366, 30):
        # round(2 * {0.8, 1.0, 1.2}) is always 2
        assert effective_monthly_games(2, day) == 2
        assert series.daily_points[day - 1] == 2 * 5 * 30
    assert series.final_points == 12 * 300


def test_weekly_rolls_use_profile_seed_offsets() -> None:
    profile = PLAYER_PROFILES["average"]
    points = PointsConfig(first=5, second=3, third=2, participation=1)
    series = _simulate("average", ScheduleConfig(daily=0, weekly=1, monthly=0), points)

    for day in range(7, 366, 7):
        # A single weekly game always rounds to 1 effective game (0.56 <= factor <= 1.2).
        assert effective_weekly_games(1, day) == 1
        seed = (day // 7) * 1000 + 0 + profile.seed_offsets.weekly
        assert seed == weekly_seed(day // 7, 0, profile.seed_offsets)
        placement = roll_placement(seed, profile.distribution)
        assert series.daily_points[day - 1] == points.points_for(placement, Cadence.WEEKLY.duration_days)


def test_weekly_rolls_differ_between_profiles_with_same_distribution_shape() -> None:
    # Same seed stream shifted by the namespace: the rolled placements are not
    # simply a copy of another profile's rolls.
    avg = PLAYER_PROFILES["average"]
    seeds_avg = [weekly_seed(w, 0, avg.seed_offsets) for w in range(1, 53)]
    seeds_exc = [weekly_seed(w, 0, PLAYER_PROFILES["exceptional"].seed_offsets) for w in range(1, 53)]
    assert seeds_avg != seeds_exc
    assert all(a - b == 1 for a, b in zip(seeds_avg, seeds_exc))


def test_levels_follow_cumulative_points() -> None:
    series = _simulate("average", ScheduleConfig(daily=2, weekly=3, monthly=1), PointsConfig())

    for total, level in zip(series.cumulative_points, series.levels):
        assert level == level_from_total_xp(CURVE, total)
    assert series.final_level == series.levels[-1]
    assert series.final_level > 0


def test_simulate_year_is_deterministic() -> None:
    schedule = ScheduleConfig(daily=4, weekly=5, monthly=2)
    a = _simulate("exceptional", schedule, PointsConfig())
    b = _simulate("exceptional", schedule, PointsConfig())
    assert a == b


def test_cumulative_points_are_running_total_of_daily_points() -> None:
    series = _simulate("average", ScheduleConfig(daily=3, weekly=2, monthly=1), PointsConfig())

    running = 0
    for gained, total in zip(series.daily_points, series.cumulative_points):
        running += gained
        assert total == running


def test_simulate_year_rejects_empty_horizon() -> None:
    profile = PLAYER_PROFILES["average"]
    with pytest.raises(ValueError):
        simulate_year(
            schedule=ScheduleConfig(),
            points=PointsConfig(),
            distribution=profile.distribution,
            seed_offsets=profile.seed_offsets,
            curve=CURVE,
            days=0,
        )


def test_points_for_scales_all_but_participation() -> None:
    points = PointsConfig(first=5, second=3, third=2, participation=1)
    assert points.points_for(Placement.FIRST, 30) == 150
    assert points.points_for(Placement.SECOND, 7) == 21
    assert points.points_for(Placement.THIRD, 1) == 2
    assert points.points_for(Placement.PARTICIPATION, 30) == 1
