from __future__ import annotations

import pytest

from xp_calculator.data import LevelCurveConfig, PointsConfig, ScheduleConfig
from xp_calculator.profiles import CURVE_PRESETS, PLAYER_PROFILES, default_config
from xp_calculator.session import CalculatorSession


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _session(clock: FakeClock) -> CalculatorSession:
    return CalculatorSession(default_config(), quiet_period=0.5, clock=clock)


def test_initial_result_is_computed() -> None:
    session = _session(FakeClock())
    assert session.result.config == default_config()
    assert not session.is_calculating
    assert session.poll() is False


def test_profile_schedule_and_points_apply_immediately() -> None:
    session = _session(FakeClock())

    session.set_profile(PLAYER_PROFILES["looser"])
    assert session.result.config.profile.key == "looser"

    session.set_schedule(ScheduleConfig(daily=0, weekly=0, monthly=0))
    assert session.result.summary.total_points_per_year == 0

    session.set_points(PointsConfig(first=10))
    assert session.config.points.first == 10
    assert session.result.config is session.config
    assert not session.is_calculating


def test_curve_edit_waits_for_quiet_period() -> None:
    clock = FakeClock()
    session = _session(clock)
    before = session.result
    flat = CURVE_PRESETS["flat-rate"]

    session.set_curve(flat)
    assert session.is_calculating
    assert session.pending_curve == flat

    clock.now += 0.25
    assert session.poll() is False
    assert session.result is before

    clock.now += 0.25
    assert session.poll() is True
    assert not session.is_calculating
    assert session.config.curve == flat
    assert session.result.config.curve == flat


def test_new_curve_edit_supersedes_and_restarts_the_wait() -> None:
    clock = FakeClock()
    session = _session(clock)

    session.set_curve(CURVE_PRESETS["flat-rate"])
    clock.now += 0.25
    session.set_curve(CURVE_PRESETS["pure-quadratic"])

    clock.now += 0.25
    assert session.poll() is False

    clock.now += 0.25
    assert session.poll() is True
    assert session.config.curve == CURVE_PRESETS["pure-quadratic"]
    # Only one recomputation; nothing left to do.
    assert session.poll() is False


def test_other_edits_keep_pending_curve() -> None:
    clock = FakeClock()
    session = _session(clock)

    session.set_curve(LevelCurveConfig(a=0, b=1, c=0, multiplier=1))
    session.set_schedule(ScheduleConfig(daily=1, weekly=0, monthly=0))

    assert session.is_calculating
    assert session.config.curve == default_config().curve

    clock.now += 1
    assert session.poll() is True
    assert session.config.schedule == ScheduleConfig(daily=1, weekly=0, monthly=0)
    assert session.config.curve == LevelCurveConfig(a=0, b=1, c=0, multiplier=1)


def test_negative_quiet_period_rejected() -> None:
    with pytest.raises(ValueError):
        CalculatorSession(default_config(), quiet_period=-1)
