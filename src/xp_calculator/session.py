"""Recomputation model for an interactive front end.

Schedule, points and profile changes recompute immediately. Coefficient edits
tend to arrive as a burst of keystrokes, so they are held back until no edit
has arrived for ``quiet_period`` seconds; meanwhile :attr:`is_calculating` is
True so the display can show a busy indicator.

There are no threads or timers here. The front end calls :meth:`poll` from its
own loop (or after its own timer fires).
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Callable, Optional

from xp_calculator.constants import DEBOUNCE_SECONDS
from xp_calculator.data import (
    CalculatorConfig,
    CalculatorResult,
    LevelCurveConfig,
    PlayerProfile,
    PointsConfig,
    ScheduleConfig,
)
from xp_calculator.main import calculate

logger = logging.getLogger(__name__)


class CalculatorSession:
    def __init__(
        self,
        config: CalculatorConfig,
        *,
        quiet_period: float = DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if quiet_period < 0:
            raise ValueError("quiet_period must be >= 0")

        self._quiet_period = quiet_period
        self._clock = clock
        self._config = config
        self._pending_curve: Optional[LevelCurveConfig] = None
        self._last_curve_edit: float = 0.0
        self._result = calculate(config)

    @property
    def config(self) -> CalculatorConfig:
        """Committed configuration (excludes a pending curve)."""

        return self._config

    @property
    def result(self) -> CalculatorResult:
        return self._result

    @property
    def pending_curve(self) -> Optional[LevelCurveConfig]:
        return self._pending_curve

    @property
    def is_calculating(self) -> bool:
        return self._pending_curve is not None

    def _commit(self, config: CalculatorConfig) -> None:
        result = calculate(config)
        self._config = config
        self._result = result

    def set_profile(self, profile: PlayerProfile) -> None:
        self._commit(dataclasses.replace(self._config, profile=profile))

    def set_schedule(self, schedule: ScheduleConfig) -> None:
        self._commit(dataclasses.replace(self._config, schedule=schedule))

    def set_points(self, points: PointsConfig) -> None:
        self._commit(dataclasses.replace(self._config, points=points))

    def set_curve(self, curve: LevelCurveConfig) -> None:
        """Queue a curve change; any previously queued curve is dropped."""

        if self._pending_curve is not None:
            logger.debug("Superseding pending curve %s", self._pending_curve)
        self._pending_curve = curve
        self._last_curve_edit = self._clock()

    def poll(self) -> bool:
        """Commit the pending curve if the quiet period has elapsed.

        Returns True if a recomputation happened.
        """

        if self._pending_curve is None:
            return False
        if self._clock() - self._last_curve_edit < self._quiet_period:
            return False

        curve = self._pending_curve
        self._pending_curve = None
        self._commit(dataclasses.replace(self._config, curve=curve))
        return True
