"""Level curve arithmetic.

The curve gives the XP needed to *complete* a level:

    xp_for_level(L) = floor(max(1, (a*L^2 + b*L + c) * multiplier))

Everything else (cumulative totals, level lookup, progress) is defined purely
in terms of :func:`xp_for_level`.

Monotonicity
------------
Nothing forces the curve to increase with level. Negative ``b``/``c`` (the
``example`` preset) or a negative ``a`` can make requirements shrink between
levels. That is left alone: level lookup is a greedy forward scan that
consumes each level's requirement in turn, which is well-defined for any
curve because every requirement is at least 1 XP.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from xp_calculator.constants import FORMULA_SAMPLE_LEVELS, LEVEL_TABLE_MAX_LEVEL
from xp_calculator.data import InvalidConfigurationError, LevelCurveConfig, LevelProgress

LevelTableRow = tuple[int, int, Optional[int]]


def xp_for_level(curve: LevelCurveConfig, level: int) -> int:
    """XP required to complete ``level`` (always >= 1)."""

    value = (curve.a * level**2 + curve.b * level + curve.c) * curve.multiplier
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"XP requirement for level {level} is not finite ({value!r})")
    return max(1, math.floor(value))


def total_xp_to_reach_level(curve: LevelCurveConfig, target_level: int) -> int:
    """Sum of requirements for levels 1..target_level (0 for target_level <= 0)."""

    total = 0
    for level in range(1, target_level + 1):
        total += xp_for_level(curve, level)
    return total


def _check_total_xp(total_xp: float) -> None:
    if not math.isfinite(total_xp):
        raise InvalidConfigurationError(f"Total XP must be finite (got {total_xp!r})")


def level_from_total_xp(curve: LevelCurveConfig, total_xp: float) -> int:
    """Number of levels completed with ``total_xp``.

    Levels are consumed in order while the next requirement still fits. Returns
    0 if even level 1 does not fit.
    """

    _check_total_xp(total_xp)

    level = 1
    xp_used = 0
    while xp_used + xp_for_level(curve, level) <= total_xp:
        xp_used += xp_for_level(curve, level)
        level += 1

    return level - 1


def progress(curve: LevelCurveConfig, total_xp: float) -> LevelProgress:
    """Current level and how far through the next level ``total_xp`` is.

    ``progress_percent`` is not clamped.
    """

    current_level = level_from_total_xp(curve, total_xp)
    xp_in_level = total_xp - total_xp_to_reach_level(curve, current_level)
    xp_needed_for_next = xp_for_level(curve, current_level + 1)

    return LevelProgress(
        current_level=current_level,
        xp_in_level=xp_in_level,
        xp_needed_for_next=xp_needed_for_next,
        progress_percent=(xp_in_level / xp_needed_for_next) * 100,
    )


class LevelScanner:
    """The greedy scan of :func:`level_from_total_xp`, resumable across calls.

    The simulator asks for the level of a running total once per day. Totals
    usually only grow, so the scan picks up where the previous call stopped
    instead of restarting from level 1. A smaller total restarts the scan.
    Results are identical to :func:`level_from_total_xp`.
    """

    def __init__(self, curve: LevelCurveConfig) -> None:
        self._curve = curve
        self._requirements: List[int] = []
        self._completed = 0
        self._xp_used = 0

    def _requirement(self, level: int) -> int:
        while len(self._requirements) < level:
            self._requirements.append(xp_for_level(self._curve, len(self._requirements) + 1))
        return self._requirements[level - 1]

    def level_for(self, total_xp: float) -> int:
        _check_total_xp(total_xp)

        if total_xp < self._xp_used:
            self._completed = 0
            self._xp_used = 0

        while self._xp_used + self._requirement(self._completed + 1) <= total_xp:
            self._xp_used += self._requirement(self._completed + 1)
            self._completed += 1

        return self._completed


def level_table(curve: LevelCurveConfig, *, max_level: int = LEVEL_TABLE_MAX_LEVEL) -> List[LevelTableRow]:
    """Rows of (level, xp_required, xp_to_next) for levels 1..max_level.

    ``xp_to_next`` is the requirement of the following level, or None on the
    last row.
    """

    if max_level < 1:
        raise ValueError("max_level must be >= 1")

    rows: List[LevelTableRow] = []
    for level in range(1, max_level + 1):
        xp_to_next = xp_for_level(curve, level + 1) if level < max_level else None
        rows.append((level, xp_for_level(curve, level), xp_to_next))
    return rows


def formula_samples(
    curve: LevelCurveConfig,
    levels: Sequence[int] = FORMULA_SAMPLE_LEVELS,
) -> List[tuple[int, int]]:
    return [(level, xp_for_level(curve, level)) for level in levels]


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_formula(curve: LevelCurveConfig) -> str:
    """Human-readable form, e.g. ``(0.035x² + 2.5x + 10) × 0.5``."""

    return (
        f"({_format_number(curve.a)}x² + {_format_number(curve.b)}x + {_format_number(curve.c)})"
        f" × {_format_number(curve.multiplier)}"
    )
