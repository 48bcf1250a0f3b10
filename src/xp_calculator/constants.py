"""Project-wide constants for :mod:`xp_calculator`.

Literal values and default assumptions are kept here so the simulation code
reads in terms of named quantities.
"""

from __future__ import annotations

from datetime import date

DAYS_IN_YEAR: int = 365

# Game duration (in days) per cadence. Points for every placement except
# participation are scaled by this.
DAILY_DURATION_DAYS: int = 1
WEEKLY_DURATION_DAYS: int = 7
MONTHLY_DURATION_DAYS: int = 30

# Weekly games complete on every 7th day, monthly games on every 30th day.
WEEKLY_INTERVAL_DAYS: int = 7
MONTHLY_INTERVAL_DAYS: int = 30

# Players only take part in daily games 5 days out of 7.
WEEKLY_PARTICIPATION_RATE: float = 5 / 7

# Approximate days per month used to bucket days into months.
DAYS_PER_MONTH: float = 30.44

# Seasonal attendance multipliers (0-indexed months).
SUMMER_MONTHS: tuple[int, int] = (5, 7)
SUMMER_MULTIPLIER: float = 0.8
WINTER_MULTIPLIER: float = 1.2
DEFAULT_SEASONAL_MULTIPLIER: float = 1.0

# daily variation(d) = base + sin(d * frequency) * amplitude
DAILY_VARIATION_BASE: float = 0.85
DAILY_VARIATION_AMPLITUDE: float = 0.15
DAILY_VARIATION_FREQUENCY: float = 0.1

# sin(seed) * scale, fractional part is the roll.
SEED_HASH_SCALE: float = 10_000.0

# Seed stride between successive weekly / monthly occurrences.
WEEKLY_SEED_STRIDE: int = 1_000
MONTHLY_SEED_STRIDE: int = 10_000

# Chart labels: the day-1 anchor and how often a label is emitted.
LABEL_ANCHOR_DATE: date = date(2024, 1, 1)
LABEL_STRIDE_DAYS: int = 14
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Coefficient edits are coalesced over this quiet period (seconds).
DEBOUNCE_SECONDS: float = 0.3

# Level requirements table shown alongside the chart.
LEVEL_TABLE_MAX_LEVEL: int = 500
FORMULA_SAMPLE_LEVELS: tuple[int, ...] = (1, 10, 50, 100)

# Nominal occurrences per year used by the summary statistics.
WEEKS_PER_YEAR: int = 52
MONTHS_PER_YEAR: int = 12

# A distribution is accepted if its probabilities sum to 1 within this tolerance.
DISTRIBUTION_SUM_TOLERANCE: float = 1e-6
