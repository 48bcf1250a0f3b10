"""Per-game chart markers for weekly and monthly games.

Markers re-roll every game with the same seeds as
:func:`xp_calculator.simulate.simulate_year`, but for the *nominal* schedule:
exactly ``schedule.weekly`` games every 7th day and ``schedule.monthly`` games
every 30th day. The simulator instead rolls a seasonally adjusted, rounded
count. The two can therefore disagree on how many games happened on a given
day; for any game index both roll, the placement is the same.
"""

from __future__ import annotations

from typing import List

from xp_calculator.constants import DAYS_IN_YEAR, MONTHLY_INTERVAL_DAYS, WEEKLY_INTERVAL_DAYS
from xp_calculator.data import AnnotationEvent, Cadence, PlacementDistribution, ScheduleConfig, SeedOffsets
from xp_calculator.roller import roll_placement
from xp_calculator.simulate import monthly_seed, weekly_seed


def generate_annotations(
    *,
    schedule: ScheduleConfig,
    distribution: PlacementDistribution,
    seed_offsets: SeedOffsets,
    days: int = DAYS_IN_YEAR,
) -> tuple[AnnotationEvent, ...]:
    """Weekly events (in day order) followed by monthly events."""

    events: List[AnnotationEvent] = []

    if schedule.weekly > 0:
        for occurrence, day in enumerate(range(WEEKLY_INTERVAL_DAYS, days + 1, WEEKLY_INTERVAL_DAYS), start=1):
            for game_index in range(schedule.weekly):
                seed = weekly_seed(occurrence, game_index, seed_offsets)
                events.append(
                    AnnotationEvent(
                        day=day,
                        cadence=Cadence.WEEKLY,
                        game_index=game_index,
                        placement=roll_placement(seed, distribution),
                    )
                )

    if schedule.monthly > 0:
        for occurrence, day in enumerate(range(MONTHLY_INTERVAL_DAYS, days + 1, MONTHLY_INTERVAL_DAYS), start=1):
            for game_index in range(schedule.monthly):
                seed = monthly_seed(occurrence, game_index, seed_offsets)
                events.append(
                    AnnotationEvent(
                        day=day,
                        cadence=Cadence.MONTHLY,
                        game_index=game_index,
                        placement=roll_placement(seed, distribution),
                    )
                )

    return tuple(events)
