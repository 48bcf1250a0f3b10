"""Seeded placement roller.

The roll is ``frac(sin(seed) * 10000)``: cheap and reproducible, not random in
any statistical sense. Every weekly/monthly game outcome in the simulator and
the chart markers goes through :func:`roll_placement`, so both always agree
for the same seed.
"""

from __future__ import annotations

import math

from xp_calculator.constants import SEED_HASH_SCALE
from xp_calculator.data import Placement, PlacementDistribution


def seeded_fraction(seed: int) -> float:
    """Return a value in [0, 1) derived from ``seed``."""

    x = math.sin(seed) * SEED_HASH_SCALE
    return x - math.floor(x)


def classify_roll(roll: float, distribution: PlacementDistribution) -> Placement:
    """Map a roll in [0, 1) onto contiguous bands first, second, third, participation.

    Participation absorbs whatever is left, including rounding error. A band of
    width 0 is never selected.
    """

    upper = distribution.first
    if roll < upper:
        return Placement.FIRST
    upper += distribution.second
    if roll < upper:
        return Placement.SECOND
    upper += distribution.third
    if roll < upper:
        return Placement.THIRD
    return Placement.PARTICIPATION


def roll_placement(seed: int, distribution: PlacementDistribution) -> Placement:
    return classify_roll(seeded_fraction(seed), distribution)
