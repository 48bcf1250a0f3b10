"""Logging setup and the top-level calculator entrypoint."""

from __future__ import annotations

import logging

from xp_calculator.annotations import generate_annotations
from xp_calculator.data import CalculatorConfig, CalculatorResult
from xp_calculator.simulate import simulate_year
from xp_calculator.stats import summarise_year


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger that writes to stderr.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    else:
        root.setLevel(level)


logger = logging.getLogger(__name__)


def calculate(config: CalculatorConfig) -> CalculatorResult:
    """Recompute everything for ``config`` from scratch."""

    profile = config.profile

    series = simulate_year(
        schedule=config.schedule,
        points=config.points,
        distribution=profile.distribution,
        seed_offsets=profile.seed_offsets,
        curve=config.curve,
    )
    annotations = generate_annotations(
        schedule=config.schedule,
        distribution=profile.distribution,
        seed_offsets=profile.seed_offsets,
    )
    summary = summarise_year(series=series, schedule=config.schedule, curve=config.curve)

    return CalculatorResult(config=config, series=series, annotations=annotations, summary=summary)


def run_calculator(config: CalculatorConfig, *, log_level: int | None = logging.INFO) -> CalculatorResult:
    """Top-level entrypoint: log the configuration, simulate, and summarise."""

    if log_level is not None:
        configure_logging(level=log_level)

    schedule = config.schedule
    points = config.points
    curve = config.curve

    logger.info("Profile: %s (%s)", config.profile.name, config.profile.key)
    logger.info("Schedule: daily=%d weekly=%d monthly=%d", schedule.daily, schedule.weekly, schedule.monthly)
    logger.info(
        "Points per day: first=%s second=%s third=%s participation=%s",
        points.first,
        points.second,
        points.third,
        points.participation,
    )
    logger.info("Level curve: a=%s b=%s c=%s multiplier=%s", curve.a, curve.b, curve.c, curve.multiplier)

    result = calculate(config)

    logger.info(
        "Simulation complete: total_points=%s final_level=%d markers=%d",
        result.summary.total_points_per_year,
        result.summary.final_level,
        len(result.annotations),
    )
    return result
