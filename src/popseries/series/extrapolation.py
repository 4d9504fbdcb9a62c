"""src/popseries/series/extrapolation.py"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Mapping

from popseries.series.rounding import round_half_up
from popseries.series.types import GenderedCount, PopulationSeries
from popseries.validation.checks import validate_series

logger = logging.getLogger(__name__)


def extrapolate_future_population(
    past_population: Mapping[int, GenderedCount],
    future_years: int,
    rate: float,
) -> PopulationSeries:
    """
    Project `future_years` years past the last known year with a constant
    yearly multiplier (1.01 = +1%/yr, 0.99 = -1%/yr).

    Each projected year compounds on the year right before it, rounding
    every step to whole people. The input years are kept as they are.
    """
    if isinstance(future_years, bool) or not isinstance(future_years, numbers.Integral):
        raise ValueError(f"future_years must be an integer, got {future_years!r}")
    if future_years < 0:
        raise ValueError(f"future_years must be >= 0, got {future_years}")
    rate = float(rate)
    if not math.isfinite(rate) or rate < 0:
        raise ValueError(f"rate must be a finite, non-negative multiplier, got {rate!r}")

    validate_series(past_population).raise_if_failed()

    future_population: PopulationSeries = dict(past_population)
    if future_years == 0:
        return future_population
    if not past_population:
        raise ValueError("Cannot extrapolate from an empty population series")

    last_recorded_year = max(past_population)
    for i in range(1, int(future_years) + 1):
        year = last_recorded_year + i
        previous = future_population[year - 1]
        future_population[year] = GenderedCount(
            female=round_half_up(previous.female * rate),
            male=round_half_up(previous.male * rate),
        )

    logger.debug("Extrapolated %d year(s) after %d at rate=%s", future_years, last_recorded_year, rate)
    return future_population
