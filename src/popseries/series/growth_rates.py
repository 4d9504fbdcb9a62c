"""
src/popseries/series/growth_rates.py

Year-over-year growth rates of a dense population series.

The rate is `ratio * 100` for growth and `-(100 - ratio * 100)` otherwise,
so a 0.02% increase reads 100.02 while a 0.39% decrease reads -0.391.
The growth branch is not a percentage change; downstream charts and
exported tables depend on these values as they are.
"""

from __future__ import annotations

import logging
from typing import Mapping

from popseries.series.rounding import round_sig
from popseries.series.types import GenderedCount, GrowthPoint, GrowthRateSeries
from popseries.validation.checks import validate_series

logger = logging.getLogger(__name__)

SIGNIFICANT_DIGITS = 5


def growth_rate_from_ratio(ratio: float) -> float:
    scaled = round_sig(ratio, SIGNIFICANT_DIGITS) * 100
    rate = scaled if ratio > 1 else -(100 - scaled)
    return round_sig(rate, SIGNIFICANT_DIGITS)


def calculate_growth_rates(population: Mapping[int, GenderedCount]) -> GrowthRateSeries:
    """
    Growth rate of every year against the year before it.

    The earliest year has nothing to compare with and is left out. Every
    other year needs its previous year present (fill gaps first).
    """
    validate_series(population).raise_if_failed()

    years = sorted(population)
    rates: GrowthRateSeries = {}

    for year in years[1:]:
        previous = population.get(year - 1)
        if previous is None:
            raise ValueError(f"Missing population for {year - 1}; fill gaps before computing growth rates")
        if previous.total == 0:
            raise ValueError(f"Population of {year - 1} is zero; growth rate for {year} is undefined")

        current_total = population[year].total
        rates[year] = GrowthPoint(
            population=current_total,
            growth_rate=growth_rate_from_ratio(current_total / previous.total),
        )

    logger.debug("Computed growth rates for %d year(s)", len(rates))
    return rates
