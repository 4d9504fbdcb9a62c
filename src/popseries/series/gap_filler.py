"""
src/popseries/series/gap_filler.py

Linear interpolation of missing years in a sparse population series.

Only years strictly between the first and last recorded year are filled,
and every approximation is computed from recorded years, never from
another approximation.
"""

from __future__ import annotations

import bisect
import logging
from typing import Mapping, Optional, Sequence

from popseries.series.rounding import round_half_up
from popseries.series.types import GenderedCount, PopulationSeries
from popseries.validation.checks import validate_series

logger = logging.getLogger(__name__)


def _interpolate(prev: int, nxt: int, year: int, previous_year: int, next_year: int) -> int:
    return round_half_up(prev + (nxt - prev) * ((year - previous_year) / (next_year - previous_year)))


def _approximate(
    recorded: Mapping[int, GenderedCount],
    known_years: Sequence[int],
    year: int,
) -> Optional[GenderedCount]:
    if year in recorded:
        return None

    # nearest recorded year strictly below / above
    i = bisect.bisect_left(known_years, year)
    if i == 0 or i == len(known_years):
        return None
    previous_year, next_year = known_years[i - 1], known_years[i]

    prev_data = recorded[previous_year]
    next_data = recorded[next_year]
    return GenderedCount(
        female=_interpolate(prev_data.female, next_data.female, year, previous_year, next_year),
        male=_interpolate(prev_data.male, next_data.male, year, previous_year, next_year),
    )


def get_approximation(recorded: Mapping[int, GenderedCount], year: int) -> Optional[GenderedCount]:
    """
    Approximate one missing year from the nearest recorded years around it.

    Returns None when `year` is already recorded or when it has no recorded
    year on one of its sides.
    """
    return _approximate(recorded, sorted(recorded), int(year))


def fill_with_approximations(recorded: Mapping[int, GenderedCount]) -> PopulationSeries:
    """
    Fill every missing year between the first and last recorded year.

    With fewer than two recorded years nothing can be interpolated: the
    problem is logged and an unchanged copy of the input is returned.
    """
    validate_series(recorded).raise_if_failed()

    if len(recorded) < 2:
        logger.error("Not enough data to fill with approximations (got %d year(s))", len(recorded))
        return dict(recorded)

    known_years = sorted(recorded)
    approximations: PopulationSeries = {}

    for year in range(known_years[0], known_years[-1] + 1):
        approx = _approximate(recorded, known_years, year)
        if approx is not None:
            approximations[year] = approx

    if approximations:
        logger.debug("Filled %d missing year(s) between %d and %d", len(approximations), known_years[0], known_years[-1])

    return {**recorded, **approximations}
