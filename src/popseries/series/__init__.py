"""src/popseries/series/__init__.py"""

from .aggregation import (
    get_population_by_year,
    get_total_population_by_year,
    rate_to_percent,
    sort_by_keys,
    total_population_by_year,
)
from .extrapolation import extrapolate_future_population
from .gap_filler import fill_with_approximations, get_approximation
from .growth_rates import calculate_growth_rates, growth_rate_from_ratio
from .rounding import round_half_up, round_sig
from .types import GENDERS, Gender, GenderedCount, GrowthPoint, GrowthRateSeries, PopulationSeries

__all__ = [
    "GENDERS",
    "Gender",
    "GenderedCount",
    "GrowthPoint",
    "GrowthRateSeries",
    "PopulationSeries",
    "fill_with_approximations",
    "get_approximation",
    "calculate_growth_rates",
    "growth_rate_from_ratio",
    "extrapolate_future_population",
    "total_population_by_year",
    "get_population_by_year",
    "get_total_population_by_year",
    "sort_by_keys",
    "rate_to_percent",
    "round_half_up",
    "round_sig",
]
