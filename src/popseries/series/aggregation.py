"""
src/popseries/series/aggregation.py

Totals, point lookups and ordering helpers for population series.
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, Mapping, TypeVar

from popseries.series.rounding import round_sig
from popseries.series.types import GenderedCount

K = TypeVar("K")
V = TypeVar("V")


def _sort_key(key: Any) -> tuple[int, Any]:
    # numbers first in numeric order, then everything else by its string form
    if isinstance(key, numbers.Real) and not isinstance(key, bool):
        return (0, key)
    return (1, str(key))


def sort_by_keys(mapping: Mapping[K, V]) -> Dict[K, V]:
    """Return a new dict with the same items, iterated in ascending key order."""
    return {k: mapping[k] for k in sorted(mapping, key=_sort_key)}


def total_population_by_year(population: Mapping[int, GenderedCount]) -> Dict[int, int]:
    return {int(year): counts.total for year, counts in population.items()}


def get_population_by_year(population: Mapping[int, GenderedCount], year: int, gender: str) -> int:
    return population[year].get(gender)


def get_total_population_by_year(population: Mapping[int, GenderedCount], year: int) -> int:
    return population[year].total


def rate_to_percent(rate: float) -> float:
    """Yearly change in percent implied by a growth multiplier (0.99876 -> -0.124)."""
    return round_sig(float(rate) * 100 - 100, 3)
