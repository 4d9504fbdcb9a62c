"""src/popseries/series/types.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping

Gender = Literal["female", "male"]
GENDERS: tuple[Gender, ...] = ("female", "male")


@dataclass(frozen=True)
class GenderedCount:
    """Population of one year split by gender."""
    female: int
    male: int

    @property
    def total(self) -> int:
        return self.female + self.male

    def get(self, gender: str) -> int:
        if gender not in GENDERS:
            raise ValueError(f"Unknown gender: {gender!r} (expected one of {GENDERS})")
        return int(getattr(self, gender))

    def as_dict(self) -> Dict[str, int]:
        return {"female": self.female, "male": self.male}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenderedCount":
        return cls(female=data["female"], male=data["male"])


@dataclass(frozen=True)
class GrowthPoint:
    """Total population of a year and its growth rate against the previous year."""
    population: int
    growth_rate: float


PopulationSeries = Dict[int, GenderedCount]
GrowthRateSeries = Dict[int, GrowthPoint]
