"""
src/popseries/seed.py

Recorded (seed) population tables and the comparator reference lines
drawn on the growth-rate chart.

A SeedDataset is built once and only read afterwards: its records live
behind a read-only mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from popseries.series.types import GenderedCount
from popseries.validation.checks import validate_series


@dataclass(frozen=True)
class SeedDataset:
    country: str
    source: str
    records: Mapping[int, GenderedCount]
    source_url: str | None = None

    def __post_init__(self) -> None:
        validate_series(self.records).raise_if_failed()
        if not self.records:
            raise ValueError(f"Seed dataset for {self.country!r} has no records")
        frozen = MappingProxyType({int(y): self.records[y] for y in sorted(self.records)})
        object.__setattr__(self, "records", frozen)

    @property
    def first_year(self) -> int:
        return min(self.records)

    @property
    def last_year(self) -> int:
        return max(self.records)

    def last_point(self) -> dict[int, GenderedCount]:
        """The most recent recorded year only (start point of projections)."""
        return {self.last_year: self.records[self.last_year]}

    @classmethod
    def from_counts(
        cls,
        country: str,
        source: str,
        counts: Mapping[int, tuple[int, int]],
        *,
        source_url: str | None = None,
    ) -> "SeedDataset":
        """Build from `{year: (female, male)}`."""
        records = {int(y): GenderedCount(female=f, male=m) for y, (f, m) in counts.items()}
        return cls(country=country, source=source, records=records, source_url=source_url)


@dataclass(frozen=True)
class ReferenceLine:
    """Fixed horizontal line on the growth-rate chart."""
    label: str
    value: float
    color: str = field(default="gray")


HUNGARY_KSH = SeedDataset.from_counts(
    "Hungary",
    "KSH",
    {
        1980: (5520754, 5188709),
        1990: (5389919, 4984904),
        2001: (5349286, 4851012),
        2012: (5207259, 4724666),
        2013: (5182225, 4713025),
        2014: (5152770, 4697447),
        2015: (5128422, 4687436),
        2016: (5101174, 4678478),
        2017: (5076104, 4663753),
        2018: (5054972, 4658683),
        2019: (5039416, 4660856),
        2020: (5025500, 4663876),
        2021: (5004102, 4647359),
        2022: (4981528, 4628875),
        2023: (4974484, 4625260),
        2024: (4961249, 4623378),
    },
    source_url="https://www.ksh.hu/stadat_files/nep/hu/nep0003.html",
)

# Yearly population growth (%) of comparator countries
REFERENCE_GROWTH_RATES: tuple[ReferenceLine, ...] = (
    ReferenceLine("Replacement rate", 0.0, "red"),
    ReferenceLine("Cyprus", 0.95, "orange"),
    ReferenceLine("Switzerland", 0.75, "purple"),
    ReferenceLine("Norway", 0.59, "green"),
    ReferenceLine("France", 0.2, "lightblue"),
    ReferenceLine("Croatia", -0.46, "pink"),
    ReferenceLine("Romania", -0.94, "yellow"),
)
