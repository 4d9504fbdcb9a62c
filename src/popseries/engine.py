"""
src/popseries/engine.py

PopulationSeriesEngine: runs fill -> growth rates / projection for one
seed dataset and shapes the results into named chart lines.

Chart lines are plain (year, value) point lists so any renderer
(matplotlib report, streamlit/plotly dashboard) can draw them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Mapping

from popseries.common.config import AppConfig
from popseries.common.utils import safe_float, safe_int
from popseries.io.readers import load_seed_dataset
from popseries.seed import HUNGARY_KSH, REFERENCE_GROWTH_RATES, ReferenceLine, SeedDataset
from popseries.series.aggregation import sort_by_keys
from popseries.series.extrapolation import extrapolate_future_population
from popseries.series.gap_filler import fill_with_approximations
from popseries.series.growth_rates import calculate_growth_rates
from popseries.series.types import GrowthRateSeries, PopulationSeries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    default_rate: float = 0.99876
    future_years: int = 100
    rate_min: float = 0.0
    rate_max: float = 2.0
    rate_step: float = 0.0001

    def __post_init__(self) -> None:
        if self.rate_min > self.rate_max:
            raise ValueError(f"engine.rate_min ({self.rate_min}) must be <= engine.rate_max ({self.rate_max})")
        if self.future_years < 0:
            raise ValueError(f"engine.future_years must be >= 0, got {self.future_years}")
        if self.rate_step <= 0:
            raise ValueError(f"engine.rate_step must be > 0, got {self.rate_step}")
        self.check_rate(self.default_rate)

    def check_rate(self, rate: float) -> float:
        rate = float(rate)
        if not (self.rate_min <= rate <= self.rate_max):
            raise ValueError(f"rate must be within [{self.rate_min}, {self.rate_max}], got {rate}")
        return rate

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "EngineSettings":
        d = cls()
        return cls(
            default_rate=safe_float(raw.get("default_rate"), d.default_rate),
            future_years=safe_int(raw.get("future_years"), d.future_years),
            rate_min=safe_float(raw.get("rate_min"), d.rate_min),
            rate_max=safe_float(raw.get("rate_max"), d.rate_max),
            rate_step=safe_float(raw.get("rate_step"), d.rate_step),
        )

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "EngineSettings":
        return cls.from_mapping(cfg.engine)


@dataclass(frozen=True)
class ChartLine:
    name: str
    points: tuple[tuple[int, float], ...]
    color: str = field(default="gray")

    @property
    def years(self) -> list[int]:
        return [y for y, _ in self.points]

    @property
    def values(self) -> list[float]:
        return [v for _, v in self.points]


class PopulationSeriesEngine:
    """All derived series of one seed dataset."""

    def __init__(self, seed: SeedDataset, settings: EngineSettings | None = None) -> None:
        self.seed = seed
        self.settings = settings or EngineSettings()

    # ---- series ----

    def recorded(self) -> PopulationSeries:
        return dict(self.seed.records)

    @cached_property
    def _filled(self) -> PopulationSeries:
        filled = sort_by_keys(fill_with_approximations(self.seed.records))
        logger.info(
            "%s: %d recorded year(s), %d after filling",
            self.seed.country, len(self.seed.records), len(filled),
        )
        return filled

    def filled(self) -> PopulationSeries:
        return dict(self._filled)

    @cached_property
    def _growth_rates(self) -> GrowthRateSeries:
        return calculate_growth_rates(self._filled)

    def growth_rates(self) -> GrowthRateSeries:
        return dict(self._growth_rates)

    def project(self, rate: float | None = None, future_years: int | None = None) -> PopulationSeries:
        """Project from the last recorded year only; the result starts at that year."""
        rate = self.settings.default_rate if rate is None else self.settings.check_rate(rate)
        future_years = self.settings.future_years if future_years is None else future_years
        return sort_by_keys(extrapolate_future_population(self.seed.last_point(), future_years, rate))

    # ---- chart lines ----

    def population_lines(self) -> list[ChartLine]:
        filled = self._filled
        return [
            ChartLine(
                "Approximate population - male",
                tuple((y, float(c.male)) for y, c in filled.items()),
                "lightblue",
            ),
            ChartLine(
                "Approximate population - female",
                tuple((y, float(c.female)) for y, c in filled.items()),
                "orange",
            ),
            ChartLine(
                "Approximate population - total",
                tuple((y, float(c.total)) for y, c in filled.items()),
                "red",
            ),
        ]

    def projection_line(self, rate: float | None = None, future_years: int | None = None) -> ChartLine:
        rate = self.settings.default_rate if rate is None else rate
        projected = self.project(rate, future_years)
        return ChartLine(
            f"Future population with {rate}% growth rate",
            tuple((y, float(c.total)) for y, c in projected.items()),
            "green",
        )

    def growth_rate_lines(self) -> list[ChartLine]:
        return [
            ChartLine(
                "Population growth rate",
                tuple((y, p.growth_rate) for y, p in self._growth_rates.items()),
                "cyan",
            )
        ]

    def reference_lines(self) -> tuple[ReferenceLine, ...]:
        return REFERENCE_GROWTH_RATES


def engine_from_config(cfg: AppConfig) -> PopulationSeriesEngine:
    """Engine for the configured seed (built-in Hungary/KSH table unless seed.path is set)."""
    settings = EngineSettings.from_config(cfg)
    seed_cfg = cfg.seed
    seed_path = seed_cfg.get("path")
    if seed_path:
        seed = load_seed_dataset(
            cfg.resolve(seed_path),
            country=str(seed_cfg.get("country", "Unknown")),
            source=seed_cfg.get("source"),
            source_url=seed_cfg.get("source_url"),
        )
    else:
        seed = HUNGARY_KSH
    return PopulationSeriesEngine(seed, settings)
