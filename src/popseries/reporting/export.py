"""src/popseries/reporting/export.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from popseries.engine import PopulationSeriesEngine
from popseries.io.writers import write_csv
from popseries.reporting.plots import plot_growth_rates, plot_population
from popseries.reporting.tables import (
    make_chart_points_table,
    make_growth_rate_table,
    make_growth_summary_table,
    make_population_table,
)
from popseries.series.aggregation import rate_to_percent
from popseries.validation.checks import validate_df
from popseries.validation.schemas import GROWTH_RATES, POPULATION_POINTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportPackPaths:
    out_dir: Path
    tables_dir: Path
    figures_dir: Path

    population_csv: Path
    projection_csv: Path
    growth_rates_csv: Path
    growth_summary_csv: Path
    chart_points_csv: Path

    population_png: Path | None
    growth_rates_png: Path | None


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def export_report_pack(
    engine: PopulationSeriesEngine,
    *,
    out_dir: Path,
    rate: float | None = None,
    future_years: int | None = None,
    make_figures: bool = True,
) -> ReportPackPaths:
    """
    Build a reporting "pack" for one rate:
        - CSV tables (filled history, projection, growth rates, chart points)
        - the population and growth-rate PNG charts

    This module does NOT compute series. It consumes the engine outputs.
    """
    out_dir = Path(out_dir)
    tables_dir = out_dir / "tables"
    figures_dir = out_dir / "figures"
    _ensure_dir(tables_dir)
    _ensure_dir(figures_dir)

    rate = engine.settings.default_rate if rate is None else rate
    country = engine.seed.country

    # Tables
    population_df = make_population_table(engine.filled(), recorded=engine.seed.records.keys())
    projection_df = make_population_table(engine.project(rate, future_years), recorded=engine.seed.records.keys())
    rates_df = make_growth_rate_table(engine.growth_rates())
    summary_df = make_growth_summary_table(rates_df)

    population_lines = [*engine.population_lines(), engine.projection_line(rate, future_years)]
    growth_lines = engine.growth_rate_lines()
    points_df = make_chart_points_table([*population_lines, *growth_lines])

    # Validate outputs (fail early)
    validate_df(points_df, schema=POPULATION_POINTS, year_col="Year", finite_cols=("Value",)).raise_if_failed()
    validate_df(rates_df, schema=GROWTH_RATES, year_col="Year", unique_keys=("Year",)).raise_if_failed()

    population_csv = write_csv(population_df, tables_dir / "population_filled.csv")
    projection_csv = write_csv(projection_df, tables_dir / "population_projection.csv")
    growth_rates_csv = write_csv(rates_df, tables_dir / "growth_rates.csv")
    growth_summary_csv = write_csv(summary_df, tables_dir / "growth_summary.csv")
    chart_points_csv = write_csv(points_df, tables_dir / "chart_points.csv")
    logger.info("Saved report tables: %s", tables_dir)

    # Figures
    population_png: Path | None = None
    growth_rates_png: Path | None = None
    if make_figures:
        try:
            population_png = plot_population(
                population_lines,
                title=f"Population trends of {country} (future: {rate_to_percent(rate):g}%/yr)",
                out_path=figures_dir / "population.png",
            )
            growth_rates_png = plot_growth_rates(
                growth_lines,
                engine.reference_lines(),
                title=f"Population growth rate of {country}",
                out_path=figures_dir / "growth_rates.png",
            )
            logger.info("Saved report figures: %s", figures_dir)
        except Exception:
            logger.exception("Plotting failed for %s", country)

    return ReportPackPaths(
        out_dir=out_dir,
        tables_dir=tables_dir,
        figures_dir=figures_dir,
        population_csv=population_csv,
        projection_csv=projection_csv,
        growth_rates_csv=growth_rates_csv,
        growth_summary_csv=growth_summary_csv,
        chart_points_csv=chart_points_csv,
        population_png=population_png,
        growth_rates_png=growth_rates_png,
    )
