"""src/popseries/reporting/__init__.py"""

from __future__ import annotations

from .export import ReportPackPaths, export_report_pack
from .plots import plot_growth_rates, plot_population
from .tables import (
    make_chart_points_table,
    make_growth_rate_table,
    make_growth_summary_table,
    make_population_table,
)

__all__ = [
    "ReportPackPaths",
    "export_report_pack",
    "plot_population",
    "plot_growth_rates",
    "make_population_table",
    "make_growth_rate_table",
    "make_chart_points_table",
    "make_growth_summary_table",
]
