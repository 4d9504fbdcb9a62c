"""src/popseries/reporting/tables.py"""

from __future__ import annotations

from typing import Iterable, Mapping

import pandas as pd

from popseries.engine import ChartLine
from popseries.series.types import GenderedCount, GrowthPoint


def make_population_table(series: Mapping[int, GenderedCount], *, recorded: Iterable[int] = ()) -> pd.DataFrame:
    """
    Wide table of a population series:
        Year, Female, Male, Total, Recorded
    """
    recorded_years = set(recorded)
    rows = [
        {
            "Year": int(year),
            "Female": counts.female,
            "Male": counts.male,
            "Total": counts.total,
            "Recorded": int(year) in recorded_years,
        }
        for year, counts in series.items()
    ]
    if not rows:
        return pd.DataFrame(columns=["Year", "Female", "Male", "Total", "Recorded"])
    return pd.DataFrame(rows).sort_values("Year").reset_index(drop=True)


def make_growth_rate_table(rates: Mapping[int, GrowthPoint]) -> pd.DataFrame:
    """
    Growth rates:
        Year, Population, Growth_Rate
    """
    rows = [
        {"Year": int(year), "Population": p.population, "Growth_Rate": p.growth_rate}
        for year, p in rates.items()
    ]
    if not rows:
        return pd.DataFrame(columns=["Year", "Population", "Growth_Rate"])
    return pd.DataFrame(rows).sort_values("Year").reset_index(drop=True)


def make_chart_points_table(lines: Iterable[ChartLine]) -> pd.DataFrame:
    """
    Long table of chart lines, one row per point:
        Line, Year, Value
    """
    rows = [
        {"Line": line.name, "Year": int(year), "Value": float(value)}
        for line in lines
        for year, value in line.points
    ]
    if not rows:
        return pd.DataFrame(columns=["Line", "Year", "Value"])
    return pd.DataFrame(rows)


def make_growth_summary_table(rates_table: pd.DataFrame) -> pd.DataFrame:
    """
    Summary of a growth-rate table:
        Year_Start, Year_End, Growth_Min, Growth_Max, Growth_Mean, Declining_Years
    """
    cols = ["Year_Start", "Year_End", "Growth_Min", "Growth_Max", "Growth_Mean", "Declining_Years"]
    d = rates_table.copy()
    if d.empty:
        return pd.DataFrame(columns=cols)

    d["Growth_Rate"] = pd.to_numeric(d["Growth_Rate"], errors="coerce")
    d = d.dropna(subset=["Growth_Rate"])

    out = pd.DataFrame(
        [
            {
                "Year_Start": int(d["Year"].min()),
                "Year_End": int(d["Year"].max()),
                "Growth_Min": float(d["Growth_Rate"].min()),
                "Growth_Max": float(d["Growth_Rate"].max()),
                "Growth_Mean": float(d["Growth_Rate"].mean()),
                "Declining_Years": int((d["Growth_Rate"] < 0).sum()),
            }
        ]
    )
    return out[cols]
