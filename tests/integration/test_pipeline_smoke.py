"""tests/integration/test_pipeline_smoke.py"""

from __future__ import annotations

import pandas as pd

from popseries.pipelines.run_report import run_report


def test_pipeline_smoke_report_pack(cfg) -> None:
    paths = run_report(cfg, rate=1.01, future_years=3)

    assert paths.out_dir == cfg.paths["reports_dir"] / "hungary_1.01"
    for p in (
        paths.population_csv,
        paths.projection_csv,
        paths.growth_rates_csv,
        paths.growth_summary_csv,
        paths.chart_points_csv,
        paths.population_png,
        paths.growth_rates_png,
    ):
        assert p is not None and p.exists(), f"missing {p}"

    filled = pd.read_csv(paths.population_csv)
    assert filled["Year"].tolist() == list(range(1980, 2025))
    assert int(filled["Recorded"].sum()) == 16
    assert (filled["Total"] == filled["Female"] + filled["Male"]).all()

    projection = pd.read_csv(paths.projection_csv)
    assert projection["Year"].tolist() == [2024, 2025, 2026, 2027]

    rates = pd.read_csv(paths.growth_rates_csv)
    assert rates["Year"].iloc[0] == 1981
    assert len(rates) == 44

    summary = pd.read_csv(paths.growth_summary_csv)
    assert summary["Year_Start"].iloc[0] == 1981
    assert summary["Year_End"].iloc[0] == 2024

    points = pd.read_csv(paths.chart_points_csv)
    assert set(points["Line"]) == {
        "Approximate population - male",
        "Approximate population - female",
        "Approximate population - total",
        "Future population with 1.01% growth rate",
        "Population growth rate",
    }


def test_pipeline_uses_config_defaults_without_figures(project_root, write_config) -> None:
    from popseries.common.config import load_config

    cfg = load_config(write_config(project_root, reporting={"figures": False, "future_years": 2}))

    paths = run_report(cfg)

    assert paths.out_dir.name == "hungary_0.99876"
    assert paths.population_png is None
    assert paths.growth_rates_png is None
    assert len(pd.read_csv(paths.projection_csv)) == 3
