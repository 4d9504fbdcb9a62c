"""src/popseries/pipelines/run_report.py"""

from __future__ import annotations

import logging

from popseries.common.config import AppConfig
from popseries.common.utils import safe_int
from popseries.engine import engine_from_config
from popseries.reporting.export import ReportPackPaths, export_report_pack

logger = logging.getLogger(__name__)

DEFAULT_REPORTS_DIR = "artifacts/reports"


def run_report(cfg: AppConfig, *, rate: float | None = None, future_years: int | None = None) -> ReportPackPaths:
    """
    Run the full pipeline for the configured seed:
      1) fill missing recorded years
      2) historical growth rates
      3) projection from the last recorded year at `rate`
      4) write tables + charts under paths.reports_dir/<country>_<rate>
    """
    engine = engine_from_config(cfg)
    rate = engine.settings.default_rate if rate is None else engine.settings.check_rate(rate)
    if future_years is None:
        future_years = safe_int(cfg.reporting.get("future_years"), engine.settings.future_years)

    reports_dir = cfg.paths.get("reports_dir") or cfg.resolve(DEFAULT_REPORTS_DIR)
    out_dir = reports_dir / f"{engine.seed.country.lower().replace(' ', '_')}_{rate:g}"

    logger.info(
        "Building report for %s: rate=%s future_years=%d -> %s",
        engine.seed.country, rate, future_years, out_dir,
    )
    paths = export_report_pack(
        engine,
        out_dir=out_dir,
        rate=rate,
        future_years=future_years,
        make_figures=bool(cfg.reporting.get("figures", True)),
    )
    logger.info("Report complete: %s", paths.out_dir)
    return paths
