"""src/popseries/cli.py"""

from __future__ import annotations

from typing import Optional

import typer
from rich import print
from rich.table import Table

from popseries.common.config import load_config
from popseries.common.logging import setup_logging
from popseries.engine import engine_from_config
from popseries.pipelines.run_report import run_report
from popseries.series.aggregation import rate_to_percent

app = typer.Typer(help="Population series: gap filling, growth rates and projections")

DEFAULT_CONFIG = "configs/config.yaml"


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories from config (artifacts/, logs/, etc.)."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    created = cfg.ensure_directories()
    print("[bold green]Init complete.[/bold green]")
    if created:
        print("Created directories:")
        for p in created:
            print(f"  - {p}")
    else:
        print("No directories needed (already exist).")


@app.command()
def report(
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    rate: Optional[float] = typer.Option(None, help="Yearly growth multiplier (default from config)"),
    years: Optional[int] = typer.Option(None, min=0, help="Number of years to project"),
) -> None:
    """Write filled history, growth rates, projection tables and charts."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    paths = run_report(cfg, rate=rate, future_years=years)
    print(f"[bold green]Report complete.[/bold green] {paths.out_dir}")


@app.command()
def project(
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    rate: Optional[float] = typer.Option(None, help="Yearly growth multiplier (default from config)"),
    years: int = typer.Option(10, min=0, help="Number of years to project"),
) -> None:
    """Print the projection from the last recorded year."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    engine = engine_from_config(cfg)
    rate = engine.settings.default_rate if rate is None else rate
    projected = engine.project(rate, years)

    table = Table(title=f"{engine.seed.country}: {rate_to_percent(rate):g}% per year")
    for col in ("Year", "Female", "Male", "Total"):
        table.add_column(col, justify="right")
    for year, counts in projected.items():
        table.add_row(str(year), f"{counts.female:,}", f"{counts.male:,}", f"{counts.total:,}")
    print(table)


@app.command()
def growth(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Print historical growth rates of the filled series."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    engine = engine_from_config(cfg)

    table = Table(title=f"{engine.seed.country}: population growth rate")
    for col in ("Year", "Population", "Growth rate"):
        table.add_column(col, justify="right")
    for year, point in engine.growth_rates().items():
        table.add_row(str(year), f"{point.population:,}", f"{point.growth_rate:g}")
    print(table)


if __name__ == "__main__":
    app()
