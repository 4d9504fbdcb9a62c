"""src/popseries/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import FuncFormatter

from popseries.engine import ChartLine
from popseries.seed import ReferenceLine

GROWTH_RATE_YLIM = (-1.0, 1.0)


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _thousands(value: float, _pos: int) -> str:
    return f"{int(np.round(value / 1000))}k" if value else ""


def _plot_lines(ax, lines: Iterable[ChartLine]) -> None:
    for line in lines:
        if not line.points:
            continue
        years = np.asarray(line.years, dtype=int)
        values = np.asarray(line.values, dtype=float)
        ax.plot(years, values, label=line.name, color=line.color)


def plot_population(
    lines: Sequence[ChartLine],
    *,
    title: str,
    out_path: Path,
) -> Path:
    """
    One PNG with the filled history (male/female/total) and the projection.
    Y axis in thousands.
    """
    _ensure_dir(out_path.parent)

    fig, ax = plt.subplots(figsize=(10, 6))
    _plot_lines(ax, lines)
    ax.yaxis.set_major_formatter(FuncFormatter(_thousands))
    ax.grid(True, linestyle="--", alpha=0.1)
    ax.set_title(title)
    ax.set_xlabel("Year")
    ax.set_ylabel("Population")
    ax.legend()
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path


def plot_growth_rates(
    lines: Sequence[ChartLine],
    references: Sequence[ReferenceLine],
    *,
    title: str,
    out_path: Path,
) -> Path:
    """
    One PNG with the historical growth rate and dashed comparator lines.
    """
    _ensure_dir(out_path.parent)

    fig, ax = plt.subplots(figsize=(10, 6))
    _plot_lines(ax, lines)
    for ref in references:
        ax.axhline(ref.value, color=ref.color, linestyle="--", alpha=0.5)
        ax.annotate(
            f"{ref.label} - {ref.value:g}",
            xy=(0.01, ref.value),
            xycoords=("axes fraction", "data"),
            fontsize=8,
            color=ref.color,
        )
    ax.set_ylim(*GROWTH_RATE_YLIM)
    ax.grid(True, linestyle="--", alpha=0.1)
    ax.set_title(title)
    ax.set_xlabel("Year")
    ax.set_ylabel("Growth rate")
    ax.legend()
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path
