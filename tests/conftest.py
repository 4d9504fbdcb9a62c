"""tests/conftest.py"""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd
import pytest
import yaml

os.environ.setdefault("MPLBACKEND", "Agg")

from popseries.common.config import AppConfig, load_config  # noqa: E402
from popseries.series.types import GenderedCount, PopulationSeries  # noqa: E402


def _make_series(counts: dict[int, tuple[int, int]]) -> PopulationSeries:
    """{year: (female, male)} -> {year: GenderedCount}"""
    return {y: GenderedCount(female=f, male=m) for y, (f, m) in counts.items()}


@pytest.fixture
def make_series():
    return _make_series


@pytest.fixture
def sparse_series() -> PopulationSeries:
    # two gaps: 2013-2014 and 2018-2021
    return _make_series(
        {
            2012: (5207259, 4724666),
            2015: (5128422, 4687436),
            2016: (5101174, 4678478),
            2017: (5076104, 4663753),
            2022: (4981528, 4628875),
        }
    )


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    (tmp_path / "data").mkdir(parents=True, exist_ok=True)
    return tmp_path


def _write_config(project_root: Path, **overrides: dict) -> Path:
    raw = {
        "paths": {
            "artifacts_dir": "artifacts",
            "reports_dir": "artifacts/reports",
        },
        "logging": {"level": "INFO"},
        "engine": {
            "default_rate": 0.99876,
            "future_years": 5,
            "rate_min": 0.0,
            "rate_max": 2.0,
            "rate_step": 0.0001,
        },
        "seed": {"path": None},
        "reporting": {"figures": True, "future_years": 5},
    }
    for section, values in overrides.items():
        raw.setdefault(section, {}).update(values)

    path = project_root / "configs" / "config.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


@pytest.fixture
def cfg(project_root: Path) -> AppConfig:
    return load_config(_write_config(project_root))


def _write_seed_csv(path: Path, counts: dict[int, tuple[int, int]], *, columns=("Year", "Female", "Male")) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    year_col, female_col, male_col = columns
    pd.DataFrame(
        {
            year_col: list(counts.keys()),
            female_col: [f for f, _ in counts.values()],
            male_col: [m for _, m in counts.values()],
        }
    ).to_csv(path, index=False)
    return path


@pytest.fixture
def write_config():
    return _write_config


@pytest.fixture
def write_seed_csv():
    return _write_seed_csv
