"""src/popseries/io/readers.py"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from popseries.seed import SeedDataset
from popseries.series.types import GenderedCount, PopulationSeries
from popseries.validation.checks import validate_seed_canonical

logger = logging.getLogger(__name__)

# KSH exports use Hungarian headers
_COLUMN_VARIANTS: dict[str, tuple[str, ...]] = {
    "Year": ("year", "Év", "Ev", "év"),
    "Female": ("female", "Females", "Nő", "No", "nő"),
    "Male": ("male", "Males", "Férfi", "Ferfi", "férfi"),
}


# ---------- generic helpers ----------

def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path, dtype=dtype)


def frame_to_series(df: pd.DataFrame) -> PopulationSeries:
    """Canonical Year/Female/Male frame -> {year: GenderedCount}."""
    return {
        int(r.Year): GenderedCount(female=int(r.Female), male=int(r.Male))
        for r in df.itertuples(index=False)
    }


# ---------- domain-specific reads ----------

def read_seed_raw(path: Path) -> pd.DataFrame:
    """
    Standardize a recorded population table into:
        Year, Female, Male

    Supports English and Hungarian (KSH) header variants. Raises ValueError
    when the table does not pass the seed checks.
    """
    df = read_csv(path)
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]

    for canonical, candidates in _COLUMN_VARIANTS.items():
        if canonical in df.columns:
            continue
        for candidate in candidates:
            if candidate in df.columns:
                df = df.rename(columns={candidate: canonical})
                break

    validate_seed_canonical(df).raise_if_failed()

    df["Year"] = pd.to_numeric(df["Year"]).astype(int)
    for c in ["Female", "Male"]:
        df[c] = pd.to_numeric(df[c]).round().astype(int)

    return df[["Year", "Female", "Male"]].sort_values("Year").reset_index(drop=True)


def load_seed_dataset(
    path: Path,
    *,
    country: str,
    source: str | None = None,
    source_url: str | None = None,
) -> SeedDataset:
    df = read_seed_raw(path)
    logger.info("Loaded seed %s: %d recorded years (%d-%d)", path, len(df), df["Year"].min(), df["Year"].max())
    return SeedDataset(
        country=country,
        source=source or path.name,
        records=frame_to_series(df),
        source_url=source_url,
    )
