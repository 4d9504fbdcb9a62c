"""src/popseries/validation/schemas.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd


@dataclass(frozen=True)
class SchemaSpec:
    """Minimal schema specification for a DataFrame."""
    name: str
    required_cols: tuple[str, ...]
    dtype_hints: dict[str, str] | None = None  # e.g. {"Year": "int", "Female": "int"}


def _missing_cols(df: pd.DataFrame, required: Iterable[str]) -> list[str]:
    req = list(required)
    return [c for c in req if c not in df.columns]


SEED_CANONICAL = SchemaSpec(
    name="seed_canonical",
    required_cols=("Year", "Female", "Male"),
    dtype_hints={"Year": "int", "Female": "int", "Male": "int"},
)

POPULATION_POINTS = SchemaSpec(
    name="population_points",
    required_cols=("Line", "Year", "Value"),
    dtype_hints={"Line": "string", "Year": "int", "Value": "float"},
)

GROWTH_RATES = SchemaSpec(
    name="growth_rates",
    required_cols=("Year", "Population", "Growth_Rate"),
    dtype_hints={"Year": "int", "Population": "int", "Growth_Rate": "float"},
)


def assert_schema(df: pd.DataFrame, spec: SchemaSpec) -> None:
    """Raise a KeyError if required columns are missing."""
    missing = _missing_cols(df, spec.required_cols)
    if missing:
        raise KeyError(
            f"{spec.name}: missing columns {missing}. Found: {list(df.columns)}"
        )
