"""src/popseries/validation/checks.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from popseries.validation.schemas import SchemaSpec, assert_schema


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid year or count
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _as_float_series(s: pd.Series) -> pd.Series:
    return pd.to_numeric(s, errors="coerce")


# ---- In-memory series checks ----

def check_series_years(series: Mapping[Any, Any]) -> list[str]:
    errs: list[str] = []
    bad = [y for y in series if not _is_int(y)]
    if bad:
        errs.append(f"years must be integers; bad_count={len(bad)}; sample={bad[:10]}")
    return errs


def check_series_counts(series: Mapping[Any, Any]) -> list[str]:
    from popseries.series.types import GenderedCount
    errs: list[str] = []
    for year, value in series.items():
        if not isinstance(value, GenderedCount):
            errs.append(f"{year}: expected GenderedCount, got {type(value).__name__}")
            continue
        for gender, count in value.as_dict().items():
            if not _is_int(count):
                errs.append(f"{year}.{gender}: count must be an integer, got {count!r}")
            elif count < 0:
                errs.append(f"{year}.{gender}: count must be non-negative, got {count}")
    return errs


def validate_series(series: Mapping[Any, Any]) -> CheckResult:
    """Validate a year -> GenderedCount mapping (integer years, non-negative integer counts)."""
    errors: list[str] = []
    errors.extend(check_series_years(series))
    errors.extend(check_series_counts(series))
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


# ---- DataFrame checks (seed CSVs, exported tables) ----

def check_year_range(df: pd.DataFrame, *, col: str = "Year", min_year: int | None = None, max_year: int | None = None) -> list[str]:
    errs: list[str] = []
    if col not in df.columns:
        return errs
    y = _as_float_series(df[col])
    n_missing = int(y.isna().sum())
    if n_missing:
        errs.append(f"{col}: {n_missing} non-numeric values")
    n_frac = int((y.dropna() % 1 != 0).sum())
    if n_frac:
        errs.append(f"{col}: {n_frac} non-integer values")
    if min_year is not None:
        bad = y < int(min_year)
        if int(bad.sum()):
            errs.append(f"{col}: {int(bad.sum())} rows below min_year={min_year}")
    if max_year is not None:
        bad = y > int(max_year)
        if int(bad.sum()):
            errs.append(f"{col}: {int(bad.sum())} rows above max_year={max_year}")
    return errs


def check_nonnegative(df: pd.DataFrame, cols: Sequence[str]) -> list[str]:
    errs: list[str] = []
    for c in cols:
        if c not in df.columns:
            continue
        x = _as_float_series(df[c])
        bad = x < 0
        n_bad = int(bad.sum())
        if n_bad:
            errs.append(f"{c}: {n_bad} negative values found")
    return errs


def check_finite(df: pd.DataFrame, cols: Sequence[str]) -> list[str]:
    errs: list[str] = []
    for c in cols:
        if c not in df.columns:
            continue
        x = _as_float_series(df[c]).to_numpy(dtype=float)
        n_bad = int((~np.isfinite(x)).sum())
        if n_bad:
            errs.append(f"{c}: {n_bad} missing or non-finite values found")
    return errs


def check_unique_keys(df: pd.DataFrame, keys: Sequence[str]) -> list[str]:
    errs: list[str] = []
    missing = [k for k in keys if k not in df.columns]
    if missing:
        return errs

    dup_mask = df.duplicated(subset=list(keys), keep=False)
    n_dup = int(dup_mask.sum())
    if n_dup:
        sample = df.loc[dup_mask, list(keys)].head(10).to_dict(orient="records")
        errs.append(f"duplicate keys on {list(keys)}; dup_rows={n_dup}; sample={sample}")
    return errs


def validate_df(
    df: pd.DataFrame,
    *,
    schema: SchemaSpec | None = None,
    year_col: str | None = None,
    year_min: int | None = None,
    year_max: int | None = None,
    nonnegative_cols: Sequence[str] = (),
    finite_cols: Sequence[str] = (),
    unique_keys: Sequence[str] = (),
) -> CheckResult:
    """
    Generic validation runner.
    - validates required columns via schema (if provided)
    - validates year values and range (if year_col)
    - validates finiteness, nonnegativity and uniqueness (optional)
    """
    errors: list[str] = []

    if schema is not None:
        try:
            assert_schema(df, schema)
        except KeyError as e:
            errors.append(str(e))
            # downstream checks assume the columns exist
            return CheckResult(ok=False, errors=tuple(errors))

    if year_col:
        errors.extend(check_year_range(df, col=year_col, min_year=year_min, max_year=year_max))

    if finite_cols:
        errors.extend(check_finite(df, cols=list(finite_cols)))

    if nonnegative_cols:
        errors.extend(check_nonnegative(df, cols=list(nonnegative_cols)))

    if unique_keys:
        errors.extend(check_unique_keys(df, keys=list(unique_keys)))

    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


def validate_seed_canonical(df: pd.DataFrame) -> CheckResult:
    from popseries.validation.schemas import SEED_CANONICAL
    return validate_df(
        df,
        schema=SEED_CANONICAL,
        year_col="Year",
        finite_cols=("Female", "Male"),
        nonnegative_cols=("Female", "Male"),
        unique_keys=("Year",),
    )
