"""src/popseries/validation/__init__.py"""

from __future__ import annotations

from .checks import (
    CheckResult,
    validate_df,
    validate_seed_canonical,
    validate_series,
)
from .schemas import (
    SchemaSpec,
    assert_schema,
    GROWTH_RATES,
    POPULATION_POINTS,
    SEED_CANONICAL,
)

__all__ = [
    # checks
    "CheckResult",
    "validate_df",
    "validate_seed_canonical",
    "validate_series",
    # schemas
    "SchemaSpec",
    "assert_schema",
    "GROWTH_RATES",
    "POPULATION_POINTS",
    "SEED_CANONICAL",
]
