"""
src/popseries/series/rounding.py

Rounding helpers shared by the series engine.

Both helpers round half-up, never to even: population counts are
non-negative so this is the same as rounding half away from zero,
and significant-digit rounding works on the exact binary value of the
float (what fixed-precision formatting does).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties go up (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value: {value!r}")
    return int(math.floor(value + 0.5))


def round_sig(value: float, digits: int = 5) -> float:
    """
    Round to `digits` significant digits.

    Example:
        round_sig(0.996086951, 5) -> 0.99609
        round_sig(100.02000000000001, 5) -> 100.02
    """
    if digits < 1:
        raise ValueError("digits must be >= 1")
    if value == 0 or not math.isfinite(value):
        return float(value)

    exact = Decimal(value)
    exponent = exact.adjusted() - digits + 1
    rounded = exact.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)
    return float(rounded)
