"""
src/popseries/common/utils.py

popseries.common.utils

Small conversion helpers for config values.
"""

from __future__ import annotations

from typing import Any


def safe_int(value: Any, default: int) -> int:
    """Best-effort int conversion with fallback (None and junk -> default)."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """Best-effort float conversion with fallback (None and junk -> default)."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
