from __future__ import annotations

import math
from typing import Any, Optional

import pandas as pd


def parse_speed(value: Any) -> Optional[float]:
    """
    Parse a raw cell into a speed measurement.

    Returns None for empty, non-numeric, NaN, infinite or negative input.
    A literal zero is a valid measurement and is returned as 0.0.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        if pd.isna(value):
            return None
        number = float(value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number) or number < 0:
        return None
    return number


def previous_year(year: str) -> Optional[str]:
    try:
        return str(int(year) - 1)
    except (TypeError, ValueError):
        return None


def clamp_int(value: Any, default: int, lo: int, hi: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(lo, min(hi, number))


def format_mbps(value: Optional[float], ndigits: int = 1) -> str:
    if value is None:
        return "n/a"
    return f"{value:,.{ndigits}f} Mbps"
