"""Number formatting shared by every renderer."""

import math
from datetime import date

DECIMALS = 2


def to_fixed(value: float) -> str:
    """Round to two decimals and drop trailing zeros ("12.50" -> "12.5", "3.00" -> "3")."""
    text = f"{round(value, DECIMALS):.{DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def insert_thousand_separator(value: int) -> str:
    return f"{value:,}"


def to_scale(value: int) -> str:
    """Compact count: 999 -> "999", 1234 -> "1.2k", 2500000 -> "2.5M"."""
    if value < 1000:
        return str(value)
    if value < 1_000_000:
        return f"{_truncate(value / 1000)}k"
    return f"{_truncate(value / 1_000_000)}M"


def _truncate(value: float) -> str:
    scaled = math.floor(value * 10) / 10
    return f"{scaled:.1f}".rstrip("0").rstrip(".")


def to_iso_date(day: date) -> str:
    return day.isoformat()
