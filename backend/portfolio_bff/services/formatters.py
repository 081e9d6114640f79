"""
Display formatting (ko-KR): whole-won currency, two-decimal percent, D-day.
"""

import math
from typing import Optional


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_krw(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{_round_half_up(value):,}원"


def format_percent(value: Optional[float]) -> str:
    """Fraction -> percent string (0.0435 -> "4.35%")."""
    if value is None:
        return "-"
    return f"{value * 100:.2f}%"


def format_d_day(days_left: int) -> str:
    return f"D-{days_left}"
