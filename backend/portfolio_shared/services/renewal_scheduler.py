"""
Renewal scheduler.

Parses free-form renewal dates ("2025년 3월 5일", "25.03.05 만기", "2025-03-05")
and emits contract/loan renewal alerts inside the look-ahead window.
Unparsable or invalid dates never raise; they simply produce no alert.
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Sequence

from portfolio_shared.models.portfolio import PortfolioUnit, RenewalAlert, RenewalKind

DEFAULT_ALERT_WINDOW_DAYS = 120

_DATE_PATTERN = re.compile(r"(\d{2,4})\D+(\d{1,2})\D+(\d{1,2})", re.ASCII)
# gviz serializes date cells as "Date(2025,2,5)" with a zero-based month
_GVIZ_DATE_PATTERN = re.compile(r"Date\(\s*(\d{4})\s*,\s*(\d{1,2})\s*,\s*(\d{1,2})", re.ASCII)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_korean_date(raw: str) -> Optional[date]:
    """Find a year / month / day triple anywhere in ``raw``; 2-digit years are 20xx."""
    if not raw:
        return None

    gviz = _GVIZ_DATE_PATTERN.search(raw)
    if gviz:
        return _safe_date(int(gviz.group(1)), int(gviz.group(2)) + 1, int(gviz.group(3)))

    match = _DATE_PATTERN.search(raw)
    if not match:
        return None

    year = int(match.group(1))
    if year < 100:
        year += 2000
    return _safe_date(year, int(match.group(2)), int(match.group(3)))


def days_left(raw: str, today: Optional[date] = None) -> Optional[int]:
    """Whole days from today to the parsed date; negative when the date has passed."""
    target = parse_korean_date(raw)
    if target is None:
        return None
    return (target - (today or date.today())).days


def build_renewal_alerts(
    units: Sequence[PortfolioUnit],
    today: Optional[date] = None,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> List[RenewalAlert]:
    """Alerts with 0 <= days_left <= window_days, soonest first (stable)."""
    reference = today or date.today()
    alerts: List[RenewalAlert] = []

    for unit in units:
        for kind, raw in (
            (RenewalKind.CONTRACT, unit.contract_renewal_raw),
            (RenewalKind.LOAN, unit.loan_renewal_raw),
        ):
            remaining = days_left(raw, reference)
            if remaining is None or not 0 <= remaining <= window_days:
                continue
            alerts.append(
                RenewalAlert(
                    id=f"{unit.id}-{kind.value}",
                    site=unit.site,
                    kind=kind,
                    raw_date=raw,
                    days_left=remaining,
                )
            )

    # list.sort is stable: equal days keep encounter order
    alerts.sort(key=lambda alert: alert.days_left)
    return alerts
