"""
Summary-sheet pipeline: table -> units -> summary, taxes, alerts.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from portfolio_shared.models.portfolio import PortfolioSnapshot
from portfolio_shared.models.sheet_table import HeaderTable
from portfolio_shared.services.portfolio_metrics import summarize_portfolio, summarize_taxes
from portfolio_shared.services.renewal_scheduler import (
    DEFAULT_ALERT_WINDOW_DAYS,
    build_renewal_alerts,
)
from portfolio_shared.services.row_normalizer import PortfolioRowNormalizer


def build_portfolio_snapshot(
    table: HeaderTable,
    *,
    today: Optional[date] = None,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> PortfolioSnapshot:
    units = PortfolioRowNormalizer.to_portfolio_units(table)
    return PortfolioSnapshot(
        units=units,
        summary=summarize_portfolio(units),
        taxes=summarize_taxes(units),
        alerts=build_renewal_alerts(units, today=today, window_days=window_days),
    )
