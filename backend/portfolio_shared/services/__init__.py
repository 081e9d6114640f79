"""
Shared services: pure transforms from sheet tables to the portfolio model.
"""

from .column_resolver import (
    PORTFOLIO_COLUMN_CANDIDATES,
    PortfolioColumns,
    find_likely_column,
    resolve_portfolio_columns,
)
from .detail_extractor import CellPosition, UnitDetailExtractor, cell_to_string
from .portfolio_metrics import (
    summarize_portfolio,
    summarize_taxes,
    unit_metrics,
    weighted_average_rate,
)
from .portfolio_snapshot import build_portfolio_snapshot
from .renewal_scheduler import build_renewal_alerts, days_left, parse_korean_date
from .row_normalizer import PortfolioRowNormalizer
from .value_coercion import parse_numeric

__all__ = [
    "PORTFOLIO_COLUMN_CANDIDATES",
    "PortfolioColumns",
    "find_likely_column",
    "resolve_portfolio_columns",
    "CellPosition",
    "UnitDetailExtractor",
    "cell_to_string",
    "summarize_portfolio",
    "summarize_taxes",
    "unit_metrics",
    "weighted_average_rate",
    "build_portfolio_snapshot",
    "build_renewal_alerts",
    "days_left",
    "parse_korean_date",
    "PortfolioRowNormalizer",
    "parse_numeric",
]
