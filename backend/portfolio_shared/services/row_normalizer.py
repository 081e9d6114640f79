"""
Portfolio row normalizer.

Turns the summary sheet (HeaderTable) into PortfolioUnit records:
- the first row whose site contains "합계" ends the data region
- rows with a blank site are skipped
- numeric fields go through parse_numeric; unparsable -> None, never 0
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from portfolio_shared.models.portfolio import PortfolioUnit
from portfolio_shared.models.sheet_table import CellValue, HeaderTable, cell_text
from portfolio_shared.services.column_resolver import PortfolioColumns, resolve_portfolio_columns
from portfolio_shared.services.value_coercion import parse_numeric

logger = logging.getLogger(__name__)

TOTAL_ROW_TOKEN = "합계"

_WHITESPACE = re.compile(r"\s+")


class PortfolioRowNormalizer:
    """Pure helpers; no network/IO."""

    @staticmethod
    def _text(value: CellValue, default: str) -> str:
        return default if value is None else cell_text(value)

    @classmethod
    def find_total_row(cls, table: HeaderTable, site_column: Optional[str]) -> Optional[int]:
        """Index of the first row whose site (whitespace removed) contains the total token."""
        for idx, row in enumerate(table.rows):
            site = _WHITESPACE.sub("", cls._text(table.value(row, site_column), ""))
            if TOTAL_ROW_TOKEN in site:
                return idx
        return None

    @classmethod
    def data_rows(
        cls, table: HeaderTable, site_column: Optional[str]
    ) -> List[Tuple[CellValue, ...]]:
        total_idx = cls.find_total_row(table, site_column)
        rows: Sequence[Tuple[CellValue, ...]] = (
            table.rows[:total_idx] if total_idx is not None else table.rows
        )
        return [
            row
            for row in rows
            if cls._text(table.value(row, site_column), "").strip()
        ]

    @classmethod
    def build_unit(
        cls,
        table: HeaderTable,
        row: Tuple[CellValue, ...],
        columns: PortfolioColumns,
        index: int,
    ) -> PortfolioUnit:
        """Build one unit; the site falls back to "호실 {n}" when no site value is given."""

        def text(label: Optional[str], default: str) -> str:
            return cls._text(table.value(row, label), default)

        def number(label: Optional[str]) -> Optional[float]:
            return parse_numeric(table.value(row, label))

        return PortfolioUnit(
            id=f"unit-{index}",
            site=text(columns.site, f"호실 {index + 1}"),
            ownership=text(columns.ownership, "-"),
            tenant_status=text(columns.tenant_status, "-"),
            completion_date=text(columns.completion_date, "-"),
            contract_renewal_raw=text(columns.contract_renewal, ""),
            loan_renewal_raw=text(columns.loan_renewal, ""),
            note=text(columns.note, "-"),
            business_number=text(columns.business_number, "-"),
            supply_price=number(columns.supply_price),
            loan_amount=number(columns.loan_amount),
            interest_rate=number(columns.interest_rate),
            monthly_interest=number(columns.monthly_interest),
            monthly_rent=number(columns.monthly_rent),
            building_tax=number(columns.building_tax),
            land_tax=number(columns.land_tax),
            traffic_inducement_charge=number(columns.traffic_charge),
        )

    @classmethod
    def to_portfolio_units(
        cls, table: HeaderTable, columns: Optional[PortfolioColumns] = None
    ) -> List[PortfolioUnit]:
        """
        Normalize every data row of the summary sheet.

        An empty sheet, or a sheet whose site column cannot be resolved,
        yields an empty list.
        """
        if len(table) == 0:
            return []

        resolved = columns or resolve_portfolio_columns(table.labels)
        if resolved.site is None:
            logger.warning(f"Site column not found in labels {list(table.labels)}; no units produced")
            return []

        missing = resolved.unresolved()
        if missing:
            logger.debug(f"Unresolved portfolio columns: {', '.join(missing)}")

        rows = cls.data_rows(table, resolved.site)
        return [cls.build_unit(table, row, resolved, i) for i, row in enumerate(rows)]
