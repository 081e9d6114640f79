"""
Unit detail sheet extractor.

The per-unit detail tab has no header row. Values are found three ways:
- anchor cells located by keyword search, value read a few rows below
- fixed absolute (row, col) coordinates for the stable building/cost block
- scenario rows recognised by a '%' in their second cell

Coordinates, offsets and the registration-cost heuristic follow one known
sheet layout and must not be generalised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from portfolio_shared.models.sheet_table import RawCell, RawTable, cell_text
from portfolio_shared.models.unit_detail import (
    BuildingInfo,
    FacilityInfo,
    LeaseInfo,
    OtherCosts,
    UnitDetailModel,
    UnitScenario,
)
from portfolio_shared.services.value_coercion import parse_numeric

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

DEPOSIT_KEYWORD = "보증금"
RENT_KEYWORD = "월세"
RENT_PER_PYEONG_KEYWORD = "평당월세"
ACQUISITION_TAX_KEYWORD = "취등록세"
REGISTRATION_KEYWORD = "등기비용"

MAX_PROBE_DEPTH = 4

# Scenario columns 3..12, read from the raw cell value
SCENARIO_VALUE_FIELDS = (
    "equity",
    "deposit",
    "fixed_cost",
    "invested_total",
    "monthly_rent",
    "monthly_interest",
    "monthly_net",
    "monthly_roi",
    "annual_profit",
    "annual_roi",
)


@dataclass(frozen=True)
class CellPosition:
    row: int
    col: int


def cell_to_string(cell: Optional[RawCell]) -> str:
    """Formatted string when present, else the raw value; trimmed."""
    if cell is None:
        return ""
    if cell.f and cell.f.strip():
        return cell.f.strip()
    return cell_text(cell.v).strip()


def _normalize(value: str) -> str:
    return _WHITESPACE.sub("", value).lower()


class UnitDetailExtractor:
    """Spatial lookups over a RawTable; pure, no IO."""

    @staticmethod
    def find_cell_by_keyword(table: RawTable, keyword: str) -> Optional[CellPosition]:
        """Row-major scan; first cell whose normalized text contains the keyword."""
        target = _normalize(keyword)
        for r, row in enumerate(table.rows):
            for c, cell in enumerate(row.c):
                if target in _normalize(cell_to_string(cell)):
                    return CellPosition(r, c)
        return None

    @staticmethod
    def numeric_at(table: RawTable, row: int, col: int) -> Optional[float]:
        """Number at (row, col); the display string wins over the raw value."""
        cell = table.cell(row, col)
        if cell is None:
            return None
        from_text = parse_numeric(cell_to_string(cell))
        if from_text is not None:
            return from_text
        return parse_numeric(cell.v)

    @classmethod
    def numeric_below(
        cls, table: RawTable, anchor: CellPosition, max_depth: int = MAX_PROBE_DEPTH
    ) -> Optional[float]:
        """First number within ``max_depth`` rows under the anchor, same column."""
        for offset in range(1, max_depth + 1):
            value = cls.numeric_at(table, anchor.row + offset, anchor.col)
            if value is not None:
                return value
        return None

    @classmethod
    def registration_heuristic(
        cls, table: RawTable, anchor: Optional[CellPosition]
    ) -> Optional[float]:
        """
        Scan the row below the registration label from its column rightwards.

        Takes the third number found if there are at least three, otherwise
        the last one found.
        """
        if anchor is None:
            return None
        row_idx = anchor.row + 1
        if row_idx >= len(table.rows):
            return None

        numbers: List[float] = []
        for c in range(anchor.col, len(table.rows[row_idx].c)):
            value = cls.numeric_at(table, row_idx, c)
            if value is not None:
                numbers.append(value)

        if not numbers:
            return None
        if len(numbers) >= 3:
            return numbers[2]
        return numbers[-1]

    @staticmethod
    def extract_scenarios(table: RawTable) -> List[UnitScenario]:
        scenarios: List[UnitScenario] = []
        for row in table.rows:
            cells = row.c

            def at(i: int) -> Optional[RawCell]:
                return cells[i] if i < len(cells) else None

            ltv = cell_to_string(at(1))
            if "%" not in ltv:
                continue

            values = {
                name: parse_numeric(at(i).v if at(i) is not None else None)
                for i, name in enumerate(SCENARIO_VALUE_FIELDS, start=3)
            }
            scenarios.append(
                UnitScenario(
                    ltv=ltv or "-",
                    loan_amount=parse_numeric(cell_to_string(at(2))),
                    **values,
                )
            )
        return scenarios

    @classmethod
    def _raw_number(cls, table: RawTable, row: int, col: int) -> Optional[float]:
        cell = table.cell(row, col)
        return parse_numeric(cell.v) if cell is not None else None

    @classmethod
    def _text_number(cls, table: RawTable, row: int, col: int) -> Optional[float]:
        return parse_numeric(cell_to_string(table.cell(row, col)))

    @classmethod
    def _text(cls, table: RawTable, row: int, col: int) -> str:
        return cell_to_string(table.cell(row, col))

    @classmethod
    def extract_lease(
        cls,
        table: RawTable,
        deposit_label: Optional[CellPosition],
        rent_label: Optional[CellPosition],
        rent_per_pyeong_label: Optional[CellPosition],
    ) -> LeaseInfo:
        if deposit_label is not None:
            deposit = cls.numeric_below(table, deposit_label)
        else:
            deposit = cls._text_number(table, 8, 1)

        if rent_label is not None:
            monthly_rent = cls.numeric_below(table, rent_label)
        elif deposit_label is not None:
            monthly_rent = cls.numeric_at(table, deposit_label.row + 1, deposit_label.col + 1)
        else:
            monthly_rent = cls._text_number(table, 8, 2)

        if rent_per_pyeong_label is not None:
            per_pyeong = cls.numeric_below(table, rent_per_pyeong_label)
        elif rent_label is not None:
            per_pyeong = cls.numeric_at(table, rent_label.row + 1, rent_label.col + 1)
        elif deposit_label is not None:
            per_pyeong = cls.numeric_at(table, deposit_label.row + 1, deposit_label.col + 2)
        else:
            per_pyeong = None

        return LeaseInfo(
            deposit=deposit,
            monthly_rent=monthly_rent,
            monthly_rent_per_pyeong=per_pyeong,
        )

    @classmethod
    def extract_building(cls, table: RawTable) -> BuildingInfo:
        return BuildingInfo(
            supply_area_pyeong=cls._text(table, 0, 1),
            exclusive_area_pyeong=cls._text(table, 0, 2),
            exclusive_ratio=cls._raw_number(table, 0, 3),
            land_price=cls._raw_number(table, 0, 4),
            building_price=cls._raw_number(table, 0, 5),
            price_per_pyeong=cls._raw_number(table, 0, 6),
            supply_amount=cls._raw_number(table, 0, 7),
            vat=cls._raw_number(table, 0, 8),
            total_acquisition=cls._raw_number(table, 0, 9),
        )

    @classmethod
    def parse_detail(cls, table: RawTable) -> UnitDetailModel:
        deposit_label = cls.find_cell_by_keyword(table, DEPOSIT_KEYWORD)
        rent_label = cls.find_cell_by_keyword(table, RENT_KEYWORD)
        rent_per_pyeong_label = cls.find_cell_by_keyword(table, RENT_PER_PYEONG_KEYWORD)
        acquisition_tax_label = cls.find_cell_by_keyword(table, ACQUISITION_TAX_KEYWORD)
        registration_label = cls.find_cell_by_keyword(table, REGISTRATION_KEYWORD)

        scenarios = cls.extract_scenarios(table)

        registration = (
            cls.numeric_below(table, acquisition_tax_label)
            if acquisition_tax_label is not None
            else None
        )
        if registration is None and scenarios:
            registration = scenarios[0].fixed_cost
        if registration is None:
            registration = cls.registration_heuristic(table, registration_label)

        warning_label = table.cols[1].label if len(table.cols) > 1 else None

        detail = UnitDetailModel(
            warning_text=warning_label or "",
            building=cls.extract_building(table),
            facility=FacilityInfo(
                hvac=cls._text(table, 5, 1),
                interior=cls._text(table, 5, 2),
            ),
            lease=cls.extract_lease(table, deposit_label, rent_label, rent_per_pyeong_label),
            other_costs=OtherCosts(
                registration=registration,
                brokerage=cls._text_number(table, 11, 2),
                property_building_tax=cls._text_number(table, 12, 1),
                property_land_tax=cls._text_number(table, 12, 2),
            ),
            loan_interest_label=cls._text(table, 14, 2),
            scenarios=scenarios,
        )
        logger.debug(
            f"Parsed detail sheet: {len(table.rows)} rows, {len(scenarios)} scenarios, "
            f"deposit anchor={deposit_label}, rent anchor={rent_label}"
        )
        return detail
