"""
Column resolver.

Maps semantic portfolio fields to observed header labels by keyword substring
match. Header text drifts between sheet edits ("현장", "호실명", "Site"), so
matching is containment on the lowercased label, never equality.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional, Sequence, Tuple

# Most specific keyword first.
PORTFOLIO_COLUMN_CANDIDATES: Dict[str, Tuple[str, ...]] = {
    "site": ("현장", "호실", "site"),
    "completion_date": ("준공일", "completion"),
    "supply_price": ("공급금액", "매입", "price"),
    "loan_amount": ("대출금", "loan"),
    "interest_rate": ("이율", "금리", "rate"),
    "monthly_interest": ("대출이자", "interest"),
    "monthly_rent": ("월세", "임대료", "rent"),
    "contract_renewal": ("계약갱신", "계약 갱신"),
    "loan_renewal": ("대출갱신", "대출 갱신"),
    "ownership": ("명의",),
    "tenant_status": ("실입주 여부", "입주", "임대"),
    "note": ("비고", "note"),
    "business_number": ("사업자등록번호",),
    "building_tax": ("재산세", "건문불"),
    "land_tax": ("토지분",),
    "traffic_charge": ("교통유발부담금",),
}


def find_likely_column(columns: Sequence[str], keys: Sequence[str]) -> Optional[str]:
    """
    Best-effort fuzzy column lookup.

    For each key in order, return the first column whose lowercased label
    contains it. Earlier keys win even if a later key matches more columns.
    """
    lowered = [(column, column.lower()) for column in columns]
    for key in keys:
        for original, lowered_label in lowered:
            if key in lowered_label:
                return original
    return None


@dataclass(frozen=True)
class PortfolioColumns:
    """Resolved label per semantic field (None = unresolved)."""

    site: Optional[str] = None
    completion_date: Optional[str] = None
    supply_price: Optional[str] = None
    loan_amount: Optional[str] = None
    interest_rate: Optional[str] = None
    monthly_interest: Optional[str] = None
    monthly_rent: Optional[str] = None
    contract_renewal: Optional[str] = None
    loan_renewal: Optional[str] = None
    ownership: Optional[str] = None
    tenant_status: Optional[str] = None
    note: Optional[str] = None
    business_number: Optional[str] = None
    building_tax: Optional[str] = None
    land_tax: Optional[str] = None
    traffic_charge: Optional[str] = None

    def unresolved(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is None)


def resolve_portfolio_columns(columns: Sequence[str]) -> PortfolioColumns:
    return PortfolioColumns(
        **{
            name: find_likely_column(columns, candidates)
            for name, candidates in PORTFOLIO_COLUMN_CANDIDATES.items()
        }
    )
