"""
Portfolio metrics.

Pure functions over a unit list. Sums treat None as 0 but never drop a unit
from the count; ratios are None when their denominator is not positive.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from portfolio_shared.models.portfolio import (
    PortfolioSummary,
    PortfolioUnit,
    TaxSummary,
    UnitMetrics,
)

LEASED_MARKERS = ("임대", "입주", "운영")


def _total(values: Iterable[Optional[float]]) -> float:
    total = 0.0
    for value in values:
        total += value if value is not None else 0.0
    return total


def weighted_average_rate(units: Sequence[PortfolioUnit]) -> Optional[float]:
    """Loan-amount weighted interest rate over units with a known rate and a positive loan."""
    numerator = 0.0
    denominator = 0.0
    for unit in units:
        if unit.interest_rate is None or unit.loan_amount is None or unit.loan_amount <= 0:
            continue
        numerator += unit.loan_amount * unit.interest_rate
        denominator += unit.loan_amount
    return numerator / denominator if denominator > 0 else None


def is_leased(unit: PortfolioUnit) -> bool:
    status = unit.tenant_status.lower()
    return any(marker in status for marker in LEASED_MARKERS)


def summarize_portfolio(units: Sequence[PortfolioUnit]) -> PortfolioSummary:
    total_supply_price = _total(u.supply_price for u in units)
    total_loan_amount = _total(u.loan_amount for u in units)
    total_equity = total_supply_price - total_loan_amount

    monthly_rent_income = _total(u.monthly_rent for u in units)
    monthly_interest_cost = _total(u.monthly_interest for u in units)
    monthly_net_cashflow = monthly_rent_income - monthly_interest_cost
    annual_net_cashflow = monthly_net_cashflow * 12

    return PortfolioSummary(
        total_units=len(units),
        leased_units=sum(1 for u in units if is_leased(u)),
        total_supply_price=total_supply_price,
        total_loan_amount=total_loan_amount,
        total_equity=total_equity,
        avg_interest_rate=weighted_average_rate(units),
        monthly_rent_income=monthly_rent_income,
        monthly_interest_cost=monthly_interest_cost,
        monthly_net_cashflow=monthly_net_cashflow,
        annual_net_cashflow=annual_net_cashflow,
        annual_return_on_equity=annual_net_cashflow / total_equity if total_equity > 0 else None,
        loan_to_value=total_loan_amount / total_supply_price if total_supply_price > 0 else None,
    )


def summarize_taxes(units: Sequence[PortfolioUnit]) -> TaxSummary:
    building = _total(u.building_tax for u in units)
    land = _total(u.land_tax for u in units)
    traffic = _total(u.traffic_inducement_charge for u in units)
    return TaxSummary(
        building_tax_total=building,
        land_tax_total=land,
        traffic_charge_total=traffic,
        annual_tax_total=building + land + traffic,
    )


def unit_metrics(unit: PortfolioUnit) -> UnitMetrics:
    """Equity, monthly net and annual ROE of a single unit."""
    supply = unit.supply_price or 0.0
    equity = supply - (unit.loan_amount or 0.0) if supply > 0 else 0.0
    monthly_net = (unit.monthly_rent or 0.0) - (unit.monthly_interest or 0.0)
    return UnitMetrics(
        equity=equity,
        monthly_net=monthly_net,
        annual_return_on_equity=(monthly_net * 12) / equity if equity > 0 else None,
    )
