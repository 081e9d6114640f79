import pytest

from portfolio_shared.models.portfolio import PortfolioUnit
from portfolio_shared.services.portfolio_metrics import (
    is_leased,
    summarize_portfolio,
    summarize_taxes,
    unit_metrics,
    weighted_average_rate,
)


def _unit(idx, **kwargs):
    kwargs.setdefault("site", f"호실 {idx + 1}")
    return PortfolioUnit(id=f"unit-{idx}", **kwargs)


def test_weighted_average_rate_weights_by_loan_amount():
    units = [
        _unit(0, loan_amount=100, interest_rate=0.04),
        _unit(1, loan_amount=200, interest_rate=0.045),
    ]

    assert weighted_average_rate(units) == pytest.approx(0.043333, rel=1e-4)


def test_weighted_average_rate_skips_units_without_rate_or_loan():
    units = [
        _unit(0, loan_amount=100, interest_rate=0.04),
        _unit(1, loan_amount=None, interest_rate=0.09),
        _unit(2, loan_amount=0, interest_rate=0.09),
        _unit(3, loan_amount=500, interest_rate=None),
    ]

    assert weighted_average_rate(units) == pytest.approx(0.04)


def test_weighted_average_rate_is_none_without_positive_loans():
    units = [_unit(0, loan_amount=0, interest_rate=0.04), _unit(1, interest_rate=0.05)]

    assert weighted_average_rate(units) is None
    assert weighted_average_rate([]) is None


def test_summary_totals_and_ratios():
    units = [
        _unit(0, supply_price=300, loan_amount=200, monthly_rent=10, monthly_interest=4, tenant_status="임대중"),
        _unit(1, supply_price=200, loan_amount=100, monthly_rent=5, monthly_interest=2, tenant_status="공실"),
    ]

    summary = summarize_portfolio(units)

    assert summary.total_units == 2
    assert summary.leased_units == 1
    assert summary.total_supply_price == 500
    assert summary.total_loan_amount == 300
    assert summary.total_equity == 200
    assert summary.monthly_rent_income == 15
    assert summary.monthly_interest_cost == 6
    assert summary.monthly_net_cashflow == 9
    assert summary.annual_net_cashflow == 108
    assert summary.annual_return_on_equity == pytest.approx(108 / 200)
    assert summary.loan_to_value == pytest.approx(0.6)


def test_missing_values_count_as_zero_but_units_are_kept():
    units = [_unit(0), _unit(1, monthly_rent=100)]

    summary = summarize_portfolio(units)

    assert summary.total_units == 2
    assert summary.monthly_rent_income == 100
    assert summary.total_supply_price == 0
    assert summary.loan_to_value is None
    assert summary.annual_return_on_equity is None
    assert summary.avg_interest_rate is None


def test_roe_is_none_when_equity_is_not_positive():
    units = [_unit(0, supply_price=100, loan_amount=150, monthly_rent=10)]

    summary = summarize_portfolio(units)

    assert summary.total_equity == -50
    assert summary.annual_return_on_equity is None
    assert summary.loan_to_value == pytest.approx(1.5)


def test_summary_is_deterministic():
    units = [
        _unit(0, supply_price=300, loan_amount=200, interest_rate=0.04, monthly_rent=10),
        _unit(1, supply_price=250, loan_amount=100, interest_rate=0.05, monthly_interest=3),
    ]

    assert summarize_portfolio(units) == summarize_portfolio(list(units))


@pytest.mark.parametrize(
    "status, leased",
    [("임대중", True), ("실입주", True), ("운영", True), ("공실", False), ("-", False)],
)
def test_is_leased_markers(status, leased):
    assert is_leased(_unit(0, tenant_status=status)) is leased


def test_tax_totals():
    units = [
        _unit(0, building_tax=100, land_tax=50, traffic_inducement_charge=10),
        _unit(1, building_tax=200, land_tax=None, traffic_inducement_charge=None),
    ]

    taxes = summarize_taxes(units)

    assert taxes.building_tax_total == 300
    assert taxes.land_tax_total == 50
    assert taxes.traffic_charge_total == 10
    assert taxes.annual_tax_total == 360


def test_unit_metrics():
    metrics = unit_metrics(
        _unit(0, supply_price=300, loan_amount=200, monthly_rent=10, monthly_interest=4)
    )

    assert metrics.equity == 100
    assert metrics.monthly_net == 6
    assert metrics.annual_return_on_equity == pytest.approx(72 / 100)


def test_unit_metrics_without_supply_price():
    metrics = unit_metrics(_unit(0, loan_amount=200, monthly_rent=10))

    assert metrics.equity == 0
    assert metrics.monthly_net == 10
    assert metrics.annual_return_on_equity is None
