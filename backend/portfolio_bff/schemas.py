"""
BFF response schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from portfolio_shared.models.portfolio import (
    PortfolioSnapshot,
    PortfolioSummary,
    PortfolioUnit,
    RenewalAlert,
    TaxSummary,
    UnitMetrics,
)
from portfolio_shared.models.unit_detail import UnitDetailModel, UnitScenario
from portfolio_shared.services.portfolio_metrics import unit_metrics

from data_connector.google_sheets.registry import route_by_site

from .services.formatters import format_d_day, format_krw, format_percent
from .services.view_state import ViewSnapshot


class MetricCard(BaseModel):
    label: str
    value: str
    sub_value: Optional[str] = None
    negative: bool = False


class UnitRow(BaseModel):
    unit: PortfolioUnit
    metrics: UnitMetrics
    detail_slug: Optional[str] = Field(default=None, description="Detail page slug if routed")


class AlertRow(RenewalAlert):
    kind_label: str
    d_day: str


class PortfolioViewResponse(BaseModel):
    """포트폴리오 대시보드 뷰"""

    loading: bool = False
    error: Optional[str] = None
    units: List[UnitRow] = Field(default_factory=list)
    summary: PortfolioSummary = Field(default_factory=PortfolioSummary)
    taxes: TaxSummary = Field(default_factory=TaxSummary)
    alerts: List[AlertRow] = Field(default_factory=list)
    cards: List[MetricCard] = Field(default_factory=list)
    status_text: str = "데이터 없음"


class UnitDetailViewResponse(BaseModel):
    """호실 상세 뷰"""

    slug: str
    found: bool = True
    title: Optional[str] = None
    loading: bool = False
    error: Optional[str] = None
    message: Optional[str] = None
    detail: Optional[UnitDetailModel] = None
    base_scenario: Optional[UnitScenario] = None


def build_metric_cards(summary: PortfolioSummary) -> List[MetricCard]:
    return [
        MetricCard(label="보유 호실", value=f"{summary.total_units}개"),
        MetricCard(label="총 투자금(공급금액)", value=format_krw(summary.total_supply_price)),
        MetricCard(
            label="총 대출금 / LTV",
            value=format_krw(summary.total_loan_amount),
            sub_value=f"LTV {format_percent(summary.loan_to_value)}",
        ),
        MetricCard(label="월 임대수입", value=format_krw(summary.monthly_rent_income)),
        MetricCard(label="월 대출이자", value=format_krw(summary.monthly_interest_cost)),
        MetricCard(
            label="월 순현금흐름",
            value=format_krw(summary.monthly_net_cashflow),
            sub_value=f"연 환산 {format_krw(summary.annual_net_cashflow)}",
            negative=summary.monthly_net_cashflow < 0,
        ),
        MetricCard(label="자기자본", value=format_krw(summary.total_equity)),
        MetricCard(label="평균 대출이율(가중)", value=format_percent(summary.avg_interest_rate)),
        MetricCard(
            label="연 자기자본수익률(ROE)",
            value=format_percent(summary.annual_return_on_equity),
        ),
        MetricCard(
            label="임대/운영 중 호실",
            value=f"{summary.leased_units} / {summary.total_units}",
        ),
    ]


def build_portfolio_response(state: ViewSnapshot[PortfolioSnapshot]) -> PortfolioViewResponse:
    snapshot = state.data or PortfolioSnapshot()
    rows = []
    for unit in snapshot.units:
        route = route_by_site(unit.site)
        rows.append(
            UnitRow(
                unit=unit,
                metrics=unit_metrics(unit),
                detail_slug=route.slug if route else None,
            )
        )
    alerts = [
        AlertRow(
            **alert.model_dump(),
            kind_label=alert.kind.label,
            d_day=format_d_day(alert.days_left),
        )
        for alert in snapshot.alerts
    ]
    return PortfolioViewResponse(
        loading=state.loading,
        error=state.error,
        units=rows,
        summary=snapshot.summary,
        taxes=snapshot.taxes,
        alerts=alerts,
        cards=build_metric_cards(snapshot.summary),
        status_text=f"{len(rows)}개 호실 로드됨" if rows else "데이터 없음",
    )
