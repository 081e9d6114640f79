"""
Portfolio models

Normalized summary-sheet records and the metrics derived from them.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PortfolioUnit(BaseModel):
    """One data row of the summary sheet"""

    id: str = Field(..., description="Stable row id (unit-{n})")
    site: str = Field(..., description="현장/호실명 (human key)")
    ownership: str = Field(default="-", description="명의")
    tenant_status: str = Field(default="-", description="실입주/임대 상태")
    completion_date: str = Field(default="-", description="준공일 (raw)")
    contract_renewal_raw: str = Field(default="", description="계약갱신일 (raw)")
    loan_renewal_raw: str = Field(default="", description="대출갱신일 (raw)")
    note: str = Field(default="-", description="비고")
    business_number: str = Field(default="-", description="사업자등록번호")

    supply_price: Optional[float] = Field(default=None, description="공급금액")
    loan_amount: Optional[float] = Field(default=None, description="대출금")
    interest_rate: Optional[float] = Field(default=None, description="이율 (fraction, e.g. 0.035)")
    monthly_interest: Optional[float] = Field(default=None, description="월 대출이자")
    monthly_rent: Optional[float] = Field(default=None, description="월세")
    building_tax: Optional[float] = Field(default=None, description="재산세(건물분)")
    land_tax: Optional[float] = Field(default=None, description="재산세(토지분)")
    traffic_inducement_charge: Optional[float] = Field(default=None, description="교통유발부담금")

    model_config = ConfigDict(frozen=True)


class PortfolioSummary(BaseModel):
    """Portfolio-level aggregate"""

    total_units: int = 0
    leased_units: int = 0
    total_supply_price: float = 0.0
    total_loan_amount: float = 0.0
    total_equity: float = 0.0
    avg_interest_rate: Optional[float] = Field(default=None, description="Loan-weighted average rate")
    monthly_rent_income: float = 0.0
    monthly_interest_cost: float = 0.0
    monthly_net_cashflow: float = 0.0
    annual_net_cashflow: float = 0.0
    annual_return_on_equity: Optional[float] = None
    loan_to_value: Optional[float] = None


class TaxSummary(BaseModel):
    """Annual tax totals"""

    building_tax_total: float = 0.0
    land_tax_total: float = 0.0
    traffic_charge_total: float = 0.0
    annual_tax_total: float = 0.0


class UnitMetrics(BaseModel):
    """Per-unit figures for table display"""

    equity: float = 0.0
    monthly_net: float = 0.0
    annual_return_on_equity: Optional[float] = None


class RenewalKind(str, Enum):
    CONTRACT = "contract"
    LOAN = "loan"

    @property
    def label(self) -> str:
        return "계약갱신" if self is RenewalKind.CONTRACT else "대출갱신"


class RenewalAlert(BaseModel):
    """Upcoming contract/loan renewal inside the alert window"""

    id: str
    site: str
    kind: RenewalKind
    raw_date: str
    days_left: int


class PortfolioSnapshot(BaseModel):
    """Everything derived from one summary-sheet fetch"""

    units: List[PortfolioUnit] = Field(default_factory=list)
    summary: PortfolioSummary = Field(default_factory=PortfolioSummary)
    taxes: TaxSummary = Field(default_factory=TaxSummary)
    alerts: List[RenewalAlert] = Field(default_factory=list)
