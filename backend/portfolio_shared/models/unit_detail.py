"""
Unit detail models

Values extracted from a per-unit detail sheet (no fixed header row).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class UnitScenario(BaseModel):
    """One LTV tier row of the detail sheet"""

    ltv: str = "-"
    loan_amount: Optional[float] = None
    equity: Optional[float] = None
    deposit: Optional[float] = None
    fixed_cost: Optional[float] = None
    invested_total: Optional[float] = None
    monthly_rent: Optional[float] = None
    monthly_interest: Optional[float] = None
    monthly_net: Optional[float] = None
    monthly_roi: Optional[float] = None
    annual_profit: Optional[float] = None
    annual_roi: Optional[float] = None


class BuildingInfo(BaseModel):
    supply_area_pyeong: str = ""
    exclusive_area_pyeong: str = ""
    exclusive_ratio: Optional[float] = None
    land_price: Optional[float] = None
    building_price: Optional[float] = None
    price_per_pyeong: Optional[float] = None
    supply_amount: Optional[float] = None
    vat: Optional[float] = None
    total_acquisition: Optional[float] = None


class FacilityInfo(BaseModel):
    hvac: str = ""
    interior: str = ""


class LeaseInfo(BaseModel):
    deposit: Optional[float] = None
    monthly_rent: Optional[float] = None
    monthly_rent_per_pyeong: Optional[float] = None


class OtherCosts(BaseModel):
    registration: Optional[float] = Field(default=None, description="취등록세/등기비용")
    brokerage: Optional[float] = None
    property_building_tax: Optional[float] = None
    property_land_tax: Optional[float] = None


class UnitDetailModel(BaseModel):
    """Parsed detail sheet"""

    warning_text: str = ""
    building: BuildingInfo = Field(default_factory=BuildingInfo)
    facility: FacilityInfo = Field(default_factory=FacilityInfo)
    lease: LeaseInfo = Field(default_factory=LeaseInfo)
    other_costs: OtherCosts = Field(default_factory=OtherCosts)
    loan_interest_label: str = ""
    scenarios: List[UnitScenario] = Field(default_factory=list)

    @property
    def base_scenario(self) -> Optional[UnitScenario]:
        return self.scenarios[0] if self.scenarios else None
