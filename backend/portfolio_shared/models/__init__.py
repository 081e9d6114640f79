from .sheet_table import (
    CellValue,
    GvizResponse,
    HeaderTable,
    RawCell,
    RawColumn,
    RawRow,
    RawTable,
    cell_text,
)

__all__ = [
    "CellValue",
    "GvizResponse",
    "HeaderTable",
    "RawCell",
    "RawColumn",
    "RawRow",
    "RawTable",
    "cell_text",
]

from .portfolio import (
    PortfolioSnapshot,
    PortfolioSummary,
    PortfolioUnit,
    RenewalAlert,
    RenewalKind,
    TaxSummary,
    UnitMetrics,
)
from .unit_detail import (
    BuildingInfo,
    FacilityInfo,
    LeaseInfo,
    OtherCosts,
    UnitDetailModel,
    UnitScenario,
)

__all__ += [
    "PortfolioSnapshot",
    "PortfolioSummary",
    "PortfolioUnit",
    "RenewalAlert",
    "RenewalKind",
    "TaxSummary",
    "UnitMetrics",
    "BuildingInfo",
    "FacilityInfo",
    "LeaseInfo",
    "OtherCosts",
    "UnitDetailModel",
    "UnitScenario",
]
