"""
Google Sheets connector: published-sheet gviz transport, envelope decoding and
the unit detail routing table.
"""

from .registry import UNIT_DETAIL_ROUTES, UnitDetailRoute, route_by_site, route_by_slug
from .service import GoogleSheetsService
from .utils import build_gviz_params, build_gviz_url, extract_sheet_id, parse_gviz_response

__all__ = [
    "GoogleSheetsService",
    "UNIT_DETAIL_ROUTES",
    "UnitDetailRoute",
    "route_by_site",
    "route_by_slug",
    "build_gviz_params",
    "build_gviz_url",
    "extract_sheet_id",
    "parse_gviz_response",
]
