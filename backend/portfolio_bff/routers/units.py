"""
호실 상세 라우터
슬러그로 상세 탭을 찾아 건물/임대/비용 정보와 대출 시나리오를 반환
"""

import logging

from fastapi import APIRouter, Depends

from portfolio_shared.exceptions import NotFoundError
from portfolio_shared.models.unit_detail import UnitDetailModel
from portfolio_shared.services.detail_extractor import UnitDetailExtractor

from data_connector.google_sheets.registry import route_by_slug
from data_connector.google_sheets.service import GoogleSheetsService

from ..dependencies import get_sheets_service, get_unit_views
from ..schemas import UnitDetailViewResponse
from ..services.view_state import ViewRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Units"])


@router.get("/units/{slug}", response_model=UnitDetailViewResponse)
async def get_unit_detail(
    slug: str,
    service: GoogleSheetsService = Depends(get_sheets_service),
    views: ViewRegistry[UnitDetailModel] = Depends(get_unit_views),
) -> UnitDetailViewResponse:
    """
    호실 상세

    등록되지 않은 슬러그는 오류가 아니라 found=false 상태로 반환합니다.
    """
    route = route_by_slug(slug)
    if route is None:
        not_found = NotFoundError(slug)
        logger.info(f"Unknown unit slug: {slug}")
        return UnitDetailViewResponse(slug=slug, found=False, message=not_found.message)

    async def load() -> UnitDetailModel:
        table = await service.fetch_table_by_gid(route.gid)
        return UnitDetailExtractor.parse_detail(table)

    view = views.get(route.slug)
    state = await view.refresh(load)

    return UnitDetailViewResponse(
        slug=route.slug,
        title=route.title,
        loading=state.loading,
        error=state.error,
        detail=state.data,
        base_scenario=state.data.base_scenario if state.data is not None else None,
    )
