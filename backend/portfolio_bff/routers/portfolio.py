"""
포트폴리오 라우터
요약 시트를 다시 읽어 호실별 손익, 요약 지표, 세금, 갱신 알림을 반환
"""

import logging

from fastapi import APIRouter, Depends

from portfolio_shared.config.settings import ApplicationSettings, get_settings
from portfolio_shared.models.portfolio import PortfolioSnapshot
from portfolio_shared.services.portfolio_snapshot import build_portfolio_snapshot

from data_connector.google_sheets.service import GoogleSheetsService

from ..dependencies import get_portfolio_view, get_sheets_service
from ..schemas import PortfolioViewResponse, build_portfolio_response
from ..services.view_state import SequencedView

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Portfolio"])


@router.get("/portfolio", response_model=PortfolioViewResponse)
async def get_portfolio(
    service: GoogleSheetsService = Depends(get_sheets_service),
    view: SequencedView[PortfolioSnapshot] = Depends(get_portfolio_view),
    settings: ApplicationSettings = Depends(get_settings),
) -> PortfolioViewResponse:
    """
    포트폴리오 대시보드

    매 요청마다 시트를 새로 읽습니다. 실패 시 error 필드에 메시지를 담아 반환합니다.
    """

    async def load() -> PortfolioSnapshot:
        table = await service.fetch_header_table()
        return build_portfolio_snapshot(
            table, window_days=settings.service.renewal_alert_window_days
        )

    state = await view.refresh(load)
    if state.data is not None:
        logger.info(
            f"Portfolio view #{state.sequence}: {len(state.data.units)} units, "
            f"{len(state.data.alerts)} renewal alerts"
        )
    return build_portfolio_response(state)
