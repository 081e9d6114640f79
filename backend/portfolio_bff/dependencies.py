"""
BFF Dependencies

FastAPI Depends() providers backed by a per-application container kept on
``app.state``. The lifespan creates the container (and fails startup on a bad
sheet id); requests reach it through DashboardDependencyProvider. Tests
replace providers via dependency_overrides.
"""

from typing import Optional

from fastapi import Depends, FastAPI, Request

from portfolio_shared.config.settings import ApplicationSettings, get_settings
from portfolio_shared.models.portfolio import PortfolioSnapshot
from portfolio_shared.models.unit_detail import UnitDetailModel

from data_connector.google_sheets.service import GoogleSheetsService

from .services.view_state import SequencedView, ViewRegistry

DETAIL_ERROR_MESSAGE = "상세 데이터를 불러오는 중 오류가 발생했습니다."


class DashboardContainer:
    """Sheet client and view states owned by one application instance."""

    def __init__(self) -> None:
        self.sheets_service: Optional[GoogleSheetsService] = None
        self.portfolio_view: SequencedView[PortfolioSnapshot] = SequencedView("portfolio")
        self.unit_views: ViewRegistry[UnitDetailModel] = ViewRegistry(
            error_message=DETAIL_ERROR_MESSAGE
        )

    def sheets(self, settings: ApplicationSettings) -> GoogleSheetsService:
        """Shared gviz client; raises ConfigError if the sheet id is missing or malformed."""
        if self.sheets_service is None:
            self.sheets_service = GoogleSheetsService.from_settings(settings.google_sheets)
        return self.sheets_service

    async def close(self) -> None:
        if self.sheets_service is not None:
            await self.sheets_service.close()
            self.sheets_service = None


def attach_container(app: FastAPI) -> DashboardContainer:
    container = DashboardContainer()
    app.state.dashboard = container
    return container


def get_container(request: Request) -> DashboardContainer:
    container = getattr(request.app.state, "dashboard", None)
    if container is None:
        # app served without its lifespan (e.g. TestClient used outside a with-block)
        container = attach_container(request.app)
    return container


class DashboardDependencyProvider:
    """Depends() providers over the application container."""

    @staticmethod
    async def get_sheets_service(
        container: DashboardContainer = Depends(get_container),
        settings: ApplicationSettings = Depends(get_settings),
    ) -> GoogleSheetsService:
        return container.sheets(settings)

    @staticmethod
    def get_portfolio_view(
        container: DashboardContainer = Depends(get_container),
    ) -> SequencedView[PortfolioSnapshot]:
        return container.portfolio_view

    @staticmethod
    def get_unit_views(
        container: DashboardContainer = Depends(get_container),
    ) -> ViewRegistry[UnitDetailModel]:
        return container.unit_views


get_sheets_service = DashboardDependencyProvider.get_sheets_service
get_portfolio_view = DashboardDependencyProvider.get_portfolio_view
get_unit_views = DashboardDependencyProvider.get_unit_views
