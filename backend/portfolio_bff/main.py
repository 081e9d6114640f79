"""
Portfolio Dashboard BFF
공개 Google Sheet 기반 부동산 포트폴리오 대시보드 JSON 서비스
"""

from dotenv import load_dotenv

load_dotenv()  # Load .env file

from contextlib import asynccontextmanager
from typing import Any, Dict

import uvicorn
from fastapi import FastAPI

from portfolio_shared import __version__
from portfolio_shared.config.settings import get_settings
from portfolio_shared.utils.app_logger import configure_logging, get_dashboard_logger

from portfolio_bff.dependencies import attach_container
from portfolio_bff.routers import portfolio, units

logger = get_dashboard_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 시작/종료 이벤트"""
    settings = get_settings()
    configure_logging(settings.service.log_level)

    # A missing or malformed GOOGLE_SHEET_ID is fatal: ConfigError aborts startup
    container = attach_container(app)
    sheets = container.sheets(settings)
    logger.info(f"Portfolio Dashboard 시작 (sheet={sheets.base_query.sheet_id})")

    try:
        yield
    finally:
        await container.close()
    logger.info("Portfolio Dashboard 종료")


app = FastAPI(
    title="Portfolio Dashboard BFF",
    version=__version__,
    description="보유 호실 투자관리 대시보드 (Google Sheets gviz)",
    lifespan=lifespan,
)

app.include_router(portfolio.router, prefix="/api/v1")
app.include_router(units.router, prefix="/api/v1")


@app.get("/")
async def root() -> Dict[str, Any]:
    """루트 엔드포인트"""
    return {
        "service": "portfolio-dashboard",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "portfolio": "/api/v1/portfolio",
            "unit_detail": "/api/v1/units/{slug}",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check() -> Dict[str, Any]:
    """서비스 상태 확인"""
    return {"service": "portfolio-dashboard", "version": __version__, "status": "healthy"}


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "portfolio_bff.main:app",
        host=settings.service.dashboard_host,
        port=settings.service.dashboard_port,
        log_level=settings.service.log_level.lower(),
    )


if __name__ == "__main__":
    run()
