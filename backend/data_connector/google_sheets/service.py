"""
Google Sheets Connector - Service Layer (gviz transport).

Read-only access to a spreadsheet published to the web:
- one GET per fetch, no retry
- non-200 -> TransportError with the status code
- body decoded from the gviz callback envelope into a RawTable
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from portfolio_shared.config.settings import GoogleSheetsSettings
from portfolio_shared.exceptions import ConfigError, TransportError
from portfolio_shared.models.sheet_table import HeaderTable, RawTable

from .models import GvizQuery
from .utils import extract_sheet_id, parse_gviz_response

logger = logging.getLogger(__name__)


class GoogleSheetsService:
    """Published Google Sheet client (read-only)."""

    def __init__(self, base_query: GvizQuery, *, timeout: float = 30.0):
        self.base_query = base_query
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, sheets_settings: GoogleSheetsSettings) -> "GoogleSheetsService":
        """Build from settings; raises ConfigError when the sheet id is missing or malformed."""
        try:
            sheet_id = extract_sheet_id(sheets_settings.require_sheet_id())
        except ValueError as e:
            raise ConfigError("GOOGLE_SHEET_ID", reason=str(e)) from e
        query = GvizQuery(
            sheet_id=sheet_id,
            gid=sheets_settings.google_sheet_gid,
            sheet_name=sheets_settings.google_sheet_name,
            query=sheets_settings.google_sheet_query,
        )
        return cls(query, timeout=sheets_settings.google_sheet_timeout)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": "portfolio-dashboard/0.1"},
                follow_redirects=True,
            )
        return self._client

    async def fetch_text(self, query: GvizQuery) -> str:
        client = await self._get_client()
        response = await client.get(query.url, params=query.params)
        if response.status_code != 200:
            logger.warning(f"gviz request failed: {response.status_code} ({query.url})")
            raise TransportError(response.status_code, url=query.url)
        return response.text

    async def fetch_table(self, query: Optional[GvizQuery] = None) -> RawTable:
        """Fetch and decode one tab; defaults to the configured summary tab."""
        target = query or self.base_query
        text = await self.fetch_text(target)
        table = parse_gviz_response(text)
        logger.info(
            f"Fetched sheet {target.sheet_id} "
            f"({'gid=' + target.gid if target.gid else 'sheet=' + str(target.sheet_name)}): "
            f"{len(table.cols)} cols, {len(table.rows)} rows"
        )
        return table

    async def fetch_table_by_gid(self, gid: str) -> RawTable:
        """Fetch a detail tab of the same spreadsheet by its internal id."""
        return await self.fetch_table(self.base_query.for_tab(gid))

    async def fetch_header_table(self) -> HeaderTable:
        """Summary tab as a header-bearing table (labels from row 1)."""
        return (await self.fetch_table()).to_header_table()

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
