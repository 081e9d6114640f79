"""
gviz 전송 계층 테스트 (httpx MockTransport)
"""

import json

import httpx
import pytest

from data_connector.google_sheets.models import GvizQuery
from data_connector.google_sheets.service import GoogleSheetsService
from portfolio_shared.config.settings import GoogleSheetsSettings
from portfolio_shared.exceptions import ConfigError, DecodeError, TransportError

TABLE = {
    "cols": [{"label": "현장"}, {"label": "월세"}],
    "rows": [{"c": [{"v": "A동 101호"}, {"v": 900000}]}],
}


def _body(payload):
    return f"google.visualization.Query.setResponse({json.dumps(payload)});"


def _service(handler, **query_kwargs):
    query = GvizQuery(sheet_id="sheet-123", **query_kwargs)
    service = GoogleSheetsService(query, timeout=5.0)
    service._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return service


@pytest.mark.asyncio
async def test_fetch_table_sends_sheet_name_query():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text=_body({"status": "ok", "table": TABLE}))

    service = _service(handler, sheet_name="요약")
    table = await service.fetch_table()
    await service.close()

    assert len(table.rows) == 1
    assert calls[0].method == "GET"
    assert calls[0].url.path == "/spreadsheets/d/sheet-123/gviz/tq"
    assert dict(calls[0].url.params) == {"sheet": "요약", "tq": "select *", "tqx": "out:json"}


@pytest.mark.asyncio
async def test_gid_takes_precedence_over_sheet_name():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, text=_body({"table": TABLE}))

    service = _service(handler, sheet_name="요약")
    await service.fetch_table_by_gid("85403937")
    await service.close()

    assert seen == [{"gid": "85403937", "tq": "select *", "tqx": "out:json"}]


@pytest.mark.asyncio
async def test_fetch_header_table():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=_body({"table": TABLE}))

    service = _service(handler)
    table = await service.fetch_header_table()
    await service.close()

    assert table.labels == ("현장", "월세")
    assert table.rows == (("A동 101호", 900000),)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [204, 302, 403, 500])
async def test_non_200_raises_transport_error(status):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text="")

    service = _service(handler)
    with pytest.raises(TransportError) as exc_info:
        await service.fetch_table()
    await service.close()

    assert exc_info.value.status_code == status
    assert exc_info.value.message == f"Google Sheets 요청 실패: {status}"


@pytest.mark.asyncio
async def test_html_body_raises_decode_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>Sign in</html>")

    service = _service(handler)
    with pytest.raises(DecodeError):
        await service.fetch_table()
    await service.close()


def test_from_settings_builds_query():
    sheets = GoogleSheetsSettings(
        _env_file=None,
        google_sheet_id="https://docs.google.com/spreadsheets/d/1AbC/edit#gid=0",
        google_sheet_gid="42",
        google_sheet_timeout=3,
    )

    service = GoogleSheetsService.from_settings(sheets)

    assert service.base_query.sheet_id == "1AbC"
    assert service.base_query.params["gid"] == "42"
    assert service.timeout == 3


def test_from_settings_requires_sheet_id():
    sheets = GoogleSheetsSettings(_env_file=None, google_sheet_id="")

    with pytest.raises(ConfigError):
        GoogleSheetsService.from_settings(sheets)


def test_query_for_tab_keeps_sheet_and_query():
    base = GvizQuery(sheet_id="sheet-123", sheet_name="요약", query="select A, B")

    tab = base.for_tab("99")

    assert base.gid is None
    assert tab.url == base.url
    assert tab.params == {"gid": "99", "tq": "select A, B", "tqx": "out:json"}


def test_from_settings_rejects_malformed_sheet_id():
    sheets = GoogleSheetsSettings(_env_file=None, google_sheet_id="my sheet id")

    with pytest.raises(ConfigError) as exc_info:
        GoogleSheetsService.from_settings(sheets)

    assert exc_info.value.message == "GOOGLE_SHEET_ID 환경 변수가 올바르지 않습니다."
    assert "my sheet id" in exc_info.value.details["reason"]
