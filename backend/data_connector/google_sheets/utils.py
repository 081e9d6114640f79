"""
Google Sheets Connector - Utility Functions
"""

import json
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from portfolio_shared.exceptions import DecodeError
from portfolio_shared.models.sheet_table import GvizResponse, RawTable

GVIZ_BASE_URL = "https://docs.google.com/spreadsheets/d"

# google.visualization.Query.setResponse({...});
_GVIZ_ENVELOPE = re.compile(r"setResponse\((.*)\);?\s*$", re.DOTALL)


def extract_sheet_id(sheet_url: str) -> str:
    """
    Google Sheets URL에서 Sheet ID 추출 (이미 ID이면 그대로 반환)

    Args:
        sheet_url: Google Sheets URL 또는 Sheet ID

    Returns:
        Sheet ID

    Raises:
        ValueError: 유효하지 않은 URL 형식
    """
    value = sheet_url.strip()
    if "/" not in value:
        if not re.fullmatch(r"[a-zA-Z0-9_-]+", value):
            raise ValueError(f"Invalid sheet ID: {sheet_url}")
        return value

    # Pattern: https://docs.google.com/spreadsheets/d/{SHEET_ID}/...
    match = re.search(r"/spreadsheets/(?:u/\d+/)?d/([a-zA-Z0-9_-]+)", value)
    if not match:
        raise ValueError(f"Cannot extract sheet ID from URL: {sheet_url}")

    return match.group(1)


def build_gviz_url(sheet_id: str) -> str:
    """
    gviz 쿼리 엔드포인트 URL 생성

    Args:
        sheet_id: Google Sheets ID

    Returns:
        Query endpoint URL
    """
    return f"{GVIZ_BASE_URL}/{sheet_id}/gviz/tq"


def build_gviz_params(
    *,
    gid: Optional[str] = None,
    sheet_name: Optional[str] = None,
    query: str = "select *",
) -> Dict[str, str]:
    """
    gviz 쿼리 파라미터 생성

    탭 내부 ID(gid)가 있으면 탭 이름보다 우선합니다.
    """
    params: Dict[str, str] = {}
    if gid:
        params["gid"] = str(gid)
    else:
        params["sheet"] = sheet_name or "Sheet1"
    params["tq"] = query or "select *"
    params["tqx"] = "out:json"
    return params


def parse_gviz_response(raw_text: str) -> RawTable:
    """
    gviz 응답 텍스트에서 테이블 추출

    Args:
        raw_text: ``<callback>(<JSON>);`` 형식의 응답 본문

    Returns:
        RawTable

    Raises:
        DecodeError: 봉투 패턴이 없거나 JSON이 유효하지 않은 경우
    """
    match = _GVIZ_ENVELOPE.search(raw_text or "")
    if not match or not match.group(1):
        raise DecodeError("envelope not found")

    try:
        payload = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise DecodeError(f"invalid JSON: {e}") from e

    try:
        response = GvizResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"unexpected payload: {e.error_count()} errors") from e

    if response.table is None:
        raise DecodeError(f"no table in response (status={response.status})")
    return response.table


def dump_gviz_table(table: RawTable) -> Dict[str, Any]:
    """Serialize a decoded table back to the gviz JSON shape (only keys that were present)."""
    return table.model_dump(mode="json", exclude_unset=True)
