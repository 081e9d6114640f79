import pytest

from portfolio_shared.config.settings import (
    ApplicationSettings,
    GoogleSheetsSettings,
    ServiceSettings,
)
from portfolio_shared.exceptions import ConfigError


def test_sheet_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_SHEET_ID", "  1AbC-def_123  ")
    monkeypatch.setenv("GOOGLE_SHEET_GID", "85403937")
    monkeypatch.setenv("GOOGLE_SHEET_NAME", "요약")
    monkeypatch.setenv("GOOGLE_SHEET_TIMEOUT", "5")

    sheets = GoogleSheetsSettings(_env_file=None)

    assert sheets.require_sheet_id() == "1AbC-def_123"
    assert sheets.google_sheet_gid == "85403937"
    assert sheets.google_sheet_name == "요약"
    assert sheets.google_sheet_query == "select *"
    assert sheets.google_sheet_timeout == 5.0


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("GOOGLE_SHEET_GID", "   ")
    monkeypatch.setenv("GOOGLE_SHEET_NAME", "")
    monkeypatch.setenv("GOOGLE_SHEET_QUERY", " ")

    sheets = GoogleSheetsSettings(_env_file=None)

    assert sheets.google_sheet_gid is None
    assert sheets.google_sheet_name == "Sheet1"
    assert sheets.google_sheet_query == "select *"


def test_missing_sheet_id_raises_config_error(monkeypatch):
    monkeypatch.delenv("GOOGLE_SHEET_ID", raising=False)

    sheets = GoogleSheetsSettings(_env_file=None)

    with pytest.raises(ConfigError) as exc_info:
        sheets.require_sheet_id()

    assert exc_info.value.code == "CONFIG_ERROR"
    assert exc_info.value.message == "GOOGLE_SHEET_ID 환경 변수가 필요합니다."
    assert exc_info.value.details == {"setting": "GOOGLE_SHEET_ID"}


def test_service_settings_defaults(monkeypatch):
    for name in ("DASHBOARD_HOST", "DASHBOARD_PORT", "LOG_LEVEL", "RENEWAL_ALERT_WINDOW_DAYS"):
        monkeypatch.delenv(name, raising=False)

    service = ServiceSettings(_env_file=None)

    assert service.dashboard_port == 8010
    assert service.log_level == "INFO"
    assert service.renewal_alert_window_days == 120


def test_application_settings_aggregate_sections(monkeypatch):
    monkeypatch.setenv("GOOGLE_SHEET_ID", "1AbC")
    monkeypatch.setenv("RENEWAL_ALERT_WINDOW_DAYS", "90")

    app_settings = ApplicationSettings(_env_file=None)

    assert isinstance(app_settings.google_sheets, GoogleSheetsSettings)
    assert app_settings.google_sheets.require_sheet_id() == "1AbC"
    assert app_settings.service.renewal_alert_window_days == 90
