from portfolio_shared.exceptions import (
    ConfigError,
    DecodeError,
    DomainException,
    NotFoundError,
    TransportError,
)


def test_all_errors_share_domain_base():
    for error in (ConfigError("X"), TransportError(404), DecodeError(), NotFoundError("slug")):
        assert isinstance(error, DomainException)
        assert str(error) == error.message


def test_transport_error_details():
    error = TransportError(404, url="https://docs.google.com/spreadsheets/d/x/gviz/tq")

    assert error.code == "TRANSPORT_ERROR"
    assert error.status_code == 404
    assert error.details["status_code"] == 404
    assert error.details["url"].endswith("/gviz/tq")


def test_decode_error_reason_is_optional():
    assert DecodeError().details == {}
    assert DecodeError("invalid JSON").details == {"reason": "invalid JSON"}


def test_not_found_message():
    error = NotFoundError("unknown")

    assert error.code == "NOT_FOUND"
    assert error.message == "등록되지 않은 호실 상세 페이지입니다."
    assert error.details == {"slug": "unknown"}


def test_config_error_missing_and_malformed():
    missing = ConfigError("GOOGLE_SHEET_ID")
    malformed = ConfigError("GOOGLE_SHEET_ID", reason="Invalid sheet ID: my sheet id")

    assert missing.message == "GOOGLE_SHEET_ID 환경 변수가 필요합니다."
    assert missing.details == {"setting": "GOOGLE_SHEET_ID"}
    assert malformed.message == "GOOGLE_SHEET_ID 환경 변수가 올바르지 않습니다."
    assert malformed.details == {"setting": "GOOGLE_SHEET_ID", "reason": "Invalid sheet ID: my sheet id"}
