"""
기본 도메인 예외 정의
"""

from typing import Optional


class DomainException(Exception):
    """도메인 기본 예외"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ConfigError(DomainException):
    """필수 설정 누락 또는 잘못된 값 (치명적, 모든 요청 차단)"""

    def __init__(self, name: str, reason: Optional[str] = None):
        details = {"setting": name}
        if reason:
            details["reason"] = reason
        super().__init__(
            message=f"{name} 환경 변수가 올바르지 않습니다." if reason else f"{name} 환경 변수가 필요합니다.",
            code="CONFIG_ERROR",
            details=details
        )


class TransportError(DomainException):
    """Google Sheets HTTP 요청 실패"""

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(
            message=f"Google Sheets 요청 실패: {status_code}",
            code="TRANSPORT_ERROR",
            details={"status_code": status_code, "url": url} if url else {"status_code": status_code}
        )
        self.status_code = status_code


class DecodeError(DomainException):
    """gviz 응답 봉투/JSON 파싱 실패"""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            message="Google Sheets 응답을 파싱할 수 없습니다.",
            code="DECODE_ERROR",
            details={"reason": reason} if reason else {}
        )


class NotFoundError(DomainException):
    """등록되지 않은 호실 상세 경로"""

    def __init__(self, slug: str):
        super().__init__(
            message="등록되지 않은 호실 상세 페이지입니다.",
            code="NOT_FOUND",
            details={"slug": slug}
        )
