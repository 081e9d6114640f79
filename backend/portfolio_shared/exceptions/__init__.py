"""
도메인 예외 정의
설정, 전송, 디코딩, 경로 조회 단계별 예외
"""

from .base import (
    ConfigError,
    DecodeError,
    DomainException,
    NotFoundError,
    TransportError,
)

__all__ = [
    "DomainException",
    "ConfigError",
    "TransportError",
    "DecodeError",
    "NotFoundError",
]
