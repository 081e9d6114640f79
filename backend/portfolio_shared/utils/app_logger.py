"""
Logging utilities for the portfolio dashboard.

Every logger writes one line per record to stdout. The level comes from the
caller, else from LOG_LEVEL, else INFO.
"""

import logging
import os
import sys
from typing import Iterable, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# per-request INFO lines from the HTTP client
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")

DASHBOARD_LOGGER_PREFIX = "portfolio_bff"


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL") or logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.INFO)
    return int(level)


def _stdout_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override (name or number)

    Returns:
        Logger with a single stdout handler that does not propagate to root
    """
    logger = logging.getLogger(name)

    # Don't add handlers if already configured
    if logger.handlers:
        return logger

    log_level = _resolve_level(level)
    logger.setLevel(log_level)
    logger.addHandler(_stdout_handler(log_level))

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def quiet_loggers(names: Iterable[str] = HTTP_CLIENT_LOGGERS, level: int = logging.WARNING) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once at startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); LOG_LEVEL when omitted
    """
    log_level = _resolve_level(level)

    # Set root logger level (works even when handlers exist)
    logging.root.setLevel(log_level)

    # Only add handler if no handlers exist (avoid duplicate handlers)
    if not logging.root.handlers:
        logging.root.addHandler(_stdout_handler(log_level))

    if log_level > logging.DEBUG:
        quiet_loggers()


def get_dashboard_logger(name: str = "app") -> logging.Logger:
    """Logger under the dashboard BFF namespace."""
    return get_logger(f"{DASHBOARD_LOGGER_PREFIX}.{name}")
