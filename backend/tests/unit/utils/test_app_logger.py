import logging

from portfolio_shared.utils.app_logger import (
    configure_logging,
    get_dashboard_logger,
    get_logger,
    quiet_loggers,
)


def test_get_logger_attaches_single_stdout_handler():
    logger = get_logger("portfolio_test.logger", level="DEBUG")
    again = get_logger("portfolio_test.logger")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_unknown_level_falls_back_to_info():
    logger = get_logger("portfolio_test.unknown_level", level="LOUD")

    assert logger.level == logging.INFO


def test_level_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")

    logger = get_logger("portfolio_test.env_level")

    assert logger.level == logging.ERROR


def test_dashboard_logger_namespace():
    assert get_dashboard_logger("main").name == "portfolio_bff.main"


def test_configure_logging_sets_root_level_and_quiets_http_client():
    previous = logging.root.level
    try:
        configure_logging("WARNING")
        assert logging.root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        logging.root.setLevel(previous)


def test_quiet_loggers():
    quiet_loggers(["portfolio_test.noisy"], level=logging.ERROR)

    assert logging.getLogger("portfolio_test.noisy").level == logging.ERROR
