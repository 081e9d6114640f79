from .app_logger import configure_logging, get_dashboard_logger, get_logger

__all__ = ["configure_logging", "get_dashboard_logger", "get_logger"]
