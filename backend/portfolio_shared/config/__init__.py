from .settings import (
    ApplicationSettings,
    GoogleSheetsSettings,
    ServiceSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "GoogleSheetsSettings",
    "ServiceSettings",
    "get_settings",
    "reload_settings",
]
