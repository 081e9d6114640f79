"""
Centralized Configuration System for the Portfolio Dashboard

Type-safe configuration using Pydantic Settings. Values are read once from the
environment (or a local .env file) at startup.

Variables:
- GOOGLE_SHEET_ID (required, id or spreadsheet URL), GOOGLE_SHEET_GID,
  GOOGLE_SHEET_NAME, GOOGLE_SHEET_QUERY, GOOGLE_SHEET_TIMEOUT
- DASHBOARD_HOST, DASHBOARD_PORT, LOG_LEVEL, RENEWAL_ALERT_WINDOW_DAYS
"""

import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_shared.exceptions import ConfigError


class GoogleSheetsSettings(BaseSettings):
    """Published Google Sheet (gviz) source settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    google_sheet_id: Optional[str] = Field(
        default=None,
        description="Spreadsheet id (or full spreadsheet URL)"
    )
    google_sheet_gid: Optional[str] = Field(
        default=None,
        description="Summary tab internal id; takes precedence over the tab name"
    )
    google_sheet_name: str = Field(
        default="Sheet1",
        description="Summary tab name, used when no gid is configured"
    )
    google_sheet_query: str = Field(
        default="select *",
        description="gviz query string"
    )
    google_sheet_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds"
    )

    @field_validator("google_sheet_id", "google_sheet_gid", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("google_sheet_name", "google_sheet_query", mode="before")
    @classmethod
    def blank_to_default(cls, v, info):
        defaults = {"google_sheet_name": "Sheet1", "google_sheet_query": "select *"}
        if v is None or not str(v).strip():
            return defaults[info.field_name]
        return str(v).strip()

    def require_sheet_id(self) -> str:
        """Return the spreadsheet id or raise ConfigError if it is missing."""
        if not self.google_sheet_id:
            raise ConfigError("GOOGLE_SHEET_ID")
        return self.google_sheet_id


class ServiceSettings(BaseSettings):
    """Dashboard BFF service settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    dashboard_host: str = Field(
        default="0.0.0.0",
        description="BFF bind host"
    )
    dashboard_port: int = Field(
        default=8010,
        description="BFF bind port"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    renewal_alert_window_days: int = Field(
        default=120,
        ge=0,
        description="Renewal alert look-ahead window in days"
    )


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    google_sheets: GoogleSheetsSettings = Field(default_factory=GoogleSheetsSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Usable with FastAPI's Depends() for dependency injection.
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)
    """
    global settings
    settings = ApplicationSettings()
    return settings
