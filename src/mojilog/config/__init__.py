"""
Mojilog Configuration Module.

Each sub-settings class reads its own environment variable prefix.

Usage:
    from mojilog.config import settings

    settings.logging.level
    settings.logging.format
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


settings = Settings()

__all__ = [
    "LogFormat",
    "LoggingSettings",
    "Settings",
    "settings",
]
