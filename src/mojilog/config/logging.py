"""
Logging Configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..levels import Level, parse_level


class LogFormat(str, Enum):
    JSON = "json"
    PRETTY_JSON = "pretty-json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: LogFormat | str) -> LogFormat:
        """Unknown names select the pretty text format."""
        try:
            return cls(value)
        except ValueError:
            return cls.PRETTY


class LoggingSettings(BaseSettings):
    """Process logger configuration, read from ``MOJILOG_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOJILOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: int = Field(default=Level.INFO, description="Minimum log level; any integer is accepted")
    format: LogFormat = Field(default=LogFormat.JSON, description="json, pretty-json or pretty")
    add_source: bool = Field(default=False, description="Include file:function:line")
    color: bool | None = Field(default=None, description="Force colors; unset detects a TTY")
    capture_stdlib: bool = Field(default=True, description="Route stdlib logging through mojilog")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return int(value) if value.isdigit() else parse_level(value)
        return value
