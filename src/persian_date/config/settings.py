# src/persian_date/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides the library defaults (time zone, language, logging) from environment
variables or a .env file, validated with Pydantic Settings.

Files that USE this module:
- persian_date.adapters.clock (default time zone)
- persian_date.shared.language (default language)
- persian_date.shared.logging_conf (configure_logging reads the logging fields)

Files that this module USES:
- None (validation uses the zoneinfo database directly)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for validation
from typing import Optional  # Type hints for optional values
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError  # IANA time zone database

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Calendar ---
    default_time_zone: str = Field(default="Asia/Tehran", alias="PDATE_TIME_ZONE")
    default_language: str = Field(default="fa", alias="PDATE_LANGUAGE")  # fa = Persian

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="PDATE_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="PDATE_LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="PDATE_LOG_DIR")
    log_stdout: bool = Field(default=True, alias="PDATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="PDATE_LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="PDATE_LOG_BACKUP_COUNT", ge=0)

    @field_validator("default_time_zone")
    @classmethod
    def validate_time_zone(cls, v: str) -> str:
        """Validate that the zone exists in the zone database."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown PDATE_TIME_ZONE: {v}") from e
        return v

    @field_validator("default_language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Validate language code."""
        if v not in ["en", "fa"]:
            raise ValueError("PDATE_LANGUAGE must be 'en' or 'fa'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown PDATE_LOG_LEVEL: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


# Global settings instance
settings = Settings()
