"""Configuration settings for dashtime using Pydantic Settings."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dashtime.config.validation import validate_interval, validate_time_zone


class DashTimeSettings(BaseSettings):
    """Main configuration settings for dashtime."""

    model_config = SettingsConfigDict(
        env_prefix="DASHTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Time Settings ===
    time_zone: str = Field(
        default="utc",
        description="Default zone for formatting and date math ('utc', 'browser' or IANA name)",
    )

    fiscal_year_start_month: int = Field(
        default=1,
        description="First month of the fiscal year (1 = January)",
        ge=1,
        le=12,
    )

    # === Interval Settings ===
    default_resolution: int = Field(
        default=1000,
        description="Default number of data points when calculating intervals",
        gt=0,
    )

    min_interval: str | None = Field(
        default=None,
        description="Lower limit for calculated intervals (e.g. '10s')",
    )

    # === Logging Configuration ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Application log level",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("time_zone")
    @classmethod
    def check_time_zone(cls, v: str) -> str:
        """Validate the time zone name."""
        if not validate_time_zone(v):
            raise ValueError(f"Unknown time zone: {v}")
        return v

    @field_validator("min_interval")
    @classmethod
    def check_min_interval(cls, v: str | None) -> str | None:
        """Validate the minimum interval format."""
        if v is not None and not validate_interval(v):
            raise ValueError(f"Invalid minimum interval: {v}")
        return v

    @field_validator("log_file")
    @classmethod
    def expand_path(cls, v: Path | None) -> Path | None:
        """Expand user home directory in paths."""
        if v is None:
            return None
        return Path(os.path.expanduser(str(v)))


# Global settings instance
_settings: DashTimeSettings | None = None


def get_settings() -> DashTimeSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = DashTimeSettings()
    return _settings


def reload_settings() -> DashTimeSettings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = DashTimeSettings()
    return _settings
