"""Configuration management for dashtime."""

from .settings import DashTimeSettings, get_settings, reload_settings
from .validation import (
    validate_fiscal_month,
    validate_interval,
    validate_resolution,
    validate_time_zone,
)

__all__ = [
    "DashTimeSettings",
    "get_settings",
    "reload_settings",
    "validate_fiscal_month",
    "validate_interval",
    "validate_resolution",
    "validate_time_zone",
]
