"""Pytest configuration and shared fixtures."""

import os
from datetime import UTC, datetime
from typing import Generator

import pytest

from dashtime.config import settings as settings_module


@pytest.fixture(autouse=True)
def reset_settings() -> Generator[None, None, None]:
    """Drop the cached settings instance around every test."""
    settings_module._settings = None
    yield
    settings_module._settings = None


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Clean environment variables before and after test."""
    # Save original environment
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("DASHTIME_"):
            del os.environ[key]

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def sample_env_vars() -> dict[str, str]:
    """Sample environment variables for testing."""
    return {
        "DASHTIME_TIME_ZONE": "Europe/Lisbon",
        "DASHTIME_FISCAL_YEAR_START_MONTH": "4",
        "DASHTIME_DEFAULT_RESOLUTION": "500",
        "DASHTIME_MIN_INTERVAL": "10s",
        "DASHTIME_LOG_LEVEL": "DEBUG",
    }


@pytest.fixture
def set_env_vars(sample_env_vars: dict[str, str]) -> Generator[dict[str, str], None, None]:
    """Set sample environment variables for testing."""
    for key, value in sample_env_vars.items():
        os.environ[key] = value
    yield sample_env_vars
    # Cleanup is handled by clean_env fixture


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed reference instant: 2024-01-15 10:30:45 UTC (a Monday)."""
    return datetime(2024, 1, 15, 10, 30, 45, tzinfo=UTC)
