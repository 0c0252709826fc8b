"""Tests for configuration validation functions."""

from dashtime.config.validation import (
    validate_fiscal_month,
    validate_interval,
    validate_resolution,
    validate_time_zone,
)


class TestValidateTimeZone:
    """Tests for time zone validation."""

    def test_valid_zones(self) -> None:
        """Test known zone names."""
        assert validate_time_zone("utc") is True
        assert validate_time_zone("UTC") is True
        assert validate_time_zone("browser") is True
        assert validate_time_zone("Europe/Lisbon") is True
        assert validate_time_zone("America/Sao_Paulo") is True

    def test_invalid_zones(self) -> None:
        """Test unknown or empty names."""
        assert validate_time_zone("") is False
        assert validate_time_zone("   ") is False
        assert validate_time_zone("Europe/Atlantis") is False


class TestValidateInterval:
    """Tests for interval validation."""

    def test_valid_intervals(self) -> None:
        """Test well-formed intervals."""
        assert validate_interval("10s") is True
        assert validate_interval("1m") is True
        assert validate_interval("500ms") is True
        assert validate_interval("30") is True

    def test_invalid_intervals(self) -> None:
        """Test malformed and non-positive intervals."""
        assert validate_interval("often") is False
        assert validate_interval("0s") is False
        assert validate_interval("-5m") is False


class TestValidateFiscalMonth:
    """Tests for fiscal month validation."""

    def test_bounds(self) -> None:
        """Test months 1 through 12."""
        assert validate_fiscal_month(1) is True
        assert validate_fiscal_month(12) is True
        assert validate_fiscal_month(0) is False
        assert validate_fiscal_month(13) is False


class TestValidateResolution:
    """Tests for resolution validation."""

    def test_bounds(self) -> None:
        """Test resolution bounds."""
        assert validate_resolution(1) is True
        assert validate_resolution(1000) is True
        assert validate_resolution(0) is False
        assert validate_resolution(-10) is False
