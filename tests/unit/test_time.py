"""Tests for time parsing and conversion utilities."""

from datetime import UTC, datetime, timezone

import pendulum
import pytest

from dashtime.utils import (
    TimeParseError,
    parse_epoch_milliseconds,
    parse_iso8601,
    parse_time,
    resolve_time_zone,
    to_epoch_ms,
)


class TestResolveTimeZone:
    """Test suite for resolve_time_zone function."""

    def test_utc(self) -> None:
        """Test 'utc' in any case."""
        assert resolve_time_zone("utc") == pendulum.UTC
        assert resolve_time_zone("UTC") == pendulum.UTC

    def test_iana_name(self) -> None:
        """Test IANA zone names."""
        assert resolve_time_zone("Europe/Lisbon").name == "Europe/Lisbon"

    def test_browser_is_local(self) -> None:
        """Test 'browser' maps to the local zone."""
        assert resolve_time_zone("browser") == pendulum.local_timezone()

    def test_default_from_settings(self, clean_env: None) -> None:
        """Test None uses the configured zone."""
        assert resolve_time_zone(None) == pendulum.UTC

    def test_unknown(self) -> None:
        """Test unknown names raise."""
        with pytest.raises(TimeParseError, match="Unknown time zone"):
            resolve_time_zone("Mars/Olympus_Mons")


class TestParseISO8601:
    """Test suite for parse_iso8601 function."""

    def test_parse_iso8601_with_z(self) -> None:
        """Test parsing ISO 8601 with Z suffix."""
        result = parse_iso8601("2024-01-15T10:30:00Z")

        assert result.year == 2024
        assert result.month == 1
        assert result.day == 15
        assert result.hour == 10
        assert result.minute == 30
        assert result.second == 0
        assert result.utcoffset() == timezone.utc.utcoffset(None)

    def test_parse_iso8601_with_offset(self) -> None:
        """Test parsing ISO 8601 with a timezone offset."""
        result = parse_iso8601("2024-01-15T10:30:00+02:00")

        assert result == datetime(2024, 1, 15, 8, 30, tzinfo=UTC)

    def test_parse_iso8601_with_milliseconds(self) -> None:
        """Test parsing ISO 8601 with milliseconds."""
        result = parse_iso8601("2024-01-15T10:30:00.123Z")

        assert result.second == 0
        assert result.microsecond == 123000

    def test_parse_iso8601_naive_uses_time_zone(self) -> None:
        """Test timestamps without an offset are read in the given zone."""
        result = parse_iso8601("2024-01-15 10:30:00", "America/New_York")

        assert result == datetime(2024, 1, 15, 15, 30, tzinfo=UTC)

    def test_parse_iso8601_invalid(self) -> None:
        """Test parsing invalid ISO 8601."""
        with pytest.raises(TimeParseError):
            parse_iso8601("not-a-date")

        with pytest.raises(TimeParseError):
            parse_iso8601("2024-13-45")  # Invalid month/day


class TestParseEpochMilliseconds:
    """Test suite for parse_epoch_milliseconds function."""

    def test_parse_epoch_milliseconds_int(self) -> None:
        """Test parsing epoch milliseconds as int."""
        # 2024-01-15 10:00:00 UTC = 1705312800000
        result = parse_epoch_milliseconds(1705312800000)

        assert result == datetime(2024, 1, 15, 10, tzinfo=UTC)
        assert result.tzinfo == timezone.utc

    def test_parse_epoch_milliseconds_string(self) -> None:
        """Test parsing epoch milliseconds as string."""
        result = parse_epoch_milliseconds("1705312800000")

        assert result.year == 2024
        assert result.month == 1

    def test_parse_epoch_milliseconds_invalid(self) -> None:
        """Test parsing invalid epoch milliseconds."""
        with pytest.raises(TimeParseError):
            parse_epoch_milliseconds("not-a-number")


class TestParseTime:
    """Test suite for parse_time function."""

    def test_parse_time_aware_datetime(self) -> None:
        """Test aware datetimes are returned unchanged."""
        dt = datetime(2024, 1, 15, 10, 0, 0, tzinfo=UTC)

        assert parse_time(dt) is dt

    def test_parse_time_naive_datetime(self) -> None:
        """Test naive datetimes are read in the given zone."""
        result = parse_time(datetime(2024, 1, 15, 10, 0, 0), "Europe/Berlin")

        assert result.astimezone(UTC) == datetime(2024, 1, 15, 9, tzinfo=UTC)

    def test_parse_time_int(self) -> None:
        """Test parsing int (epoch milliseconds)."""
        assert parse_time(1705312800000) == datetime(2024, 1, 15, 10, tzinfo=UTC)

    def test_parse_time_epoch_string(self) -> None:
        """Test parsing epoch milliseconds string."""
        assert parse_time(" 1705312800000 ") == datetime(2024, 1, 15, 10, tzinfo=UTC)

    def test_parse_time_iso8601(self) -> None:
        """Test parsing ISO 8601 string."""
        assert parse_time("2024-01-15T10:00:00Z") == datetime(2024, 1, 15, 10, tzinfo=UTC)


class TestToEpochMs:
    """Test suite for to_epoch_ms function."""

    def test_to_epoch_ms(self) -> None:
        """Test converting datetime to epoch milliseconds."""
        assert to_epoch_ms(datetime(2024, 1, 15, 10, 0, 0, tzinfo=UTC)) == 1705312800000
