"""Absolute timestamp parsing and time zone resolution."""

import logging
from datetime import UTC, datetime

import pendulum
from dateutil import parser as dateutil_parser
from pendulum.tz.timezone import FixedTimezone, Timezone

logger = logging.getLogger(__name__)


class TimeParseError(Exception):
    """Raised when time parsing fails."""

    pass


def resolve_time_zone(time_zone: str | None = None) -> Timezone | FixedTimezone:
    """
    Resolve a time zone name to a pendulum time zone.

    Accepted values:
    - 'utc' (any case)
    - 'browser' or '' - the host's local zone
    - an IANA name such as 'Europe/Lisbon'
    - None - the configured default zone

    Args:
        time_zone: Time zone name

    Returns:
        pendulum time zone

    Raises:
        TimeParseError: If the name is not a known time zone
    """
    if time_zone is None:
        from dashtime.config import get_settings

        time_zone = get_settings().time_zone

    if time_zone.lower() == "utc":
        return pendulum.UTC

    if time_zone in ("", "browser"):
        return pendulum.local_timezone()

    try:
        return pendulum.timezone(time_zone)
    except Exception as e:
        raise TimeParseError(f"Unknown time zone: {time_zone}") from e


def parse_iso8601(iso_str: str, time_zone: str | None = "utc") -> datetime:
    """
    Parse ISO 8601 timestamp string.

    Supports various ISO 8601 formats:
    - 2024-01-15T10:00:00Z
    - 2024-01-15T10:00:00+00:00
    - 2024-01-15T10:00:00.123Z
    - 2024-01-15 10:00:00 (read in time_zone)

    Args:
        iso_str: ISO 8601 timestamp string
        time_zone: Zone for timestamps without an offset

    Returns:
        datetime object in UTC

    Raises:
        TimeParseError: If parsing fails
    """
    tz = resolve_time_zone(time_zone)
    try:
        # Try pendulum first (better ISO 8601 support)
        dt = pendulum.parse(iso_str, tz=tz)
        if isinstance(dt, pendulum.DateTime):
            return datetime.fromtimestamp(dt.timestamp(), tz=UTC)
        # Handle cases where pendulum returns Date, Time or Duration objects
        raise TimeParseError(f"Unexpected pendulum parse result type for: {iso_str}")
    except Exception as e:
        # Fallback to dateutil parser
        try:
            parsed_dt = dateutil_parser.parse(iso_str)
        except (ValueError, OverflowError):
            raise TimeParseError(f"Failed to parse ISO 8601 timestamp: {iso_str}") from e
        logger.debug(f"pendulum rejected {iso_str!r}, parsed with dateutil")
        if parsed_dt.tzinfo is None:
            parsed_dt = parsed_dt.replace(tzinfo=tz)
        return parsed_dt.astimezone(UTC)


def parse_epoch_milliseconds(epoch_ms: int | str) -> datetime:
    """
    Parse epoch milliseconds to datetime.

    Args:
        epoch_ms: Epoch milliseconds (int or string)

    Returns:
        datetime object in UTC

    Raises:
        TimeParseError: If parsing fails
    """
    try:
        ms = int(epoch_ms) if isinstance(epoch_ms, str) else epoch_ms
        return datetime.fromtimestamp(ms / 1000.0, tz=UTC)
    except (ValueError, OSError, OverflowError) as e:
        raise TimeParseError(f"Failed to parse epoch milliseconds: {epoch_ms}") from e


def parse_time(value: str | int | datetime, time_zone: str | None = "utc") -> datetime:
    """
    Parse an absolute time in various formats to datetime.

    Supports:
    - ISO 8601: "2024-01-15T10:00:00Z"
    - Epoch milliseconds: 1705314000000 (int or str)
    - datetime objects (naive ones are read in time_zone)

    Relative expressions such as "now-6h" are handled by
    :mod:`dashtime.utils.datemath`.

    Args:
        value: Time in various formats
        time_zone: Zone for values without an offset

    Returns:
        Timezone-aware datetime

    Raises:
        TimeParseError: If parsing fails
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=resolve_time_zone(time_zone))
        return value

    if isinstance(value, int):
        return parse_epoch_milliseconds(value)

    value = value.strip()

    if value.isdigit():
        return parse_epoch_milliseconds(value)

    return parse_iso8601(value, time_zone)


def to_epoch_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds."""
    return int(dt.timestamp() * 1000)
