"""Validation functions for configuration values."""

from dashtime.core.intervals import InvalidIntervalError, describe_interval
from dashtime.utils.time import TimeParseError, resolve_time_zone


def validate_time_zone(time_zone: str) -> bool:
    """
    Validate a time zone name.

    Args:
        time_zone: 'utc', 'browser' or an IANA zone name

    Returns:
        True if valid, False otherwise
    """
    if not time_zone or not time_zone.strip():
        return False

    try:
        resolve_time_zone(time_zone)
    except TimeParseError:
        return False
    return True


def validate_interval(interval: str) -> bool:
    """
    Validate an interval string such as '10s' or '1m'.

    Args:
        interval: Interval string

    Returns:
        True if valid, False otherwise
    """
    try:
        info = describe_interval(interval)
    except InvalidIntervalError:
        return False
    return info.count > 0


def validate_fiscal_month(month: int) -> bool:
    """Validate a fiscal year start month (1 = January)."""
    return 1 <= month <= 12


def validate_resolution(resolution: int) -> bool:
    """
    Validate a panel resolution is within reasonable bounds.

    Args:
        resolution: Number of data points

    Returns:
        True if valid, False otherwise
    """
    # At least one point, at most one point per millisecond of a day
    return 1 <= resolution <= 86_400_000
