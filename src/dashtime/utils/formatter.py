"""Display formatting for absolute instants."""

from datetime import UTC, datetime

import pendulum

from dashtime.utils.time import resolve_time_zone

DEFAULT_DATE_TIME_FORMAT = "YYYY-MM-DD HH:mm:ss"


def date_time_format(
    dt: datetime, time_zone: str | None = None, format: str = DEFAULT_DATE_TIME_FORMAT
) -> str:
    """
    Format an instant in a time zone.

    Args:
        dt: Instant to format (naive values are read as UTC)
        time_zone: Display zone, defaults to the configured zone
        format: pendulum token pattern

    Returns:
        Formatted string, e.g. '2024-01-15 10:00:00'
    """
    return pendulum.instance(dt).in_timezone(resolve_time_zone(time_zone)).format(format)


def date_time_format_time_ago(dt: datetime, now: datetime | None = None) -> str:
    """
    Describe an instant relative to now.

    Examples:
    - "2 minutes ago"
    - "1 hour ago"
    - "in 3 days"

    Args:
        dt: Instant to describe
        now: Reference instant, defaults to the current time

    Returns:
        Human-readable relative time
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    if now is None:
        now = datetime.now(UTC)

    seconds = int((now - dt).total_seconds())
    future = seconds < 0
    seconds = abs(seconds)

    def _label(amount: int, unit: str) -> str:
        text = f"{amount} {unit}{'s' if amount != 1 else ''}"
        return f"in {text}" if future else f"{text} ago"

    if seconds < 60:
        return _label(seconds, "second")

    minutes = seconds // 60
    if minutes < 60:
        return _label(minutes, "minute")

    hours = minutes // 60
    if hours < 24:
        return _label(hours, "hour")

    days = hours // 24
    if days < 7:
        return _label(days, "day")

    weeks = days // 7
    if weeks < 4:
        return _label(weeks, "week")

    months = max(days // 30, 1)
    if months < 12:
        return _label(months, "month")

    years = days // 365
    return _label(max(years, 1), "year")


def time_zone_abbreviation(dt: datetime, time_zone: str | None = None) -> str:
    """Abbreviation of the zone in effect at dt, e.g. 'UTC' or 'CEST'."""
    return pendulum.instance(dt).in_timezone(resolve_time_zone(time_zone)).strftime("%Z")
