"""Resolution of date math expressions such as 'now-6h' or 'now-1y/fy'.

An expression is an anchor followed by zero or more operations:

- anchor: ``now`` or an absolute time followed by ``||``
  (``2024-01-15T00:00:00Z||+1M``)
- ``+N<unit>`` / ``-N<unit>``: add or subtract N units (N defaults to 1)
- ``/<unit>``: round to the start of the unit, or its end when rounding up
- ``/f<unit>``: round to the fiscal year (``fy``) or quarter (``fQ``)

Units are y, Q, M, w, d, h, m and s.
"""

import logging
import re
from datetime import datetime

import pendulum

from dashtime.utils.time import TimeParseError, parse_time, resolve_time_zone

logger = logging.getLogger(__name__)

_OPERATION = re.compile(r"([/+-])(\d*)(f?)([yQMwdhms])")

_PENDULUM_UNITS = {
    "y": "year",
    "M": "month",
    "w": "week",
    "d": "day",
    "h": "hour",
    "m": "minute",
    "s": "second",
}

_ADD_KWARGS = {
    "y": "years",
    "M": "months",
    "w": "weeks",
    "d": "days",
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
}


def _as_datetime(dt: datetime) -> datetime:
    """Plain datetime for a pendulum DateTime, keeping its zone."""
    return datetime(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        dt.microsecond,
        tzinfo=dt.tzinfo,
        fold=dt.fold,
    )


def is_math_string(text: object) -> bool:
    """True for strings anchored on 'now' or on an absolute time with '||'."""
    if not isinstance(text, str) or not text:
        return False
    return text.startswith("now") or "||" in text


def _shift(dt: pendulum.DateTime, unit: str, amount: int) -> pendulum.DateTime:
    if unit == "Q":
        return dt.add(months=3 * amount)
    return dt.add(**{_ADD_KWARGS[unit]: amount})


def _round(dt: pendulum.DateTime, unit: str, round_up: bool) -> pendulum.DateTime:
    if unit == "Q":
        start = dt.start_of("month").subtract(months=(dt.month - 1) % 3)
        return start.add(months=2).end_of("month") if round_up else start

    name = _PENDULUM_UNITS[unit]
    return dt.end_of(name) if round_up else dt.start_of(name)


def round_to_fiscal(
    dt: pendulum.DateTime, unit: str, fiscal_year_start_month: int, round_up: bool
) -> pendulum.DateTime:
    """
    Round to the start (or end) of the fiscal year or quarter containing dt.

    Args:
        dt: Instant to round
        unit: 'y' or 'Q'; other units leave dt unchanged
        fiscal_year_start_month: First month of the fiscal year (1 = January)
        round_up: Round to the end of the period instead of its start

    Returns:
        Rounded instant
    """
    if unit == "y":
        start = dt.subtract(months=(dt.month - fiscal_year_start_month) % 12).start_of("month")
        return start.add(months=11).end_of("month") if round_up else start

    if unit == "Q":
        start = dt.subtract(months=(dt.month - fiscal_year_start_month) % 3).start_of("month")
        return start.add(months=2).end_of("month") if round_up else start

    return dt


def parse_date_math(
    math_string: str,
    time: datetime,
    round_up: bool = False,
    fiscal_year_start_month: int | None = None,
) -> pendulum.DateTime | None:
    """
    Apply the operations of a date math string to an instant.

    Args:
        math_string: Operations only, e.g. '-1d/d'
        time: Anchor instant
        round_up: Round to the end of units instead of their start
        fiscal_year_start_month: First month of the fiscal year (1 = January)

    Returns:
        Resulting instant, or None if the string is malformed
    """
    stripped = re.sub(r"\s", "", math_string)
    dt = pendulum.instance(time)
    fiscal_start = fiscal_year_start_month or 1

    position = 0
    while position < len(stripped):
        match = _OPERATION.match(stripped, position)
        if not match:
            return None
        position = match.end()

        operator, digits, fiscal, unit = match.groups()
        amount = int(digits) if digits else 1

        if operator == "/":
            # Rounding takes no amount
            if digits:
                return None
            if fiscal:
                dt = round_to_fiscal(dt, unit, fiscal_start, round_up)
            else:
                dt = _round(dt, unit, round_up)
        elif operator == "+":
            dt = _shift(dt, unit, amount)
        else:
            dt = _shift(dt, unit, -amount)

    return dt


def parse(
    text: str | datetime | None,
    round_up: bool = False,
    time_zone: str | None = None,
    fiscal_year_start_month: int | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """
    Resolve a date math expression or absolute time to an instant.

    Args:
        text: Expression ('now-6h', 'now/d', '2024-01-01||+1M'),
            absolute time or datetime
        round_up: Round to the end of units instead of their start
        time_zone: Zone in which 'now' and rounding are evaluated
        fiscal_year_start_month: First month of the fiscal year (1 = January)
        now: Reference instant, defaults to the current time

    Returns:
        Timezone-aware datetime, or None if the text is not understood
    """
    if not text:
        return None

    if isinstance(text, datetime):
        return text

    try:
        tz = resolve_time_zone(time_zone)
        if text.startswith("now"):
            anchor = pendulum.instance(now).in_timezone(tz) if now else pendulum.now(tz)
            math_string = text[len("now") :]
        elif "||" in text:
            anchor_text, math_string = text.split("||", 1)
            anchor = pendulum.instance(parse_time(anchor_text, time_zone)).in_timezone(tz)
        else:
            return parse_time(text, time_zone)
    except (TimeParseError, ValueError, OverflowError) as e:
        logger.debug(f"Could not resolve {text!r}: {e}")
        return None

    if not math_string:
        return _as_datetime(anchor)

    try:
        result = parse_date_math(math_string, anchor, round_up, fiscal_year_start_month)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Date math in {text!r} is out of range: {e}")
        return None
    if result is None:
        logger.debug(f"Malformed date math in {text!r}")
        return None
    return _as_datetime(result)


def date_time_parse(
    value: str | int | datetime,
    round_up: bool = False,
    time_zone: str | None = None,
    fiscal_year_start_month: int | None = None,
    format: str | None = None,
) -> datetime:
    """
    Resolve one end of a raw time range to an instant.

    Args:
        value: Date math string, absolute time string, epoch milliseconds
            or datetime
        round_up: Round to the end of units (use for the 'to' end)
        time_zone: Zone for 'now', rounding and offset-less timestamps
        fiscal_year_start_month: First month of the fiscal year (1 = January)
        format: Token pattern for absolute strings, e.g. 'DD/MM/YYYY HH:mm'

    Returns:
        Timezone-aware datetime

    Raises:
        TimeParseError: If the value cannot be resolved
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, int):
        return parse_time(value)

    if is_math_string(value):
        parsed = parse(value, round_up, time_zone, fiscal_year_start_month)
        if parsed is None:
            raise TimeParseError(f"Invalid date math expression: {value}")
        return parsed

    if format:
        try:
            parsed = pendulum.from_format(value, format, tz=resolve_time_zone(time_zone))
        except ValueError as e:
            raise TimeParseError(f"'{value}' does not match format '{format}'") from e
        return _as_datetime(parsed)

    return parse_time(value, time_zone)
