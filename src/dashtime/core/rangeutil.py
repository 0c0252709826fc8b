"""Describe, validate and convert time ranges.

Relative expressions are written against "now": "now-6h" is six hours ago,
"now/d" the start of today, "now-1y/fy" the start of the previous fiscal
year. Ranges in the preset catalog get their catalog label; simple
"now-N<unit>" expressions get a generated one.
"""

import logging
import re
from datetime import UTC, datetime, timedelta

from dashtime.core.presets import SPANS, find_preset
from dashtime.core.types import (
    RawTimeRange,
    RelativeTimeRange,
    TimeOption,
    TimeRange,
    TimeZone,
)
from dashtime.utils import datemath
from dashtime.utils.formatter import (
    date_time_format,
    date_time_format_time_ago,
    time_zone_abbreviation,
)

logger = logging.getLogger(__name__)

SIMPLE_RELATIVE_PATTERN = re.compile(rf"now([-+])(\d+)([{''.join(SPANS)}])")


def describe_text_range(expr: str) -> TimeOption:
    """
    Describe a shorthand range expression.

    Handles expressions like:
    - '5m' (same as 'now-5m')
    - '+5m' (same as 'now+5m', a future range)
    - 'now-6h'
    - 'now/d'

    The range always ends (or, for future ranges, starts) at 'now'.

    Args:
        expr: Range expression

    Returns:
        The catalog preset when there is one, a generated 'Last N <unit>' /
        'Next N <unit>' option for simple offsets, otherwise an option
        flagged invalid whose label is the literal range
    """
    is_last = not expr.startswith("+")
    if "now" not in expr:
        expr = ("now-" if is_last else "now") + expr

    preset = find_preset(expr, "now")
    if preset:
        return preset

    from_, to = (expr, "now") if is_last else ("now", expr)

    match = SIMPLE_RELATIVE_PATTERN.fullmatch(expr)
    if not match:
        logger.debug(f"No label for range expression {expr!r}")
        return TimeOption(from_=from_, to=to, display=f"{from_} to {to}", invalid=True)

    amount = int(match.group(2))
    span = SPANS[match.group(3)]
    display = f"{'Last' if is_last else 'Next'} {amount} {span.display}"
    if amount > 1:
        display += "s"

    return TimeOption(from_=from_, to=to, display=display, section=span.section)


def describe_time_range(time_range: RawTimeRange, time_zone: TimeZone | None = None) -> str:
    """
    Produce a label for a raw time range as shown by the time picker.

    Args:
        time_range: Range whose ends are datetimes or expressions
        time_zone: Zone used to display absolute ends

    Returns:
        Label such as 'Últimas 6 horas', '2024-01-15 10:00:00 to 2 hours ago'
        or 'now-2d/d to now-1d/d'; empty if a relative end cannot be resolved
    """
    from_, to = time_range.from_, time_range.to

    if isinstance(from_, str) and isinstance(to, str):
        preset = find_preset(from_, to)
        if preset:
            return preset.display

    if isinstance(from_, datetime) and isinstance(to, datetime):
        return f"{date_time_format(from_, time_zone)} to {date_time_format(to, time_zone)}"

    if isinstance(from_, datetime):
        parsed = datemath.parse(to, round_up=True, time_zone="utc")
        if parsed is None:
            return ""
        return f"{date_time_format(from_, time_zone)} to {date_time_format_time_ago(parsed)}"

    if isinstance(to, datetime):
        parsed = datemath.parse(from_, round_up=False, time_zone="utc")
        if parsed is None:
            return ""
        return f"{date_time_format_time_ago(parsed)} to {date_time_format(to, time_zone)}"

    if to == "now":
        return describe_text_range(from_).display

    return f"{from_} to {to}"


def is_valid_time_span(value: str) -> bool:
    """True for template variables ('$interval', '+$offset') and labelled expressions."""
    if value.startswith("$") or value.startswith("+$"):
        return True

    return not describe_text_range(value).invalid


def describe_time_range_abbreviation(
    time_range: TimeRange, time_zone: TimeZone | None = None
) -> str:
    """Time zone abbreviation for the start of a range, e.g. 'UTC'."""
    return time_zone_abbreviation(time_range.from_, time_zone)


def convert_raw_to_range(
    raw: RawTimeRange,
    time_zone: TimeZone | None = None,
    fiscal_year_start_month: int | None = None,
    format: str | None = None,
) -> TimeRange:
    """
    Resolve a raw range to absolute instants.

    The start is rounded down and the end rounded up, so 'now/d' to 'now/d'
    covers the whole day. Expressions are kept in the result's raw range;
    absolute ends are replaced by their parsed instants.

    Args:
        raw: Range to resolve
        time_zone: Zone for 'now', rounding and offset-less timestamps
        fiscal_year_start_month: First month of the fiscal year (1 = January)
        format: Token pattern for absolute string ends

    Returns:
        Resolved TimeRange

    Raises:
        TimeParseError: If either end cannot be resolved
    """
    from_ = datemath.date_time_parse(
        raw.from_,
        round_up=False,
        time_zone=time_zone,
        fiscal_year_start_month=fiscal_year_start_month,
        format=format,
    )
    to = datemath.date_time_parse(
        raw.to,
        round_up=True,
        time_zone=time_zone,
        fiscal_year_start_month=fiscal_year_start_month,
        format=format,
    )

    return TimeRange(
        from_=from_,
        to=to,
        raw=RawTimeRange(
            from_=raw.from_ if datemath.is_math_string(raw.from_) else from_,
            to=raw.to if datemath.is_math_string(raw.to) else to,
        ),
    )


def is_relative_time(value: datetime | str) -> bool:
    return isinstance(value, str) and "now" in value


def is_relative_time_range(raw: RawTimeRange) -> bool:
    return is_relative_time(raw.from_) or is_relative_time(raw.to)


def is_fiscal(time_range: TimeRange) -> bool:
    """True if either raw end uses fiscal rounding ('now/fy', 'now-1Q/fQ')."""
    for end in (time_range.raw.from_, time_range.raw.to):
        if isinstance(end, str) and end.find("f") > 0:
            return True
    return False


def _seconds_between(later: datetime, earlier: datetime) -> int | float:
    seconds = (later - earlier).total_seconds()
    return int(seconds) if seconds.is_integer() else seconds


def time_range_to_relative(time_range: TimeRange, now: datetime | None = None) -> RelativeTimeRange:
    """
    Express an absolute range as offsets in seconds before now.

    Args:
        time_range: Absolute range
        now: Reference instant, defaults to the current time

    Returns:
        RelativeTimeRange usable in alert rules
    """
    if now is None:
        now = datetime.now(UTC)

    return RelativeTimeRange(
        from_=_seconds_between(now, time_range.from_),
        to=_seconds_between(now, time_range.to),
    )


def relative_to_time_range(relative: RelativeTimeRange, now: datetime | None = None) -> TimeRange:
    """
    Resolve offsets in seconds before now to an absolute range.

    Args:
        relative: Offsets before now
        now: Reference instant, defaults to the current time

    Returns:
        TimeRange whose raw ends are the same instants
    """
    if now is None:
        now = datetime.now(UTC)

    from_ = now - timedelta(seconds=relative.from_)
    to = now if relative.to == 0 else now - timedelta(seconds=relative.to)

    return TimeRange(from_=from_, to=to, raw=RawTimeRange(from_=from_, to=to))
