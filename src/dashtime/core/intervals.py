"""Interval parsing, rounding and duration formatting.

Intervals are the bucket sizes used when drawing time-series data: a panel
spanning a time range with N data points needs a "nice" spacing between them
(10s, 1m, 1h...) rather than the raw quotient of the range by N.
"""

import logging
import math
import re
from types import MappingProxyType

from dashtime.core.types import IntervalInfo, IntervalValues, TimeRange

logger = logging.getLogger(__name__)


class InvalidIntervalError(ValueError):
    """Raised when an interval string cannot be parsed."""

    pass


# Seconds per unit, largest first
INTERVALS_IN_SECONDS: MappingProxyType[str, float] = MappingProxyType(
    {
        "y": 31536000,
        "M": 2592000,
        "w": 604800,
        "d": 86400,
        "h": 3600,
        "m": 60,
        "s": 1,
        "ms": 0.001,
    }
)

INTERVAL_PATTERN = re.compile(r"(-?\d+(?:\.\d+)?)(ms|[Mwdhmsy])")

# (exclusive upper bound, bucket) pairs in milliseconds, ascending
ROUNDING_LADDER: tuple[tuple[float, int], ...] = (
    (10, 1),  # 0.001s
    (15, 10),  # 0.01s
    (35, 20),  # 0.02s
    (75, 50),  # 0.05s
    (150, 100),  # 0.1s
    (350, 200),  # 0.2s
    (750, 500),  # 0.5s
    (1500, 1000),  # 1s
    (3500, 2000),  # 2s
    (7500, 5000),  # 5s
    (12500, 10000),  # 10s
    (17500, 15000),  # 15s
    (25000, 20000),  # 20s
    (45000, 30000),  # 30s
    (90000, 60000),  # 1m
    (210000, 120000),  # 2m
    (450000, 300000),  # 5m
    (750000, 600000),  # 10m
    (1050000, 900000),  # 15m
    (1500000, 1200000),  # 20m
    (2700000, 1800000),  # 30m
    (5400000, 3600000),  # 1h
    (9000000, 7200000),  # 2h
    (16200000, 10800000),  # 3h
    (32400000, 21600000),  # 6h
    (86400000, 43200000),  # 12h
    (604800000, 86400000),  # 1d
    (1814400000, 604800000),  # 1w
    (3628800000, 2592000000),  # 30d
)

LARGEST_BUCKET_MS = 31536000000  # 1y

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: str) -> int:
    """Integer prefix of a string ("1.5h" -> 1), 0 when there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _is_unitless(value: str) -> bool:
    """True for a non-zero plain number such as "90" or "2.5"."""
    try:
        number = float(value)
    except ValueError:
        return False
    return bool(number) and math.isfinite(number)


def describe_interval(value: str) -> IntervalInfo:
    """
    Parse an interval string such as "5m", "1.5h" or "90".

    A plain number is read as a count of seconds. Otherwise the first
    ``<number><unit>`` occurrence is used; fractional counts are truncated.

    Args:
        value: Interval string

    Returns:
        IntervalInfo with seconds per unit, unit symbol and count

    Raises:
        InvalidIntervalError: If the string has no recognised unit
    """
    if _is_unitless(value):
        return IntervalInfo(sec=INTERVALS_IN_SECONDS["s"], type="s", count=_leading_int(value))

    match = INTERVAL_PATTERN.search(value)
    if not match:
        units = ", ".join(INTERVALS_IN_SECONDS)
        raise InvalidIntervalError(
            "Invalid interval string, has to be either unit-less or end with "
            f'one of the following units: "{units}"'
        )

    unit = match.group(2)
    sec = INTERVALS_IN_SECONDS.get(unit)
    if sec is None:
        # Unreachable while the pattern and the table agree
        raise InvalidIntervalError("describe_interval failed: invalid interval string")

    return IntervalInfo(sec=sec, type=unit, count=_leading_int(match.group(1)))


def interval_to_seconds(value: str) -> float:
    """Convert an interval string to seconds."""
    info = describe_interval(value)
    return info.sec * info.count


def interval_to_ms(value: str) -> float:
    """Convert an interval string to milliseconds."""
    info = describe_interval(value)
    return info.sec * 1000 * info.count


def round_interval(interval: float) -> int:
    """
    Round a raw duration to the closest "nice" bucket.

    Args:
        interval: Duration in milliseconds

    Returns:
        Bucket size in milliseconds
    """
    for upper_bound, bucket in ROUNDING_LADDER:
        if interval < upper_bound:
            return bucket
    return LARGEST_BUCKET_MS


def seconds_to_hms(seconds: float) -> str:
    """
    Format a duration using only its largest non-zero unit.

    Examples:
    - 3661 -> "1h"
    - 90 -> "1m"
    - 0.25 -> "250ms"

    Args:
        seconds: Duration in seconds, may be fractional

    Returns:
        Compact duration string
    """
    num_years = math.floor(seconds / 31536000)
    if num_years:
        return f"{num_years}y"

    remainder = seconds % 31536000
    num_days = math.floor(remainder / 86400)
    if num_days:
        return f"{num_days}d"

    remainder %= 86400
    num_hours = math.floor(remainder / 3600)
    if num_hours:
        return f"{num_hours}h"

    remainder %= 3600
    num_minutes = math.floor(remainder / 60)
    if num_minutes:
        return f"{num_minutes}m"

    num_seconds = math.floor(remainder % 60)
    if num_seconds:
        return f"{num_seconds}s"

    num_milliseconds = math.floor(seconds * 1000.0)
    if num_milliseconds:
        return f"{num_milliseconds}ms"

    return "less than a millisecond"


def ms_range_to_time_string(range_ms: float) -> str:
    """
    Format a duration as up to three space-separated parts.

    Examples:
    - 5400000 -> "1h 30min"
    - 61000 -> "1min 1sec"

    Args:
        range_ms: Duration in milliseconds

    Returns:
        Composite duration string, "less than 1sec" for sub-second ranges
    """
    range_sec = math.floor(range_ms / 1000 + 0.5)

    hours = range_sec // 3600
    minutes = range_sec // 60 - hours * 60
    seconds = range_sec % 60

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}min")
    if seconds:
        parts.append(f"{seconds}sec")

    return " ".join(parts) or "less than 1sec"


def calculate_interval(
    time_range: TimeRange, resolution: int, low_limit_interval: str | None = None
) -> IntervalValues:
    """
    Pick the bucket size for drawing a range with a given number of points.

    Args:
        time_range: Absolute time range
        resolution: Number of buckets (usually the panel's max data points); 0 gives
            the largest bucket
        low_limit_interval: Optional minimum interval such as "10s"

    Returns:
        IntervalValues with the interval in milliseconds and its label

    Raises:
        InvalidIntervalError: If low_limit_interval cannot be parsed
    """
    low_limit_ms: float = 1
    if low_limit_interval:
        low_limit_ms = interval_to_ms(low_limit_interval)

    span_ms = (time_range.to - time_range.from_).total_seconds() * 1000
    raw_ms = span_ms / resolution if resolution else math.inf
    interval_ms: float = round_interval(raw_ms)
    if low_limit_ms > interval_ms:
        logger.debug(f"Interval {interval_ms}ms below limit {low_limit_interval}, clamping")
        interval_ms = low_limit_ms

    return IntervalValues(interval_ms=interval_ms, interval=seconds_to_hms(interval_ms / 1000))
