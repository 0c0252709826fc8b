"""Time utilities for parsing, date math and formatting."""

from .datemath import date_time_parse, is_math_string
from .formatter import date_time_format, date_time_format_time_ago, time_zone_abbreviation
from .time import (
    TimeParseError,
    parse_epoch_milliseconds,
    parse_iso8601,
    parse_time,
    resolve_time_zone,
    to_epoch_ms,
)

__all__ = [
    "TimeParseError",
    "date_time_format",
    "date_time_format_time_ago",
    "date_time_parse",
    "is_math_string",
    "parse_epoch_milliseconds",
    "parse_iso8601",
    "parse_time",
    "resolve_time_zone",
    "time_zone_abbreviation",
    "to_epoch_ms",
]
