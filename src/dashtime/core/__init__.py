"""Interval rounding, preset catalog and time range descriptions."""

from .intervals import (
    InvalidIntervalError,
    calculate_interval,
    describe_interval,
    interval_to_ms,
    interval_to_seconds,
    ms_range_to_time_string,
    round_interval,
    seconds_to_hms,
)
from .presets import HIDDEN_RANGE_OPTIONS, RANGE_INDEX, RANGE_OPTIONS, SPANS, find_preset
from .rangeutil import (
    convert_raw_to_range,
    describe_text_range,
    describe_time_range,
    describe_time_range_abbreviation,
    is_fiscal,
    is_relative_time,
    is_relative_time_range,
    is_valid_time_span,
    relative_to_time_range,
    time_range_to_relative,
)
from .types import (
    IntervalInfo,
    IntervalValues,
    RawTimeRange,
    RelativeTimeRange,
    TimeOption,
    TimeRange,
    TimeZone,
)

__all__ = [
    "HIDDEN_RANGE_OPTIONS",
    "RANGE_INDEX",
    "RANGE_OPTIONS",
    "SPANS",
    "IntervalInfo",
    "IntervalValues",
    "InvalidIntervalError",
    "RawTimeRange",
    "RelativeTimeRange",
    "TimeOption",
    "TimeRange",
    "TimeZone",
    "calculate_interval",
    "convert_raw_to_range",
    "describe_interval",
    "describe_text_range",
    "describe_time_range",
    "describe_time_range_abbreviation",
    "find_preset",
    "interval_to_ms",
    "interval_to_seconds",
    "is_fiscal",
    "is_relative_time",
    "is_relative_time_range",
    "is_valid_time_span",
    "ms_range_to_time_string",
    "relative_to_time_range",
    "round_interval",
    "seconds_to_hms",
    "time_range_to_relative",
]
