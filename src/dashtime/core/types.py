"""Records shared by the interval and time range utilities."""

from dataclasses import dataclass
from datetime import datetime

# "utc", "browser" (host local zone) or an IANA zone name
TimeZone = str


@dataclass(frozen=True)
class TimeOption:
    """A preset or derived description of a relative time range.

    Attributes:
        from_: Start expression (e.g. "now-6h")
        to: End expression (e.g. "now")
        display: Human-readable label
        section: Optional grouping hint for pickers
        invalid: True when the expression could not be understood
    """

    from_: str
    to: str
    display: str
    section: int | None = None
    invalid: bool = False


@dataclass(frozen=True)
class RawTimeRange:
    """A range whose ends are absolute instants or relative expressions."""

    from_: datetime | str
    to: datetime | str


@dataclass(frozen=True)
class TimeRange:
    """A raw range resolved to absolute instants, keeping the raw ends."""

    from_: datetime
    to: datetime
    raw: RawTimeRange


@dataclass(frozen=True)
class RelativeTimeRange:
    """Offsets in seconds before now, as used by alert rules."""

    from_: int | float
    to: int | float


@dataclass(frozen=True)
class IntervalValues:
    """A chosen bucket size and its label."""

    interval_ms: float
    interval: str


@dataclass(frozen=True)
class IntervalInfo:
    """Parsed interval string: seconds per unit, unit symbol and count."""

    sec: float
    type: str
    count: int
