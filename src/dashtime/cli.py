"""Command-line interface for dashtime."""

import argparse
import logging
import re
import sys
from datetime import datetime

from dashtime import __version__
from dashtime.config import (
    DashTimeSettings,
    get_settings,
    validate_resolution,
    validate_time_zone,
)
from dashtime.core import (
    InvalidIntervalError,
    RawTimeRange,
    calculate_interval,
    convert_raw_to_range,
    describe_time_range,
    is_valid_time_span,
    ms_range_to_time_string,
    round_interval,
    seconds_to_hms,
    time_range_to_relative,
)
from dashtime.utils import (
    TimeParseError,
    date_time_format,
    date_time_parse,
    to_epoch_ms,
)

logger = logging.getLogger(__name__)

ABSOLUTE_TIME_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}|\d{10,}$)")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dashtime",
        description="Describe, convert and bucket dashboard time ranges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dashtime describe now-6h                  # Últimas 6 horas
  dashtime describe now-2d/d now-1d/d       # Literal range label
  dashtime validate 15m                     # valid
  dashtime interval now-1h now --resolution 100
  dashtime round 36000                      # 30000
  dashtime duration 5400                    # 1h / 1h 30min
  dashtime relative now-1h now              # 3600 0

Environment Variables:
  DASHTIME_TIME_ZONE               # Default zone: utc (default), browser or IANA name
  DASHTIME_FISCAL_YEAR_START_MONTH # First fiscal month, 1-12 (default: 1)
  DASHTIME_DEFAULT_RESOLUTION      # Data points for 'interval' (default: 1000)
  DASHTIME_MIN_INTERVAL            # Lower interval limit, e.g. 10s
  DASHTIME_LOG_LEVEL               # DEBUG, INFO, WARNING (default) or ERROR
  DASHTIME_LOG_FILE                # Optional log file path

Note: Command-line arguments take precedence over environment variables.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--time-zone",
        type=str,
        help="Time zone for display and date math (overrides DASHTIME_TIME_ZONE)",
        default=None,
        metavar="TZ",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser("describe", help="Label a time range")
    describe.add_argument("range_from", metavar="FROM")
    describe.add_argument("range_to", metavar="TO", nargs="?", default="now")

    validate = subparsers.add_parser("validate", help="Check a range expression")
    validate.add_argument("expression", metavar="EXPR")

    interval = subparsers.add_parser("interval", help="Pick the bucket size for a range")
    interval.add_argument("range_from", metavar="FROM")
    interval.add_argument("range_to", metavar="TO")
    interval.add_argument(
        "--resolution",
        type=int,
        default=None,
        help="Number of data points (overrides DASHTIME_DEFAULT_RESOLUTION)",
    )
    interval.add_argument(
        "--min-interval",
        type=str,
        default=None,
        help="Lower interval limit (overrides DASHTIME_MIN_INTERVAL)",
    )

    round_cmd = subparsers.add_parser("round", help="Round a duration to a bucket")
    round_cmd.add_argument("milliseconds", type=float, metavar="MS")

    duration = subparsers.add_parser("duration", help="Format a duration")
    duration.add_argument("seconds", type=float, metavar="SECONDS")

    relative = subparsers.add_parser("relative", help="Express a range as offsets before now")
    relative.add_argument("range_from", metavar="FROM")
    relative.add_argument("range_to", metavar="TO")

    return parser


def _configure_logging(settings: DashTimeSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        filename=str(settings.log_file) if settings.log_file else None,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _absolute_or_expression(value: str, time_zone: str) -> datetime | str:
    """Parse dates and epoch milliseconds, leaving expressions such as '6h' as text."""
    if ABSOLUTE_TIME_PATTERN.match(value):
        return date_time_parse(value, time_zone=time_zone)
    return value


def _run(args: argparse.Namespace, settings: DashTimeSettings) -> int:
    if args.command == "describe":
        raw = RawTimeRange(
            from_=_absolute_or_expression(args.range_from, settings.time_zone),
            to=_absolute_or_expression(args.range_to, settings.time_zone),
        )
        print(describe_time_range(raw, settings.time_zone))
        return 0

    if args.command == "validate":
        valid = is_valid_time_span(args.expression)
        print("valid" if valid else "invalid")
        return 0 if valid else 1

    if args.command == "round":
        print(round_interval(args.milliseconds))
        return 0

    if args.command == "duration":
        print(seconds_to_hms(args.seconds))
        print(ms_range_to_time_string(args.seconds * 1000))
        return 0

    time_range = convert_raw_to_range(
        RawTimeRange(from_=args.range_from, to=args.range_to),
        time_zone=settings.time_zone,
        fiscal_year_start_month=settings.fiscal_year_start_month,
    )

    if args.command == "relative":
        relative = time_range_to_relative(time_range)
        print(f"{relative.from_:.0f} {relative.to:.0f}")
        return 0

    resolution = (
        args.resolution if args.resolution is not None else settings.default_resolution
    )
    if not validate_resolution(resolution):
        raise ValueError(f"Resolution must be a positive number of points, got {resolution}")
    low_limit = args.min_interval or settings.min_interval
    values = calculate_interval(time_range, resolution, low_limit)
    logger.info(
        f"Range {to_epoch_ms(time_range.from_)}..{to_epoch_ms(time_range.to)} "
        f"at resolution {resolution}"
    )
    print(
        f"{date_time_format(time_range.from_, settings.time_zone)} to "
        f"{date_time_format(time_range.to, settings.time_zone)}"
    )
    print(f"{values.interval_ms:.0f}ms ({values.interval})")
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    # Load and validate configuration
    try:
        settings = get_settings()

        # CLI arguments take precedence over environment variables
        if args.time_zone is not None:
            if not validate_time_zone(args.time_zone):
                raise ValueError(f"Unknown time zone: {args.time_zone}")
            settings = settings.model_copy(update={"time_zone": args.time_zone})
    except ValueError as e:
        print(f"❌ Configuration Error: {e}", file=sys.stderr)
        return 1

    _configure_logging(settings)

    try:
        return _run(args, settings)
    except (InvalidIntervalError, TimeParseError, ValueError) as e:
        logger.warning(f"{args.command} failed: {e}")
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
