from __future__ import annotations

import argparse
import logging

from ru_holidays.calendar import DEFAULT_CALENDAR
from ru_holidays.reporting import working_time_norm
from ru_holidays.timeutils import parse_ymd

logger = logging.getLogger(__name__)


def _date_arg(value: str):
    try:
        return parse_ymd(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _cmd_day(args: argparse.Namespace) -> int:
    d = args.date
    name = DEFAULT_CALENDAR.is_holiday(d.year, d.month, d.day)
    print(f"{d.isoformat()}")
    print(f"  holiday: {name or '-'}")
    print(f"  business day: {'yes' if DEFAULT_CALENDAR.is_business_date(d) else 'no'}")
    print(f"  short business day: {'yes' if DEFAULT_CALENDAR.is_short_business_day(d.year, d.month, d.day) else 'no'}")
    return 0


def _cmd_year(args: argparse.Namespace) -> int:
    if args.year not in DEFAULT_CALENDAR.covered_years():
        logger.warning("No decree data for %s, only fixed holidays are applied", args.year)
    norm = working_time_norm(args.year, hours_per_week=args.hours_per_week)
    print(norm.to_string())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ru_holidays", description="Russian holidays and business days.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    day = sub.add_parser("day", help="Show the status of a single date")
    day.add_argument("date", type=_date_arg, help="YYYY-MM-DD")
    day.set_defaults(func=_cmd_day)

    year = sub.add_parser("year", help="Show the monthly working time norm of a year")
    year.add_argument("year", type=int)
    year.add_argument("--hours-per-week", type=float, default=40.0)
    year.set_defaults(func=_cmd_year)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    if args.command == "year" and args.hours_per_week <= 0:
        parser.error("--hours-per-week must be positive")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
