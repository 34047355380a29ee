#!/usr/bin/env python3
"""
Export the Russian production calendar to CSV.

Usage:
    python scripts/export_production_calendar.py --years 2015 2016 --output data/calendar

Writes, per year:
- production_calendar_<year>.csv: one row per day
- working_time_norm_<year>.csv: monthly norm plus a total row
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from ru_holidays.calendar import HolidayCalendar
from ru_holidays.reporting import production_calendar, working_time_norm


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the production calendar")
    parser.add_argument("--years", nargs="+", type=int, help="Years to export (default: all covered years)")
    parser.add_argument("--output", required=True, help="Output directory")
    parser.add_argument("--data", default=None, help="Alternative holidays YAML document")
    parser.add_argument("--hours-per-week", type=float, default=40.0)
    args = parser.parse_args(argv)

    calendar = HolidayCalendar.from_file(Path(args.data) if args.data else None)
    years = args.years or list(calendar.covered_years())

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Exporting production calendar")
    print(f"  Years: {years}")
    print(f"  Hours per week: {args.hours_per_week}")
    print(f"  Output: {output_dir}")
    print()

    summary = {}
    for year in years:
        days = production_calendar(year, hours_per_week=args.hours_per_week, calendar=calendar)
        days.to_csv(output_dir / f"production_calendar_{year}.csv", index=False)

        norm = working_time_norm(year, hours_per_week=args.hours_per_week, calendar=calendar)
        norm.to_csv(output_dir / f"working_time_norm_{year}.csv")

        total = norm.loc["total"]
        summary[year] = {
            "business_days": int(total["business_days"]),
            "days_off": int(total["days_off"]),
            "short_days": int(total["short_days"]),
            "hours": float(total["hours"]),
        }
        print(f"  {year}: {summary[year]['business_days']:>3} business days, {summary[year]['hours']:>7.1f} hours")

    with open(output_dir / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)
    print("\nSummary saved to:", output_dir / "summary.json")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
