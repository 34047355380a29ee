"""Russian Federation holiday calendar.

Answers whether a date is an official holiday, a business day, or a
shortened pre-holiday business day, using the yearly tables from
ru_holidays/data/holidays.yaml.
"""

from __future__ import annotations

import logging
import threading
from datetime import date, timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ru_holidays.config import CalendarTables, load_calendar_tables
from ru_holidays.timeutils import md_key

logger = logging.getLogger(__name__)

TRANSFERRED_HOLIDAY = "Перенос праздничного дня"


class InvalidArgument(ValueError):
    pass


def _year_key(year: Any) -> int:
    # Tables and snapshots are keyed by int; "2014" and 2014 are the same year.
    try:
        return int(year)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Bad year {year!r}") from e


class HolidayCalendar:
    """
    Holiday lookups over one set of CalendarTables.

    The per-year holiday snapshot (yearly holidays plus that year's
    transfers) is built on first use and kept for the life of the instance.
    """

    def __init__(self, tables: CalendarTables):
        self._tables = tables
        self._snapshots: dict[Any, Mapping[str, str]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, path: Path | None = None) -> "HolidayCalendar":
        return cls(load_calendar_tables(path))

    @property
    def tables(self) -> CalendarTables:
        return self._tables

    def covered_years(self) -> tuple[int, ...]:
        """Years that have an entry in any of the per-year tables."""
        t = self._tables
        return tuple(sorted(set(t.special) | set(t.business_days_on_weekends) | set(t.short_business_days)))

    def _build_snapshot(self, year: Any) -> Mapping[str, str]:
        snapshot = dict(self._tables.yearly)
        # Transfers go on top of the yearly copy so their label wins.
        for md in self._tables.special.get(year, ()):
            snapshot[md] = TRANSFERRED_HOLIDAY
        logger.debug("Built holiday snapshot for %s: %d days", year, len(snapshot))
        return MappingProxyType(snapshot)

    def holidays(self, year: int) -> Mapping[str, str]:
        """
        Get all holidays of a year.

        Args:
            year: Calendar year.

        Returns:
            Read-only mapping of MMDD key to holiday name. The same object is
            returned on every call for the same year.

        Raises:
            InvalidArgument: If year is missing.
        """
        if not year:
            raise InvalidArgument("Bad year")
        year = _year_key(year)

        with self._lock:
            snapshot = self._snapshots.get(year)
            if snapshot is None:
                snapshot = self._build_snapshot(year)
                self._snapshots[year] = snapshot
        return snapshot

    def is_holiday(self, year: int, month: int, day: int) -> str | None:
        """
        Check if a date is a holiday.

        Args:
            year: Calendar year.
            month: Month, 1-12.
            day: Day of month, 1-31.

        Returns:
            Holiday name, or None for an ordinary day. Month and day values
            outside their range never match and also give None.

        Raises:
            InvalidArgument: If year, month or day is missing.
        """
        if not (year and month and day):
            raise InvalidArgument("Bad params")
        return self.holidays(year).get(md_key(month, day))

    is_ru_holiday = is_holiday

    def is_business_day(self, year: int, month: int, day: int) -> bool:
        """
        Check if a date is a business day.

        Holidays are never business days. Weekdays otherwise are. Saturdays
        and Sundays are only when the year lists them as working days.

        Raises:
            InvalidArgument: If year, month or day is missing, or the date does
                not exist in the calendar and is not a holiday.
        """
        if not (year and month and day):
            raise InvalidArgument("Bad params")
        year = _year_key(year)

        if self.is_holiday(year, month, day):
            return False

        try:
            weekday = date(year, int(month), int(day)).weekday()
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Bad date {year}-{month}-{day}: {e}") from e
        if weekday < 5:
            return True

        days = self._tables.business_days_on_weekends.get(year)
        if days is None:
            return False
        return md_key(month, day) in days

    def is_short_business_day(self, year: int, month: int, day: int) -> bool:
        """
        Check if a date is a shortened pre-holiday business day.

        Arguments are not validated: a missing year or a year without data
        is simply not a short day.
        """
        try:
            year = int(year)
        except (TypeError, ValueError):
            return False
        days = self._tables.short_business_days.get(year)
        if days is None:
            return False
        return md_key(month, day) in days

    def is_business_date(self, d: date) -> bool:
        return self.is_business_day(d.year, d.month, d.day)

    def get_business_days(self, start: date, end: date) -> list[date]:
        """
        Get all business days in a date range.

        Args:
            start: Start date (inclusive).
            end: End date (inclusive).

        Returns:
            List of business days, empty when start is after end.
        """
        days = []
        current = start
        while current <= end:
            if self.is_business_date(current):
                days.append(current)
            current += timedelta(days=1)
        return days

    def next_business_day(self, d: date) -> date:
        """First business day strictly after d."""
        current = d + timedelta(days=1)
        while not self.is_business_date(current):
            current += timedelta(days=1)
        return current


def is_weekend(d: date) -> bool:
    """
    Check if a date is a weekend.

    Args:
        d: The date to check.

    Returns:
        True if Saturday (5) or Sunday (6), False otherwise.
    """
    return d.weekday() >= 5


DEFAULT_CALENDAR = HolidayCalendar.from_file()


def holidays(year: int) -> Mapping[str, str]:
    """Read-only mapping of MMDD key to holiday name for the year."""
    return DEFAULT_CALENDAR.holidays(year)


def is_holiday(year: int, month: int, day: int) -> str | None:
    """Holiday name for the date, or None."""
    return DEFAULT_CALENDAR.is_holiday(year, month, day)


def is_ru_holiday(year: int, month: int, day: int) -> str | None:
    """Alias for is_holiday()."""
    return is_holiday(year, month, day)


def is_business_day(year: int, month: int, day: int) -> bool:
    return DEFAULT_CALENDAR.is_business_day(year, month, day)


def is_short_business_day(year: int, month: int, day: int) -> bool:
    return DEFAULT_CALENDAR.is_short_business_day(year, month, day)


def is_business_date(d: date) -> bool:
    return DEFAULT_CALENDAR.is_business_date(d)


def get_business_days(start: date, end: date) -> list[date]:
    return DEFAULT_CALENDAR.get_business_days(start, end)


def next_business_day(d: date) -> date:
    return DEFAULT_CALENDAR.next_business_day(d)


def covered_years() -> tuple[int, ...]:
    return DEFAULT_CALENDAR.covered_years()
