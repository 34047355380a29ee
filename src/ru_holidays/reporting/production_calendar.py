"""Production calendar tables: per-day status and monthly working time norms."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ru_holidays.calendar.holiday_calendar import DEFAULT_CALENDAR, HolidayCalendar

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Labour Code art. 95: a pre-holiday working day is one hour shorter.
SHORT_DAY_REDUCTION_HOURS = 1.0


def production_calendar(
    year: int,
    hours_per_week: float = 40.0,
    calendar: HolidayCalendar | None = None,
) -> pd.DataFrame:
    """
    Build the day-by-day production calendar of a year.

    Args:
        year: Calendar year.
        hours_per_week: Working week length; a full business day is a fifth of it.
        calendar: Calendar to query. Defaults to the packaged data.

    Returns:
        DataFrame with one row per day: date, month, weekday, holiday,
        is_business_day, is_short_business_day, hours.
    """
    if hours_per_week <= 0:
        raise ValueError(f"hours_per_week must be positive, got {hours_per_week}")
    cal = calendar or DEFAULT_CALENDAR

    rows = []
    for ts in pd.date_range(start=f"{year}-01-01", end=f"{year}-12-31", freq="D"):
        d = ts.date()
        rows.append({
            "date": d,
            "month": d.month,
            "weekday": WEEKDAY_NAMES[d.weekday()],
            "holiday": cal.is_holiday(d.year, d.month, d.day),
            "is_business_day": cal.is_business_date(d),
            "is_short_business_day": cal.is_short_business_day(d.year, d.month, d.day),
        })
    df = pd.DataFrame(rows)

    full_day = hours_per_week / 5.0
    shortened = df["is_business_day"] & df["is_short_business_day"]
    df["hours"] = np.where(
        df["is_business_day"],
        full_day - np.where(shortened, SHORT_DAY_REDUCTION_HOURS, 0.0),
        0.0,
    )
    return df


def working_time_norm(
    year: int,
    hours_per_week: float = 40.0,
    calendar: HolidayCalendar | None = None,
) -> pd.DataFrame:
    """
    Compute the monthly working time norm of a year.

    Returns:
        DataFrame indexed by month (1-12) plus a final "total" row, with
        calendar_days, business_days, days_off, short_days, hours.
    """
    df = production_calendar(year, hours_per_week=hours_per_week, calendar=calendar)
    df["counted_short"] = df["is_business_day"] & df["is_short_business_day"]

    norm = df.groupby("month").agg(
        calendar_days=("date", "size"),
        business_days=("is_business_day", "sum"),
        short_days=("counted_short", "sum"),
        hours=("hours", "sum"),
    )
    norm["days_off"] = norm["calendar_days"] - norm["business_days"]
    norm = norm[["calendar_days", "business_days", "days_off", "short_days", "hours"]].copy()

    norm.index = norm.index.astype(object)
    norm.loc["total"] = norm.sum()
    return norm.astype({
        "calendar_days": int,
        "business_days": int,
        "days_off": int,
        "short_days": int,
        "hours": float,
    })
