"""Russian holiday and business day calendar."""

from ru_holidays.calendar.holiday_calendar import (
    DEFAULT_CALENDAR,
    TRANSFERRED_HOLIDAY,
    HolidayCalendar,
    InvalidArgument,
    covered_years,
    get_business_days,
    holidays,
    is_business_date,
    is_business_day,
    is_holiday,
    is_ru_holiday,
    is_short_business_day,
    is_weekend,
    next_business_day,
)

__all__ = [
    "DEFAULT_CALENDAR",
    "TRANSFERRED_HOLIDAY",
    "HolidayCalendar",
    "InvalidArgument",
    "covered_years",
    "get_business_days",
    "holidays",
    "is_business_date",
    "is_business_day",
    "is_holiday",
    "is_ru_holiday",
    "is_short_business_day",
    "is_weekend",
    "next_business_day",
]
