"""Russian Federation official holidays and business days."""

from ru_holidays.calendar import (
    HolidayCalendar,
    InvalidArgument,
    holidays,
    is_business_day,
    is_holiday,
    is_ru_holiday,
    is_short_business_day,
)

__version__ = "0.2.0"

__all__ = [
    "HolidayCalendar",
    "InvalidArgument",
    "holidays",
    "is_business_day",
    "is_holiday",
    "is_ru_holiday",
    "is_short_business_day",
]
