"""Production calendar reporting."""

from ru_holidays.reporting.production_calendar import (
    production_calendar,
    working_time_norm,
)

__all__ = [
    "production_calendar",
    "working_time_norm",
]
