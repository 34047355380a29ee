from __future__ import annotations

from datetime import date
from typing import Any


def md_key(month: Any, day: Any) -> str:
    # "3", 3 and "03" all pad to "03"; out-of-range values pass through unmatched.
    return f"{str(month).zfill(2)}{str(day).zfill(2)}"


def parse_ymd(value: str) -> date:
    parts = value.split("-")
    if len(parts) != 3:
        raise ValueError(f"Invalid date: {value}")
    return date(int(parts[0]), int(parts[1]), int(parts[2]))
