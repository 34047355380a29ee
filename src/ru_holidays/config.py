from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "holidays.yaml"

_MD_RE = re.compile(r"^\d{4}$")


@dataclass(frozen=True)
class Config:
    raw: dict[str, Any]

    def get(self, *path: str, default: Any | None = None) -> Any:
        node: Any = self.raw
        for key in path:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node


def load_config(path: Path) -> Config:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config root in {path}")
    return Config(raw=data)


@dataclass(frozen=True)
class CalendarTables:
    """
    The four static tables behind the holiday calendar.

    yearly: MMDD -> holiday name, the same every year.
    special: year -> MMDD days off moved onto weekdays that year.
    business_days_on_weekends: year -> Saturdays/Sundays declared working days.
    short_business_days: year -> pre-holiday days with shortened hours.
    """

    yearly: Mapping[str, str]
    special: Mapping[int, frozenset[str]]
    business_days_on_weekends: Mapping[int, frozenset[str]]
    short_business_days: Mapping[int, frozenset[str]]


def _check_md(value: Any, where: str, path: Path) -> str:
    if not isinstance(value, str) or not _MD_RE.match(value):
        raise ValueError(f"Invalid MMDD key {value!r} in {where} of {path}")
    return value


def _yearly_table(config: Config, path: Path) -> Mapping[str, str]:
    node = config.get("yearly")
    if not isinstance(node, dict):
        raise ValueError(f"Missing 'yearly' table in {path}")
    table = {}
    for md, name in node.items():
        if not isinstance(name, str) or not name:
            raise ValueError(f"Invalid holiday name for {md!r} in {path}")
        table[_check_md(md, "yearly", path)] = name
    return MappingProxyType(table)


def _per_year_table(config: Config, section: str, path: Path) -> Mapping[int, frozenset[str]]:
    # A missing section is the same as a section with no years in it.
    node = config.get(section, default={}) or {}
    if not isinstance(node, dict):
        raise ValueError(f"Invalid '{section}' table in {path}")
    table = {}
    for year, days in node.items():
        if not isinstance(year, int) or isinstance(year, bool):
            raise ValueError(f"Invalid year {year!r} in {section} of {path}")
        if not isinstance(days, list):
            raise ValueError(f"Invalid day list for {year} in {section} of {path}")
        table[year] = frozenset(_check_md(md, f"{section}/{year}", path) for md in days)
    return MappingProxyType(table)


def load_calendar_tables(path: Path | None = None) -> CalendarTables:
    """
    Load holiday tables from a YAML document.

    Args:
        path: Document to read. Defaults to the data file shipped with the package.

    Returns:
        Read-only CalendarTables.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    path = path or DEFAULT_DATA_PATH
    config = load_config(path)
    tables = CalendarTables(
        yearly=_yearly_table(config, path),
        special=_per_year_table(config, "special", path),
        business_days_on_weekends=_per_year_table(config, "business_days_on_weekends", path),
        short_business_days=_per_year_table(config, "short_business_days", path),
    )
    logger.debug(
        "Loaded holiday tables from %s: %d yearly holidays, special years %s",
        path,
        len(tables.yearly),
        sorted(tables.special),
    )
    return tables
