"""Tests for production calendar reporting and the command line."""

from __future__ import annotations

import json
import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from export_production_calendar import main as export_main
from ru_holidays.__main__ import main
from ru_holidays.calendar import TRANSFERRED_HOLIDAY
from ru_holidays.reporting import production_calendar, working_time_norm


class TestProductionCalendar:
    """Tests for the day-by-day table."""

    def test_one_row_per_day(self):
        assert len(production_calendar(2015)) == 365
        assert len(production_calendar(2016)) == 366

    def test_columns(self):
        df = production_calendar(2015)
        assert list(df.columns) == [
            "date",
            "month",
            "weekday",
            "holiday",
            "is_business_day",
            "is_short_business_day",
            "hours",
        ]

    def test_row_values(self):
        df = production_calendar(2015).set_index("date")

        new_year = df.loc[date(2015, 1, 1)]
        assert new_year["weekday"] == "Thu"
        assert new_year["holiday"] == "Новогодние каникулы"
        assert not new_year["is_business_day"]
        assert new_year["hours"] == 0.0

        transfer = df.loc[date(2015, 1, 9)]
        assert transfer["holiday"] == TRANSFERRED_HOLIDAY
        assert transfer["hours"] == 0.0

        assert df.loc[date(2015, 1, 12)]["hours"] == 8.0
        assert df.loc[date(2015, 4, 30)]["hours"] == 7.0

    def test_invalid_hours_per_week(self):
        with pytest.raises(ValueError):
            production_calendar(2015, hours_per_week=0)
        print("  ✓ Non-positive week length raises ValueError")


class TestWorkingTimeNorm:
    """Tests for monthly working time norms."""

    @pytest.mark.parametrize(
        "year,business_days,hours",
        [
            (2008, 250, 1993),
            (2010, 249, 1987),
            (2012, 245, 1957),
            (2013, 247, 1970),
            (2014, 247, 1971),
            (2015, 248, 1979),
            (2016, 247, 1974),
            (2017, 247, 1973),
        ],
    )
    def test_yearly_totals(self, year, business_days, hours):
        total = working_time_norm(year).loc["total"]
        assert total["business_days"] == business_days
        assert total["hours"] == hours

    def test_monthly_rows(self):
        norm = working_time_norm(2015)
        assert list(norm.index) == list(range(1, 13)) + ["total"]

        january = norm.loc[1]
        assert january["calendar_days"] == 31
        assert january["business_days"] == 15
        assert january["days_off"] == 16
        assert january["hours"] == 120

        may = norm.loc[5]
        assert may["business_days"] == 19
        assert may["short_days"] == 1
        assert may["hours"] == 151

    def test_total_row_sums_months(self):
        norm = working_time_norm(2016)
        months = norm.drop(index="total")
        assert norm.loc["total", "calendar_days"] == 366
        assert norm.loc["total", "business_days"] == months["business_days"].sum()
        assert norm.loc["total", "short_days"] == 2

    def test_shorter_week(self):
        total = working_time_norm(2015, hours_per_week=36).loc["total"]
        assert total["hours"] == pytest.approx(1780.6)

    def test_year_without_data(self):
        norm = working_time_norm(1999)
        assert norm.loc["total", "short_days"] == 0
        assert norm.loc["total", "calendar_days"] == 365


class TestCli:
    """Tests for python -m ru_holidays."""

    def test_day(self, capsys):
        assert main(["day", "2015-01-01"]) == 0
        out = capsys.readouterr().out
        assert "2015-01-01" in out
        assert "Новогодние каникулы" in out
        assert "business day: no" in out

    def test_working_weekend(self, capsys):
        assert main(["day", "2012-03-11"]) == 0
        out = capsys.readouterr().out
        assert "holiday: -" in out
        assert "  business day: yes" in out

    def test_year(self, capsys):
        assert main(["year", "2015"]) == 0
        out = capsys.readouterr().out
        assert "total" in out
        assert "1979" in out

    def test_year_without_data_warns(self, caplog):
        with caplog.at_level("WARNING"):
            assert main(["year", "1999"]) == 0
        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert [r.name for r in warnings] == ["ru_holidays.__main__"]
        assert "1999" in warnings[0].getMessage()

    def test_bad_date(self):
        with pytest.raises(SystemExit) as exc:
            main(["day", "2015/01/01"])
        assert exc.value.code == 2

    def test_bad_week_length(self):
        with pytest.raises(SystemExit) as exc:
            main(["year", "2015", "--hours-per-week", "0"])
        assert exc.value.code == 2


class TestExportScript:
    """Tests for scripts/export_production_calendar.py."""

    def test_export_writes_csv_and_summary(self, tmp_path, capsys):
        out_dir = tmp_path / "calendar"
        assert export_main(["--years", "2015", "2016", "--output", str(out_dir)]) == 0

        assert (out_dir / "production_calendar_2015.csv").exists()
        assert (out_dir / "working_time_norm_2016.csv").exists()

        summary = json.loads((out_dir / "summary.json").read_text())
        assert summary["2015"] == {
            "business_days": 248,
            "days_off": 117,
            "short_days": 5,
            "hours": 1979.0,
        }
        assert summary["2016"]["hours"] == 1974.0
        assert "Summary saved to" in capsys.readouterr().out
        print("  ✓ Export writes per-year CSVs and summary.json")

    def test_export_defaults_to_covered_years(self, tmp_path):
        assert export_main(["--output", str(tmp_path)]) == 0
        summary = json.loads((tmp_path / "summary.json").read_text())
        assert sorted(int(y) for y in summary) == list(range(2005, 2018))
