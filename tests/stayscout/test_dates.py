"""
Tests for stayscout.dates — stay window selection.
"""

from datetime import date, datetime, timedelta

import pytest

from stayscout.dates import format_date, select_window
from stayscout.errors import InvalidDateError


NOW = datetime(2026, 3, 4, 10, 30)  # a Wednesday


class TestRequestedCheckin:
    def test_five_nights_from_checkin(self):
        window = select_window(NOW, "2026-03-24")
        assert window.check_in == date(2026, 3, 24)
        assert window.check_out == date(2026, 3, 29)
        assert window.nights == 5

    def test_tomorrow_is_allowed(self):
        window = select_window(NOW, "2026-03-05")
        assert window.check_in == date(2026, 3, 5)

    def test_today_is_rejected(self):
        with pytest.raises(InvalidDateError, match="future"):
            select_window(NOW, "2026-03-04")

    def test_past_date_rejected(self):
        with pytest.raises(InvalidDateError, match="future"):
            select_window(NOW, "2026-01-15")

    @pytest.mark.parametrize("value", ["2026-02-30", "next monday", "03/24/2026", "2026-3"])
    def test_malformed_date_rejected(self, value):
        with pytest.raises(InvalidDateError, match="YYYY-MM-DD"):
            select_window(NOW, value)

    def test_next_year_rejected(self):
        with pytest.raises(InvalidDateError, match="current year 2026"):
            select_window(NOW, "2027-01-05")

    def test_empty_checkin_rejected(self):
        with pytest.raises(InvalidDateError, match="YYYY-MM-DD"):
            select_window(NOW, "")

    def test_invalid_date_is_value_error(self):
        with pytest.raises(ValueError):
            select_window(NOW, "not-a-date")

    def test_checkout_may_cross_year_end(self):
        # Only the auto-pick path clamps check-out to Dec 31; an explicit
        # late-December check-in keeps its five nights into next year.
        window = select_window(datetime(2026, 12, 1), "2026-12-29")
        assert window.check_out == date(2027, 1, 3)

    def test_accepts_plain_date_for_now(self):
        window = select_window(date(2026, 3, 4), "2026-04-01")
        assert window.check_out == date(2026, 4, 6)


class TestAutoPick:
    def test_next_monday_after_two_weeks(self):
        window = select_window(NOW)
        # earliest is Wed 2026-03-18, next Monday is 2026-03-23
        assert window.check_in == date(2026, 3, 23)
        assert window.check_in.weekday() == 0
        assert window.check_out == date(2026, 3, 28)

    def test_monday_is_kept_when_earliest_is_monday(self):
        window = select_window(datetime(2026, 3, 2))  # Monday
        assert window.check_in == date(2026, 3, 16)

    def test_shifts_back_to_end_by_dec_31(self):
        # earliest Thu 2026-12-24 -> Monday 2026-12-28 -> out 2027-01-02
        window = select_window(datetime(2026, 12, 10))
        assert window.check_in == date(2026, 12, 26)
        assert window.check_out == date(2026, 12, 31)

    def test_no_window_left_late_in_year(self):
        # Next Monday falls in 2027, and the Dec 10 fallback is already past
        with pytest.raises(InvalidDateError, match="fits in 2026"):
            select_window(datetime(2026, 12, 16))

    @pytest.mark.parametrize("year", [2025, 2026, 2027])
    def test_window_invariants_for_every_day_of_year(self, year):
        day = date(year, 1, 1)
        while day.year == year:
            try:
                window = select_window(day)
            except InvalidDateError:
                assert day.month == 12
            else:
                assert window.check_out - window.check_in == timedelta(days=5)
                assert window.check_in > day
                assert window.check_in.year == year
                assert window.check_out.year == year
                if day < date(year, 12, 1):
                    assert window.check_in - day >= timedelta(days=14)
                    assert window.check_in.weekday() == 0
            day += timedelta(days=1)


class TestFormatDate:
    def test_iso_format(self):
        assert format_date(date(2026, 3, 5)) == "2026-03-05"
