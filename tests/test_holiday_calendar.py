"""
Tests for the fixed holiday calendar.
"""

from datetime import date, timedelta

import pytest

from vacation_calculator.core.holiday_calendar import HolidayCalendar
from vacation_calculator.data.holiday_data import FIXED_HOLIDAYS
from vacation_calculator.exceptions import InvalidRangeError


@pytest.fixture
def calendar():
    """Create a HolidayCalendar with the statutory holidays."""
    return HolidayCalendar()


class TestHolidaySet:
    """Tests for the seeded holiday set."""

    def test_contains_fourteen_dates(self, calendar):
        """The statutory set has exactly 14 (month, day) pairs."""
        assert len(calendar.holidays) == 14
        assert calendar.holidays == FIXED_HOLIDAYS

    def test_new_year_holidays(self, calendar):
        """January 1 through 8 are all holidays, January 9 is not."""
        for day in range(1, 9):
            assert calendar.is_holiday(date(2025, 1, day)) is True
        assert calendar.is_holiday(date(2025, 1, 9)) is False

    @pytest.mark.parametrize("month,day", [(2, 23), (3, 8), (5, 1), (5, 9), (6, 12), (11, 4)])
    def test_single_day_holidays(self, calendar, month, day):
        """Each single-day holiday is recognized."""
        assert calendar.is_holiday(date(2025, month, day)) is True

    def test_holiday_set_is_immutable(self, calendar):
        """The holiday set cannot be mutated."""
        with pytest.raises(AttributeError):
            calendar.holidays.add((7, 7))

    def test_custom_holidays(self):
        """A calendar can be built from another set of pairs."""
        custom = HolidayCalendar([(12, 31)])
        assert custom.is_holiday(date(2024, 12, 31)) is True
        assert custom.is_holiday(date(2024, 1, 1)) is False


class TestIsHoliday:
    """Tests for is_holiday."""

    @pytest.mark.parametrize("year", [2024, 2025, 2100])
    def test_year_invariant(self, calendar, year):
        """Every fixed holiday is a holiday in every year."""
        for month, day in FIXED_HOLIDAYS:
            assert calendar.is_holiday(date(year, month, day)) is True

    def test_regular_day(self, calendar):
        """An ordinary summer day is not a holiday."""
        assert calendar.is_holiday(date(2024, 7, 15)) is False


class TestCountHolidaysBetween:
    """Tests for count_holidays_between."""

    def test_range_without_holidays(self, calendar):
        """June 1-28 holds no fixed holidays."""
        assert calendar.count_holidays_between(date(2024, 6, 1), date(2024, 6, 28)) == 0

    def test_may_range(self, calendar):
        """May 1-10 holds May 1 and May 9."""
        assert calendar.count_holidays_between(date(2024, 5, 1), date(2024, 5, 10)) == 2

    def test_year_boundary(self, calendar):
        """Dec 30 - Jan 3 counts January 1 to 3."""
        assert calendar.count_holidays_between(date(2024, 12, 30), date(2025, 1, 3)) == 3

    def test_full_year(self, calendar):
        """A full calendar year holds all 14 holidays."""
        assert calendar.count_holidays_between(date(2025, 1, 1), date(2025, 12, 31)) == 14

    def test_multiple_years(self, calendar):
        """Three full years hold 42 holidays."""
        assert calendar.count_holidays_between(date(2023, 1, 1), date(2025, 12, 31)) == 42

    def test_single_day(self, calendar):
        """A one-day range counts 0 or 1."""
        assert calendar.count_holidays_between(date(2024, 3, 8), date(2024, 3, 8)) == 1
        assert calendar.count_holidays_between(date(2024, 3, 9), date(2024, 3, 9)) == 0

    def test_never_exceeds_range_length(self, calendar):
        """The count is bounded by the number of days in the range."""
        start = date(2023, 12, 20)
        for length in range(0, 40):
            end = start + timedelta(days=length)
            assert calendar.count_holidays_between(start, end) <= length + 1

    def test_start_after_end(self, calendar):
        """A reversed range raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError, match="Start date must be before or equal to end date"):
            calendar.count_holidays_between(date(2024, 5, 10), date(2024, 5, 1))


class TestHolidayListing:
    """Tests for holidays_between and holidays_for_year."""

    def test_holidays_for_year(self, calendar):
        """All 14 holidays are listed in date order with names."""
        holidays = calendar.holidays_for_year(2026)

        assert len(holidays) == 14
        assert holidays[0].holiday_date == date(2026, 1, 1)
        assert holidays[-1].holiday_date == date(2026, 11, 4)
        assert holidays[-1].name == "Unity Day"
        assert [h.holiday_date for h in holidays] == sorted(h.holiday_date for h in holidays)

    def test_holidays_between(self, calendar):
        """Only the holidays inside the range are returned."""
        holidays = calendar.holidays_between(date(2024, 5, 1), date(2024, 5, 10))

        assert [h.holiday_date for h in holidays] == [date(2024, 5, 1), date(2024, 5, 9)]
        assert holidays[1].name == "Victory Day"

    def test_holidays_between_reversed(self, calendar):
        """A reversed range raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError):
            calendar.holidays_between(date(2024, 5, 10), date(2024, 5, 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
