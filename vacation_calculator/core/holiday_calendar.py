"""
Fixed, year-independent holiday calendar.
"""

from datetime import date, timedelta
from typing import FrozenSet, Iterable, List, Optional, Tuple

from vacation_calculator.data.holiday_data import FIXED_HOLIDAYS, HOLIDAY_NAMES
from vacation_calculator.data.schemas import Holiday
from vacation_calculator.exceptions import InvalidRangeError


class HolidayCalendar:
    """
    Answers holiday questions against a fixed set of (month, day) pairs.

    The set is frozen at construction and never mutated, so one instance can
    be shared by any number of concurrent callers.
    """

    def __init__(self, holidays: Optional[Iterable[Tuple[int, int]]] = None):
        """
        Initialize the holiday calendar.

        Args:
            holidays: (month, day) pairs to treat as holidays. Defaults to the
                statutory fixed holidays.
        """
        self._holidays: FrozenSet[Tuple[int, int]] = (
            FIXED_HOLIDAYS if holidays is None else frozenset(holidays)
        )

    @property
    def holidays(self) -> FrozenSet[Tuple[int, int]]:
        """The (month, day) pairs of this calendar."""
        return self._holidays

    def is_holiday(self, check_date: date) -> bool:
        """
        Check if a date is a holiday. The year is ignored.

        Args:
            check_date: Date to check.

        Returns:
            True if the date's month and day are in the holiday set.
        """
        return (check_date.month, check_date.day) in self._holidays

    def count_holidays_between(self, start: date, end: date) -> int:
        """
        Count holidays between two dates, both ends included.

        Args:
            start: Start date (inclusive).
            end: End date (inclusive).

        Returns:
            Number of holidays within the range.

        Raises:
            InvalidRangeError: If start is after end.
        """
        return sum(1 for _ in self._iter_holiday_dates(start, end))

    def holidays_between(self, start: date, end: date) -> List[Holiday]:
        """
        Get the holidays between two dates, both ends included, in date order.

        Raises:
            InvalidRangeError: If start is after end.
        """
        return [self._to_holiday(d) for d in self._iter_holiday_dates(start, end)]

    def holidays_for_year(self, year: int) -> List[Holiday]:
        """
        Get all holidays of a year in date order.

        Args:
            year: Year to materialize the holidays for.

        Returns:
            List of Holiday objects for the year.
        """
        dates = []
        for month, day in self._holidays:
            try:
                dates.append(date(year, month, day))
            except ValueError:
                # February 29 outside leap years
                continue
        return [self._to_holiday(d) for d in sorted(dates)]

    def _iter_holiday_dates(self, start: date, end: date):
        if start > end:
            raise InvalidRangeError()

        current = start
        while current <= end:
            if self.is_holiday(current):
                yield current
            current += timedelta(days=1)

    def _to_holiday(self, holiday_date: date) -> Holiday:
        name = HOLIDAY_NAMES.get((holiday_date.month, holiday_date.day), "Holiday")
        return Holiday(holiday_date=holiday_date, name=name)
