"""
Vacation pay calculation.

Average daily earnings = average salary / 29.3, rounded to two decimals.
Vacation pay = average daily earnings x payable days, rounded to two decimals.
Payable days are either given directly or derived from a date range minus
fixed holidays.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from vacation_calculator.core.holiday_calendar import HolidayCalendar
from vacation_calculator.data.schemas import ByDateRange, ByDayCount, PayRequest, PayResult
from vacation_calculator.exceptions import InvalidDateOrderError, ModeConflictError

logger = logging.getLogger(__name__)

# Average number of calendar days in a month used by the statutory formula
AVERAGE_MONTHLY_DAYS = Decimal("29.3")

MONETARY_SCALE = 2
MONETARY_QUANTUM = Decimal(1).scaleb(-MONETARY_SCALE)
MONETARY_ROUNDING = ROUND_HALF_UP

# Digits kept beyond the integer part of the largest intermediate value
GUARD_DIGITS = 8
MIN_PRECISION = 28


def round_money(amount: Decimal) -> Decimal:
    """Round an amount to the monetary scale using round-half-up."""
    return amount.quantize(MONETARY_QUANTUM, rounding=MONETARY_ROUNDING)


def working_precision(average_salary: Decimal, payable_days: int = 1) -> int:
    """
    Decimal precision large enough to hold salary-derived amounts exactly.

    The default 28-digit context cannot quantize amounts with more
    significant digits, so the context grows with the salary magnitude
    and the number of payable days.
    """
    return max(
        MIN_PRECISION,
        average_salary.adjusted() + len(str(payable_days)) + MONETARY_SCALE + GUARD_DIGITS,
    )


class PayCalculator:
    """Calculates vacation pay from a salary and a vacation period."""

    def __init__(self, holiday_calendar: HolidayCalendar):
        """
        Initialize the pay calculator.

        Args:
            holiday_calendar: Calendar used to exclude holidays from date ranges.
        """
        self.holiday_calendar = holiday_calendar

    def calculate(self, request: PayRequest) -> PayResult:
        """
        Calculate vacation pay for a request.

        Args:
            request: PayRequest with salary and vacation period.

        Returns:
            PayResult with the amount, payable days and an explanation.

        Raises:
            ModeConflictError: If the request has no valid selection mode.
            InvalidDateOrderError: If the start date is after the end date.
        """
        self.validate(request)

        daily_earnings = self.average_daily_earnings(request.average_salary)
        period = request.period

        if isinstance(period, ByDayCount):
            payable_days = period.days
            calendar_days = None
            holidays = 0
            excluded = []
            details = f"Based on {period.days} vacation days"
        else:
            calendar_days = period.calendar_days
            holidays = self.holiday_calendar.count_holidays_between(
                period.start_date, period.end_date
            )
            excluded = self.holiday_calendar.holidays_between(period.start_date, period.end_date)
            payable_days = calendar_days - holidays
            details = self._describe_date_range(period, calendar_days, holidays)

        with localcontext() as ctx:
            ctx.prec = working_precision(request.average_salary, payable_days)
            vacation_pay = round_money(daily_earnings * payable_days)

        logger.debug(
            "Daily earnings %s x %d payable days = %s (calendar days: %s, holidays: %d)",
            daily_earnings, payable_days, vacation_pay, calendar_days, holidays,
        )

        return PayResult(
            vacation_pay=vacation_pay,
            payable_days=payable_days,
            calculation_details=details,
            average_daily_earnings=daily_earnings,
            calendar_days=calendar_days,
            holidays_count=holidays,
            holidays=excluded,
        )

    def validate(self, request: PayRequest) -> None:
        """
        Check a request before any computation.

        Raises:
            ModeConflictError: If the period is not exactly one selection mode.
            InvalidDateOrderError: If the start date is after the end date.
        """
        period = getattr(request, "period", None)
        if not isinstance(period, (ByDayCount, ByDateRange)):
            raise ModeConflictError()

        if isinstance(period, ByDateRange) and period.start_date > period.end_date:
            raise InvalidDateOrderError()

    def average_daily_earnings(self, average_salary: Decimal) -> Decimal:
        """Average daily earnings, rounded once to two decimals."""
        with localcontext() as ctx:
            ctx.prec = working_precision(average_salary)
            return round_money(average_salary / AVERAGE_MONTHLY_DAYS)

    def _describe_date_range(self, period: ByDateRange, calendar_days: int, holidays: int) -> str:
        text = (
            f"Based on provided dates ({period.start_date.isoformat()} to "
            f"{period.end_date.isoformat()}), {calendar_days} calendar days"
        )
        if holidays > 0:
            text += f" excluding {holidays} holiday(s)"
        return text
