"""
Core business logic for vacation pay calculation.
"""

from vacation_calculator.core.holiday_calendar import HolidayCalendar
from vacation_calculator.core.pay_calculator import AVERAGE_MONTHLY_DAYS, PayCalculator

__all__ = [
    "AVERAGE_MONTHLY_DAYS",
    "HolidayCalendar",
    "PayCalculator",
]
