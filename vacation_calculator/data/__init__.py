"""
Data models and static holiday data for the vacation pay calculator.
"""

from vacation_calculator.data.holiday_data import FIXED_HOLIDAYS, HOLIDAY_NAMES
from vacation_calculator.data.schemas import (
    ByDateRange,
    ByDayCount,
    Config,
    Holiday,
    PayRequest,
    PayResult,
)

__all__ = [
    "ByDateRange",
    "ByDayCount",
    "Config",
    "FIXED_HOLIDAYS",
    "HOLIDAY_NAMES",
    "Holiday",
    "PayRequest",
    "PayResult",
]
