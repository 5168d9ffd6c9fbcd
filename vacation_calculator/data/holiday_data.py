"""
Static data for the fixed non-working holidays.
"""

from typing import Dict, FrozenSet, Tuple

MonthDay = Tuple[int, int]

# (month, day) -> English display name
HOLIDAY_NAMES: Dict[MonthDay, str] = {
    (1, 1): "New Year Holidays",
    (1, 2): "New Year Holidays",
    (1, 3): "New Year Holidays",
    (1, 4): "New Year Holidays",
    (1, 5): "New Year Holidays",
    (1, 6): "New Year Holidays",
    (1, 7): "Orthodox Christmas Day",
    (1, 8): "New Year Holidays",
    (2, 23): "Defender of the Fatherland Day",
    (3, 8): "International Women's Day",
    (5, 1): "Spring and Labour Day",
    (5, 9): "Victory Day",
    (6, 12): "Russia Day",
    (11, 4): "Unity Day",
}

FIXED_HOLIDAYS: FrozenSet[MonthDay] = frozenset(HOLIDAY_NAMES)
