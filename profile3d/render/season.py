"""Seasonal palette index for a calendar day.

Twenty patterns rotate through the year: the first month of each quarter
fades over five weekly steps into the next season, the two months after it
hold that season's final pattern.

    Sep      0-4   summer -> autumn
    Oct-Nov  4     autumn
    Dec      5-9   autumn -> winter
    Jan-Feb  9     winter
    Mar      10-14 winter -> spring
    Apr-May  14    spring
    Jun      15-19 spring -> summer
    Jul-Aug  19    summer
"""

from datetime import date, timedelta

SEASON_PATTERN_COUNT = 20

# month -> (base, follows day-of-month band)
_MONTH_TABLE: dict[int, tuple[int, bool]] = {
    9: (0, True),
    10: (4, False),
    11: (4, False),
    12: (5, True),
    1: (9, False),
    2: (9, False),
    3: (10, True),
    4: (14, False),
    5: (14, False),
    6: (15, True),
    7: (19, False),
    8: (19, False),
}


def _day_band(day_of_month: int) -> int:
    if day_of_month <= 7:
        return 0
    if day_of_month <= 14:
        return 1
    if day_of_month <= 21:
        return 2
    if day_of_month <= 28:
        return 3
    return 4


def season_pattern_index(day: date) -> int:
    """Pattern index in [0, 19], decided by the Sunday on or before ``day``."""
    sunday = day - timedelta(days=day.isoweekday() % 7)
    base, transitional = _MONTH_TABLE[sunday.month]
    if transitional:
        return base + _day_band(sunday.day)
    return base
