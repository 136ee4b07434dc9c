# File: availability_engine/utils/months.py
"""
Month arithmetic used by the month projector. Months are 1-based.
"""

import calendar
from typing import Tuple


def normalize_month(month: int, year: int) -> Tuple[int, int]:
    """
    Roll an out-of-range month into the year.

    (13, 2023) -> (1, 2024), (0, 2024) -> (12, 2023), (-1, 2024) -> (11, 2023)
    """
    years, index = divmod(month - 1, 12)
    return index + 1, year + years


def days_in_month(month: int, year: int) -> int:
    month, year = normalize_month(month, year)
    return calendar.monthrange(year, month)[1]


def weekday_of_first(month: int, year: int) -> int:
    """Weekday of the first day of the month (0 = Sunday)."""
    month, year = normalize_month(month, year)
    # monthrange() numbers weekdays from Monday
    return (calendar.monthrange(year, month)[0] + 1) % 7
