# File: availability_engine/processors/month_projector.py
"""
Month projection.
Expands a weekly recurring pattern into every concrete, bookable window
of a calendar month, skipping windows that collide with booked meetings.
"""

from datetime import datetime
from typing import Iterable, Optional

from availability_engine.models import Availability, Timeslot
from availability_engine.processors.quantizer import slice_availability
from availability_engine.utils.logger import setup_logger
from availability_engine.utils.months import days_in_month, normalize_month, weekday_of_first

logger = setup_logger(__name__)

MONTH_INTERVAL = 15
MONTH_DURATION = 30


def get_months_timeslots(
    baseline: Iterable[Timeslot],
    month: int,
    year: int,
    booked: Optional[Iterable[Timeslot]] = None,
    earliest: Optional[datetime] = None,
    latest: Optional[datetime] = None,
    interval: int = MONTH_INTERVAL,
    duration: int = MONTH_DURATION,
) -> Availability:
    """
    Project a weekly pattern onto a month.

    Args:
        baseline: Weekly recurring availability (only weekday and time count)
        month: Target month, 1 = January; out-of-range values roll into the year
        year: Target year
        booked: Absolute booked intervals; any window touching one is skipped
        earliest: Skip windows starting before this instant
        latest: Skip windows ending after this instant
        interval: Minutes between window starts
        duration: Window length in minutes

    Returns:
        Availability of concrete windows, grouped by slice and ordered by date
    """
    month, year = normalize_month(month, year)
    booked = Availability(booked or [])
    num_days = days_in_month(month, year)
    weekday_offset = weekday_of_first(month, year)

    timeslots = Availability()
    skipped = 0

    for window in slice_availability(baseline, interval, duration):
        weekday = window.weekday
        for date in range(1, num_days + 1):
            if (date - 1 + weekday_offset) % 7 != weekday:
                continue
            from_ = datetime(year, month, date, window.from_.hour, window.from_.minute)
            candidate = Timeslot(from_, from_ + window.duration, window.recur)

            if earliest is not None and candidate.from_ < earliest:
                continue
            if latest is not None and candidate.to > latest:
                continue
            if booked.overlaps(candidate):
                skipped += 1
                continue
            timeslots.append(candidate)

    logger.debug(
        f"Projected {len(timeslots)} timeslots onto {year}-{month:02d} "
        f"({skipped} skipped as booked)"
    )
    return timeslots
