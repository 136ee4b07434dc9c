# File: availability_engine/processors/index_materializer.py
"""
Search-index materialization.

The search index can only do scalar range filters; it has no notion of
"repeats weekly". At write time we decide, for each sliced weekly window,
whether any of its occurrences before the horizon is still unbooked and
push one concrete start instant per bookable window. The result is a
derived snapshot and must be recomputed whenever bookings or availability
change.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from availability_engine.core.anchor import ONE_WEEK, next_date_with_day_and_time
from availability_engine.models import Availability, Timeslot, to_millis
from availability_engine.processors.quantizer import slice_availability
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

INDEX_INTERVAL = 15
INDEX_DURATION = 60
HORIZON_MONTHS = 3


def default_horizon(now: datetime, months: int = HORIZON_MONTHS) -> datetime:
    """`months` calendar months after `now`."""
    return now + relativedelta(months=months)


def first_free_occurrence(
    window: Timeslot,
    booked: Availability,
    now: datetime,
    until: datetime,
) -> Optional[datetime]:
    """
    Nearest occurrence of a weekly window at or after `now` that is not
    booked, or None when every occurrence up to the horizon is taken.
    Back-to-back meetings do not block an occurrence.
    """
    length: timedelta = window.duration
    start = next_date_with_day_and_time(window.from_, now)
    while start <= until + length:
        occurrence = Timeslot(start, start + length, window.recur)
        if not booked.overlaps(occurrence, allow_back_to_back=True):
            return start
        start += ONE_WEEK
    return None


def get_search_availability(
    availability: Iterable[Timeslot],
    booked: Iterable[Timeslot],
    now: datetime,
    until: Optional[datetime] = None,
    interval: int = INDEX_INTERVAL,
    duration: int = INDEX_DURATION,
) -> List[int]:
    """
    Materialize weekly availability into start instants for the search index.

    A window whose every occurrence until the horizon is booked (e.g. a
    volunteer who meets someone every Monday at 11 for the next 3 months)
    is left out.

    Args:
        availability: Weekly recurring availability
        booked: Absolute booked intervals
        now: Current instant; occurrences before it are ignored
        until: Horizon (default: 3 months after `now`)
        interval: Minutes between window starts
        duration: Window length in minutes

    Returns:
        Epoch-millisecond start of the nearest free occurrence of every
        bookable window, in slice order
    """
    if until is None:
        until = default_horizon(now)
    booked = Availability(booked)

    sliced = slice_availability(availability, interval, duration)
    starts: List[int] = []
    for window in sliced:
        start = first_free_occurrence(window, booked, now, until)
        if start is not None:
            starts.append(to_millis(start))

    logger.info(
        f"Materialized {len(starts)} of {len(sliced)} weekly windows "
        f"as available until {until.isoformat()}"
    )
    return starts
