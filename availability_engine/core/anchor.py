# File: availability_engine/core/anchor.py
"""
Weekly-pattern anchoring.

"Every Monday at 9:00" is stored as one concrete datetime: the first
Monday 9:00 at or after EPOCH. Only the weekday and time-of-day of an
anchored datetime mean anything; its date is disposable.
"""

from datetime import datetime, timedelta

from availability_engine.models import Availability, Timeslot, day_of_week
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

# 1970-01-01 is a Thursday. Nothing depends on which weekday it is, only
# that every anchor computation shares it.
EPOCH = datetime(1970, 1, 1)

# Upper bound on the weekday walk; a valid weekday is reached in < 7 steps.
MAX_WEEKDAY_STEPS = 256

ONE_WEEK = timedelta(days=7)


def get_date_with_time(
    hours: int,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
    reference: datetime = EPOCH,
) -> datetime:
    """
    Return `reference`'s calendar date with the given time-of-day.

    Out-of-range values roll over, so hours=24 is midnight of the next day.
    """
    midnight = datetime(reference.year, reference.month, reference.day)
    return midnight + timedelta(
        hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
    )


def get_date_with_day(weekday: int, reference: datetime = EPOCH) -> datetime:
    """
    Return the first date at or after `reference` falling on `weekday`
    (0 = Sunday). The time-of-day is left unchanged.

    An unreachable weekday stops after MAX_WEEKDAY_STEPS and returns the
    last date visited.
    """
    date = reference
    count = 0
    while day_of_week(date) != weekday and count < MAX_WEEKDAY_STEPS:
        date += timedelta(days=1)
        count += 1
    if count >= MAX_WEEKDAY_STEPS:
        logger.debug(f"Weekday {weekday!r} not reached after {count} steps")
    return date


def get_date(
    weekday: int,
    hours: int,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
    reference: datetime = EPOCH,
) -> datetime:
    """First occurrence of (weekday, time) at or after `reference`'s date."""
    return get_date_with_day(
        weekday,
        get_date_with_time(hours, minutes, seconds, milliseconds, reference),
    )


def next_date_with_day_and_time(date: datetime, now: datetime) -> datetime:
    """
    Next datetime at or after `now` sharing `date`'s weekday and time-of-day.
    """
    nxt = get_date(
        day_of_week(date),
        date.hour,
        date.minute,
        date.second,
        date.microsecond // 1000,
        reference=now,
    )
    # Same weekday as now but the time already passed
    if nxt < now:
        nxt += ONE_WEEK
    return nxt


def full_week(reference: datetime = EPOCH) -> Availability:
    """
    A weekly pattern that is open all day, every day.
    Used when a person is "available any time".
    """
    week = Availability()
    for weekday in range(7):
        start = get_date(weekday, 0, reference=reference)
        week.append(Timeslot(start, start + timedelta(days=1)))
    return week.sort()
