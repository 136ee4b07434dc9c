# File: availability_engine/processors/quantizer.py
"""
Quantizing and slicing availability into bookable windows.

Slicing deliberately over-generates: windows are `duration` long but
start every `interval` minutes, so consecutive windows overlap (a 9-11
block at 15/60 yields 9:00-10:00, 9:15-10:15, ..., 10:00-11:00). That lets
a session start on any quarter-hour. Never assume sliced windows are
disjoint.
"""

import math
from datetime import datetime, timedelta
from typing import Iterable

from availability_engine.models import Availability, Timeslot
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_INTERVAL = 15
DEFAULT_DURATION = 60


def round_start_time(start: datetime, interval: int = DEFAULT_INTERVAL) -> datetime:
    """
    Round `start` up to the next `interval`-minute boundary of its hour.

    9:41 becomes 9:45 and 9:56 becomes 10:00. A start whose minute is
    already a multiple of `interval` is returned unchanged, seconds included.
    """
    if interval <= 0:
        raise ValueError(f"Quantization interval must be positive: {interval}")
    if start.minute % interval == 0:
        return start
    hour = start.replace(minute=0, second=0, microsecond=0)
    return hour + timedelta(minutes=math.ceil(start.minute / interval) * interval)


def slice_availability(
    availability: Iterable[Timeslot],
    interval: int = DEFAULT_INTERVAL,
    duration: int = DEFAULT_DURATION,
) -> Availability:
    """
    Slice availability into `duration`-minute windows starting every
    `interval` minutes.

    Args:
        availability: Timeslots to slice (not modified)
        interval: Minutes between window start times
        duration: Window length in minutes

    Returns:
        Sliced windows ordered by start time within each source timeslot
    """
    if interval <= 0:
        raise ValueError(f"Slice interval must be positive: {interval}")
    if duration <= 0:
        raise ValueError(f"Slice duration must be positive: {duration}")

    length = timedelta(minutes=duration)
    step = timedelta(minutes=interval)
    sliced = Availability()

    for timeslot in Availability(availability).sort():
        cursor = round_start_time(timeslot.from_, interval)
        while cursor + length <= timeslot.to:
            sliced.append(Timeslot(cursor, cursor + length, timeslot.recur))
            cursor += step

    logger.debug(f"Sliced availability into {len(sliced)} windows ({duration} min every {interval} min)")
    return sliced
