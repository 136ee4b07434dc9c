# File: availability_engine/services/booking_service.py
"""
Turns meeting records into a booked set of concrete, absolute intervals.
Recurring meetings are expanded with python-dateutil's RRULE support.
"""

from datetime import datetime
from typing import Iterable, List

from dateutil.rrule import rrulestr

from availability_engine.core.config_manager import Config
from availability_engine.models import Availability, Meeting, Timeslot
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)


def expand_meeting(
    meeting: Meeting,
    start: datetime,
    end: datetime,
    max_occurrences: int = Config.MAX_OCCURRENCES,
) -> List[Timeslot]:
    """
    Concrete occurrences of a meeting that overlap [start, end].

    Args:
        meeting: The meeting to expand
        start: Window start
        end: Window end
        max_occurrences: Cap on occurrences produced for one meeting

    Returns:
        List of absolute Timeslots, each as long as the meeting itself
    """
    first = meeting.time
    length = first.duration

    if not meeting.is_recurring():
        return [first] if first.to >= start and first.from_ <= end else []

    try:
        rule = rrulestr(meeting.recur, dtstart=first.from_, ignoretz=True)
    except (ValueError, TypeError) as e:
        logger.warning(f"Could not parse recurrence of meeting '{meeting.id}' ({meeting.recur!r}): {e}")
        return [first] if first.to >= start and first.from_ <= end else []

    occurrences: List[Timeslot] = []
    # Occurrences starting up to one meeting-length before the window still reach into it
    for occ_start in rule.xafter(start - length, count=max_occurrences, inc=True):
        if occ_start > end:
            break
        occurrences.append(Timeslot(occ_start, occ_start + length, meeting.recur))

    if len(occurrences) >= max_occurrences:
        logger.warning(f"Meeting '{meeting.id}' expansion capped at {max_occurrences} occurrences")
    return occurrences


def expand_booked(
    meetings: Iterable[Meeting],
    start: datetime,
    end: datetime,
    max_occurrences: int = Config.MAX_OCCURRENCES,
) -> Availability:
    """
    Build the booked set for [start, end] from confirmed meetings only.
    Tentative and cancelled meetings never block availability.
    """
    booked = Availability()
    for meeting in meetings:
        if not meeting.is_confirmed():
            continue
        booked.extend(expand_meeting(meeting, start, end, max_occurrences))

    logger.debug(f"Booked set has {len(booked)} intervals between {start.isoformat()} and {end.isoformat()}")
    return booked.sort()
