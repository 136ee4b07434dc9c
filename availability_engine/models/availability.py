# File: availability_engine/models/availability.py

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

import pytz

from availability_engine.core.config_manager import Config

from .common import day_of_week
from .timeslot import Timeslot, timeslot_from_dict
from availability_engine.utils.intl import format_time, weekday_name
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)


class Availability(list):
    """
    An ordered collection of timeslots (one's open time, or booked time).

    No structural invariant is enforced: callers may pass overlapping
    timeslots. Algorithms that stream over an availability sort it first.
    """

    def __init__(self, timeslots: Iterable[Timeslot] = ()):
        super().__init__(timeslots)

    def copy(self) -> 'Availability':
        return Availability(self)

    def sort(self, key=None, reverse: bool = False) -> 'Availability':
        """Sort in place by start time (or `key`) and return self."""
        super().sort(key=key or (lambda t: t.from_), reverse=reverse)
        return self

    def sorted(self) -> 'Availability':
        """Sorted copy; leaves this availability untouched."""
        return self.copy().sort()

    def has_timeslot(self, timeslot: Timeslot) -> bool:
        return any(t.equal_to(timeslot) for t in self)

    def equal_to(self, other: Iterable[Timeslot]) -> bool:
        """Order-independent equality."""
        other = list(other)
        if len(other) != len(self):
            return False
        remaining = list(self)
        for timeslot in other:
            for idx, candidate in enumerate(remaining):
                if candidate.equal_to(timeslot):
                    del remaining[idx]
                    break
            else:
                return False
        return True

    def overlaps(self, other: Union[Timeslot, Iterable[Timeslot]], allow_back_to_back: bool = False) -> bool:
        """
        Whether any timeslot here overlaps `other`.

        `other` may be a single timeslot or another availability.
        """
        if isinstance(other, Timeslot):
            return any(t.overlaps(other, allow_back_to_back) for t in self)
        return any(self.overlaps(t, allow_back_to_back) for t in other)

    def contains(self, timeslot: Timeslot) -> bool:
        return any(t.contains(timeslot) for t in self)

    def has_date(self, day: date) -> bool:
        return any(t.on_date(day) for t in self)

    def on_date(self, day: date) -> 'Availability':
        return Availability(t for t in self if t.on_date(day))

    def remove(self, timeslot: Timeslot) -> None:
        """
        Remove a booked timeslot in place.

        Members overlapping it are trimmed, split in two, or dropped so
        that nothing left intersects the booked time. Back-to-back
        members are kept.
        """
        updated: List[Timeslot] = []
        for t in self:
            if not t.overlaps(timeslot, allow_back_to_back=True):
                updated.append(t)
                continue
            if t.from_ < timeslot.from_:
                updated.append(Timeslot(t.from_, timeslot.from_, t.recur))
            if t.to > timeslot.to:
                updated.append(Timeslot(timeslot.to, t.to, t.recur))
        self[:] = updated

    def to_list(self) -> List[Dict[str, Any]]:
        return [t.to_dict() for t in self]

    def to_display_string(
        self,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
        show_timezone: bool = False,
    ) -> str:
        """
        Human readable form, e.g. "Monday 9:00–10:30 AM, Friday 2:00–3:00 PM".

        `locale` and `timezone` default to Config.DISPLAY_LOCALE and
        Config.DISPLAY_TIMEZONE. `timezone` only labels the times; they are
        never converted.
        """
        locale = locale or Config.DISPLAY_LOCALE
        timezone = timezone or Config.DISPLAY_TIMEZONE
        zone = None
        if show_timezone and timezone:
            try:
                zone = pytz.timezone(timezone)
            except pytz.UnknownTimeZoneError:
                logger.warning(f"Unknown display timezone '{timezone}', omitting zone name")

        parts = []
        for t in self:
            same_day = t.from_.date() == t.to.date()
            same_period = (t.from_.hour < 12) == (t.to.hour < 12)
            start = f"{weekday_name(t.weekday, locale)} {format_time(t.from_, locale, not (same_day and same_period))}"
            end = format_time(t.to, locale)
            if not same_day:
                end = f"{weekday_name(day_of_week(t.to), locale)} {end}"
            if zone is not None:
                end = f"{end} {zone.localize(t.to).strftime('%Z')}"
            # En dash without spaces between the range
            parts.append(f"{start}–{end}")
        return ", ".join(parts)

    def __str__(self) -> str:
        return self.to_display_string()


def availability_from_list(data: Optional[Iterable[Dict[str, Any]]]) -> Availability:
    """Create Availability from a list of timeslot dictionaries."""
    return Availability(timeslot_from_dict(item) for item in (data or []))
