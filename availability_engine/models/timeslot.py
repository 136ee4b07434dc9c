# File: availability_engine/models/timeslot.py

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from .common import coerce_datetime, day_of_week, from_millis, to_millis

DEFAULT_RECUR = "RRULE:FREQ=WEEKLY"


@dataclass
class Timeslot:
    """
    A window of time, [from_, to).

    `recur` follows RFC 5545 RRULE syntax. Weekly is assumed everywhere
    a person declares availability.
    """
    from_: datetime
    to: datetime
    recur: str = DEFAULT_RECUR

    def __post_init__(self):
        """Validate timeslot data."""
        if self.to <= self.from_:
            raise ValueError(
                f"Timeslot end must be after start: {self.from_.isoformat()} - {self.to.isoformat()}"
            )
        if not self.recur:
            self.recur = DEFAULT_RECUR

    @property
    def duration(self) -> timedelta:
        return self.to - self.from_

    def duration_minutes(self) -> int:
        """Calculate timeslot duration in minutes."""
        return int(self.duration.total_seconds() / 60)

    @property
    def weekday(self) -> int:
        """Weekday of the start (0 = Sunday)."""
        return day_of_week(self.from_)

    def overlaps(self, other: 'Timeslot', allow_back_to_back: bool = False) -> bool:
        """
        Check if this timeslot overlaps with another.

        Touching endpoints count as an overlap unless `allow_back_to_back`
        is set, in which case adjacent timeslots are not in conflict.
        """
        if allow_back_to_back:
            return self.to > other.from_ and self.from_ < other.to
        return self.to >= other.from_ and self.from_ <= other.to

    def contains(self, other: 'Timeslot') -> bool:
        return other.from_ >= self.from_ and other.to <= self.to

    def equal_to(self, other: 'Timeslot') -> bool:
        return (
            self.from_ == other.from_
            and self.to == other.to
            and self.recur == other.recur
        )

    def on_date(self, day: date) -> bool:
        """Check if both endpoints fall on the given calendar date."""
        if isinstance(day, datetime):
            day = day.date()
        return self.from_.date() == day and self.to.date() == day

    def shifted(self, delta: timedelta) -> 'Timeslot':
        """Copy of this timeslot moved by `delta`."""
        return Timeslot(self.from_ + delta, self.to + delta, self.recur)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'from': self.from_.isoformat(),
            'to': self.to.isoformat(),
            'recur': self.recur,
        }

    def to_search_hit(self) -> Dict[str, Any]:
        """Numeric form stored by the search index."""
        return {
            'from': to_millis(self.from_),
            'to': to_millis(self.to),
            'recur': self.recur,
        }

    @classmethod
    def from_search_hit(cls, hit: Dict[str, Any]) -> 'Timeslot':
        return cls(from_millis(hit['from']), from_millis(hit['to']), hit.get('recur') or DEFAULT_RECUR)

    def __str__(self) -> str:
        return f"{self.from_.isoformat()} - {self.to.isoformat()}"


def timeslot_from_dict(data: Dict[str, Any]) -> Timeslot:
    """
    Create Timeslot from dictionary.

    Endpoints may be ISO strings, datetimes or epoch milliseconds.
    Raises ValueError when an endpoint is missing or unparseable.
    """
    from_dt: Optional[datetime] = coerce_datetime(data.get('from', data.get('from_')))
    to_dt: Optional[datetime] = coerce_datetime(data.get('to'))
    if from_dt is None or to_dt is None:
        raise ValueError(f"Timeslot requires valid 'from' and 'to' values: {data!r}")
    return Timeslot(from_dt, to_dt, data.get('recur') or DEFAULT_RECUR)
