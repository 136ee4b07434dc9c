# File: availability_engine/models/meeting.py

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import MeetingStatus
from .timeslot import Timeslot, timeslot_from_dict


@dataclass
class Meeting:
    """
    A scheduled meeting as read from the meeting store.

    `time` is the first occurrence. `recur` is an RFC 5545 RRULE for
    recurring meetings and None for one-off meetings.
    """
    id: str
    time: Timeslot
    recur: Optional[str] = None
    status: MeetingStatus = MeetingStatus.CONFIRMED

    def __post_init__(self):
        """Convert string status to enum."""
        if isinstance(self.status, str):
            self.status = MeetingStatus(self.status.lower())

    def is_confirmed(self) -> bool:
        return self.status == MeetingStatus.CONFIRMED

    def is_recurring(self) -> bool:
        return bool(self.recur)

    def to_dict(self) -> Dict[str, Any]:
        time = self.time.to_dict()
        time['recur'] = self.recur
        return {
            'id': self.id,
            'time': time,
            'status': self.status.value,
        }


def meeting_from_dict(data: Dict[str, Any]) -> Meeting:
    """Create Meeting from dictionary; unknown statuses count as tentative."""
    try:
        status = MeetingStatus(str(data.get('status', 'confirmed')).lower())
    except ValueError:
        status = MeetingStatus.TENTATIVE

    time_data = data['time']
    return Meeting(
        id=str(data.get('id', '')),
        time=timeslot_from_dict(time_data),
        recur=time_data.get('recur') or None,
        status=status,
    )
