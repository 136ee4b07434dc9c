# File: availability_engine/models/enums.py

from enum import Enum, IntEnum


class Day(IntEnum):
    """Day of the week, numbered from Sunday like the booking UI."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Frequency(Enum):
    """Coarse recurrence labels shown for recurring meetings."""
    DAILY = "Daily"
    WEEKLY = "Weekly"
    BIWEEKLY = "Biweekly"
    MONTHLY = "Monthly"


class MeetingStatus(Enum):
    """Lifecycle of a meeting as stored by the meeting collaborator."""
    CONFIRMED = "confirmed"
    TENTATIVE = "tentative"
    CANCELLED = "cancelled"
