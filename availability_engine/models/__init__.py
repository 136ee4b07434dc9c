from .enums import Day, Frequency, MeetingStatus
from .common import parse_iso_datetime, coerce_datetime, to_millis, from_millis, day_of_week
from .timeslot import Timeslot, timeslot_from_dict, DEFAULT_RECUR
from .availability import Availability, availability_from_list
from .meeting import Meeting, meeting_from_dict

__all__ = [
    "Day",
    "Frequency",
    "MeetingStatus",
    "parse_iso_datetime",
    "coerce_datetime",
    "to_millis",
    "from_millis",
    "day_of_week",
    "Timeslot",
    "timeslot_from_dict",
    "DEFAULT_RECUR",
    "Availability",
    "availability_from_list",
    "Meeting",
    "meeting_from_dict",
]
