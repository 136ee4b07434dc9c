# File: availability_engine/models/common.py

from datetime import datetime, timedelta
from typing import Optional, Union

# Numeric instants are milliseconds from this naive origin, i.e. wall-clock
# values are read as if they were UTC so the host time zone never leaks in.
UNIX_ORIGIN = datetime(1970, 1, 1)


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings into naive wall-clock datetimes."""
    if not date_str:
        return None
    try:
        # specific fix for Python < 3.11 which doesn't handle 'Z' natively in fromisoformat
        clean_str = date_str.replace('Z', '+00:00')
        parsed = datetime.fromisoformat(clean_str)
    except (ValueError, TypeError, AttributeError):
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except (ValueError, TypeError):
            return None
    # Offsets are dropped; the engine works on local wall-clock time only
    return parsed.replace(tzinfo=None)


def coerce_datetime(value: Union[datetime, str, int, float, None]) -> Optional[datetime]:
    """Accept a datetime, an ISO string or epoch milliseconds."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, (int, float)):
        return from_millis(value)
    return parse_iso_datetime(value)


def to_millis(instant: datetime) -> int:
    """Convert a wall-clock instant to epoch milliseconds."""
    delta = instant.replace(tzinfo=None) - UNIX_ORIGIN
    return (delta.days * 86_400_000) + (delta.seconds * 1000) + (delta.microseconds // 1000)


def from_millis(millis: Union[int, float]) -> datetime:
    """Inverse of to_millis."""
    return UNIX_ORIGIN + timedelta(milliseconds=millis)


def day_of_week(instant: datetime) -> int:
    """Weekday with 0 = Sunday (Python's weekday() starts on Monday)."""
    return (instant.weekday() + 1) % 7
