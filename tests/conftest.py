# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable weekly patterns, bookings and meetings for all tests.
"""

import pytest
from datetime import datetime, timedelta
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from availability_engine.core.anchor import get_date
from availability_engine.models import Availability, Meeting, MeetingStatus, Timeslot


# ==================== Clock Fixtures ====================

@pytest.fixture
def now():
    """Monday, January 1st 2024 at 08:00 (January 1st 2024 is a Monday)."""
    return datetime(2024, 1, 1, 8, 0)


# ==================== Weekly Pattern Fixtures ====================

@pytest.fixture
def monday_morning():
    """Weekly pattern: Mondays 09:00-11:00."""
    return Availability([Timeslot(get_date(1, 9), get_date(1, 11))])


@pytest.fixture
def monday_nine_to_ten():
    """Weekly pattern: Mondays 09:00-10:00."""
    return Availability([Timeslot(get_date(1, 9), get_date(1, 10))])


@pytest.fixture
def weekly_pattern():
    """Weekly pattern with two days, deliberately unsorted."""
    return Availability([
        Timeslot(get_date(5, 14), get_date(5, 16)),
        Timeslot(get_date(1, 9), get_date(1, 11)),
    ])


# ==================== Booking Fixtures ====================

@pytest.fixture
def every_monday_booked():
    """Mondays 09:00-10:00 booked from Jan 1st through Apr 1st 2024."""
    first = datetime(2024, 1, 1, 9, 0)
    return Availability([
        Timeslot(first + timedelta(weeks=week), first + timedelta(weeks=week, hours=1))
        for week in range(14)
    ])


@pytest.fixture
def weekly_meeting():
    """Confirmed weekly meeting on Mondays 09:30-10:30, starting Jan 8th 2024."""
    return Meeting(
        id="mtg_weekly",
        time=Timeslot(datetime(2024, 1, 8, 9, 30), datetime(2024, 1, 8, 10, 30)),
        recur="RRULE:FREQ=WEEKLY",
    )


@pytest.fixture
def one_off_meeting():
    """Confirmed one-off meeting on Jan 22nd 2024, 10:00-11:00."""
    return Meeting(
        id="mtg_once",
        time=Timeslot(datetime(2024, 1, 22, 10, 0), datetime(2024, 1, 22, 11, 0)),
    )


@pytest.fixture
def cancelled_meeting():
    """Cancelled meeting that must never block availability."""
    return Meeting(
        id="mtg_cancelled",
        time=Timeslot(datetime(2024, 1, 29, 9, 0), datetime(2024, 1, 29, 11, 0)),
        status=MeetingStatus.CANCELLED,
    )


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
