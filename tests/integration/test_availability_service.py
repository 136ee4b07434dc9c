# File: tests/integration/test_availability_service.py
"""
Integration tests for AvailabilityService.
Runs meetings through expansion, projection and materialization together.
"""

import pytest
from datetime import datetime, timedelta

from availability_engine.core.config_manager import Config
from availability_engine.models import Meeting, Timeslot, to_millis
from availability_engine.services.availability_service import AvailabilityService

pytestmark = pytest.mark.integration


class OpenWindowConfig(Config):
    MIN_NOTICE_DAYS = 0
    MAX_ADVANCE_DAYS = 60


def weekly_nine_oclock(recur="RRULE:FREQ=WEEKLY"):
    return Meeting(
        id="mtg_standing",
        time=Timeslot(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 10, 0)),
        recur=recur,
    )


@pytest.fixture
def short_weekly_meeting(weekly_meeting):
    """The Monday 9:30 meeting, ending after Jan 15th."""
    weekly_meeting.recur = "RRULE:FREQ=WEEKLY;UNTIL=20240115T235959Z"
    return weekly_meeting


class TestBookingWindow:

    def test_default_notice_and_advance(self, now):
        window = AvailabilityService().booking_window(now)

        assert window['earliest'] == now + timedelta(days=3)
        assert window['latest'] == now + timedelta(days=30)


class TestMonthAvailability:

    def test_meetings_and_booking_window_applied(self, monday_morning, short_weekly_meeting, now):
        timeslots = AvailabilityService().month_availability(
            monday_morning, [short_weekly_meeting], 1, 2024, now
        )

        assert len(timeslots) == 14
        assert sorted({t.from_.day for t in timeslots}) == [22, 29]

    def test_wider_booking_window(self, monday_morning, short_weekly_meeting, now):
        service = AvailabilityService(OpenWindowConfig)
        timeslots = service.month_availability(monday_morning, [short_weekly_meeting], 1, 2024, now)

        assert len(timeslots) == 21
        assert sorted({t.from_.day for t in timeslots}) == [1, 22, 29]

    def test_cancelled_meetings_ignored(self, monday_morning, cancelled_meeting, now):
        service = AvailabilityService(OpenWindowConfig)
        timeslots = service.month_availability(monday_morning, [cancelled_meeting], 1, 2024, now)

        assert len(timeslots) == 35


class TestSearchAvailability:

    def test_standing_meeting_hides_window(self, monday_nine_to_ten, now):
        assert AvailabilityService().search_availability(monday_nine_to_ten, [weekly_nine_oclock()], now) == []

    def test_meeting_ending_frees_later_weeks(self, monday_nine_to_ten, now):
        meeting = weekly_nine_oclock("RRULE:FREQ=WEEKLY;UNTIL=20240301")
        starts = AvailabilityService().search_availability(monday_nine_to_ten, [meeting], now)

        assert starts == [to_millis(datetime(2024, 3, 4, 9, 0))]

    def test_back_to_back_window_stays_available(self, monday_morning, now):
        starts = AvailabilityService().search_availability(monday_morning, [weekly_nine_oclock()], now)

        assert starts == [to_millis(datetime(2024, 1, 1, 10, 0))]

    def test_search_record(self, monday_morning, now):
        record = AvailabilityService().search_record("user_1", monday_morning, [], now)

        assert record['objectID'] == "user_1"
        assert record['availability'] == [t.to_search_hit() for t in monday_morning]
        assert len(record['_availability']) == 5
