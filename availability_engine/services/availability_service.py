# File: availability_engine/services/availability_service.py

from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Type

from availability_engine.core.config_manager import Config
from availability_engine.models import Availability, Meeting, Timeslot
from availability_engine.processors.index_materializer import default_horizon, get_search_availability
from availability_engine.processors.month_projector import get_months_timeslots
from availability_engine.services.booking_service import expand_booked
from availability_engine.utils.logger import LoggerMixin
from availability_engine.utils.months import normalize_month


class AvailabilityService(LoggerMixin):
    """
    Derives a person's bookable time from their weekly availability and
    their meetings.

    Stateless: every call re-derives its result from the inputs, so a
    fresh booked set is used each time.
    """

    def __init__(self, config: Type[Config] = Config):
        """
        Initialize the availability service.

        Args:
            config: Configuration class providing slicing and window settings
        """
        self.config = config

    def booking_window(self, now: datetime) -> Dict[str, datetime]:
        """Earliest and latest instants a new lesson may occupy."""
        return {
            'earliest': now + timedelta(days=self.config.MIN_NOTICE_DAYS),
            'latest': now + timedelta(days=self.config.MAX_ADVANCE_DAYS),
        }

    def month_availability(
        self,
        baseline: Iterable[Timeslot],
        meetings: Iterable[Meeting],
        month: int,
        year: int,
        now: datetime,
    ) -> Availability:
        """
        Bookable windows for one month, for the calendar picker.

        1. Start from the weekly recurring baseline.
        2. Remove every window touching a confirmed meeting in that month.
        3. Keep only windows inside the booking window (minimum notice and
           maximum advance booking measured from `now`).
        """
        month, year = normalize_month(month, year)
        next_month, next_year = normalize_month(month + 1, year)
        # One day of margin either side catches meetings spanning midnight
        start = datetime(year, month, 1) - timedelta(days=1)
        end = datetime(next_year, next_month, 1) + timedelta(days=1)
        booked = expand_booked(meetings, start, end, self.config.MAX_OCCURRENCES)

        window = self.booking_window(now)
        timeslots = get_months_timeslots(
            baseline,
            month,
            year,
            booked=booked,
            earliest=window['earliest'],
            latest=window['latest'],
            interval=self.config.SLOT_INTERVAL_MINUTES,
            duration=self.config.MONTH_SLOT_DURATION_MINUTES,
        )
        self.logger.info(f"{len(timeslots)} bookable timeslots in {year}-{month:02d}")
        return timeslots

    def search_availability(
        self,
        baseline: Iterable[Timeslot],
        meetings: Iterable[Meeting],
        now: datetime,
        until: Optional[datetime] = None,
    ) -> List[int]:
        """Materialized start instants for the search index."""
        if until is None:
            until = default_horizon(now, self.config.INDEX_HORIZON_MONTHS)
        duration = timedelta(minutes=self.config.INDEX_SLOT_DURATION_MINUTES)
        booked = expand_booked(meetings, now, until + duration, self.config.MAX_OCCURRENCES)

        return get_search_availability(
            baseline,
            booked,
            now,
            until=until,
            interval=self.config.SLOT_INTERVAL_MINUTES,
            duration=self.config.INDEX_SLOT_DURATION_MINUTES,
        )

    def search_record(
        self,
        uid: str,
        baseline: Iterable[Timeslot],
        meetings: Iterable[Meeting],
        now: datetime,
    ) -> Dict[str, Any]:
        """
        Per-person record pushed to the search index. Must be re-pushed
        whenever the person's availability or meetings change.
        """
        baseline = Availability(baseline)
        return {
            'objectID': uid,
            'availability': [t.to_search_hit() for t in baseline],
            '_availability': self.search_availability(baseline, meetings, now),
        }
