# File: event_manager/processors/schedule_processor.py
"""
Schedule processing module.
Handles conflict detection and free-slot suggestion using typed models.
"""

import datetime
from typing import Iterable, List, Optional

from event_manager.core.config_manager import Config
from event_manager.utils.logger import setup_logger
from event_manager.models import Event


class ScheduleProcessor:
    """Checks candidate slots against booked events."""

    def __init__(
        self,
        event_duration: datetime.timedelta = Config.EVENT_DURATION,
        workday_start: datetime.time = Config.WORKDAY_START,
        workday_end: datetime.time = Config.WORKDAY_END,
        slot_step: datetime.timedelta = Config.SLOT_STEP
    ):
        """
        Initialize schedule processor.

        Args:
            event_duration: Fixed length of every event; a booking at t blocks
                the open window (t - duration, t + duration)
            workday_start: First candidate slot offered by suggest_slots
            workday_end: Candidates must start strictly before this time
            slot_step: Distance between candidate slots
        """
        self.event_duration = event_duration
        self.workday_start = workday_start
        self.workday_end = workday_end
        self.slot_step = slot_step
        self.logger = setup_logger(__name__)

    def _within_window(self, candidate: datetime.time, booked: datetime.time) -> bool:
        # Same-day arithmetic: the window never wraps past midnight.
        day = datetime.date.min
        delta = datetime.datetime.combine(day, candidate) - datetime.datetime.combine(day, booked)
        return abs(delta) < self.event_duration

    def find_conflict(
        self,
        events: Iterable[Event],
        candidate_date: datetime.date,
        candidate_time: datetime.time,
        exclude_id: Optional[int] = None
    ) -> Optional[Event]:
        """
        Return the first booked event whose conflict window contains the candidate.

        Args:
            events: Live events to check against
            candidate_date: Date of the new or moved event
            candidate_time: Start time of the new or moved event
            exclude_id: Id to skip, so an edited event never conflicts with itself

        Returns:
            The blocking Event, or None if the slot is free
        """
        for existing in events:
            if exclude_id is not None and existing.id == exclude_id:
                continue
            if existing.date != candidate_date:
                continue
            if self._within_window(candidate_time, existing.time):
                self.logger.debug(
                    f"{candidate_date} {candidate_time.strftime('%H:%M')} blocked by "
                    f"event {existing.id} '{existing.name}' at {existing.time.strftime('%H:%M')}"
                )
                return existing
        return None

    def has_conflict(
        self,
        events: Iterable[Event],
        candidate_date: datetime.date,
        candidate_time: datetime.time,
        exclude_id: Optional[int] = None
    ) -> bool:
        """True if the candidate slot is inside the window of any other event on that date."""
        return self.find_conflict(events, candidate_date, candidate_time, exclude_id) is not None

    def candidate_slots(self) -> List[datetime.time]:
        """Hour-aligned start times within the working window."""
        slots: List[datetime.time] = []
        current = datetime.datetime.combine(datetime.date.min, self.workday_start)
        end = datetime.datetime.combine(datetime.date.min, self.workday_end)
        while current < end:
            slots.append(current.time())
            current += self.slot_step
        return slots

    def suggest_slots(self, events: Iterable[Event], day: datetime.date) -> List[datetime.time]:
        """
        List free start times on a day, ascending.

        A candidate is free when it lies outside the conflict window of every
        booking on that day. Read-only; an empty list means no free slot.
        """
        booked_times = sorted(event.time for event in events if event.date == day)

        available = [
            slot for slot in self.candidate_slots()
            if not any(self._within_window(slot, booked) for booked in booked_times)
        ]

        self.logger.info(
            f"Slot suggestion for {day}: {len(available)} free, "
            f"{len(booked_times)} booked"
        )
        return available
