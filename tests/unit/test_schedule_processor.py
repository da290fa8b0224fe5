# File: tests/unit/test_schedule_processor.py
"""
Unit tests for conflict detection and slot suggestion.
"""

import pytest
from datetime import date, time, timedelta

from event_manager.processors.schedule_processor import ScheduleProcessor

ALL_SLOTS = [time(h, 0) for h in range(8, 17)]


class TestConflictDetection:
    """Tests for ScheduleProcessor.has_conflict."""

    @pytest.mark.parametrize("candidate", [
        time(10, 0), time(9, 1), time(10, 59), time(9, 30), time(10, 30),
    ])
    def test_inside_window_conflicts(self, schedule_processor, team_meeting, day, candidate):
        """Anything strictly within an hour of a booking conflicts."""
        assert schedule_processor.has_conflict([team_meeting], day, candidate) is True

    @pytest.mark.parametrize("candidate", [
        time(9, 0), time(11, 0), time(8, 0), time(12, 0), time(8, 59), time(11, 1),
    ])
    def test_window_edges_do_not_conflict(self, schedule_processor, team_meeting, day, candidate):
        """The window is open: exactly one hour away is allowed."""
        assert schedule_processor.has_conflict([team_meeting], day, candidate) is False

    def test_other_date_never_conflicts(self, schedule_processor, team_meeting, next_day):
        assert schedule_processor.has_conflict([team_meeting], next_day, time(10, 0)) is False

    def test_excluded_event_is_ignored(self, schedule_processor, team_meeting, day):
        """An edited event never conflicts with itself."""
        assert schedule_processor.has_conflict(
            [team_meeting], day, team_meeting.time, exclude_id=team_meeting.id
        ) is False

    def test_exclusion_only_skips_that_event(self, schedule_processor, sample_events, day):
        team_meeting, standup = sample_events
        assert schedule_processor.has_conflict(
            sample_events, day, time(14, 30), exclude_id=team_meeting.id
        ) is True

    def test_empty_collection(self, schedule_processor, day):
        assert schedule_processor.has_conflict([], day, time(10, 0)) is False

    def test_find_conflict_returns_blocking_event(self, schedule_processor, sample_events, day):
        blocking = schedule_processor.find_conflict(sample_events, day, time(13, 30))
        assert blocking is not None
        assert blocking.name == "Standup"

    def test_window_does_not_wrap_midnight(self, schedule_processor, create_test_event, day):
        """Bookings near midnight only block their own side of the day."""
        late = create_test_event(event_time=time(23, 30))

        assert schedule_processor.has_conflict([late], day, time(23, 45)) is True
        assert schedule_processor.has_conflict([late], day, time(0, 15)) is False

    def test_custom_duration(self, team_meeting, day):
        processor = ScheduleProcessor(event_duration=timedelta(minutes=30))
        assert processor.has_conflict([team_meeting], day, time(10, 45)) is False
        assert processor.has_conflict([team_meeting], day, time(10, 15)) is True


def test_processor_logs_under_module_name(schedule_processor):
    assert schedule_processor.logger.name == "event_manager.processors.schedule_processor"


class TestSlotSuggestion:
    """Tests for ScheduleProcessor.suggest_slots."""

    def test_candidate_slots(self, schedule_processor):
        assert schedule_processor.candidate_slots() == ALL_SLOTS

    def test_empty_day_offers_every_slot(self, schedule_processor, day):
        assert schedule_processor.suggest_slots([], day) == ALL_SLOTS

    def test_booking_on_the_hour_removes_only_that_slot(self, schedule_processor, team_meeting, day):
        """A 10:00 booking leaves 09:00 and 11:00 free."""
        slots = schedule_processor.suggest_slots([team_meeting], day)

        assert time(10, 0) not in slots
        assert time(9, 0) in slots
        assert time(11, 0) in slots
        assert len(slots) == 8

    def test_booking_off_the_hour_removes_two_slots(self, schedule_processor, create_test_event, day):
        event = create_test_event(event_time=time(10, 30))

        slots = schedule_processor.suggest_slots([event], day)

        assert time(10, 0) not in slots
        assert time(11, 0) not in slots
        assert slots == [time(8, 0), time(9, 0), time(12, 0), time(13, 0),
                         time(14, 0), time(15, 0), time(16, 0)]

    def test_other_days_are_ignored(self, schedule_processor, team_meeting, next_day):
        assert schedule_processor.suggest_slots([team_meeting], next_day) == ALL_SLOTS

    def test_booking_outside_window_edges(self, schedule_processor, create_test_event, day):
        """A 07:30 booking blocks 08:00; a 17:00 booking blocks nothing."""
        early = create_test_event(1, event_time=time(7, 30))
        late = create_test_event(2, event_time=time(17, 0))

        slots = schedule_processor.suggest_slots([early, late], day)

        assert slots == ALL_SLOTS[1:]

    def test_fully_booked_day(self, schedule_processor, create_test_event, day):
        events = [
            create_test_event(i, event_time=time(h, 30))
            for i, h in enumerate(range(7, 17), start=1)
        ]
        assert schedule_processor.suggest_slots(events, day) == []

    def test_suggestions_are_ascending(self, schedule_processor, sample_events, day):
        slots = schedule_processor.suggest_slots(sample_events, day)
        assert slots == sorted(slots)
