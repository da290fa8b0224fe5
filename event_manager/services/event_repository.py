# File: event_manager/services/event_repository.py
"""
In-memory event collection backed by whole-collection persistence.
Every create/update passes through the conflict check before it is applied.
"""

import datetime
from typing import List, Optional, Tuple

from event_manager.utils.logger import LoggerMixin
from event_manager.processors.schedule_processor import ScheduleProcessor
from event_manager.services.event_store import JsonEventStore
from event_manager.models import (
    Event,
    EventUpdate,
    EventNotFoundError,
    SchedulingConflictError,
    StorageWriteError,
)


class EventRepository(LoggerMixin):
    """Owns the live list of events and assigns their ids."""

    def __init__(self, store: JsonEventStore, schedule_processor: Optional[ScheduleProcessor] = None):
        """
        Load the persisted events and derive the next id.

        Args:
            store: Persistence backend, saved after every successful mutation
            schedule_processor: Conflict engine (default policy if omitted)
        """
        self.store = store
        self.schedule_processor = schedule_processor or ScheduleProcessor()
        self._events: List[Event] = store.load_all()
        # An id freed by deleting the newest event is handed out again after a reload.
        self._next_id = max((event.id for event in self._events), default=0) + 1
        self.unsaved_changes = False
        self.last_save_error: Optional[str] = None

        self.logger.debug(f"Repository ready with {len(self._events)} events, next id {self._next_id}")

    @property
    def events(self) -> Tuple[Event, ...]:
        """Read-only view of the live events, in insertion order."""
        return tuple(self._events)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._events)

    def find_by_id(self, event_id: int) -> Optional[Event]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def has_conflict(
        self,
        event_date: datetime.date,
        event_time: datetime.time,
        exclude_id: Optional[int] = None
    ) -> bool:
        return self.schedule_processor.has_conflict(self._events, event_date, event_time, exclude_id)

    def suggest_slots(self, day: datetime.date) -> List[datetime.time]:
        return self.schedule_processor.suggest_slots(self._events, day)

    def _check_slot(
        self,
        event_date: datetime.date,
        event_time: datetime.time,
        exclude_id: Optional[int] = None
    ) -> None:
        blocking = self.schedule_processor.find_conflict(self._events, event_date, event_time, exclude_id)
        if blocking is not None:
            raise SchedulingConflictError(event_date, event_time, blocking)

    def _persist(self) -> bool:
        """
        Save the whole collection.

        A failed save keeps the in-memory change and flags unsaved_changes
        until the next successful save.
        """
        try:
            self.store.save_all(self._events)
        except StorageWriteError as e:
            self.unsaved_changes = True
            self.last_save_error = str(e)
            self.logger.error(f"Change kept in memory only: {e}")
            return False

        self.unsaved_changes = False
        self.last_save_error = None
        return True

    def add(
        self,
        name: str,
        event_date: datetime.date,
        event_time: datetime.time,
        event_type: str,
        location: str = ""
    ) -> Event:
        """
        Create a new event.

        Raises:
            SchedulingConflictError: If the slot is taken; nothing is changed
        """
        self._check_slot(event_date, event_time)

        event = Event(
            id=self._next_id,
            name=name,
            date=event_date,
            time=event_time,
            event_type=event_type,
            location=location or "",
        )
        self._next_id += 1
        self._events.append(event)
        self.logger.info(f"Added event {event.id} '{event.name}' on {event.date} at {event.time}")

        self._persist()
        return event

    def edit(self, event_id: int, update: EventUpdate) -> Event:
        """
        Apply all field changes to an event, or none of them.

        Raises:
            EventNotFoundError: If no event has event_id
            SchedulingConflictError: If the new date/time is taken by another event
        """
        event = self.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        new_date = update.date if update.date is not None else event.date
        new_time = update.time if update.time is not None else event.time
        self._check_slot(new_date, new_time, exclude_id=event_id)

        if update.name is not None:
            event.name = update.name
        if update.event_type is not None:
            event.event_type = update.event_type
        if update.location is not None:
            event.location = update.location
        event.date = new_date
        event.time = new_time.replace(second=0, microsecond=0)
        self.logger.info(f"Updated event {event.id} '{event.name}'")

        self._persist()
        return event

    def delete(self, event_id: int) -> Event:
        """
        Remove an event.

        Raises:
            EventNotFoundError: If no event has event_id; nothing is changed
        """
        event = self.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        self._events.remove(event)
        self.logger.info(f"Deleted event {event.id} '{event.name}'")

        self._persist()
        return event
