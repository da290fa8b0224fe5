# File: event_manager/models/errors.py
"""
Error kinds raised by the event manager.
None of them are fatal: the shell reports each one and returns to its menu.
"""

import datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event


class EventManagerError(Exception):
    """Base class for all event manager errors."""


class ParseError(EventManagerError, ValueError):
    """Malformed date, time or id typed by the operator."""

    def __init__(self, field: str, value: str, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {field} '{value}'. Please use {expected}.")


class EventNotFoundError(EventManagerError):
    """No live event has the requested id."""

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event with ID {event_id} not found.")


class SchedulingConflictError(EventManagerError):
    """The candidate slot falls inside the conflict window of a booked event."""

    def __init__(
        self,
        date: datetime.date,
        time: datetime.time,
        blocking_event: Optional['Event'] = None
    ):
        self.date = date
        self.time = time
        self.blocking_event = blocking_event
        message = f"Conflict detected: {date.isoformat()} {time.strftime('%H:%M')} is already occupied"
        if blocking_event is not None:
            message += f" by '{blocking_event.name}' at {blocking_event.time.strftime('%H:%M')}"
        super().__init__(message)


class StorageError(EventManagerError):
    """Base class for persistence failures."""


class StorageReadError(StorageError):
    """Persisted events could not be read or decoded."""


class StorageWriteError(StorageError):
    """Persisted events could not be written."""


class ReminderSourceError(EventManagerError):
    """The attendee contact file could not be read."""
