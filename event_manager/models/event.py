# File: event_manager/models/event.py

import datetime
from dataclasses import dataclass
from typing import Optional

from .common import STORAGE_DATE_FORMAT, TIME_FORMAT


@dataclass
class Event:
    """A single booked event. Duration is a policy constant, not stored."""
    id: int
    name: str
    date: datetime.date
    time: datetime.time
    event_type: str
    location: str = ""

    def __post_init__(self):
        """Validate event data and auto-convert types."""
        if isinstance(self.date, str):
            self.date = datetime.datetime.strptime(self.date, STORAGE_DATE_FORMAT).date()
        if isinstance(self.time, str):
            self.time = datetime.datetime.strptime(self.time, TIME_FORMAT).time()
        # Minute resolution
        self.time = self.time.replace(second=0, microsecond=0)
        if self.location is None:
            self.location = ""

    @property
    def sort_key(self) -> tuple:
        """Canonical display order: date, then time."""
        return (self.date, self.time)

    def to_dict(self) -> dict:
        """Convert to the persisted record."""
        return {
            'id': self.id,
            'name': self.name,
            'date': self.date.strftime(STORAGE_DATE_FORMAT),
            'time': self.time.strftime(TIME_FORMAT),
            'type': self.event_type,
            'location': self.location,
        }


@dataclass
class EventUpdate:
    """Field changes for an edit. None keeps the current value."""
    name: Optional[str] = None
    date: Optional[datetime.date] = None
    time: Optional[datetime.time] = None
    event_type: Optional[str] = None
    location: Optional[str] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.date, self.time, self.event_type, self.location)
        )


def event_from_dict(data: dict) -> Event:
    """Create Event from a persisted record. Raises KeyError/ValueError on bad data."""
    return Event(
        id=int(data['id']),
        name=str(data['name']),
        date=str(data['date']),
        time=str(data['time']),
        event_type=str(data.get('type', '')),
        location=str(data.get('location') or ''),
    )
