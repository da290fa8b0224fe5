from .errors import (
    EventManagerError,
    ParseError,
    EventNotFoundError,
    SchedulingConflictError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    ReminderSourceError,
)
from .common import (
    parse_date,
    parse_time,
    parse_event_id,
    parse_optional_date,
    parse_optional_time,
    format_date,
    format_time,
)
from .event import Event, EventUpdate, event_from_dict
from .report import EventStatistics, ReminderReport

__all__ = [
    "EventManagerError",
    "ParseError",
    "EventNotFoundError",
    "SchedulingConflictError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "ReminderSourceError",
    "parse_date",
    "parse_time",
    "parse_event_id",
    "parse_optional_date",
    "parse_optional_time",
    "format_date",
    "format_time",
    "Event",
    "EventUpdate",
    "event_from_dict",
    "EventStatistics",
    "ReminderReport",
]
