# File: event_manager/utils/formatting.py
"""
Console rendering of events, slots and statistics.
Functions return lines; the shell decides where they are written.
"""

import datetime
from typing import List, Sequence

from event_manager.core.config_manager import Config
from event_manager.models import Event, EventStatistics, format_date, format_time

SEPARATOR = "-" * 101


def format_event(event: Event) -> str:
    """One fixed-width line per event."""
    return (
        f"ID: {event.id:<3d} | Name: {event.name:<20s} | "
        f"Date: {format_date(event.date):<12s} | Time: {format_time(event.time):<7s} | "
        f"Type: {event.event_type:<15s} | Location: {event.location or 'N/A'}"
    )


def render_events(events: Sequence[Event]) -> List[str]:
    """Render a block of events, already in display order."""
    if not events:
        return ["No events to display."]
    return [SEPARATOR] + [format_event(event) for event in events] + [SEPARATOR]


def render_slots(day: datetime.date, slots: Sequence[datetime.time]) -> List[str]:
    lines = [f"--- Suggested Available Slots for {format_date(day)} ---"]
    if not slots:
        lines.append(
            f"No available 1-hour slots found between "
            f"{format_time(Config.WORKDAY_START)} and {format_time(Config.WORKDAY_END)}."
        )
    else:
        lines.append("Available slots: " + ", ".join(format_time(slot) for slot in slots))
    return lines


def render_statistics(stats: EventStatistics) -> List[str]:
    if stats.is_empty():
        return ["No events to show statistics for."]

    lines = [f"Total number of events: {stats.total}", "", "Events by Type:"]
    for event_type, count in stats.counts_by_type.items():
        lines.append(f"  - {event_type}: {count}")
    return lines
