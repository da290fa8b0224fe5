# File: event_manager/models/report.py
"""
Data models for reporting over the event collection.
"""

from dataclasses import dataclass, field
from typing import Dict, List

@dataclass
class EventStatistics:
    """Aggregate counts over the live events."""
    total: int = 0
    counts_by_type: Dict[str, int] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return self.total == 0


@dataclass
class ReminderReport:
    """Result of a simulated reminder run for one event."""
    event_id: int
    event_name: str
    notified: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{len(self.notified)} reminder(s) sent for '{self.event_name}'"
