# File: event_manager/processors/event_query.py
"""
Filtering and aggregation over the event repository.
Holds no state of its own; every call reads the live collection.
"""

import datetime
from collections import Counter
from typing import Callable, List

from event_manager.core.config_manager import Config
from event_manager.utils.logger import setup_logger
from event_manager.services.event_repository import EventRepository
from event_manager.models import Event, EventStatistics

logger = setup_logger(__name__)


class EventQueryService:
    """Read-only views of the repository in display order."""

    def __init__(
        self,
        repository: EventRepository,
        today_provider: Callable[[], datetime.date] = Config.today
    ):
        self.repository = repository
        self.today_provider = today_provider

    def list_all(self) -> List[Event]:
        """All events sorted by (date, time)."""
        return sorted(self.repository.events, key=lambda event: event.sort_key)

    def list_for_date(self, day: datetime.date) -> List[Event]:
        return [event for event in self.list_all() if event.date == day]

    def list_today(self) -> List[Event]:
        return self.list_for_date(self.today_provider())

    def search(self, keyword: str) -> List[Event]:
        """
        Case-insensitive substring match on name or type.

        Args:
            keyword: Text to look for, matched as typed apart from case

        Returns:
            Matching events in (date, time) order
        """
        needle = keyword.lower()
        matches = [
            event for event in self.list_all()
            if needle in event.name.lower() or needle in event.event_type.lower()
        ]
        logger.debug(f"Search '{needle}' matched {len(matches)} events")
        return matches

    def statistics(self) -> EventStatistics:
        """Total count and exact-match counts per event type."""
        events = self.list_all()
        counts = Counter(event.event_type for event in events)
        return EventStatistics(total=len(events), counts_by_type=dict(counts))
