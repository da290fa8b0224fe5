# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data and stores for all tests.
"""

import pytest
from datetime import date, time
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from event_manager.models import Event
from event_manager.processors.schedule_processor import ScheduleProcessor
from event_manager.processors.event_query import EventQueryService
from event_manager.services.event_store import JsonEventStore
from event_manager.services.event_repository import EventRepository


# ==================== Date/Time Fixtures ====================

@pytest.fixture
def day():
    """A fixed working day used across tests."""
    return date(2025, 1, 1)


@pytest.fixture
def next_day():
    return date(2025, 1, 2)


# ==================== Event Fixtures ====================

@pytest.fixture
def create_test_event():
    """Factory fixture for creating test events."""
    def _create(
        event_id: int = 1,
        name: str = "Test Event",
        event_date: date = date(2025, 1, 1),
        event_time: time = time(10, 0),
        event_type: str = "Meeting",
        location: str = ""
    ) -> Event:
        """Create a test event with given parameters."""
        return Event(
            id=event_id,
            name=name,
            date=event_date,
            time=event_time,
            event_type=event_type,
            location=location
        )

    return _create


@pytest.fixture
def team_meeting(create_test_event):
    return create_test_event(1, "Team Meeting", date(2025, 1, 1), time(10, 0), "Work", "Room 4")


@pytest.fixture
def standup(create_test_event):
    return create_test_event(2, "Standup", date(2025, 1, 1), time(14, 0), "Sync")


@pytest.fixture
def sample_events(team_meeting, standup):
    """Collection of sample events."""
    return [team_meeting, standup]


# ==================== Service Fixtures ====================

@pytest.fixture
def events_file(tmp_path):
    """Path of a not-yet-existing events file."""
    return tmp_path / "data" / "events.json"


@pytest.fixture
def store(events_file):
    return JsonEventStore(events_file)


@pytest.fixture
def schedule_processor():
    return ScheduleProcessor()


@pytest.fixture
def repository(store, schedule_processor):
    """Empty repository over a temporary JSON store."""
    return EventRepository(store, schedule_processor)


@pytest.fixture
def queries(repository, day):
    """Query service whose "today" is the fixed test day."""
    return EventQueryService(repository, today_provider=lambda: day)


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
