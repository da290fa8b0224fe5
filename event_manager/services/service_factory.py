# File: event_manager/services/service_factory.py

from pathlib import Path
from typing import Tuple

from event_manager.core.config_manager import Config
from event_manager.utils.logger import setup_logger
from event_manager.processors.schedule_processor import ScheduleProcessor
from event_manager.processors.event_query import EventQueryService
from event_manager.services.event_store import JsonEventStore
from event_manager.services.event_repository import EventRepository
from event_manager.services.reminder_service import ReminderService

logger = setup_logger(__name__)

class ServiceFactory:
    """Factory for creating service instances."""

    @staticmethod
    def create_repository(events_file: Path = Config.EVENTS_FILE) -> EventRepository:
        """
        Create the repository over a JSON store, loading any saved events.

        Args:
            events_file: Path of the persisted event collection

        Returns:
            EventRepository instance
        """
        store = JsonEventStore(events_file)
        return EventRepository(store, ScheduleProcessor())

    @staticmethod
    def create_services(
        events_file: Path = Config.EVENTS_FILE
    ) -> Tuple[EventRepository, EventQueryService, ReminderService]:
        """
        Create every service the shell needs.

        Args:
            events_file: Path of the persisted event collection

        Returns:
            Tuple of (repository, query_service, reminder_service)
        """
        logger.info(f"Creating services for {events_file}")
        repository = ServiceFactory.create_repository(events_file)
        return (
            repository,
            EventQueryService(repository),
            ReminderService()
        )
