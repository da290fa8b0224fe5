# File: event_manager/services/reminder_service.py

from pathlib import Path
from typing import List, Union

from event_manager.utils.logger import setup_logger
from event_manager.models import Event, ReminderReport, ReminderSourceError

logger = setup_logger(__name__)


class ReminderService:
    """Reads attendee addresses and records simulated reminders."""

    def load_contacts(self, filepath: Union[str, Path]) -> List[str]:
        """
        Read contact addresses, one per line.

        Returns:
            Addresses with surrounding whitespace removed; blank lines skipped

        Raises:
            ReminderSourceError: If the file cannot be read
        """
        path = Path(filepath).expanduser()
        try:
            lines = path.read_text(encoding='utf-8').splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read contacts from {path}: {e}")
            raise ReminderSourceError(
                f"Could not read the emails file '{filepath}'. Please check the path."
            ) from e

        contacts = [line.strip() for line in lines if line.strip()]
        logger.debug(f"Loaded {len(contacts)} contacts from {path}")
        return contacts

    def send_reminders(self, event: Event, filepath: Union[str, Path]) -> ReminderReport:
        """
        Notify every contact in the file about an event.

        Delivery is simulated: each address is logged and reported as notified.
        """
        report = ReminderReport(event_id=event.id, event_name=event.name)
        for contact in self.load_contacts(filepath):
            logger.info(f"Sending reminder for event {event.id} to {contact}")
            report.notified.append(contact)
        return report
