# File: event_manager/services/event_store.py

import datetime
import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from event_manager.core.config_manager import Config
from event_manager.utils.logger import setup_logger
from event_manager.models import Event, event_from_dict, StorageReadError, StorageWriteError

logger = setup_logger(__name__)


class JsonEventStore:
    """Whole-collection persistence of events in a single JSON file."""

    def __init__(self, filepath: Path = Config.EVENTS_FILE):
        """
        Initialize event store.

        Args:
            filepath: JSON file holding every event
        """
        self.filepath = Path(filepath)
        self.last_load_error: Optional[str] = None

    def _read_events(self) -> List[Event]:
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                payload = json.load(f)
            return [event_from_dict(record) for record in payload['events']]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StorageReadError(f"Could not load events from {self.filepath}: {e}") from e

    def load_all(self) -> List[Event]:
        """
        Load every persisted event.

        Returns:
            List of events; empty if the file is missing, empty or unreadable.
            A read failure is kept in last_load_error instead of being raised.
        """
        self.last_load_error = None

        if not self.filepath.exists() or self.filepath.stat().st_size == 0:
            logger.info(f"No saved events at {self.filepath}, starting fresh")
            return []

        try:
            events = self._read_events()
        except StorageReadError as e:
            self.last_load_error = str(e)
            logger.warning(f"{e}. A new file will be created on the next save.")
            return []

        logger.info(f"Loaded {len(events)} events from {self.filepath}")
        return events

    def save_all(self, events: Iterable[Event]) -> None:
        """
        Replace the persisted set with the given events.

        Writes to a temporary file in the same directory and renames it over
        the target, so a failed write never leaves a half-written file.

        Raises:
            StorageWriteError: If the file could not be written
        """
        events = list(events)
        data_to_save = {
            "events": [event.to_dict() for event in events],
            "saved_at": datetime.datetime.now().isoformat()
        }

        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                suffix=".json",
                prefix=self.filepath.stem + "_",
                dir=self.filepath.parent,
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data_to_save, f, indent=2, ensure_ascii=False)
                # Atomic rename
                os.replace(temp_path, self.filepath)
            except BaseException:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise
        except OSError as e:
            logger.error(f"Could not save events to {self.filepath}: {e}", exc_info=True)
            raise StorageWriteError(f"Could not save events to file. {e}") from e

        logger.info(f"Saved {len(events)} events to {self.filepath}")
