# File: event_manager/core/config_manager.py
"""
Centralized configuration management for Smart Event Manager.
Loads settings from environment variables (and a .env file).
"""

import os
import datetime
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
import pytz

# Load environment variables
load_dotenv()

class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from event_manager/core/

    # Subdirectories
    DATA_DIR = BASE_DIR / "data"
    LOGS_DIR = Path(os.getenv("LOGS_DIR", str(BASE_DIR / "logs")))

    # Files
    EVENTS_FILE = Path(os.getenv("EVENTS_FILE", str(DATA_DIR / "events.json")))
    ENV_FILE = BASE_DIR / ".env"

    # Access control
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    # Application Settings
    TARGET_TIMEZONE: Optional[str] = os.getenv("TIMEZONE")  # None means the machine's local date
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Scheduling policy
    EVENT_DURATION = datetime.timedelta(hours=1)
    WORKDAY_START = datetime.time(8, 0)
    WORKDAY_END = datetime.time(17, 0)
    SLOT_STEP = datetime.timedelta(hours=1)

    @classmethod
    def today(cls) -> datetime.date:
        """Current date, in TARGET_TIMEZONE when one is configured."""
        if cls.TARGET_TIMEZONE:
            return datetime.datetime.now(pytz.timezone(cls.TARGET_TIMEZONE)).date()
        return datetime.date.today()

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        if not cls.ADMIN_PASSWORD:
            errors.append("ADMIN_PASSWORD not set")

        if cls.TARGET_TIMEZONE and cls.TARGET_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TARGET_TIMEZONE}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
