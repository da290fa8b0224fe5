# File: event_manager/models/common.py

import datetime
from typing import Optional

from .errors import ParseError

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M"
STORAGE_DATE_FORMAT = "%Y-%m-%d"


def parse_date(date_str: str) -> datetime.date:
    """Parse an operator date in DD-MM-YYYY format."""
    try:
        return datetime.datetime.strptime(date_str.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError):
        raise ParseError("date", date_str, "DD-MM-YYYY")


def parse_time(time_str: str) -> datetime.time:
    """Parse an operator time in 24-hour HH:MM format."""
    try:
        return datetime.datetime.strptime(time_str.strip(), TIME_FORMAT).time()
    except (ValueError, AttributeError):
        raise ParseError("time", time_str, "HH:MM")


def parse_event_id(id_str: str) -> int:
    """Parse an event id typed by the operator."""
    try:
        return int(id_str.strip())
    except (ValueError, AttributeError):
        raise ParseError("ID", id_str, "a number")


def parse_optional_date(date_str: Optional[str]) -> Optional[datetime.date]:
    """Blank input means "keep current value" while editing."""
    if not date_str or not date_str.strip():
        return None
    return parse_date(date_str)


def parse_optional_time(time_str: Optional[str]) -> Optional[datetime.time]:
    """Blank input means "keep current value" while editing."""
    if not time_str or not time_str.strip():
        return None
    return parse_time(time_str)


def format_date(value: datetime.date) -> str:
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime.time) -> str:
    return value.strftime(TIME_FORMAT)
