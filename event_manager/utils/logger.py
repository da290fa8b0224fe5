# File: logger.py
"""
Centralized logging configuration for Smart Event Manager.
"""

import logging
import sys
from datetime import datetime

from event_manager.core.config_manager import Config

def setup_logger(name: str = "event_manager", level: int = logging.DEBUG) -> logging.Logger:
    """
    Configure and return a logger instance.

    The console handler only shows Config.LOG_LEVEL and above, so the
    interactive menu is not drowned in INFO lines.

    Args:
        name: Logger name
        level: Logging level (default: DEBUG)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.WARNING))

    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler for persistent logs
    log_dir = Config.LOGS_DIR
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"event_manager_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError as e:
        logger.warning(f"File logging disabled, could not open {log_dir}: {e}")
        return logger

    file_handler.setLevel(logging.DEBUG)

    # More detailed format for file
    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(self.__class__.__name__)
        return self._logger
