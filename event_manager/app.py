# File: event_manager/app.py
"""
Smart Event Manager entry point.
Make sure you have run 'python scripts/setup.py' at least once.
"""

import sys

from event_manager.core.config_manager import Config
from event_manager.auth.credentials import credential_check_from_config
from event_manager.services.service_factory import ServiceFactory
from event_manager.cli.shell import EventShell
from event_manager.utils.logger import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    """
    Main execution function. Takes no command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    logger.info("=" * 60)
    logger.info("Starting Smart Event Manager")
    logger.info("=" * 60)

    if not Config.validate():
        logger.error("Configuration validation failed")
        print("Please run 'python scripts/setup.py' to configure the application")
        return 1

    try:
        repository, queries, reminders = ServiceFactory.create_services(Config.EVENTS_FILE)
        shell = EventShell(repository, queries, reminders, credential_check_from_config())
        shell.run()
        return 0

    except KeyboardInterrupt:
        logger.warning("Session interrupted by operator")
        print("\nGoodbye!")
        return 0

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        print(f"Error: {e}")
        return 1

    finally:
        logger.info("Smart Event Manager stopped")


if __name__ == "__main__":
    sys.exit(main())
