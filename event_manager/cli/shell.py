# File: event_manager/cli/shell.py
"""
Interactive console for the event manager.

Every command runs to completion and returns to the menu; operator errors
are reported inline and never end the session.
"""

import datetime
from typing import Callable, Iterable, Optional

from event_manager.utils.logger import setup_logger
from event_manager.utils.formatting import (
    format_event,
    render_events,
    render_slots,
    render_statistics,
)
from event_manager.auth.credentials import CredentialCheck
from event_manager.processors.event_query import EventQueryService
from event_manager.services.event_repository import EventRepository
from event_manager.services.reminder_service import ReminderService
from event_manager.models import (
    EventManagerError,
    EventUpdate,
    SchedulingConflictError,
    format_date,
    format_time,
    parse_date,
    parse_time,
    parse_event_id,
    parse_optional_date,
    parse_optional_time,
)

logger = setup_logger(__name__)

ADMIN_MENU = """
--- Admin Menu ---
1. Add Event
2. Edit Event
3. Delete Event
4. View Events
5. Search Events
6. Send Event Reminders
7. View Statistics
8. Logout"""

VIEW_MENU = """
--- View Events ---
1. View Today's Events
2. View Events for a Specific Day
3. View All Events"""


class EventShell:
    """Password gate plus the admin menu loop."""

    def __init__(
        self,
        repository: EventRepository,
        queries: EventQueryService,
        reminders: ReminderService,
        credentials: CredentialCheck,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.repository = repository
        self.queries = queries
        self.reminders = reminders
        self.credentials = credentials
        self._input = input_func or input
        self._output = output_func or print

        self.commands = {
            "1": self.add_event,
            "2": self.edit_event,
            "3": self.delete_event,
            "4": self.view_events_menu,
            "5": self.search_events,
            "6": self.send_reminders,
            "7": self.view_statistics,
        }

    # --------------------------------------------------------------------------
    # I/O helpers
    # --------------------------------------------------------------------------

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def say(self, line: str = "") -> None:
        self._output(line)

    def say_all(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._output(line)

    def _report_save_state(self) -> None:
        if self.repository.unsaved_changes:
            self.say(f"Warning: {self.repository.last_save_error}")
            self.say("The change is kept in memory and will be saved with the next change.")

    def _report_conflict(self, error: SchedulingConflictError, action: str) -> None:
        self.say(f"!! Conflict Detected: {action}")
        if error.blocking_event is not None:
            self.say(f"   Blocked by: {format_event(error.blocking_event)}")
        self.say_all(render_slots(error.date, self.repository.suggest_slots(error.date)))

    # --------------------------------------------------------------------------
    # Main loops
    # --------------------------------------------------------------------------

    def run(self) -> None:
        """Prompt for the admin secret until the operator types 'exit'."""
        self.say("Welcome to the Smart Event Manager!")
        load_error = getattr(self.repository.store, 'last_load_error', None)
        if load_error:
            self.say(f"Error: {load_error}. Starting with an empty event list.")

        while True:
            try:
                secret = self.ask("Enter admin password to manage events (or type 'exit' to close): ")
            except EOFError:
                break

            if secret.strip().lower() == "exit":
                break

            if self.credentials.verify(secret):
                logger.info("Admin logged in")
                self.admin_menu()
            else:
                self.say("Incorrect password. Access denied.")

        self.say("Thank you for using Smart Event Manager. Goodbye!")

    def admin_menu(self) -> None:
        while True:
            self.say(ADMIN_MENU)
            try:
                choice = self.ask("Choose an option: ").strip()
            except EOFError:
                return

            if choice == "8":
                self.say("Logging out...")
                logger.info("Admin logged out")
                return

            command = self.commands.get(choice)
            if command is None:
                self.say("Invalid option. Please try again.")
                continue

            try:
                command()
            except EventManagerError as e:
                self.say(f"Error: {e}")
            except EOFError:
                return
            except Exception as e:
                logger.error(f"Unexpected error in menu option {choice}: {e}", exc_info=True)
                self.say(f"An unexpected error occurred: {e}")

    # --------------------------------------------------------------------------
    # Commands
    # --------------------------------------------------------------------------

    def add_event(self) -> None:
        self.say("\n--- Add New Event ---")
        name = self.ask("Enter Event Name: ").strip()
        event_date = parse_date(self.ask("Enter Date (DD-MM-YYYY): "))
        event_time = parse_time(self.ask("Enter Time (HH:MM): "))

        # Fail before asking for the remaining fields
        if self.repository.has_conflict(event_date, event_time):
            self.say("!! Conflict Detected: An event already exists at this date and time.")
            self.say_all(render_slots(event_date, self.repository.suggest_slots(event_date)))
            return

        event_type = self.ask("Enter Event Type (e.g., Meeting, Conference, Personal): ").strip()
        location = self.ask("Enter Location (optional): ").strip()

        try:
            event = self.repository.add(name, event_date, event_time, event_type, location)
        except SchedulingConflictError as e:
            self._report_conflict(e, "An event already exists at this date and time.")
            return

        self.say(f"Event added successfully! (ID {event.id})")
        self._report_save_state()

    def edit_event(self) -> None:
        self.say("\n--- Edit Event ---")
        event_id = parse_event_id(self.ask("Enter the ID of the event to edit: "))
        event = self.repository.find_by_id(event_id)
        if event is None:
            self.say(f"Event with ID {event_id} not found.")
            return

        self.say(f"Editing Event: {format_event(event)}")
        name = self.ask(f"Enter new Name (or press Enter to keep '{event.name}'): ").strip()
        new_date = parse_optional_date(self.ask(
            f"Enter new Date (DD-MM-YYYY) (or press Enter to keep '{format_date(event.date)}'): "
        ))
        new_time = parse_optional_time(self.ask(
            f"Enter new Time (HH:MM) (or press Enter to keep '{format_time(event.time)}'): "
        ))

        target_date = new_date if new_date is not None else event.date
        target_time = new_time if new_time is not None else event.time
        if self.repository.has_conflict(target_date, target_time, exclude_id=event.id):
            self.say("!! Conflict Detected: Cannot move event to this time slot as it's already occupied.")
            self.say_all(render_slots(target_date, self.repository.suggest_slots(target_date)))
            return

        event_type = self.ask(f"Enter new Type (or press Enter to keep '{event.event_type}'): ").strip()
        location = self.ask(f"Enter new Location (or press Enter to keep '{event.location}'): ").strip()

        update = EventUpdate(
            name=name or None,
            date=new_date,
            time=new_time,
            event_type=event_type or None,
            location=location or None,
        )
        if update.is_empty():
            self.say("No changes made.")
            return

        try:
            self.repository.edit(event_id, update)
        except SchedulingConflictError as e:
            self._report_conflict(e, "Cannot move event to this time slot as it's already occupied.")
            return

        self.say("Event updated successfully!")
        self._report_save_state()

    def delete_event(self) -> None:
        self.say("\n--- Delete Event ---")
        event_id = parse_event_id(self.ask("Enter the ID of the event to delete: "))
        self.repository.delete(event_id)
        self.say("Event deleted successfully.")
        self._report_save_state()

    def view_events_menu(self) -> None:
        self.say(VIEW_MENU)
        choice = self.ask("Choose an option: ").strip()

        if choice == "1":
            self._show_day(self.queries.today_provider())
        elif choice == "2":
            self._show_day(parse_date(self.ask("Enter Date (DD-MM-YYYY): ")))
        elif choice == "3":
            self.say_all(render_events(self.queries.list_all()))
        else:
            self.say("Invalid option.")

    def _show_day(self, day: datetime.date) -> None:
        self.say(f"\n--- Events for {format_date(day)} ---")
        self.say_all(render_events(self.queries.list_for_date(day)))

    def search_events(self) -> None:
        self.say("\n--- Search Events ---")
        keyword = self.ask("Enter search keyword (for name or type): ")
        found = self.queries.search(keyword)
        self.say(f"Found {len(found)} matching event(s):")
        self.say_all(render_events(found))

    def send_reminders(self) -> None:
        self.say("\n--- Send Event Reminders ---")
        event_id = parse_event_id(self.ask("Enter the ID of the event to send reminders for: "))
        event = self.repository.find_by_id(event_id)
        if event is None:
            self.say(f"Event with ID {event_id} not found.")
            return

        filepath = self.ask("Enter the path to the attendee emails file (e.g., attendees.txt): ").strip()
        report = self.reminders.send_reminders(event, filepath)
        if not report.notified:
            self.say("No emails found in the file.")
            return

        self.say(f"\nSending reminders for event: {event.name}")
        for contact in report.notified:
            self.say(f"  -> Sending reminder to {contact}")
        self.say("All reminders sent successfully.")

    def view_statistics(self) -> None:
        self.say("\n--- Event Statistics ---")
        self.say_all(render_statistics(self.queries.statistics()))
