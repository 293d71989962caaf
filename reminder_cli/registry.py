"""In-memory registry of reminders keyed by integer id."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .dates import is_after, is_same_day

logger = logging.getLogger(__name__)

DatePredicate = Callable[[date], bool]


@dataclass(frozen=True)
class Reminder:
    """A single reminder with its due date."""
    description: str
    due_date: date


class ReminderRegistry:
    """
    Holds the reminders of the current session.

    Ids come from a counter that starts at 0 and only grows, so an id is
    never handed out twice within a session. Ids are not persisted.
    """

    def __init__(self):
        self.reminders: Dict[int, Reminder] = {}
        self.next_id = 0

    def __len__(self) -> int:
        return len(self.reminders)

    def add(self, description: str, due_date: date) -> int:
        """
        Store a new reminder.

        Args:
            description: Free text, may be empty
            due_date: Calendar day the reminder is due

        Returns:
            The id assigned to the reminder
        """
        reminder_id = self.next_id
        self.reminders[reminder_id] = Reminder(description=description, due_date=due_date)
        self.next_id += 1
        logger.debug("Added reminder %d due %s", reminder_id, due_date)
        return reminder_id

    def load(self, reminders: Iterable[Reminder]) -> None:
        """Add previously stored reminders in the order given."""
        for reminder in reminders:
            self.add(reminder.description, reminder.due_date)

    def remove(self, reminder_id: int) -> Optional[Reminder]:
        """Remove a reminder. Returns it, or None if the id is unknown."""
        removed = self.reminders.pop(reminder_id, None)
        if removed is None:
            logger.debug("No reminder with id %d to remove", reminder_id)
        return removed

    def list(self, predicate: DatePredicate) -> List[Tuple[int, Reminder]]:
        """Return (id, reminder) pairs whose due date matches, sorted by id."""
        return [
            (reminder_id, self.reminders[reminder_id])
            for reminder_id in sorted(self.reminders)
            if predicate(self.reminders[reminder_id].due_date)
        ]

    def all_reminders(self) -> List[Reminder]:
        """All reminders in id order."""
        return [reminder for _, reminder in self.list(everything())]


def everything() -> DatePredicate:
    """Predicate matching every due date."""
    return lambda due_date: True


def due_today(today: date) -> DatePredicate:
    """Predicate matching reminders due on ``today``."""
    return lambda due_date: is_same_day(today, due_date)


def due_within(today: date, days: int) -> DatePredicate:
    """
    Predicate for the "next n days" view.

    A due date matches when it is not after ``today + (days + 1)``, so
    ``days=0`` shows today and tomorrow. There is no lower bound.
    A limit past the supported date range matches everything, or nothing
    when it falls before the earliest date.
    """
    try:
        limit = today + timedelta(days=days + 1)
    except OverflowError:
        if days > 0:
            return everything()
        return lambda due_date: False
    return lambda due_date: not is_after(due_date, limit)


def is_expired(due_date: date, today: date) -> bool:
    """True if the reminder was due strictly before ``today``."""
    return is_after(today, due_date)
