"""Flat-file persistence for reminders."""

import logging
import os
from datetime import date
from pathlib import Path
from typing import Iterable, List, Tuple

from .dates import format_date, parse_date
from .errors import StorageUnavailable
from .registry import Reminder, is_expired

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"


def format_line(reminder: Reminder) -> str:
    """Serialize a reminder as ``description<TAB>M-D-YYYY``."""
    return f"{reminder.description}{FIELD_SEPARATOR}{format_date(reminder.due_date)}\n"


def parse_line(line: str) -> Reminder:
    """
    Parse one stored line.

    Raises:
        ValueError: If the line does not have exactly two fields or the
            date cannot be parsed
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 2:
        raise ValueError(f"expected 2 tab-separated fields, found {len(fields)}")
    description, raw_date = fields
    return Reminder(description=description, due_date=parse_date(raw_date))


class ReminderStore:
    """Reads and rewrites the reminder file. The file is never held open."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_storage(self) -> None:
        """Create the storage directory and an empty store file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Unable to open {self.path} :: {e}") from e

    def load(self, today: date) -> Tuple[List[Reminder], bool]:
        """
        Load every well-formed, unexpired reminder in file order.

        Malformed lines are reported and skipped.

        Args:
            today: Reminders due strictly before this day are dropped

        Returns:
            Tuple of (kept reminders, whether any expired reminder was dropped)
        """
        self.ensure_storage()
        kept: List[Reminder] = []
        had_expired = False

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line:
                        continue
                    try:
                        reminder = parse_line(line)
                    except ValueError as e:
                        print(f"Error loading reminder on line {line_number} :: {e}")
                        logger.warning("Skipping malformed line %d in %s: %r", line_number, self.path, line)
                        continue

                    if is_expired(reminder.due_date, today):
                        had_expired = True
                        logger.info("Dropping expired reminder: %s", reminder.description)
                        continue
                    kept.append(reminder)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnavailable(f"Unable to open {self.path} :: {e}") from e

        logger.debug("Loaded %d reminders from %s", len(kept), self.path)
        return kept, had_expired

    def save_all(self, reminders: Iterable[Reminder]) -> None:
        """Overwrite the store file with the given reminders."""
        content = "".join(format_line(reminder) for reminder in reminders)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise StorageUnavailable(
                f"Error writing file system for current tasks file {self.path} :: {e}"
            ) from e
        logger.debug("Rewrote %s", self.path)
