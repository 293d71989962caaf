"""Parser turning one line of user input into a command."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from .dates import parse_date
from .errors import InvalidCommandFormat

HELP_TEXT = """\
a <txt>@<date> : New reminder on <(M)M-(D)D-YYYY>
r <rem-id>: Delete a reminder
vt : Today's reminders
vt+n : Reminders in next <n> days
va : All reminders
q : Quit"""

ADD_PREFIX = "a "
NEXT_DAYS_PREFIX = "vt+"
REMOVE_PREFIX = "r"


class ViewKind(Enum):
    ALL = "all"
    TODAY = "today"
    NEXT_DAYS = "next_days"


@dataclass(frozen=True)
class AddCommand:
    description: str
    due_date: date


@dataclass(frozen=True)
class ViewCommand:
    kind: ViewKind
    days: int = 0


@dataclass(frozen=True)
class RemoveCommand:
    reminder_id: int


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = Union[AddCommand, ViewCommand, RemoveCommand, HelpCommand, QuitCommand]


def parse_add(text: str) -> AddCommand:
    """Parse the ``<text>@<M-D-YYYY>`` part of an add command."""
    parts = text.split("@")
    if len(parts) != 2:
        raise InvalidCommandFormat("Invalid command format")
    description, raw_date = parts
    try:
        due_date = parse_date(raw_date)
    except ValueError as e:
        raise InvalidCommandFormat("Invalid command format") from e
    return AddCommand(description=description, due_date=due_date)


def is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_days(text: str) -> int:
    """Parse a signed decimal day count. No whitespace or underscores."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not is_ascii_digits(digits):
        raise InvalidCommandFormat(f"'{text}' is not a number of days")
    return int(text)


def parse_reminder_id(text: str) -> int:
    """Parse the leading run of digits after ``r``; anything after it is ignored."""
    rest = text.lstrip()
    end = 0
    while end < len(rest) and is_ascii_digits(rest[end]):
        end += 1
    if end == 0:
        raise InvalidCommandFormat(f"expected r<rem-id>, got 'r{text}'")
    return int(rest[:end])


def parse_command(line: str) -> Optional[Command]:
    """
    Classify one input line.

    Args:
        line: A single line of input without its trailing newline

    Returns:
        The parsed command, or None for input that is not a command

    Raises:
        InvalidCommandFormat: If the line looks like a command but is malformed
    """
    if line.startswith(ADD_PREFIX):
        return parse_add(line[len(ADD_PREFIX):])
    if line == "va":
        return ViewCommand(ViewKind.ALL)
    if line == "vt":
        return ViewCommand(ViewKind.TODAY)
    if line.startswith(NEXT_DAYS_PREFIX):
        return ViewCommand(ViewKind.NEXT_DAYS, days=parse_days(line[len(NEXT_DAYS_PREFIX):]))
    if line == "h":
        return HelpCommand()
    if line.startswith(REMOVE_PREFIX):
        return RemoveCommand(parse_reminder_id(line[len(REMOVE_PREFIX):]))
    if line == "q":
        return QuitCommand()
    return None
