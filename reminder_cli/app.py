"""Interactive command loop for the reminder tracker."""

import logging
import sys
from datetime import date
from typing import Callable, Optional, TextIO

from .commands import (
    HELP_TEXT,
    AddCommand,
    HelpCommand,
    QuitCommand,
    RemoveCommand,
    ViewCommand,
    ViewKind,
    parse_command,
)
from .config import AppConfig, ConfigManager
from .dates import format_date
from .errors import InputClosed, InvalidCommandFormat, ReminderError
from .registry import DatePredicate, ReminderRegistry, due_today, due_within, everything
from .store import ReminderStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class ReminderApp:
    """
    Application context for one interactive session.

    Owns the registry, the store and the input/output streams, so every
    handler works on explicit state.
    """

    def __init__(
        self,
        config: AppConfig,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize the ReminderApp.

        Args:
            config: Application settings
            stdin: Stream commands are read from (defaults to sys.stdin)
            stdout: Stream output is written to (defaults to sys.stdout)
            today: Clock returning the current day (defaults to date.today)
        """
        self.config = config
        self.registry = ReminderRegistry()
        self.store = ReminderStore(config.store_path)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.today = today or date.today

    def echo(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def initialize(self) -> None:
        """Load stored reminders and drop the expired ones from disk."""
        self.echo(f"Current Reminders are stored in {self.store.path}")
        reminders, had_expired = self.store.load(self.today())
        self.registry.load(reminders)
        if had_expired:
            logger.info("Expired reminders found, rewriting %s", self.store.path)
            self.save()
        self.echo(f"Loaded current reminders :: {len(self.registry)}")

    def save(self) -> None:
        self.store.save_all(self.registry.all_reminders())

    def read_command(self) -> str:
        """Prompt for and read one line, without its trailing newline."""
        self.stdout.write(f"\n{self.config.prompt}")
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputClosed(f"Error in reading command {e}") from e
        if not line:
            raise InputClosed("Error in reading command: end of input")
        return line[:-1] if line.endswith("\n") else line

    def handle_line(self, line: str) -> bool:
        """
        Parse and execute one line.

        Returns:
            False once the user asked to quit, True otherwise
        """
        try:
            command = parse_command(line)
        except InvalidCommandFormat as e:
            if line.startswith("a "):
                self.echo(f"Error in processing {line} :: {e}")
            else:
                self.echo(f"Invalid command format :: {e}")
            return True

        if command is None:
            logger.debug("Ignoring input %r", line)
            return True

        if isinstance(command, AddCommand):
            self.add_reminder(command)
        elif isinstance(command, ViewCommand):
            self.view_reminders(self.predicate_for(command))
        elif isinstance(command, RemoveCommand):
            self.remove_reminder(command.reminder_id)
        elif isinstance(command, HelpCommand):
            self.show_help()
        elif isinstance(command, QuitCommand):
            self.echo("Bye")
            return False
        return True

    def predicate_for(self, command: ViewCommand) -> DatePredicate:
        today = self.today()
        if command.kind is ViewKind.TODAY:
            return due_today(today)
        if command.kind is ViewKind.NEXT_DAYS:
            return due_within(today, command.days)
        return everything()

    def add_reminder(self, command: AddCommand) -> int:
        reminder_id = self.registry.add(command.description, command.due_date)
        self.save()
        self.echo("Saved.")
        return reminder_id

    def remove_reminder(self, reminder_id: int) -> None:
        removed = self.registry.remove(reminder_id)
        if removed is None:
            self.echo(f"No reminder with id {reminder_id}.")
            return
        self.save()
        self.echo(f"Reminder :: {removed.description} Removed.")

    def view_reminders(self, predicate: DatePredicate) -> None:
        self.echo()
        self.echo("Reminders .....................")
        self.echo()
        for reminder_id, reminder in self.registry.list(predicate):
            self.echo(f"{reminder_id}. {reminder.description} [{format_date(reminder.due_date)}]")

    def show_help(self) -> None:
        self.echo()
        self.echo(HELP_TEXT)

    def run(self) -> int:
        """Run the read-eval-print loop until the user quits."""
        while True:
            line = self.read_command()
            if not self.handle_line(line):
                return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point. Command-line arguments are not used."""
    try:
        config = ConfigManager().load_config()
        setup_logging(config.log_level)
        app = ReminderApp(config)
        app.initialize()
        return app.run()
    except ReminderError as e:
        print(e)
        return 1
    except KeyboardInterrupt:
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
