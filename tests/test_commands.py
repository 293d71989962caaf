"""Unit tests for the command parser."""

import pytest
from datetime import date

from reminder_cli.commands import (
    HELP_TEXT,
    AddCommand,
    HelpCommand,
    QuitCommand,
    RemoveCommand,
    ViewCommand,
    ViewKind,
    parse_command,
)
from reminder_cli.errors import InvalidCommandFormat


class TestAddCommand:
    """Tests for parsing the add command."""

    def test_valid(self):
        command = parse_command("a Call mom@3-9-2025")
        assert command == AddCommand("Call mom", date(2025, 3, 9))

    def test_empty_description(self):
        assert parse_command("a @1-1-2025") == AddCommand("", date(2025, 1, 1))

    def test_only_first_prefix_removed(self):
        command = parse_command("a a b@1-1-2025")
        assert command.description == "a b"

    def test_invalid_date(self):
        """Test that an impossible month/day is rejected."""
        with pytest.raises(InvalidCommandFormat):
            parse_command("a foo@13-40-2024")

    def test_missing_at(self):
        with pytest.raises(InvalidCommandFormat):
            parse_command("a foo 1-1-2024")

    def test_extra_at(self):
        with pytest.raises(InvalidCommandFormat):
            parse_command("a mail bob@example.com@1-1-2024")

    def test_a_without_space_is_ignored(self):
        assert parse_command("afoo@1-1-2024") is None


class TestViewCommands:
    """Tests for parsing the view commands."""

    def test_view_all(self):
        assert parse_command("va") == ViewCommand(ViewKind.ALL)

    def test_view_today(self):
        assert parse_command("vt") == ViewCommand(ViewKind.TODAY)

    def test_view_next_days(self):
        assert parse_command("vt+3") == ViewCommand(ViewKind.NEXT_DAYS, days=3)

    def test_view_next_days_zero(self):
        assert parse_command("vt+0") == ViewCommand(ViewKind.NEXT_DAYS, days=0)

    def test_view_next_days_not_a_number(self):
        with pytest.raises(InvalidCommandFormat, match="not a number"):
            parse_command("vt+abc")

    def test_view_next_days_missing_number(self):
        with pytest.raises(InvalidCommandFormat):
            parse_command("vt+")

    def test_view_next_days_negative(self):
        assert parse_command("vt+-2") == ViewCommand(ViewKind.NEXT_DAYS, days=-2)

    def test_view_next_days_explicit_plus_sign(self):
        assert parse_command("vt++4") == ViewCommand(ViewKind.NEXT_DAYS, days=4)

    @pytest.mark.parametrize("text", ["vt+1_0", "vt+ 3", "vt+3 ", "vt+٣", "vt+-", "vt+1.5"])
    def test_view_next_days_rejects_loose_numbers(self, text):
        """Test that only plain ASCII digits with an optional sign are accepted."""
        with pytest.raises(InvalidCommandFormat):
            parse_command(text)


class TestRemoveCommand:
    """Tests for parsing the remove command."""

    def test_remove(self):
        assert parse_command("r7") == RemoveCommand(7)

    def test_remove_with_space(self):
        assert parse_command("r 12") == RemoveCommand(12)

    def test_remove_uses_leading_digits(self):
        """Test that trailing text after the id is ignored."""
        assert parse_command("r7abc") == RemoveCommand(7)
        assert parse_command("r 1 2") == RemoveCommand(1)

    @pytest.mark.parametrize("line", ["r", "rx", "r-1", "r ", "remove 3"])
    def test_remove_invalid(self, line):
        """Test that r-prefixed lines without an id are recoverable errors."""
        with pytest.raises(InvalidCommandFormat):
            parse_command(line)


class TestOtherCommands:
    """Tests for help, quit and unknown input."""

    def test_help(self):
        assert parse_command("h") == HelpCommand()

    def test_quit(self):
        assert parse_command("q") == QuitCommand()

    @pytest.mark.parametrize("line", ["", "hello", "vax", "Q", " va", "quit"])
    def test_unknown_is_ignored(self, line):
        assert parse_command(line) is None

    def test_help_text_lists_commands(self):
        lines = HELP_TEXT.splitlines()
        assert lines[0] == "a <txt>@<date> : New reminder on <(M)M-(D)D-YYYY>"
        assert lines[-1] == "q : Quit"
        assert len(lines) == 6
