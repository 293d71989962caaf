"""Exception types for the reminder tracker."""


class ReminderError(Exception):
    """Base class for all reminder tracker errors."""


class InvalidCommandFormat(ReminderError, ValueError):
    """A command line could not be parsed. Recoverable."""


class StorageUnavailable(ReminderError, OSError):
    """The store directory or file cannot be used. Fatal."""


class InputClosed(ReminderError, EOFError):
    """No more commands can be read from the input stream. Fatal."""
