"""Calendar-date helpers shared by the command parser and the store."""

from datetime import date, datetime

DATE_FORMAT = "%m-%d-%Y"


def is_same_day(a: date, b: date) -> bool:
    """Return True if both dates fall on the same calendar day."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_after(a: date, b: date) -> bool:
    """Return True if ``a`` is a strictly later calendar day than ``b``."""
    return (a.year, a.month, a.day) > (b.year, b.month, b.day)


def parse_date(text: str) -> date:
    """
    Parse a date written as M-D-YYYY.

    Month and day may or may not be zero-padded; the year must have four
    digits. Raises ValueError for anything else, including impossible
    dates such as 13-40-2024.
    """
    if text != text.strip():
        raise ValueError(f"unexpected whitespace in date '{text}'")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Render a date as M-D-YYYY without zero padding."""
    return f"{value.month}-{value.day}-{value.year:04d}"
