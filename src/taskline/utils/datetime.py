"""Strict date-time handling for task commands.

Task commands carry point-in-time values in exactly one format,
``YYYY-MM-DD HH:MM:SS``. Parsing is strict: every field must be zero-padded
to its full width and the result must be a real calendar date on a 24-hour
clock. Values are naive; no time zone is attached.
"""

import re
from datetime import datetime

from ..errors import ParseFailure


DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_DISPLAY_FORMAT = "%b %d %Y %H:%M"

# strptime accepts unpadded fields ("2024-1-5"), so the shape is checked first.
_DATE_TIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


def parse_date_time(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` string.

    Args:
        text: The date-time text, with no surrounding whitespace

    Returns:
        Naive datetime

    Raises:
        ParseFailure: If the text does not have the exact shape or names an
            invalid calendar date or time
    """
    if _DATE_TIME_SHAPE.fullmatch(text) is None:
        raise ParseFailure(f"'{text}' is not in YYYY-MM-DD HH:MM:SS format", text)
    try:
        return datetime.strptime(text, DATE_TIME_FORMAT)
    except ValueError as e:
        raise ParseFailure(f"'{text}' is not a valid date-time: {e}", text) from e


def format_date_time(value: datetime) -> str:
    """Format a datetime back into the command format."""
    return value.strftime(DATE_TIME_FORMAT)


def format_for_display(value: datetime, display_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
    """Format a datetime for listing output."""
    return value.strftime(display_format)
