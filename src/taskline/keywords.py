"""Keyword classification for single-line task commands."""

import re
from enum import Enum
from typing import List, Optional, Pattern, Tuple


class Keyword(Enum):
    """Command family of an input line."""
    MARK = "mark"
    UNMARK = "unmark"
    DEADLINE = "deadline"
    EVENT = "event"
    TODO = "todo"
    TODO_ERROR = "todoError"
    DELETE = "delete"
    FIND = "find"
    NONE = "none"


# Any character except a line terminator (\n, \r, NEL, LINE and PARAGRAPH SEPARATOR).
LINE_CHAR = r"[^\n\r\u0085\u2028\u2029]"


def _compile(pattern: str) -> Pattern:
    return re.compile(pattern, re.ASCII)


# Evaluated top to bottom, first match wins. The malformed todo pattern must
# stay ahead of the well-formed one since "todo .+" also matches "todo   ".
KEYWORD_PATTERNS: List[Tuple[Pattern, Keyword]] = [
    (_compile(r"mark \d+"), Keyword.MARK),
    (_compile(r"unmark \d+"), Keyword.UNMARK),
    (_compile(r"deadline " + LINE_CHAR + "*"), Keyword.DEADLINE),
    (_compile(r"event " + LINE_CHAR + "*"), Keyword.EVENT),
    (_compile(r"todo\s+"), Keyword.TODO_ERROR),
    (_compile(r"todo " + LINE_CHAR + "+"), Keyword.TODO),
    (_compile(r"delete \d+"), Keyword.DELETE),
    (_compile(r"find " + LINE_CHAR + "+"), Keyword.FIND),
]

# Keywords a user can type, used for "did you mean" suggestions.
COMMAND_WORDS = ["mark", "unmark", "deadline", "event", "todo", "delete", "find", "list", "bye"]


def matches_pattern(line: str, pattern: Pattern) -> bool:
    """Return True if the pattern matches the whole line."""
    return pattern.fullmatch(line) is not None


def classify(line: Optional[str]) -> Keyword:
    """Classify an input line into exactly one keyword category.

    Never raises; lines that match no pattern (including the empty line)
    classify as Keyword.NONE.
    """
    if line is None:
        line = ""
    for pattern, keyword in KEYWORD_PATTERNS:
        if matches_pattern(line, pattern):
            return keyword
    return Keyword.NONE
