"""Argument extraction and task building for classified command lines."""

import logging
import re
from typing import Optional

from .errors import ParseFailure
from .keywords import Keyword, classify
from .task import DeadlineTask, EventTask, Task, TodoTask
from .utils.datetime import parse_date_time

logger = logging.getLogger(__name__)


BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

# Distance from a delimiter's start to the text it introduces.
SPACE_OFFSET = 1  # " "
BY_OFFSET = 4  # "/by "
FROM_OFFSET = 6  # "/from "
TO_OFFSET = 4  # "/to "

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def checked_slice(text: str, begin: int, end: Optional[int] = None) -> str:
    """Return text[begin:end], failing instead of clamping bad bounds.

    Python slicing silently clamps and accepts negative indices; argument
    extraction relies on a missing marker (position -1) or markers in the
    wrong order producing an error instead.

    Raises:
        ParseFailure: If begin is negative, end is past the text, or
            begin is after end
    """
    if end is None:
        end = len(text)
    if begin < 0 or end > len(text) or begin > end:
        raise ParseFailure(f"Slice [{begin}:{end}] is out of bounds for length {len(text)}", text)
    return text[begin:end]


class KeywordPatternMatcher:
    """Classifies one input line and extracts its arguments.

    The keyword is computed once on construction and reused by every query.
    Instances hold no state beyond their line and keyword.
    """

    def __init__(self, input_text: str):
        self.input_text = "" if input_text is None else input_text
        self.keyword_type = classify(self.input_text)
        logger.debug(f"Classified {self.input_text!r} as {self.keyword_type.value}")

    def _space_position(self) -> int:
        return self.input_text.find(" ")

    def _argument(self) -> str:
        space_position = self._space_position()
        if space_position < 0:
            raise ParseFailure(f"No argument in {self.input_text!r}", self.input_text)
        return self.input_text[space_position + SPACE_OFFSET:]

    def find_search_input(self) -> str:
        """Return everything after the first space, untrimmed.

        Raises:
            ParseFailure: If the line has no space
        """
        return self._argument()

    def find_number_index(self) -> int:
        """Return the text after the first space as a base-10 integer.

        Raises:
            ParseFailure: If the line has no space or the text is not an integer
        """
        argument = self._argument()
        if _INTEGER.fullmatch(argument) is None:
            raise ParseFailure(f"'{argument}' is not a task number", self.input_text)
        return int(argument)

    def build_task(self) -> Optional[Task]:
        """Build the task described by a todo, deadline or event line.

        Returns:
            The task, or None when the line is malformed (missing or
            misplaced marker, empty name, bad date-time) or is not a
            task-creating command
        """
        try:
            if self.keyword_type == Keyword.TODO:
                task = self._build_todo()
            elif self.keyword_type == Keyword.DEADLINE:
                task = self._build_deadline()
            elif self.keyword_type == Keyword.EVENT:
                task = self._build_event()
            else:
                return None
        except ParseFailure as e:
            logger.debug(f"No task built from {self.input_text!r}: {e}")
            return None

        if not task.name:
            logger.debug(f"No task built from {self.input_text!r}: empty name")
            return None
        return task

    def _build_todo(self) -> TodoTask:
        space_position = self._space_position()
        return TodoTask(checked_slice(self.input_text, space_position + SPACE_OFFSET))

    def _build_deadline(self) -> DeadlineTask:
        text = self.input_text
        space_position = self._space_position()
        by_position = text.find(BY_MARKER)

        name = checked_slice(text, space_position + SPACE_OFFSET, by_position - 1)
        deadline = checked_slice(text, by_position + BY_OFFSET)
        return DeadlineTask(name, parse_date_time(deadline))

    def _build_event(self) -> EventTask:
        text = self.input_text
        space_position = self._space_position()
        from_position = text.find(FROM_MARKER)
        to_position = text.find(TO_MARKER)

        name = checked_slice(text, space_position + SPACE_OFFSET, from_position - 1)
        start = checked_slice(text, from_position + FROM_OFFSET, to_position - 1)
        end = checked_slice(text, to_position + TO_OFFSET)
        return EventTask(name, parse_date_time(start), parse_date_time(end))


def build_task(line: str) -> Optional[Task]:
    """Classify a line and build its task in one call."""
    return KeywordPatternMatcher(line).build_task()
