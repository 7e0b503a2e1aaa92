"""Dispatches classified command lines against a task list."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from fuzzywuzzy import fuzz, process

from .config import ConfigModel
from .errors import ParseFailure, TaskIndexError
from .keywords import COMMAND_WORDS, Keyword
from .matcher import KeywordPatternMatcher
from .task import Task
from .task_list import TaskList

logger = logging.getLogger(__name__)


LIST_COMMAND = "list"
EXIT_COMMAND = "bye"

TASK_FORMATS = {
    Keyword.TODO: "todo NAME",
    Keyword.DEADLINE: "deadline NAME /by YYYY-MM-DD HH:MM:SS",
    Keyword.EVENT: "event NAME /from YYYY-MM-DD HH:MM:SS /to YYYY-MM-DD HH:MM:SS",
}


@dataclass
class Reply:
    """Outcome of one command, ready for rendering."""
    message: str
    tasks: List[Tuple[int, Task]] = field(default_factory=list)
    is_error: bool = False
    finished: bool = False


class CommandInterpreter:
    """Runs one command line at a time against a TaskList."""

    def __init__(self, task_list: TaskList, config: ConfigModel):
        self.task_list = task_list
        self.config = config

    def execute(self, line: str) -> Reply:
        """Execute a single command line and describe the result."""
        if line == EXIT_COMMAND:
            return Reply("Bye. Hope to see you again soon!", finished=True)
        if line == LIST_COMMAND:
            return self._list()

        matcher = KeywordPatternMatcher(line)
        keyword = matcher.keyword_type

        try:
            if keyword in (Keyword.TODO, Keyword.DEADLINE, Keyword.EVENT):
                return self._add(matcher)
            if keyword == Keyword.MARK:
                task = self.task_list.mark(matcher.find_number_index())
                return Reply(f"Nice! I've marked this task as done:\n  {self._describe(task)}")
            if keyword == Keyword.UNMARK:
                task = self.task_list.unmark(matcher.find_number_index())
                return Reply(f"OK, I've marked this task as not done yet:\n  {self._describe(task)}")
            if keyword == Keyword.DELETE:
                task = self.task_list.delete(matcher.find_number_index())
                return Reply(
                    f"Noted. I've removed this task:\n  {self._describe(task)}\n"
                    f"Now you have {len(self.task_list)} tasks in the list."
                )
            if keyword == Keyword.FIND:
                matches = self.task_list.find(matcher.find_search_input())
                if not matches:
                    return Reply("No matching tasks found.")
                return Reply("Here are the matching tasks in your list:", tasks=matches)
        except (ParseFailure, TaskIndexError) as e:
            logger.debug(f"Command {line!r} failed: {e}")
            return Reply(str(e), is_error=True)

        if keyword == Keyword.TODO_ERROR:
            return Reply("The description of a todo cannot be empty.", is_error=True)
        return self._unrecognized(line)

    def _add(self, matcher: KeywordPatternMatcher) -> Reply:
        task = matcher.build_task()
        if task is None:
            expected = TASK_FORMATS[matcher.keyword_type]
            return Reply(f"Could not read that {matcher.keyword_type.value}. Use: {expected}", is_error=True)
        self.task_list.add(task)
        return Reply(
            f"Got it. I've added this task:\n  {self._describe(task)}\n"
            f"Now you have {len(self.task_list)} tasks in the list."
        )

    def _list(self) -> Reply:
        if not len(self.task_list):
            return Reply("Your task list is empty.")
        return Reply("Here are the tasks in your list:", tasks=list(enumerate(self.task_list, start=1)))

    def _unrecognized(self, line: str) -> Reply:
        message = "Sorry, I don't know what that means."
        suggestion = self.suggest_command(line)
        if suggestion:
            message += f" Did you mean '{suggestion}'?"
        return Reply(message, is_error=True)

    def suggest_command(self, line: str) -> Optional[str]:
        """Suggest the command word closest to the first word of line."""
        words = line.split()
        if not words:
            return None
        best = process.extractOne(
            words[0], COMMAND_WORDS, scorer=fuzz.ratio, score_cutoff=self.config.suggestion_cutoff
        )
        return best[0] if best else None

    def _describe(self, task: Task) -> str:
        return task.describe(self.config.display_datetime_format)
