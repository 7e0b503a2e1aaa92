"""Taskline - A keyword-driven task tracking command interpreter."""

__version__ = "0.1.0"
__author__ = "Taskline Team"

from .keywords import Keyword, classify
from .matcher import KeywordPatternMatcher
from .task import Task, TodoTask, DeadlineTask, EventTask
from .errors import TasklineError, ParseFailure, TaskIndexError

__all__ = [
    "Keyword",
    "classify",
    "KeywordPatternMatcher",
    "Task",
    "TodoTask",
    "DeadlineTask",
    "EventTask",
    "TasklineError",
    "ParseFailure",
    "TaskIndexError",
    "__version__",
]
