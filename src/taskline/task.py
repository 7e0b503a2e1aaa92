"""Task data model for Taskline."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from .utils.datetime import DEFAULT_DISPLAY_FORMAT, format_date_time, format_for_display


@dataclass
class Task(ABC):
    """A named task that can be marked done."""

    name: str
    done: bool = field(default=False, init=False)

    @property
    @abstractmethod
    def type_tag(self) -> str:
        """Single-letter tag shown in listings."""

    def mark_done(self):
        """Mark the task as done."""
        self.done = True

    def mark_undone(self):
        """Mark the task as not done."""
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def describe(self, display_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
        """Render the task as a listing line."""
        return f"[{self.type_tag}][{self.status_icon}] {self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type_tag,
            "name": self.name,
            "done": self.done,
        }

    def __str__(self) -> str:
        return self.describe()


@dataclass
class TodoTask(Task):
    """A plain to-do with only a name."""

    @property
    def type_tag(self) -> str:
        return "T"


@dataclass
class DeadlineTask(Task):
    """A task that must be done by a point in time."""

    deadline: datetime

    @property
    def type_tag(self) -> str:
        return "D"

    def describe(self, display_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
        base = super().describe(display_format)
        return f"{base} (by: {format_for_display(self.deadline, display_format)})"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["deadline"] = format_date_time(self.deadline)
        return data


@dataclass
class EventTask(Task):
    """A task that occupies a time range."""

    start: datetime
    end: datetime

    @property
    def type_tag(self) -> str:
        return "E"

    def describe(self, display_format: str = DEFAULT_DISPLAY_FORMAT) -> str:
        base = super().describe(display_format)
        start = format_for_display(self.start, display_format)
        end = format_for_display(self.end, display_format)
        return f"{base} (from: {start} to: {end})"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["start"] = format_date_time(self.start)
        data["end"] = format_date_time(self.end)
        return data
