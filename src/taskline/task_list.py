"""In-memory task list that receives tasks built from commands."""

import logging
from typing import Iterator, List, Tuple

from .errors import TaskIndexError
from .task import Task

logger = logging.getLogger(__name__)


class TaskList:
    """Ordered list of tasks addressed by 1-based task numbers."""

    def __init__(self, tasks: List[Task] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _position(self, number: int) -> int:
        if number < 1 or number > len(self._tasks):
            raise TaskIndexError(number, len(self._tasks))
        return number - 1

    def get(self, number: int) -> Task:
        return self._tasks[self._position(number)]

    def add(self, task: Task) -> Task:
        """Append a task and return it."""
        self._tasks.append(task)
        logger.debug(f"Added task {len(self._tasks)}: {task.name}")
        return task

    def mark(self, number: int) -> Task:
        task = self.get(number)
        task.mark_done()
        return task

    def unmark(self, number: int) -> Task:
        task = self.get(number)
        task.mark_undone()
        return task

    def delete(self, number: int) -> Task:
        """Remove a task; later tasks move up one number."""
        task = self._tasks.pop(self._position(number))
        logger.debug(f"Deleted task {number}: {task.name}")
        return task

    def find(self, term: str) -> List[Tuple[int, Task]]:
        """Return (number, task) pairs whose name contains term verbatim."""
        return [
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if term in task.name
        ]
