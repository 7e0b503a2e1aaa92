"""Exception types raised by Taskline."""


class TasklineError(Exception):
    """Base class for Taskline errors."""


class ParseFailure(TasklineError, ValueError):
    """Raised when a command argument cannot be sliced or parsed."""

    def __init__(self, message: str, line: str = ""):
        self.line = line
        super().__init__(message)


class TaskIndexError(TasklineError, IndexError):
    """Raised when a task number does not refer to a task in the list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Task {index} does not exist (list has {size} tasks)")
