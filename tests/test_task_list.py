"""Tests for the in-memory task list."""

import pytest

from taskline.errors import TaskIndexError
from taskline.task import TodoTask
from taskline.task_list import TaskList


class TestTaskList:
    """Test task numbering and operations."""

    def setup_method(self):
        self.tasks = TaskList([TodoTask("read book"), TodoTask("return book"), TodoTask("buy milk")])

    def test_add(self):
        task = self.tasks.add(TodoTask("call mom"))
        assert len(self.tasks) == 4
        assert self.tasks.get(4) is task

    def test_mark_unmark(self):
        assert self.tasks.mark(2).done is True
        assert self.tasks.unmark(2).done is False

    def test_delete_renumbers(self):
        removed = self.tasks.delete(1)
        assert removed.name == "read book"
        assert self.tasks.get(1).name == "return book"
        assert len(self.tasks) == 2

    @pytest.mark.parametrize("number", [0, 4, -1])
    def test_out_of_range(self, number):
        with pytest.raises(TaskIndexError):
            self.tasks.mark(number)

    def test_find(self):
        """Test find keeps original task numbers."""
        matches = self.tasks.find("book")
        assert [(number, task.name) for number, task in matches] == [(1, "read book"), (2, "return book")]

    def test_find_is_verbatim(self):
        assert self.tasks.find("Book") == []
        assert self.tasks.find("book ") == []
