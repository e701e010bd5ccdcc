"""Tests for the ordered task list."""

import re
from datetime import datetime

import pytest

from taskpal.core.task_list import EMPTY_LIST_MESSAGE, TaskList
from taskpal.core.tasks import Deadline, Todo


@pytest.fixture
def tasks():
    return TaskList([Todo("first"), Todo("second"), Todo("third")])


class TestBasics:
    def test_empty(self):
        empty = TaskList()
        assert empty.is_empty()
        assert empty.size() == 0
        assert len(empty) == 0

    def test_add_appends(self, tasks):
        tasks.add(Todo("fourth"))
        assert tasks.size() == 4
        assert tasks.get(3).description == "fourth"

    def test_does_not_alias_input(self):
        source = [Todo("a")]
        tasks = TaskList(source)
        tasks.add(Todo("b"))
        assert len(source) == 1


class TestDelete:
    def test_shifts_later_tasks_down(self, tasks):
        removed = tasks.delete(0)
        assert removed.description == "first"
        assert tasks.size() == 2
        assert [t.description for t in tasks] == ["second", "third"]

    def test_last(self, tasks):
        tasks.delete(2)
        assert [t.description for t in tasks] == ["first", "second"]

    @pytest.mark.parametrize("pos", [-1, 3, 10])
    def test_out_of_range(self, tasks, pos):
        with pytest.raises(IndexError):
            tasks.delete(pos)
        assert tasks.size() == 3


class TestMarkDone:
    def test_marks_only_that_task(self, tasks):
        task = tasks.mark_done(1)
        assert task.done
        assert [t.done for t in tasks] == [False, True, False]

    def test_out_of_range(self, tasks):
        with pytest.raises(IndexError):
            tasks.mark_done(-1)


class TestFind:
    def test_returns_positions_in_order(self):
        tasks = TaskList([Todo("Buy Milk"), Todo("read book"), Todo("milk the cow")])
        matches = tasks.find(re.compile("milk", re.IGNORECASE))
        assert [pos for pos, _ in matches] == [0, 2]

    def test_no_match(self, tasks):
        assert tasks.find(re.compile("nothing")) == []


class TestRender:
    def test_empty(self):
        assert TaskList().render() == EMPTY_LIST_MESSAGE

    def test_numbered_from_one(self):
        tasks = TaskList([
            Todo("read book", done=True),
            Deadline("submit report", datetime(2019, 12, 2, 18, 0)),
        ])
        assert tasks.render() == (
            "1. [T][X] read book\n"
            "2. [D][ ] submit report (by: 02 Dec 2019, 6:00 pm)"
        )
