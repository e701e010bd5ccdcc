"""Ordered in-memory task collection."""

import re
from typing import Iterable, Iterator

from .tasks import Task, describe

EMPTY_LIST_MESSAGE = "You have completed all tasks!"


class TaskList:
    """
    Ordered, mutable list of tasks.

    Positions are zero-based. Callers validate positions before calling
    get/delete/mark_done; an out-of-range position raises IndexError.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, pos: int) -> Task:
        self._check(pos)
        return self._tasks[pos]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, pos: int) -> Task:
        """Remove and return the task at pos. Later tasks shift down by one."""
        self._check(pos)
        return self._tasks.pop(pos)

    def mark_done(self, pos: int) -> Task:
        self._check(pos)
        task = self._tasks[pos]
        task.mark_done()
        return task

    def find(self, pattern: re.Pattern) -> list[tuple[int, Task]]:
        """Tasks whose description matches pattern, with their positions, in list order."""
        return [(i, t) for i, t in enumerate(self._tasks) if pattern.search(t.description)]

    def render(self) -> str:
        """Numbered listing, one task per line, or the empty-list message."""
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "\n".join(f"{i}. {describe(t)}" for i, t in enumerate(self._tasks, start=1))

    def _check(self, pos: int) -> None:
        # Negative indexes would silently wrap around on a plain list
        if not 0 <= pos < len(self._tasks):
            raise IndexError(f"Position {pos} out of range for {len(self._tasks)} tasks")
