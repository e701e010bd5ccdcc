"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .formats import format_display


class TaskKind(Enum):
    """One-letter tag identifying a task variant."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _check_description(description: str) -> None:
    if not description or not description.strip():
        raise ValueError("Task description cannot be empty")


@dataclass
class Todo:
    """A plain to-do with no date attached."""

    description: str
    done: bool = False

    def __post_init__(self):
        _check_description(self.description)

    def mark_done(self) -> None:
        self.done = True


@dataclass
class Deadline:
    """A task that must be finished by a point in time."""

    description: str
    due_at: datetime
    done: bool = False

    def __post_init__(self):
        _check_description(self.description)
        self.due_at = self.due_at.replace(second=0, microsecond=0)

    def mark_done(self) -> None:
        self.done = True


@dataclass
class Event:
    """A task happening at a point in time."""

    description: str
    at: datetime
    done: bool = False

    def __post_init__(self):
        _check_description(self.description)
        self.at = self.at.replace(second=0, microsecond=0)

    def mark_done(self) -> None:
        self.done = True


Task = Todo | Deadline | Event


def kind_of(task: Task) -> TaskKind:
    """Variant tag of a task."""
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
    raise TypeError(f"Not a task: {task!r}")


def describe(task: Task) -> str:
    """
    Long-form display string.

    Examples:
        [T][ ] read book
        [D][X] submit report (by: 02 Dec 2019, 6:00 pm)
    """
    head = f"[{kind_of(task).value}][{'X' if task.done else ' '}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(due_at=due_at):
            return f"{head} (by: {format_display(due_at)})"
        case Event(at=at):
            return f"{head} (at: {format_display(at)})"
    raise TypeError(f"Not a task: {task!r}")
