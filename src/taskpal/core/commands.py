"""
Executable commands.

Each command holds only the arguments it was parsed with. The session
passes in the task list and store it owns on every execute() call.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar

from .errors import ErrorKind, Failure
from .formats import INPUT_FORMATS_HELP
from .task_list import TaskList
from .tasks import Deadline, Event, Task, Todo, describe

if TYPE_CHECKING:
    from taskpal.ports.task_store import TaskStore

FAREWELL = "Bye. Hope to see you again soon!"
NO_MATCHES = "There are no tasks matching your input :("

HELP_TEXT = f"""Here is what I can do:
  todo <description>                     add a to-do
  deadline <description> /by <date>      add a task with a deadline
  event <description> /at <date>         add an event
  done <index>                           mark a task as done
  delete <index>                         remove a task
  list                                   show all tasks
  find <keyword>                         search task descriptions
  help                                   show this message
  bye                                    save and quit
Dates can be written as: {INPUT_FORMATS_HELP}"""


def _count(tasks: TaskList) -> str:
    n = len(tasks)
    return f"Now you have {n} task{'' if n == 1 else 's'} in the list."


def _added(task: Task, tasks: TaskList) -> str:
    tasks.add(task)
    return f"Got it. I've added this task:\n  {describe(task)}\n{_count(tasks)}"


class Command(ABC):
    """Base for all commands."""

    word: ClassVar[str] = ""
    mutates: ClassVar[bool] = False

    @abstractmethod
    def execute(self, tasks: TaskList, store: "TaskStore") -> str | Failure:
        """Run against the session's list. Returns the response, or a Failure to report as an error."""

    def is_exit(self) -> bool:
        return False


@dataclass
class AddTodo(Command):
    word: ClassVar[str] = "todo"
    mutates: ClassVar[bool] = True

    description: str

    def execute(self, tasks, store):
        return _added(Todo(self.description), tasks)


@dataclass
class AddDeadline(Command):
    word: ClassVar[str] = "deadline"
    mutates: ClassVar[bool] = True

    description: str
    due_at: datetime

    def execute(self, tasks, store):
        return _added(Deadline(self.description, self.due_at), tasks)


@dataclass
class AddEvent(Command):
    word: ClassVar[str] = "event"
    mutates: ClassVar[bool] = True

    description: str
    at: datetime

    def execute(self, tasks, store):
        return _added(Event(self.description, self.at), tasks)


@dataclass
class MarkDone(Command):
    word: ClassVar[str] = "done"
    mutates: ClassVar[bool] = True

    position: int

    def execute(self, tasks, store):
        task = tasks.mark_done(self.position)
        return f"Nice! I've marked this task as done:\n  {describe(task)}"


@dataclass
class Delete(Command):
    word: ClassVar[str] = "delete"
    mutates: ClassVar[bool] = True

    position: int

    def execute(self, tasks, store):
        task = tasks.delete(self.position)
        return f"Noted. I've removed this task:\n  {describe(task)}\n{_count(tasks)}"


@dataclass
class ListTasks(Command):
    word: ClassVar[str] = "list"

    def execute(self, tasks, store):
        if tasks.is_empty():
            return tasks.render()
        return f"Here are the tasks in your list:\n{tasks.render()}"


@dataclass
class Find(Command):
    """Case-insensitive search; the keyword is a regex, or a literal if it doesn't compile."""

    word: ClassVar[str] = "find"

    keyword: str

    def pattern(self) -> re.Pattern:
        try:
            return re.compile(self.keyword, re.IGNORECASE)
        except re.error:
            return re.compile(re.escape(self.keyword), re.IGNORECASE)

    def execute(self, tasks, store):
        matches = tasks.find(self.pattern())
        if not matches:
            return NO_MATCHES
        lines = ["These are the search results:"]
        lines.extend(f"{pos + 1}. {describe(task)}" for pos, task in matches)
        return "\n".join(lines)


@dataclass
class Help(Command):
    word: ClassVar[str] = "help"

    def execute(self, tasks, store):
        return HELP_TEXT


@dataclass
class Exit(Command):
    """Save everything, then say goodbye."""

    word: ClassVar[str] = "bye"

    def execute(self, tasks, store):
        failure = store.save(tasks)
        if failure is not None:
            return Failure(ErrorKind.STORAGE, f"Could not save your tasks: {failure.message}")
        return FAREWELL

    def is_exit(self) -> bool:
        return True


COMMANDS: dict[str, type[Command]] = {
    cls.word: cls for cls in (AddTodo, AddDeadline, AddEvent, MarkDone, Delete, ListTasks, Find, Help, Exit)
}
