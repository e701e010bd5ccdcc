"""Session driver: owns the task list and routes each input line to a command.

Shared by the interactive `chat` loop and the one-shot `do` command.
"""

import logging

from .core.errors import Failure
from .core.parser import parse
from .core.task_list import TaskList
from .ports.display import Display
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

GREETING = "What can I do for you?"


class Session:
    """One run of the assistant, from load to save."""

    def __init__(self, store: TaskStore, display: Display, eager_save: bool = False):
        self.store = store
        self.display = display
        self.eager_save = eager_save
        self.tasks = TaskList()
        # Unsaved mutations since the last successful save
        self.dirty = False
        self.last_failure: Failure | None = None

    def start(self, greet: bool = True) -> None:
        """Load saved tasks. A bad file is reported and the session starts empty."""
        result = self.store.load()
        if not result.ok:
            self.display.show_error(result.failure.message)
        self.tasks = TaskList(result.tasks)

        if greet:
            if self.tasks.is_empty():
                self.display.show("You have no existing tasks!")
            else:
                self.display.show(f"You have existing tasks!\n{self.tasks.render()}")
            self.display.show(GREETING)

    def handle(self, line: str) -> bool:
        """Run one line of input. Returns True when the session should end."""
        match parse(line, self.tasks):
            case Failure(kind=kind, message=message) as failure:
                self.last_failure = failure
                logger.debug(f"Rejected {line!r}: {kind.value}")
                self.display.show_error(message)
                return False
            case command:
                self.last_failure = None

        logger.debug(f"Running {type(command).__name__}")
        match command.execute(self.tasks, self.store):
            case Failure(message=message) as failure:
                self.last_failure = failure
                self.display.show_error(message)
            case response:
                self.display.show(response)

        if command.mutates:
            self.dirty = True
            if self.eager_save:
                self.save()
        return command.is_exit()

    def save(self) -> bool:
        """Write the current list, reporting any failure. Returns True on success."""
        failure = self.store.save(self.tasks)
        if failure is not None:
            self.display.show_error(f"Could not save your tasks: {failure.message}")
            return False
        self.dirty = False
        return True

    def close(self) -> bool:
        """End without a farewell, saving only if something changed. Returns True on success."""
        if not self.dirty:
            return True
        return self.save()
