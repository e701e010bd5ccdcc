"""Task storage interface."""

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from taskpal.core.errors import Failure
from taskpal.core.tasks import Task


@dataclass
class LoadResult:
    """Tasks read at startup, or an empty list plus the reason loading failed."""

    tasks: list[Task] = field(default_factory=list)
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class TaskStore(Protocol):
    """Interface for loading and saving the whole task list."""

    def load(self) -> LoadResult:
        """Read all tasks. Never raises; problems are reported in the result."""
        ...

    def save(self, tasks: Iterable[Task]) -> Failure | None:
        """Overwrite storage with tasks. Returns a Failure instead of raising."""
        ...
