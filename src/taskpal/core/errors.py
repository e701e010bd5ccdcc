"""Error taxonomy shared by the parser, the codec and the task store."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kinds of recoverable failure a session can report."""

    INVALID_COMMAND = "invalid_command"
    EMPTY_ARGUMENT = "empty_argument"
    INVALID_DATE_TIME = "invalid_date_time"
    INVALID_INDEX_INPUT = "invalid_index_input"
    EMPTY_LIST = "empty_list"
    INVALID_TASK_TYPE = "invalid_task_type"
    STORAGE = "storage"


@dataclass(frozen=True)
class Failure:
    """A failed parse, load or save. Returned as a value, never raised."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class DecodeError(ValueError):
    """Raised by the codec when a stored line cannot be turned into a task."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    def to_failure(self) -> Failure:
        return Failure(self.kind, str(self))
