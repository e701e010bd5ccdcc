"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind, Todo, Deadline, Event, describe, kind_of
from .task_list import TaskList
from .errors import ErrorKind, Failure, DecodeError
from .codec import encode, decode, encode_all, decode_all
from .commands import Command
from .parser import parse

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    "Todo",
    "Deadline",
    "Event",
    "describe",
    "kind_of",
    "TaskList",
    # Errors
    "ErrorKind",
    "Failure",
    "DecodeError",
    # Codec
    "encode",
    "decode",
    "encode_all",
    "decode_all",
    # Commands
    "Command",
    "parse",
]
