"""Ports - interfaces/protocols for external dependencies."""

from .display import Display
from .task_store import LoadResult, TaskStore

__all__ = [
    "Display",
    "LoadResult",
    "TaskStore",
]
