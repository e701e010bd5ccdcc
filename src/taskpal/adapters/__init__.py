"""Adapters - I/O implementations of ports."""

from .file_store import FileTaskStore
from .console import ConsoleDisplay

__all__ = [
    "FileTaskStore",
    "ConsoleDisplay",
]
