"""File-based task storage adapter."""

import logging
from pathlib import Path
from typing import Iterable

from taskpal.core.codec import decode_all, encode_all
from taskpal.core.errors import DecodeError, ErrorKind, Failure
from taskpal.core.tasks import Task
from taskpal.ports.task_store import LoadResult

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Flat text file storage, one encoded task per line.

    Implements TaskStore protocol. The whole file is read at once and
    overwritten at once.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> LoadResult:
        """Read all tasks. A missing file is an empty list, a bad file is an empty list plus a Failure."""
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, starting empty")
            return LoadResult()

        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.warning(f"Failed to read {self.path}: {e}")
            return LoadResult(failure=Failure(ErrorKind.STORAGE, f"Cannot access file at {self.path}: {e}"))
        except UnicodeDecodeError as e:
            logger.warning(f"Discarding task file {self.path}: {e}")
            return LoadResult(failure=Failure(
                ErrorKind.INVALID_TASK_TYPE,
                f"Task file {self.path} is not valid UTF-8 text. Please check your file again!",
            ))

        try:
            tasks = decode_all(lines)
        except DecodeError as e:
            logger.warning(f"Discarding task file {self.path}: {e}")
            return LoadResult(failure=e.to_failure())

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return LoadResult(tasks=tasks)

    def save(self, tasks: Iterable[Task]) -> Failure | None:
        """Overwrite the file with tasks."""
        text = "".join(f"{line}\n" for line in encode_all(tasks))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            return Failure(ErrorKind.STORAGE, str(e))
        logger.debug(f"Saved tasks to {self.path}")
        return None
