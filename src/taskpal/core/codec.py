"""
One-line text codec for tasks.

Line format: "<Tag> | <0|1> | <description>[ | <stored date>]"

    T | 0 | read book
    D | 1 | submit report | 2/12/2019 1800
    E | 0 | project meeting | 6/8/2019 1400

A description containing the " | " delimiter does not survive a round trip.
"""

from typing import Iterable

from .errors import DecodeError, ErrorKind
from .formats import INPUT_FORMATS_HELP, format_stored, parse_datetime
from .tasks import Deadline, Event, Task, TaskKind, Todo

DELIMITER = " | "
BAD_LINE_MESSAGE = "Erroneous task type in file. Please check your file again!"


def encode(task: Task) -> str:
    """Encode a task as one storage line (no trailing newline)."""
    flag = "1" if task.done else "0"
    match task:
        case Todo(description=description):
            fields = ["T", flag, description]
        case Deadline(description=description, due_at=due_at):
            fields = ["D", flag, description, format_stored(due_at)]
        case Event(description=description, at=at):
            fields = ["E", flag, description, format_stored(at)]
        case _:
            raise TypeError(f"Not a task: {task!r}")
    return DELIMITER.join(fields)


def decode(line: str) -> Task:
    """
    Decode one storage line.

    Raises DecodeError with INVALID_TASK_TYPE for an unknown tag or a
    malformed line, and with INVALID_DATE_TIME for an unreadable date.
    """
    fields = line.rstrip("\r\n").split(DELIMITER)
    if len(fields) < 3 or fields[1] not in ("0", "1"):
        raise DecodeError(ErrorKind.INVALID_TASK_TYPE, BAD_LINE_MESSAGE)

    try:
        kind = TaskKind(fields[0])
    except ValueError:
        raise DecodeError(ErrorKind.INVALID_TASK_TYPE, BAD_LINE_MESSAGE) from None

    done = fields[1] == "1"
    description = fields[2]
    if not description.strip():
        raise DecodeError(ErrorKind.INVALID_TASK_TYPE, BAD_LINE_MESSAGE)

    match kind:
        case TaskKind.TODO:
            return Todo(description, done=done)
        case TaskKind.DEADLINE:
            return Deadline(description, _decode_date(fields), done=done)
        case TaskKind.EVENT:
            return Event(description, _decode_date(fields), done=done)


def _decode_date(fields: list[str]):
    if len(fields) < 4:
        raise DecodeError(ErrorKind.INVALID_TASK_TYPE, BAD_LINE_MESSAGE)
    parsed = parse_datetime(fields[3])
    if parsed is None:
        raise DecodeError(
            ErrorKind.INVALID_DATE_TIME,
            f"Unreadable date '{fields[3]}' in file; expected one of: {INPUT_FORMATS_HELP}",
        )
    return parsed


def encode_all(tasks: Iterable[Task]) -> list[str]:
    return [encode(t) for t in tasks]


def decode_all(lines: Iterable[str]) -> list[Task]:
    """Decode every non-blank line. The first bad line aborts the whole batch."""
    return [decode(line) for line in lines if line.strip()]
