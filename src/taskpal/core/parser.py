"""Turn one line of user input into a Command, or a Failure explaining why not."""

from .commands import (
    COMMANDS,
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    Find,
    MarkDone,
)
from .errors import ErrorKind, Failure
from .formats import INPUT_FORMATS_HELP, parse_datetime
from .task_list import TaskList

# Tag expected right after the "/" for timed tasks
DATE_TAGS = {AddDeadline.word: "by", AddEvent.word: "at"}

EMPTY_INDEX_MESSAGES = {
    MarkDone.word: "You have already done all tasks!",
    Delete.word: "There are no tasks to delete!",
}


def parse(line: str, tasks: TaskList) -> Command | Failure:
    """
    Parse a line such as "deadline report /by 2/12/2019 1800".

    The task list is only read, to check index arguments against its bounds.
    """
    word, _, rest = line.strip().partition(" ")
    rest = rest.strip()

    if not word:
        return Failure(ErrorKind.INVALID_COMMAND, "Please type a command. Type 'help' to see what I can do.")

    match word:
        case "todo":
            if not rest:
                return _no_description()
            return AddTodo(rest)
        case "deadline" | "event":
            return _parse_timed(word, rest)
        case "done" | "delete":
            return _parse_index(word, rest, tasks)
        case "find":
            if tasks.is_empty():
                return Failure(ErrorKind.EMPTY_LIST, "There are no tasks to search through!")
            if not rest:
                return Failure(ErrorKind.EMPTY_ARGUMENT, "Please pass a keyword to search for!")
            return Find(rest)
        case "list" | "bye" | "help":
            if rest:
                return Failure(ErrorKind.INVALID_COMMAND, f"'{word}' does not take any arguments.")
            return COMMANDS[word]()
        case _:
            return Failure(
                ErrorKind.INVALID_COMMAND,
                f"I'm sorry, but I don't know what '{word}' means. Type 'help' to see what I can do.",
            )


def _no_description() -> Failure:
    return Failure(ErrorKind.EMPTY_ARGUMENT, "Please input a valid task description!")


def _parse_timed(word: str, rest: str) -> Command | Failure:
    tag = DATE_TAGS[word]
    description, slash, when = rest.partition("/")
    description = description.strip()
    when = when.strip()

    if not description:
        return _no_description()
    if not slash or not when.startswith(tag):
        return Failure(ErrorKind.EMPTY_ARGUMENT, f"Please add a date with '/{tag} <date>'!")

    due = parse_datetime(when[len(tag):])
    if due is None:
        return Failure(
            ErrorKind.INVALID_DATE_TIME,
            f"Please input the date in one of these formats: {INPUT_FORMATS_HELP}",
        )

    if word == AddDeadline.word:
        return AddDeadline(description, due)
    return AddEvent(description, due)


def _parse_index(word: str, rest: str, tasks: TaskList) -> Command | Failure:
    if not rest:
        return Failure(ErrorKind.EMPTY_ARGUMENT, f"Please pass an index after the '{word}' command!")
    if not rest.isdigit() or not rest.isascii():
        return Failure(
            ErrorKind.INVALID_INDEX_INPUT,
            f"'{word}' is a command word; please pass a numerical index "
            "or start your task with another word!",
        )
    if tasks.is_empty():
        return Failure(ErrorKind.INVALID_INDEX_INPUT, EMPTY_INDEX_MESSAGES[word])

    position = int(rest) - 1
    if not 0 <= position < len(tasks):
        return Failure(ErrorKind.INVALID_INDEX_INPUT, f"Please input an index from 1 to {len(tasks)}!")

    if word == MarkDone.word:
        return MarkDone(position)
    return Delete(position)
