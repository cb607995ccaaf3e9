"""
Command parsing and dispatch - pure logic, no I/O.

A line is classified in two stages. First it is split at its first whitespace
character into a command word and a body; a line with no whitespace at all is
a zero-argument command. Then the body is searched for a trailing date clause
introduced by ``/`` and any two characters (``/by``, ``/at``, ...).
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from .task_list import TaskList
from .tasks import DATE_FORMAT, Deadline, Event, Todo, parse_date

logger = logging.getLogger(__name__)

APP_NAME = "Taskbot"

_WORD_BREAK = re.compile(r"\s", re.ASCII)
_DATE_CLAUSE = re.compile(r"\s/..\s?(.*)$", re.ASCII)
_TASK_NUMBER = re.compile(r"[+-]?[0-9]+", re.ASCII)

HELP_TEXT = (
    "Accepted commands:\n"
    "hello - hello!\n"
    "list - show current list\n"
    "bye - saves the current list and exits the program\n"
    "\n"
    "todo <description> - create a todo Task\n"
    f"event <description> /at <{DATE_FORMAT}> - create an event Task (date is optional)\n"
    f"deadline <description> /by <{DATE_FORMAT}> - create a deadline Task (date is optional)\n"
    "\n"
    "done <index> - mark the specified task as done\n"
    "undo <index> - mark the specified task as not done\n"
    "delete <index> - deletes the specified task from the list\n"
    "find <word> - list the tasks whose description contains the word"
)
FAREWELL = "Bye! Hope to see you again soon!"


@dataclass(frozen=True)
class CommandError:
    """A recoverable, user-facing command failure."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: either output text or a CommandError."""

    output: str | None = None
    error: CommandError | None = None

    @classmethod
    def success(cls, output: str) -> "CommandResult":
        return cls(output=output)

    @classmethod
    def failure(cls, message: str) -> "CommandResult":
        return cls(error=CommandError(message))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """The text to show the user, whichever kind of result this is."""
        if self.error is not None:
            return self.error.message
        return self.output or ""


@dataclass(frozen=True)
class SplitCommand:
    """A line that contains whitespace, broken into its parts."""

    word: str
    argument: str
    date: str | None


def split_command(line: str) -> SplitCommand | None:
    """
    Split a line into command word, argument and date clause.

    Returns None when the line has no whitespace. ``argument`` is the text
    between the first whitespace character and the first date clause; ``date``
    is the text after that clause, or None when there is no clause. A clause
    with nothing after it gives an empty date.
    """
    gap = _WORD_BREAK.search(line)
    if gap is None:
        return None
    word = line[: gap.start()]
    body = line[gap.end() :]
    clause = _DATE_CLAUSE.search(body)
    if clause is None:
        return SplitCommand(word=word, argument=body, date=None)
    return SplitCommand(
        word=word,
        argument=body[: clause.start()],
        date=clause.group(1),
    )


def unrecognized(line: str) -> CommandResult:
    return CommandResult.failure(
        f"Sorry, I did not understand: {line}\nUse \"help\" to look at available commands."
    )


# Usage shown when the required argument is missing.
_TASK_USAGE = {
    "todo": 'Please write a task to be done, with "todo <task>"',
    "deadline": 'Please write a deadline, with "deadline <task> /by <date>"',
    "event": 'Please write an event, with "event <task> /at <date>"',
}
_LIST_USAGE = {
    "done": 'Please choose a task to mark as done, with "done <task number>"',
    "undo": 'Please choose a task to undo, with "undo <task number>"',
    "delete": 'Please choose a task to delete, with "delete <task number>"',
    "find": 'Please input a word to find tasks with, using "find <word>"',
}
DATE_FORMAT_MESSAGE = f'Please write your date in the format "{DATE_FORMAT}"'

ExitCallback = Callable[[TaskList], str]


class Parser:
    """
    Turns lines of text into operations on a TaskList.

    ``on_exit`` is called with the list when ``bye`` is processed; its return
    value is shown ahead of the farewell. Persisting the list is the caller's
    business, the parser never touches disk.
    """

    def __init__(self, task_list: TaskList, on_exit: ExitCallback | None = None):
        self.task_list = task_list
        self.on_exit = on_exit
        self._is_exit = False

        self._task_commands: dict[str, Callable[[str, str | None], CommandResult]] = {
            "todo": self._add_todo,
            "deadline": self._add_deadline,
            "event": self._add_event,
        }
        self._list_commands: dict[str, Callable[[str], CommandResult]] = {
            "done": self._mark_done,
            "undo": self._revert_done,
            "delete": self._delete,
            "find": self._find,
        }
        self._bare_commands: dict[str, Callable[[], CommandResult]] = {
            "": lambda: CommandResult.success("Please provide an input!"),
            "list": lambda: CommandResult.success(self.task_list.render()),
            "hello": lambda: CommandResult.success(
                f"Hi! I'm {APP_NAME}! Pleasure to meet you :)"
            ),
            "bye": self._exit,
            "help": lambda: CommandResult.success(HELP_TEXT),
        }

    @property
    def is_exit(self) -> bool:
        """True once ``bye`` has been processed. Never resets."""
        return self._is_exit

    def process(self, line: str) -> CommandResult:
        """Classify and run one command line."""
        parts = split_command(line)
        if parts is None:
            handler = self._bare_commands.get(line)
            if handler is None:
                return unrecognized(line)
            logger.debug("Running bare command %r", line)
            return handler()

        if parts.word in self._list_commands:
            logger.debug("Running list command %r with %r", parts.word, parts.argument)
            return self._list_commands[parts.word](parts.argument)
        if parts.word in self._task_commands:
            logger.debug(
                "Running task command %r with %r (date %r)",
                parts.word,
                parts.argument,
                parts.date,
            )
            return self._task_commands[parts.word](parts.argument, parts.date)
        return unrecognized(line)

    # ============== Zero-argument commands ==============

    def _exit(self) -> CommandResult:
        self._is_exit = True
        if self.on_exit is None:
            return CommandResult.success(FAREWELL)
        return CommandResult.success(f"{self.on_exit(self.task_list)}\n{FAREWELL}")

    # ============== Task creation ==============

    def _add_todo(self, description: str, date: str | None) -> CommandResult:
        # A date clause on a todo is dropped.
        if not description.strip():
            return CommandResult.failure(_TASK_USAGE["todo"])
        return CommandResult.success(self.task_list.add_item(Todo(description)))

    def _add_dated(self, command: str, description: str, date: str | None) -> CommandResult:
        if not description.strip():
            return CommandResult.failure(_TASK_USAGE[command])
        try:
            when = parse_date(date)
        except ValueError:
            return CommandResult.failure(DATE_FORMAT_MESSAGE)
        task_type = Deadline if command == "deadline" else Event
        return CommandResult.success(self.task_list.add_item(task_type(description, when=when)))

    def _add_deadline(self, description: str, date: str | None) -> CommandResult:
        return self._add_dated("deadline", description, date)

    def _add_event(self, description: str, date: str | None) -> CommandResult:
        return self._add_dated("event", description, date)

    # ============== List mutation ==============

    def _task_index(self, command: str, argument: str) -> int | CommandResult:
        """Convert a 1-based task number to a 0-based index, or a failure."""
        if not argument.strip():
            return CommandResult.failure(_LIST_USAGE[command])
        if not _TASK_NUMBER.fullmatch(argument):
            return CommandResult.failure(f'Please use a task number, e.g. "{command} 2"')
        return int(argument) - 1

    def _mark_done(self, argument: str) -> CommandResult:
        index = self._task_index("done", argument)
        if isinstance(index, CommandResult):
            return index
        return CommandResult.success(self.task_list.mark_done(index))

    def _revert_done(self, argument: str) -> CommandResult:
        index = self._task_index("undo", argument)
        if isinstance(index, CommandResult):
            return index
        return CommandResult.success(self.task_list.revert_done(index))

    def _delete(self, argument: str) -> CommandResult:
        index = self._task_index("delete", argument)
        if isinstance(index, CommandResult):
            return index
        return CommandResult.success(self.task_list.delete_item(index))

    def _find(self, argument: str) -> CommandResult:
        if not argument.strip():
            return CommandResult.failure(_LIST_USAGE["find"])
        return CommandResult.success(self.task_list.find_word(argument))
