"""Pure task domain logic - no I/O dependencies."""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

DATE_FORMAT = "dd/MM/yyyy"


@dataclass
class Task:
    """A trackable item with a completion flag."""

    description: str
    done: bool = False

    marker: ClassVar[str] = "?"

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def detail(self) -> str:
        """Variant-specific suffix appended after the description."""
        return ""

    def mark_done(self) -> str:
        self.done = True
        return f"Nice! I've marked this task as done:\n  {self}"

    def revert_done(self) -> str:
        self.done = False
        return f"OK, I've marked this task as not done yet:\n  {self}"

    def __str__(self) -> str:
        return f"[{self.marker}][{self.status_icon}] {self.description}{self.detail()}"


@dataclass
class Todo(Task):
    """A task with no date."""

    marker: ClassVar[str] = "T"


@dataclass
class DatedTask(Task):
    """A task that may carry a calendar date."""

    when: date | None = None

    date_word: ClassVar[str] = ""

    def detail(self) -> str:
        if self.when is None:
            return ""
        return f" ({self.date_word}: {format_date(self.when)})"


@dataclass
class Deadline(DatedTask):
    """Something to finish by a date."""

    marker: ClassVar[str] = "D"
    date_word: ClassVar[str] = "by"


@dataclass
class Event(DatedTask):
    """Something happening at a date."""

    marker: ClassVar[str] = "E"
    date_word: ClassVar[str] = "at"


TASK_TYPES: dict[str, type[Task]] = {cls.marker: cls for cls in (Todo, Deadline, Event)}


def format_date(value: date) -> str:
    """Display form of a date, e.g. 'Dec 2 2024'."""
    return f"{value.strftime('%b')} {value.day} {value.year}"


def parse_date(text: str | None) -> date | None:
    """
    Convert a dd/mm/yyyy literal into a date.

    None means no date was given and yields None. Anything that is not exactly
    two-digit day, two-digit month and four-digit year raises ValueError, as do
    days outside 1-31 and months outside 1-12. A day past the end of its month
    is clamped to the last day, so 31/04/2024 is Apr 30 2024.
    """
    if text is None:
        return None
    parts = text.split("/")
    if [len(p) for p in parts] != [2, 2, 4] or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValueError(f"Date {text!r} does not match {DATE_FORMAT}")
    day, month, year = (int(p) for p in parts)
    if not 1 <= day <= 31 or not 1 <= month <= 12:
        raise ValueError(f"Date {text!r} is out of range")
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))
