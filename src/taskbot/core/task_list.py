"""Ordered task collection with derived completion counters - no I/O."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .tasks import Task

EMPTY_LIST_MESSAGE = "There are currently no tasks."


@dataclass(frozen=True)
class TaskCounts:
    """Active (not done) and completed totals for a set of tasks."""

    active: int
    completed: int

    def __str__(self) -> str:
        return f"Active Tasks: {self.active}\nCompleted Tasks: {self.completed}"


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    """
    Count active and completed tasks.

    Pure function - works on any sequence, including filtered views.
    """
    active = completed = 0
    for task in tasks:
        if task.done:
            completed += 1
        else:
            active += 1
    return TaskCounts(active=active, completed=completed)


def render_tasks(tasks: Sequence[Task]) -> str:
    """Numbered (1-based) listing followed by the counters."""
    if not tasks:
        return EMPTY_LIST_MESSAGE
    lines = ["Current tasks:"]
    lines.extend(f"{i}. {task}" for i, task in enumerate(tasks, start=1))
    lines.append("")
    lines.append(str(count_tasks(tasks)))
    return "\n".join(lines)


class TaskList:
    """
    The session's tasks in insertion order.

    Every operation returns a user-facing string. Invalid indices and no-op
    state changes are reported in that string rather than raised.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)

    @property
    def counts(self) -> TaskCounts:
        return count_tasks(self._tasks)

    @property
    def active_count(self) -> int:
        return self.counts.active

    @property
    def completed_count(self) -> int:
        return self.counts.completed

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def add_item(self, item: Task | None) -> str:
        if item is None:
            return "Task is null! Nothing was added."
        self._tasks.append(item)
        return f"added: {item}\n{self.counts}"

    def delete_item(self, index: int) -> str:
        if not self._in_range(index):
            return "Please choose a valid task to delete"
        deleted = self._tasks.pop(index)
        return f"Noted. I have deleted the following task: \n{deleted}\n{self.counts}"

    def mark_done(self, index: int) -> str:
        if not self._in_range(index):
            return "Please choose a valid task to mark as done"
        task = self._tasks[index]
        if task.done:
            return "The task is already done!"
        confirmation = task.mark_done()
        return f"{confirmation}\n{self.counts}"

    def revert_done(self, index: int) -> str:
        if not self._in_range(index):
            return "Please choose a valid task to mark as not done"
        task = self._tasks[index]
        if not task.done:
            return "The task is not yet done!"
        confirmation = task.revert_done()
        return f"{confirmation}\n{self.counts}"

    def filter(self, word: str) -> "TaskList":
        """Transient list of tasks whose description contains word (case-sensitive)."""
        return TaskList(task for task in self._tasks if word in task.description)

    def find_word(self, word: str) -> str:
        return f"Using keyword: {word}\n{self.filter(word).render()}"

    def render(self) -> str:
        return render_tasks(self._tasks)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]
