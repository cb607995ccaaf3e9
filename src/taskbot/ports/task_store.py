"""Task storage interface."""

from typing import Protocol

from taskbot.core.task_list import TaskList


class TaskStore(Protocol):
    """Interface for loading and saving the task list."""

    def load(self) -> TaskList:
        """Load the saved list. Returns an empty list if nothing is saved."""
        ...

    def save(self, task_list: TaskList) -> str:
        """Save the list. Returns a message describing the outcome, never raises."""
        ...
