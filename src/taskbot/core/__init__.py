"""Functional core - pure business logic with no I/O."""

from .tasks import Task, Todo, Deadline, Event, parse_date
from .task_list import TaskList, TaskCounts, count_tasks
from .parser import CommandError, CommandResult, Parser, split_command

__all__ = [
    # Tasks
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "parse_date",
    # Task list
    "TaskList",
    "TaskCounts",
    "count_tasks",
    # Parser
    "CommandError",
    "CommandResult",
    "Parser",
    "split_command",
]
