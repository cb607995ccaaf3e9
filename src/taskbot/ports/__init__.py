"""Ports - interfaces/protocols for external dependencies."""

from .task_store import TaskStore

__all__ = [
    "TaskStore",
]
