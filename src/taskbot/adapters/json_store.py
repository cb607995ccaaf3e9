"""JSON file task storage adapter."""

import json
import logging
from datetime import date
from pathlib import Path

from taskbot.core.task_list import TaskList
from taskbot.core.tasks import TASK_TYPES, DatedTask, Task

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict:
    """Serialize a task to a JSON-compatible dict."""
    when = task.when if isinstance(task, DatedTask) else None
    return {
        "type": task.marker,
        "done": task.done,
        "description": task.description,
        "date": when.isoformat() if when else None,
    }


def task_from_record(data: dict) -> Task:
    """Build a task from a stored record. Raises ValueError/KeyError on bad data."""
    task_type = TASK_TYPES.get(data["type"])
    if task_type is None:
        raise ValueError(f"Unknown task type: {data['type']!r}")
    description = data["description"]
    if not isinstance(description, str):
        raise ValueError(f"Invalid description: {description!r}")
    done = data.get("done", False)
    if not isinstance(done, bool):
        raise ValueError(f"Invalid done flag: {done!r}")
    if issubclass(task_type, DatedTask):
        when = date.fromisoformat(data["date"]) if data.get("date") else None
        return task_type(description, done=done, when=when)
    return task_type(description, done=done)


class JsonTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The whole list is one JSON array.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """Load tasks from file. Missing or unreadable file gives an empty list."""
        if not self.path.exists():
            logger.info("No saved tasks at %s, starting empty", self.path)
            return TaskList()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read tasks from %s: %s", self.path, e)
            return TaskList()
        if not isinstance(data, list):
            logger.warning("Ignoring %s: expected a list of tasks", self.path)
            return TaskList()

        tasks = []
        for i, record in enumerate(data, start=1):
            try:
                tasks.append(task_from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping task %d in %s: %s", i, self.path, e)
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return TaskList(tasks)

    def save(self, task_list: TaskList) -> str:
        """Write tasks to file. Returns a message describing the outcome."""
        records = [task_to_record(t) for t in task_list]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self.path, e)
            return f"Unable to save tasks: {e}"
        logger.info("Saved %d task(s) to %s", len(records), self.path)
        return f"Saved {len(records)} task(s) to {self.path}"
