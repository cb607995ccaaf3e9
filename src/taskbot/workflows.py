"""Shared workflow layer between the CLI commands.

Wires the pure core to storage: load the list, hand the parser a save
callback for ``bye``, and save again when a session ends some other way.
"""

import logging
from dataclasses import dataclass

from .adapters.json_store import JsonTaskStore
from .config import Config
from .core.parser import CommandResult, Parser
from .core.task_list import TaskList
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One run of the interpreter: a store, its loaded list, and a parser over it."""

    store: TaskStore
    task_list: TaskList
    parser: Parser

    @property
    def is_exit(self) -> bool:
        return self.parser.is_exit


def get_store(config: Config) -> JsonTaskStore:
    """Resolve task storage from config."""
    return JsonTaskStore(config.data_path)


def build_session(config: Config) -> Session:
    """Load the saved list and wire a parser that saves it on ``bye``."""
    store = get_store(config)
    task_list = store.load()
    parser = Parser(task_list, on_exit=store.save)
    return Session(store=store, task_list=task_list, parser=parser)


def run_command(session: Session, line: str) -> CommandResult:
    """Run one command line against the session."""
    result = session.parser.process(line)
    if not result.ok:
        logger.debug("Command %r failed: %s", line, result.error)
    return result


def end_session(session: Session) -> str | None:
    """Save the list unless ``bye`` already did. Returns the save message, if any."""
    if session.is_exit:
        return None
    logger.info("Session ended without bye, saving")
    return session.store.save(session.task_list)
