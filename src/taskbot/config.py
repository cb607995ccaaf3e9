"""Configuration management for Taskbot."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKBOT_HOME = Path(os.environ.get("TASKBOT_HOME", Path.home() / "taskbot"))
CONFIG_FILE = TASKBOT_HOME / "config" / "taskbot.conf"
DATA_DIR = TASKBOT_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Taskbot configuration."""

    data_file: str = ""
    prompt: str = "> "
    divider: str = "_" * 40
    log_level: str = "WARNING"

    @property
    def data_path(self) -> Path:
        """Where the task list is saved."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "tasks.json"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskbot.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "prompt":
                config.prompt = value
            case "divider":
                config.divider = value
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
