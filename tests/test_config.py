"""Tests for config file loading."""

from pathlib import Path

import pytest

from taskbot.config import DATA_DIR, Config, load_config


@pytest.fixture
def conf_file(tmp_path):
    return tmp_path / "taskbot.conf"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.conf") == Config()

    def test_reads_values(self, conf_file):
        conf_file.write_text(
            "# Taskbot settings\n"
            "\n"
            "DATA_FILE=/tmp/my-tasks.json\n"
            'PROMPT="todo> "\n'
            "DIVIDER = ----  # short divider\n"
            "LOG_LEVEL=debug\n"
        )
        config = load_config(conf_file)
        assert config.data_file == "/tmp/my-tasks.json"
        assert config.prompt == "todo> "
        assert config.divider == "----"
        assert config.log_level == "DEBUG"

    def test_single_quotes(self, conf_file):
        conf_file.write_text("PROMPT='$ ' # shell style\n")
        assert load_config(conf_file).prompt == "$ "

    def test_skips_lines_without_equals(self, conf_file):
        conf_file.write_text("just some text\nPROMPT=>>\n")
        assert load_config(conf_file).prompt == ">>"

    def test_unknown_keys_ignored(self, conf_file):
        conf_file.write_text("COLOR=blue\n")
        assert load_config(conf_file) == Config()

    def test_invalid_log_level_ignored(self, conf_file):
        conf_file.write_text("LOG_LEVEL=loud\n")
        assert load_config(conf_file).log_level == "WARNING"


class TestDataPath:
    def test_default(self):
        assert Config().data_path == DATA_DIR / "tasks.json"

    def test_configured(self):
        assert Config(data_file="~/t.json").data_path == Path.home() / "t.json"
