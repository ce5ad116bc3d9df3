"""Unit tests for configuration helpers and environment overrides.

HOW: Environment overrides are read at import time, so those tests set
the variables with monkeypatch and reload instruction_composer.config.
The module is reloaded again afterwards so later tests see the defaults.
"""

import importlib
import logging

import pytest

from instruction_composer import cli, config
from instruction_composer.config import (
    BUNDLED_LIBRARY_DIR,
    CATEGORY_DIRS,
    decode_separator,
    load_library_root,
)


@pytest.fixture
def reload_config(monkeypatch):
    """Return a function that reloads config with extra environment variables."""

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


@pytest.fixture
def basic_config_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


class TestDecodeSeparator:

    def test_horizontal_rule(self):
        assert decode_separator("\\n---\\n") == "\n---\n"

    def test_tab_and_backslash(self):
        assert decode_separator("\\t|\\\\") == "\t|\\"

    def test_unknown_escape_kept(self):
        assert decode_separator("\\x") == "\\x"

    def test_plain_text_unchanged(self):
        assert decode_separator(" | ") == " | "

    def test_empty(self):
        assert decode_separator("") == ""


class TestLoadLibraryRoot:

    def test_explicit_directory(self, tmp_path):
        assert load_library_root(tmp_path) == tmp_path.resolve()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError, match="INSTRUCTIONS_DIR"):
            load_library_root(tmp_path / "missing")

    def test_bundled_library_has_every_category(self):
        for directory in CATEGORY_DIRS.values():
            assert (BUNDLED_LIBRARY_DIR / directory).is_dir()


class TestEnvironmentOverrides:

    def test_defaults(self, reload_config, monkeypatch):
        for key in ("INSTRUCTIONS_DIR", "INSTRUCTIONS_SEPARATOR", "INSTRUCTIONS_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        reloaded = reload_config()
        assert reloaded.INSTRUCTIONS_DIR == str(BUNDLED_LIBRARY_DIR)
        assert reloaded.DEFAULT_SEPARATOR == "\n---\n"
        assert reloaded.LOG_LEVEL == "WARNING"

    def test_separator_escapes_decoded(self, reload_config):
        reloaded = reload_config(INSTRUCTIONS_SEPARATOR="\\n\\n***\\n\\n")
        assert reloaded.DEFAULT_SEPARATOR == "\n\n***\n\n"

    def test_instructions_dir_used_without_path(self, reload_config, tmp_path):
        reloaded = reload_config(INSTRUCTIONS_DIR=str(tmp_path))
        assert reloaded.load_library_root() == tmp_path.resolve()

    def test_missing_instructions_dir(self, reload_config, tmp_path):
        reloaded = reload_config(INSTRUCTIONS_DIR=str(tmp_path / "missing"))
        with pytest.raises(ValueError, match="Instruction library not found"):
            reloaded.load_library_root()

    def test_log_level_upper_cased(self, reload_config):
        assert reload_config(INSTRUCTIONS_LOG_LEVEL="info").LOG_LEVEL == "INFO"

    def test_cli_list_reads_instructions_dir(self, library_root, monkeypatch, capsys):
        monkeypatch.setattr(config, "INSTRUCTIONS_DIR", str(library_root))
        cli.main(["list", "--category", "language"])
        assert capsys.readouterr().out.splitlines() == ["language/python", "language/sql"]


class TestConfigureLogging:

    def test_warning_level(self, basic_config_calls, monkeypatch):
        monkeypatch.setattr(cli, "LOG_LEVEL", "WARNING")
        cli._configure_logging(verbose=False)
        assert basic_config_calls[-1]["level"] == logging.WARNING

    def test_log_level_setting(self, basic_config_calls, monkeypatch):
        monkeypatch.setattr(cli, "LOG_LEVEL", "INFO")
        cli._configure_logging(verbose=False)
        assert basic_config_calls[-1]["level"] == logging.INFO

    def test_unknown_log_level_falls_back(self, basic_config_calls, monkeypatch):
        monkeypatch.setattr(cli, "LOG_LEVEL", "CHATTY")
        cli._configure_logging(verbose=False)
        assert basic_config_calls[-1]["level"] == logging.WARNING

    def test_verbose_flag_wins(self, basic_config_calls, monkeypatch, capsys):
        monkeypatch.setattr(cli, "LOG_LEVEL", "ERROR")
        cli.main(["-v", "targets"])
        assert basic_config_calls[-1]["level"] == logging.DEBUG
        assert "CLAUDE.md" in capsys.readouterr().out
