"""Unit tests for run logging setup."""

import logging
import re
from pathlib import Path

import pytest
from logsweep.core.logging_config import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_stdout_timestamped(self, make_config, capsys: pytest.CaptureFixture[str]) -> None:
        """Lines go to stdout prefixed with the configured timestamp."""
        configure_logging(make_config(output_date_format="%Y-%m-%d"))

        logging.getLogger("logsweep.rotation.compressor").info("Compressed: %s", "a.log")

        out = capsys.readouterr().out
        assert re.search(r"^\[\d{4}-\d{2}-\d{2}\] Compressed: a\.log$", out, re.MULTILINE)

    def test_file_logging_appends(self, tmp_path: Path, make_config) -> None:
        """With log_enabled, lines are appended to the log file."""
        log_file = tmp_path / "nested" / "run.log"
        log_file.parent.mkdir()
        log_file.write_text("previous run\n")
        configure_logging(make_config(log_enabled=True, log_file=log_file))

        logging.getLogger("logsweep.rotation.sweeper").info("Deleted: %s", "old.gz")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()

        lines = log_file.read_text().splitlines()
        assert lines[0] == "previous run"
        assert lines[1].endswith("] Deleted: old.gz")

    def test_creates_log_directory(self, tmp_path: Path, make_config) -> None:
        """The log file directory is created on demand."""
        log_file = tmp_path / "state" / "logsweep" / "logsweep.log"

        configure_logging(make_config(log_enabled=True, log_file=log_file))

        assert log_file.parent.is_dir()

    def test_unopenable_log_file_raises_oserror(self, tmp_path: Path, make_config) -> None:
        """A log path that is a directory fails with OSError before any handler changes."""
        log_file = tmp_path / "run.log"
        log_file.mkdir()

        with pytest.raises(OSError):
            configure_logging(make_config(log_enabled=True, log_file=log_file))

        assert logging.getLogger(LOGGER_NAME).handlers == []

    def test_file_logging_disabled(self, tmp_path: Path, make_config) -> None:
        """Without log_enabled, no file handler is installed."""
        configure_logging(make_config(log_enabled=False))

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_reconfigure_does_not_duplicate(self, make_config) -> None:
        """Repeated configuration replaces the previous handlers."""
        configure_logging(make_config())
        configure_logging(make_config())

        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
