"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from logsweep.core.config import RotationConfig
from logsweep.core.logging_config import LOGGER_NAME


class StaticProbe:
    """Open-file probe reporting a fixed set of paths as open."""

    def __init__(self, open_paths: set[str] | None = None) -> None:
        self.open_paths = open_paths or set()
        self.calls: list[str] = []

    def is_open(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.open_paths


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., RotationConfig]:
    """Factory for RotationConfig with file logging disabled."""

    def _make(**overrides: Any) -> RotationConfig:
        values: dict[str, Any] = {
            "log_enabled": False,
            "log_file": tmp_path / "state" / "logsweep.log",
        }
        values.update(overrides)
        return RotationConfig(**values)

    return _make


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file whose atime and mtime lie age seconds in the past."""

    def _make(
        path: Path,
        age: float = 3600.0,
        content: str = "log line\n",
        now: float | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        stamp = (time.time() if now is None else now) - age
        os.utime(path, (stamp, stamp))
        return path

    return _make


@pytest.fixture
def probe() -> StaticProbe:
    """Probe that reports every file as closed."""
    return StaticProbe()


@pytest.fixture
def make_probe() -> Callable[..., StaticProbe]:
    """Factory for probes reporting the given paths as open."""

    def _make(*open_paths: Path | str) -> StaticProbe:
        return StaticProbe({str(p) for p in open_paths})

    return _make


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach handlers installed by configure_logging during a test."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
