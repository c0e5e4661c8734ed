"""Tests for the opt-in logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from configgen.config.paths import ENV_LOG_FILE
from configgen.platform.logging import LOGGER_NAME, ProvisioningRichHandler, setup_logger


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Put the package logger back to its import-time state after each test."""

    package_logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    try:
        yield None
    finally:
        for handler in list(package_logger.handlers):
            if handler not in original_handlers:
                handler.close()
        package_logger.handlers[:] = original_handlers
        package_logger.setLevel(original_level)


def _console() -> Console:
    return Console(file=StringIO(), force_terminal=True, soft_wrap=True)


def test_import_leaves_library_logger_silent() -> None:
    """Importing the package must only attach a ``NullHandler``."""

    handlers = logging.getLogger(LOGGER_NAME).handlers

    assert handlers
    assert all(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_console_only_without_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_LOG_FILE, raising=False)

    logger = setup_logger(console=_console())

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], ProvisioningRichHandler)
    assert logger.handlers[0].level == logging.INFO


def test_explicit_log_file_adds_rotating_handler(tmp_path: Path) -> None:
    """A log file should be created under a provisioned directory."""

    log_file = tmp_path / "logs" / "configgen.log"

    logger = setup_logger(log_file=log_file, console=_console())

    file_handlers = [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert Path(file_handlers[0].baseFilename) == log_file.resolve()
    assert file_handlers[0].level == logging.DEBUG
    assert log_file.parent.is_dir()


def test_environment_names_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_file = tmp_path / "env.log"
    monkeypatch.setenv(ENV_LOG_FILE, str(log_file))

    logger = setup_logger(console=_console())
    logger.debug("written to file")

    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_LOG_FILE, raising=False)

    _ = setup_logger(console=_console())
    logger = setup_logger(console=_console())

    assert len(logger.handlers) == 1
