"""Tests for logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from speq.log import setup_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """The root logger, with its handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    def test_stderr_defaults_to_warning(self, root_logger: logging.Logger) -> None:
        setup_logging()
        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1

    def test_verbose(self, root_logger: logging.Logger) -> None:
        setup_logging(verbose=True)
        assert root_logger.level == logging.DEBUG

    def test_log_file(self, root_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "speq.log"
        setup_logging(log_file=str(log_file))
        assert root_logger.level == logging.INFO
        logging.getLogger("speq.test").info("hello %s", "file")
        for handler in root_logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
