"""Logging setup for the command-line entry point.

The curses session owns the screen, so log records either go to a file
(``--log-file``) or, without one, only warnings and errors reach stderr,
where they appear before the session starts or after it ends.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["setup_logging"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
STDERR_FORMAT = "speq: %(message)s"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure the root logger.

    Args:
        verbose:  Log DEBUG records instead of INFO (file) or WARNING (stderr).
        log_file: Append records to this file instead of writing to stderr.
    """
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        level = logging.DEBUG if verbose else logging.INFO
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(STDERR_FORMAT))
        level = logging.DEBUG if verbose else logging.WARNING

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
