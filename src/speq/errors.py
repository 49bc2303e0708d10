"""Exceptions raised while loading an API description document.

All load failures are fatal: the CLI reports them with the originating path
and exits before a browsing session is started. Building and navigating the
schema tree never raises.
"""

from __future__ import annotations

__all__ = ["SpecParseError", "SpecReadError", "SpecVersionError", "SpeqError"]


class SpeqError(Exception):
    """Base class for all exceptions raised by speq."""

    def __init__(self, msg: str, path: str | None = None) -> None:
        super().__init__(msg)
        self.path = path

    def __str__(self) -> str:
        msg = super().__str__()
        if self.path is None:
            return msg
        return f"{self.path}: {msg}"


class SpecReadError(SpeqError):
    """The document file could not be read."""


class SpecParseError(SpeqError):
    """The document is not valid YAML/JSON, or its top level is not a mapping."""


class SpecVersionError(SpeqError):
    """The document's version cannot be determined or is not supported."""
