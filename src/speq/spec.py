"""LoadedSpec and SpecVersion: the decoded document summary.

The summary holds what the header needs (title, versions) and the raw schema
descriptions the TreeBuilder consumes. ``schema_names`` is kept sorted
independently of the tree so lookups and tests do not depend on tree order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = ["LoadedSpec", "SpecVersion"]


class SpecVersion(Enum):
    """Supported document dialects."""

    V20 = "2.0"
    V30 = "3.0"
    V31 = "3.1"

    def label(self) -> str:
        """Return the human-readable dialect name shown in the header."""
        return _LABELS[self]


_LABELS: dict[SpecVersion, str] = {
    SpecVersion.V20: "Swagger 2.0",
    SpecVersion.V30: "OpenAPI 3.0",
    SpecVersion.V31: "OpenAPI 3.1",
}


@dataclass(frozen=True, slots=True)
class LoadedSpec:
    """The loaded, version-detected representation of an API document.

    Attributes:
        title:            ``info.title`` of the document ("" when absent).
        openapi_version:  The declared version string, e.g. "3.0.3".
        version:          The detected dialect.
        schema_names:     Top-level schema names, sorted alphabetically.
        schemas:          Raw decoded schema descriptions keyed by name.
        source:           Path the document was read from, if any.
    """

    title: str
    openapi_version: str
    version: SpecVersion
    schema_names: list[str] = field(default_factory=list)
    schemas: dict[str, Any] = field(default_factory=dict)
    source: str | None = None
