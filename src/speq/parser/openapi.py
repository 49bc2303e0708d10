"""Dialect-specific extraction of the document summary.

OpenAPI 3.x keeps named schemas under ``components.schemas``; Swagger 2.0
keeps them under ``definitions``. Both dialects share ``info.title``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from speq.spec import LoadedSpec, SpecVersion

__all__ = ["parse_swagger2", "parse_v3"]


def _title(raw: Mapping[Any, Any]) -> str:
    info = raw.get("info")
    if isinstance(info, Mapping) and info.get("title") is not None:
        return str(info["title"])
    return ""


def _named_schemas(container: Any) -> dict[str, Any]:
    if not isinstance(container, Mapping):
        return {}
    return {str(name): schema for name, schema in container.items()}


def _summary(
    raw: Mapping[Any, Any],
    declared: str,
    version: SpecVersion,
    schemas: dict[str, Any],
    source: str | None,
) -> LoadedSpec:
    return LoadedSpec(
        title=_title(raw),
        openapi_version=declared,
        version=version,
        schema_names=sorted(schemas),
        schemas=schemas,
        source=source,
    )


def parse_v3(
    raw: Mapping[Any, Any], declared: str, source: str | None = None
) -> LoadedSpec:
    """Build the summary of an OpenAPI 3.0 or 3.1 document."""
    version = SpecVersion.V31 if declared.startswith("3.1") else SpecVersion.V30
    components = raw.get("components")
    schemas = (
        _named_schemas(components.get("schemas"))
        if isinstance(components, Mapping)
        else {}
    )
    return _summary(raw, declared, version, schemas, source)


def parse_swagger2(
    raw: Mapping[Any, Any], declared: str, source: str | None = None
) -> LoadedSpec:
    """Build the summary of a Swagger 2.0 document."""
    schemas = _named_schemas(raw.get("definitions"))
    return _summary(raw, declared, SpecVersion.V20, schemas, source)
