"""Document loading: decode YAML/JSON text and detect its dialect.

``parse_spec`` turns document text into a LoadedSpec; ``load_spec`` reads the
text from a file first. PyYAML's safe loader reads both YAML and JSON, so a
single decoding step covers either format.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from speq.errors import SpecParseError, SpecReadError, SpecVersionError
from speq.parser.openapi import parse_swagger2, parse_v3
from speq.spec import LoadedSpec

__all__ = ["load_spec", "parse_spec"]

logger = logging.getLogger(__name__)


def _declared(raw: dict[Any, Any], key: str) -> str | None:
    # an unquoted `openapi: 3.0` decodes as a float
    value = raw.get(key)
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def parse_spec(content: str, source: str | None = None) -> LoadedSpec:
    """Decode document text and build its LoadedSpec.

    Args:
        content: YAML or JSON text of an OpenAPI 3.x or Swagger 2.0 document.
        source:  Originating path, used in error messages.

    Returns:
        The document summary with its raw schema descriptions.

    Raises:
        SpecParseError:   The text is not valid YAML/JSON or is not a mapping.
        SpecVersionError: Neither ``openapi: 3.x`` nor ``swagger: 2.x`` is declared.
    """
    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        msg = f"failed to parse spec as YAML/JSON: {exc}"
        raise SpecParseError(msg, source) from exc

    if not isinstance(raw, dict):
        msg = "document root must be a mapping"
        raise SpecParseError(msg, source)

    swagger = _declared(raw, "swagger")
    if swagger is not None and swagger.startswith("2."):
        spec = parse_swagger2(raw, swagger, source)
    else:
        openapi = _declared(raw, "openapi")
        if openapi is None or not openapi.startswith("3."):
            declared = openapi if openapi is not None else swagger
            detail = f" (found {declared!r})" if declared is not None else ""
            msg = (
                "cannot determine OpenAPI version from spec "
                f"(expected 'openapi: 3.x' or 'swagger: 2.0'){detail}"
            )
            raise SpecVersionError(msg, source)
        spec = parse_v3(raw, openapi, source)

    logger.info(
        "loaded %s document %r with %d schemas",
        spec.version.label(),
        spec.title,
        len(spec.schema_names),
    )
    return spec


def load_spec(path: str | Path) -> LoadedSpec:
    """Read and parse the document at ``path``.

    Raises:
        SpecReadError: The file cannot be read or decoded as UTF-8.
        SpecParseError, SpecVersionError: See ``parse_spec``.
    """
    source = str(path)
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read spec file: {exc}"
        raise SpecReadError(msg, source) from exc
    logger.debug("read %d characters from %s", len(content), source)
    return parse_spec(content, source)
