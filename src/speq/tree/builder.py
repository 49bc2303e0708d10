"""TreeBuilder: converts decoded schema descriptions into a TreeNode tree.

Uses recursive dispatch over the shape of a JSON-Schema-like mapping (as
produced by decoding an OpenAPI or Swagger document) to build TreeNode
objects. References are never inlined: a ``$ref`` becomes a REF leaf that
only carries the target's name, which bounds recursion depth and keeps
mutually referencing schemas from forming cycles.

Dispatch order:
- ``$ref``                     -> REF leaf
- ``allOf`` / ``oneOf`` / ``anyOf`` -> composition node, one child per branch
- ``type``                     -> OBJECT, ARRAY or a primitive kind
- anything else                -> UNKNOWN leaf

Building never raises. A shape that matches none of the kinds above degrades
to UNKNOWN so that one exotic schema never aborts loading the document.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from speq.tree.nodes import NodeKind, TreeNode

__all__ = ["ITEMS_LABEL", "TreeBuilder"]

# Label of the single child of an ARRAY node
ITEMS_LABEL = "items"

_PRIMITIVE_KINDS: dict[str, NodeKind] = {
    "string": NodeKind.STRING,
    "integer": NodeKind.INTEGER,
    "number": NodeKind.NUMBER,
    "boolean": NodeKind.BOOLEAN,
}

# Checked in this order when a schema declares more than one combiner
_COMPOSITION_KINDS: tuple[tuple[str, NodeKind], ...] = (
    ("allOf", NodeKind.ALL_OF),
    ("oneOf", NodeKind.ONE_OF),
    ("anyOf", NodeKind.ANY_OF),
)


def _is_number(value: Any) -> bool:
    # bool subclasses int; a YAML `true` is never a numeric bound
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_display(value: Any) -> str:
    """Render an arbitrary decoded value as a display string.

    Strings are returned verbatim. JSON-native scalars and containers are
    rendered in compact JSON notation. Anything else (e.g. dates produced by
    the YAML decoder) falls back to ``str()``, as do containers JSON cannot
    encode: mappings with non-string keys such as dates, and values made
    self-referencing by YAML aliases.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, int, float, dict, list)):
        try:
            return json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def _enum_literal(value: Any, quote_strings: bool) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False) if quote_strings else value
    return _to_display(value)


def _ref_target(pointer: str) -> str:
    """Return the last path segment of a reference.

    E.g. "Pet" for "#/components/schemas/Pet".
    """
    return pointer.rstrip("/").rsplit("/", 1)[-1]


def _resolve_type(schema: Mapping[str, Any]) -> str | None:
    """Return the single declared type of ``schema``, or None.

    Accepts the plain string form and the OpenAPI 3.1 list form in which
    ``"null"`` marks the schema as nullable, e.g. ``["string", "null"]``.
    """
    declared = schema.get("type")
    if isinstance(declared, str):
        return declared
    if isinstance(declared, list):
        non_null = [t for t in declared if t != "null"]
        if len(non_null) == 1 and isinstance(non_null[0], str):
            return non_null[0]
    return None


@dataclass
class TreeBuilder:
    """Converts decoded schema descriptions into TreeNode trees.

    The builder is stateless; one instance can be shared across documents.

    Example::

        builder = TreeBuilder()
        node = builder.build(
            "Pet",
            {
                "type": "object",
                "required": ["id"],
                "properties": {"id": {"type": "integer", "format": "int64"}},
            },
        )
        # node: OBJECT("Pet") -> INTEGER("id", format="int64", required=True)
    """

    def build_roots(self, schemas: Mapping[str, Any]) -> list[TreeNode]:
        """Build one root node per named top-level schema.

        Roots are sorted alphabetically by name so the tree order does not
        depend on how the source document happened to be serialized.

        Args:
            schemas: Mapping of schema name to decoded schema description.

        Returns:
            Root nodes in alphabetical order, none of them required.
        """
        ordered = sorted(schemas.items(), key=lambda item: str(item[0]))
        return [self.build(str(name), schema) for name, schema in ordered]

    def build(self, name: str, schema: Any, required: bool = False) -> TreeNode:
        """Convert one schema description into a TreeNode subtree.

        Args:
            name:     Label for the node.
            schema:   Decoded schema description. Non-mapping values are
                      accepted and produce an UNKNOWN node.
            required: Whether the parent object declares ``name`` as required.

        Returns:
            The root of the built subtree.
        """
        return self._build(name, schema, required, frozenset())

    def _build(
        self, name: str, schema: Any, required: bool, path: frozenset[int]
    ) -> TreeNode:
        # YAML aliases can make a mapping contain itself; ``path`` holds the
        # ids of the mappings being built above this one.
        if not isinstance(schema, Mapping) or id(schema) in path:
            return TreeNode(name=name, kind=NodeKind.UNKNOWN, required=required)

        node = self._build_shape(name, schema, required, path | {id(schema)})
        self._copy_metadata(node, schema)
        return node

    # ------------------------------------------------------------------
    # Shape dispatch
    # ------------------------------------------------------------------

    def _build_shape(
        self,
        name: str,
        schema: Mapping[str, Any],
        required: bool,
        path: frozenset[int],
    ) -> TreeNode:
        pointer = schema.get("$ref")
        if isinstance(pointer, str):
            return TreeNode(
                name=name,
                kind=NodeKind.REF,
                ref_target=_ref_target(pointer),
                required=required,
            )

        for keyword, kind in _COMPOSITION_KINDS:
            branches = schema.get(keyword)
            if isinstance(branches, list):
                return self._build_composition(name, kind, branches, required, path)

        declared = _resolve_type(schema)
        if declared == "object":
            return self._build_object(name, schema, required, path)
        if declared == "array":
            return self._build_array(name, schema, required, path)
        if declared in _PRIMITIVE_KINDS:
            return self._build_primitive(
                name, _PRIMITIVE_KINDS[declared], schema, required
            )

        return TreeNode(name=name, kind=NodeKind.UNKNOWN, required=required)

    def _build_object(
        self,
        name: str,
        schema: Mapping[str, Any],
        required: bool,
        path: frozenset[int],
    ) -> TreeNode:
        """Build an OBJECT node with one child per declared property.

        Args:
            name:     Label for the object node.
            schema:   The object schema.
            required: Required flag for the object node itself.
            path:     Ids of the mappings on the current build path.

        Returns:
            An OBJECT TreeNode whose children follow property declaration order.
        """
        node = TreeNode(name=name, kind=NodeKind.OBJECT, required=required)

        declared_required = schema.get("required")
        required_names = (
            {str(n) for n in declared_required}
            if isinstance(declared_required, list)
            else set()
        )

        properties = schema.get("properties")
        if isinstance(properties, Mapping):
            for prop_name, prop_schema in properties.items():
                label = str(prop_name)
                node.children.append(
                    self._build(label, prop_schema, label in required_names, path)
                )

        self._add_count_bounds(node, schema, "minProperties", "maxProperties")
        return node

    def _build_array(
        self,
        name: str,
        schema: Mapping[str, Any],
        required: bool,
        path: frozenset[int],
    ) -> TreeNode:
        """Build an ARRAY node with at most one "items" child."""
        node = TreeNode(name=name, kind=NodeKind.ARRAY, required=required)

        items = schema.get("items")
        if isinstance(items, Mapping):
            node.children.append(self._build(ITEMS_LABEL, items, False, path))

        self._add_count_bounds(node, schema, "minItems", "maxItems")
        if schema.get("uniqueItems") is True:
            node.constraints.append("uniqueItems: true")
        return node

    def _build_composition(
        self,
        name: str,
        kind: NodeKind,
        branches: list[Any],
        required: bool,
        path: frozenset[int],
    ) -> TreeNode:
        node = TreeNode(name=name, kind=kind, required=required)
        node.children.extend(
            self._build(f"[{idx}]", branch, False, path)
            for idx, branch in enumerate(branches)
        )
        return node

    def _build_primitive(
        self,
        name: str,
        kind: NodeKind,
        schema: Mapping[str, Any],
        required: bool,
    ) -> TreeNode:
        """Build a STRING, INTEGER, NUMBER or BOOLEAN leaf.

        Constraints are collected in a fixed order per kind:
        - STRING:          minLength, maxLength, pattern
        - INTEGER/NUMBER:  min, max, multipleOf
        - BOOLEAN:         none
        """
        node = TreeNode(name=name, kind=kind, required=required)

        fmt = schema.get("format")
        if kind is not NodeKind.BOOLEAN and isinstance(fmt, str):
            node.format = fmt

        if kind is NodeKind.STRING:
            self._add_count_bounds(node, schema, "minLength", "maxLength")
            pattern = schema.get("pattern")
            if isinstance(pattern, str):
                node.constraints.append(f"pattern: {pattern}")
        elif kind in (NodeKind.INTEGER, NodeKind.NUMBER):
            self._add_numeric_bounds(node, schema)

        values = schema.get("enum")
        if isinstance(values, list):
            quote = kind is NodeKind.STRING
            node.enum_values.extend(_enum_literal(v, quote) for v in values)
        return node

    # ------------------------------------------------------------------
    # Constraints and metadata
    # ------------------------------------------------------------------

    @staticmethod
    def _add_count_bounds(
        node: TreeNode, schema: Mapping[str, Any], low_key: str, high_key: str
    ) -> None:
        for key in (low_key, high_key):
            value = schema.get(key)
            if _is_number(value):
                node.constraints.append(f"{key}: {_to_display(value)}")

    @staticmethod
    def _add_numeric_bounds(node: TreeNode, schema: Mapping[str, Any]) -> None:
        """Append "min: ...", "max: ..." and "multipleOf: ..." constraints.

        Exclusive bounds are written with a ``>`` or ``<`` prefix. Both the
        OpenAPI 3.0 form (boolean ``exclusiveMinimum`` next to ``minimum``)
        and the 3.1 form (numeric ``exclusiveMinimum``) are understood.
        """
        for label, bound_key, exclusive_key, op in (
            ("min", "minimum", "exclusiveMinimum", ">"),
            ("max", "maximum", "exclusiveMaximum", "<"),
        ):
            bound = schema.get(bound_key)
            exclusive = schema.get(exclusive_key)
            if _is_number(exclusive):
                node.constraints.append(f"{label}: {op}{_to_display(exclusive)}")
            elif _is_number(bound):
                prefix = op if exclusive is True else ""
                node.constraints.append(f"{label}: {prefix}{_to_display(bound)}")

        multiple = schema.get("multipleOf")
        if _is_number(multiple):
            node.constraints.append(f"multipleOf: {_to_display(multiple)}")

    @staticmethod
    def _copy_metadata(node: TreeNode, schema: Mapping[str, Any]) -> None:
        description = schema.get("description")
        if description is not None:
            node.description = _to_display(description)

        if "default" in schema:
            node.default = _to_display(schema["default"])

        if "example" in schema:
            node.example = _to_display(schema["example"])
        else:
            examples = schema.get("examples")
            if isinstance(examples, list) and examples:
                node.example = _to_display(examples[0])
