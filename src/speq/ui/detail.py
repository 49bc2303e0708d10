"""Detail panel content for the selected node.

``build_detail_lines`` is a pure function producing styled lines; drawing
them onto the screen happens in ``speq.ui``. Node attributes never change
after the tree is built, so the lines of each node are computed once and kept
in an LRU cache keyed by the node itself (nodes hash by identity).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from cachetools import LRUCache

from speq.tree.nodes import NodeKind, TreeNode

__all__ = ["DetailCache", "DetailLine", "Span", "Style", "build_detail_lines"]

KEY_WIDTH = 14
SEPARATOR_WIDTH = 60
LIST_JOINER = " · "

_COMPOSITIONS = frozenset({NodeKind.ALL_OF, NodeKind.ONE_OF, NodeKind.ANY_OF})


class Style(StrEnum):
    """Semantic style roles; the screen layer maps them to attributes."""

    PLAIN = auto()
    TITLE = auto()
    TYPE = auto()
    LABEL = auto()
    VALUE = auto()
    REQUIRED = auto()
    MUTED = auto()


@dataclass(frozen=True, slots=True)
class Span:
    text: str
    style: Style = Style.PLAIN


DetailLine = tuple[Span, ...]


def _kv(key: str, value: str, style: Style = Style.VALUE) -> DetailLine:
    return (Span("  "), Span(f"{key:<{KEY_WIDTH}}", Style.LABEL), Span(value, style))


def build_detail_lines(node: TreeNode) -> list[DetailLine]:
    """Return the detail panel lines describing ``node``.

    Layout: a header (name, type label, format), a separator, the generic
    rows (required, description), kind-specific rows, then constraints,
    enum values, default and example. UNKNOWN nodes have no kind-specific
    rows.
    """
    fmt = f" ({node.format})" if node.format else ""
    lines: list[DetailLine] = [
        (
            Span("  "),
            Span(node.name, Style.TITLE),
            Span("  "),
            Span(f"{node.type_label()}{fmt}", Style.TYPE),
        ),
        (Span("  " + "─" * SEPARATOR_WIDTH, Style.MUTED),),
    ]

    if node.required:
        lines.append(_kv("required", "yes", Style.REQUIRED))
    if node.description is not None:
        lines.append(_kv("description", node.description))

    if node.kind is NodeKind.OBJECT:
        if node.children:
            lines.append(_kv("properties", str(len(node.children))))
        required_props = [c.name for c in node.children if c.required]
        if required_props:
            lines.append(_kv("required", LIST_JOINER.join(required_props)))
    elif node.kind is NodeKind.ARRAY:
        if node.children:
            lines.append(_kv("items", node.children[0].type_label(), Style.TYPE))
    elif node.kind is NodeKind.REF:
        lines.append(_kv("reference", node.type_label(), Style.TYPE))
    elif node.kind in _COMPOSITIONS:
        lines.append(
            _kv("combiner", f"{node.kind} ({len(node.children)} schemas)")
        )

    lines.extend(_kv("constraint", c) for c in node.constraints)

    if node.enum_values:
        lines.append(_kv("enum", LIST_JOINER.join(node.enum_values)))
    if node.default is not None:
        lines.append(_kv("default", node.default))
    if node.example is not None:
        lines.append(_kv("example", node.example))

    lines.append(())
    return lines


class DetailCache:
    """LRU cache of detail lines per node.

    Args:
        max_size: Maximum number of nodes whose lines are kept. Defaults to 256.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[TreeNode, list[DetailLine]] = LRUCache(maxsize=max_size)

    def lines_for(self, node: TreeNode) -> list[DetailLine]:
        lines = self._cache.get(node)
        if lines is None:
            lines = build_detail_lines(node)
            self._cache[node] = lines
        return lines

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize)
