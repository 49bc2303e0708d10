"""Row text and scrolling for the tree list pane."""

from __future__ import annotations

from speq.tree.nodes import FlatNode

__all__ = ["row_text", "visible_window"]

EXPANDED_MARKER = "▼"
COLLAPSED_MARKER = "▶"


def row_text(row: FlatNode, indent_width: int = 2) -> str:
    """Return the text of one tree row.

    Expandable nodes get a ▶/▼ marker, leaves a blank of the same width.
    Required nodes are suffixed with ``*``.

    Example::

        "  ▼ Pet  object"
        "      id*  integer"
    """
    node = row.node
    if node.is_expandable():
        marker = EXPANDED_MARKER if node.expanded else COLLAPSED_MARKER
    else:
        marker = " "
    star = "*" if node.required else ""
    indent = " " * (indent_width * row.depth)
    return f"{indent}{marker} {node.name}{star}  {node.type_label()}"


def visible_window(cursor: int, offset: int, count: int, height: int) -> int:
    """Return the first row to draw so that ``cursor`` stays on screen.

    Args:
        cursor: Selected row index.
        offset: First row drawn on the previous frame.
        count:  Total number of visible rows.
        height: Rows available in the pane.

    Returns:
        The new offset, in ``[0, max(count - height, 0)]``.
    """
    if height <= 0:
        return 0
    if cursor < offset:
        offset = cursor
    elif cursor >= offset + height:
        offset = cursor - height + 1
    return max(0, min(offset, max(count - height, 0)))
