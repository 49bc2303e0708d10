"""TreeNavigator: expand/collapse state and cursor over a schema tree.

The navigator wraps the root nodes built by TreeBuilder. Expansion state is
stored on each node (``TreeNode.expanded``); the visible sequence of rows is
recomputed from those flags on every ``flatten()`` call, never cached, so it
always reflects the latest expand/collapse operation.

Operations on "the node at the cursor" locate it with the same depth-first,
pre-order walk that ``flatten()`` uses, skipping collapsed subtrees, so the
node acted upon is always the one the renderer shows as selected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from speq.tree.nodes import FlatNode, TreeNode

__all__ = ["TreeNavigator"]

# Action applied to the node found at a flat position
NodeAction = Callable[[TreeNode], None]


def _toggle(node: TreeNode) -> None:
    node.expanded = not node.expanded


def _expand(node: TreeNode) -> None:
    node.expanded = True


def _collapse(node: TreeNode) -> None:
    node.expanded = False


def _walk_visible(nodes: list[TreeNode], depth: int) -> Iterator[FlatNode]:
    for node in nodes:
        yield FlatNode(node=node, depth=depth)
        if node.expanded:
            yield from _walk_visible(node.children, depth + 1)


def _walk_all(nodes: list[TreeNode]) -> Iterator[TreeNode]:
    for node in nodes:
        yield node
        yield from _walk_all(node.children)


class TreeNavigator:
    """Cursor and expand/collapse state machine over a list of root nodes.

    Every node starts collapsed. A node without children is always
    effectively collapsed: actions on it are no-ops.

    The cursor satisfies ``0 <= cursor < max(1, visible_count())``. With an
    empty tree the cursor stays at 0 and ``selected_node()`` returns None.

    Example::

        nav = TreeNavigator(TreeBuilder().build_roots(schemas))
        nav.toggle_at_cursor()      # expand the first root
        nav.move_down()             # select its first child
        for row in nav.flatten():
            print("  " * row.depth + row.node.name)
    """

    def __init__(self, roots: list[TreeNode]) -> None:
        self._roots: list[TreeNode] = list(roots)
        self._cursor: int = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def roots(self) -> tuple[TreeNode, ...]:
        """The root nodes, in display order."""
        return tuple(self._roots)

    @property
    def cursor(self) -> int:
        """Index of the selected row within ``flatten()``."""
        return self._cursor

    # ------------------------------------------------------------------
    # Visible sequence
    # ------------------------------------------------------------------

    def flatten(self) -> list[FlatNode]:
        """Return the visible rows, depth-first and pre-order.

        A node's children are included only when the node is expanded.
        Roots have depth 0; each nesting level adds 1.
        """
        return list(_walk_visible(self._roots, 0))

    def visible_count(self) -> int:
        return len(self.flatten())

    def selected_node(self) -> TreeNode | None:
        """Return the node at the cursor, or None when the tree is empty."""
        rows = self.flatten()
        if 0 <= self._cursor < len(rows):
            return rows[self._cursor].node
        return None

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_down(self) -> None:
        if self._cursor < self._last_index():
            self._cursor += 1

    def goto_top(self) -> None:
        self._cursor = 0

    def goto_bottom(self) -> None:
        self._cursor = self._last_index()

    # ------------------------------------------------------------------
    # Expand / collapse
    # ------------------------------------------------------------------

    def toggle_at_cursor(self) -> None:
        """Flip the expanded flag of the selected node if it has children."""
        self._apply_at(self._cursor, _toggle)

    def expand_at_cursor(self) -> None:
        self._apply_at(self._cursor, _expand)

    def collapse_at_cursor(self) -> None:
        self._apply_at(self._cursor, _collapse)

    def expand_all(self) -> None:
        """Expand every expandable node, including currently hidden ones."""
        for node in _walk_all(self._roots):
            if node.is_expandable():
                node.expanded = True

    def collapse_all(self) -> None:
        """Collapse every node and move the cursor back to the first row.

        Rows deeper than the roots disappear, so any previous cursor position
        beyond the root count would no longer exist.
        """
        for node in _walk_all(self._roots):
            node.expanded = False
        self._cursor = 0

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _last_index(self) -> int:
        return max(self.visible_count() - 1, 0)

    def _apply_at(self, target: int, action: NodeAction) -> None:
        """Apply ``action`` to the expandable node at flat position ``target``.

        Walks the visible rows in the same order as ``flatten()``, counting
        entries and descending only into expanded nodes, until ``target`` is
        reached. Leaves and out-of-range positions are left untouched.
        """
        counter = 0
        stack: list[Iterator[TreeNode]] = [iter(self._roots)]
        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                continue
            if counter == target:
                if node.is_expandable():
                    action(node)
                return
            counter += 1
            if node.expanded:
                stack.append(iter(node.children))
