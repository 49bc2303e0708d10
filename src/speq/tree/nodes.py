"""TreeNode dataclass and NodeKind StrEnum for the schema display tree.

Provides the foundational data types used by TreeBuilder to convert decoded
schema descriptions into a tree of display nodes, and by TreeNavigator to
flatten that tree into visible rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

__all__ = ["FlatNode", "NodeKind", "TreeNode"]


class NodeKind(StrEnum):
    """Enumeration of the eleven kinds a schema tree node can take.

    Values are the labels used for display:
    - OBJECT  -> "object"  : object schema, one child per property
    - ARRAY   -> "array"   : array schema, at most one "items" child
    - STRING  -> "string"  : string primitive
    - INTEGER -> "integer" : integer primitive
    - NUMBER  -> "number"  : number primitive
    - BOOLEAN -> "boolean" : boolean primitive
    - REF     -> "ref"     : named link to another schema, never inlined
    - ALL_OF  -> "allOf"   : composition, one child per branch
    - ONE_OF  -> "oneOf"
    - ANY_OF  -> "anyOf"
    - UNKNOWN -> "?"       : any shape not matching the kinds above
    """

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    REF = "ref"
    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    UNKNOWN = "?"


@dataclass(slots=True, eq=False)
class TreeNode:
    """A node in the schema display tree.

    Equality is identity: two nodes built from identical schemas are still
    distinct rows in the tree.

    Attributes:
        name:         Property name, "items", "[i]" for composition branches,
                      or the schema name for roots.
        kind:         Which kind of node this is (see NodeKind).
        ref_target:   Target schema name for REF nodes; empty for all others.
        format:       Secondary type hint (e.g. "int64", "date-time"); only
                      set for STRING, INTEGER and NUMBER nodes.
        description:  Free-text description, if declared.
        example:      Example value rendered as a display string.
        default:      Default value rendered as a display string.
        required:     Whether the parent object lists this node's name as
                      required. Fixed at construction.
        constraints:  Human-readable bound descriptions in per-kind order.
        enum_values:  Permitted literals in source order.
        children:     Child nodes. Must use field(default_factory=list) so
                      each instance gets its own list.
        expanded:     Expand/collapse flag; meaningless without children.
    """

    name: str
    kind: NodeKind
    ref_target: str = ""
    format: str | None = None
    description: str | None = None
    example: str | None = None
    default: str | None = None
    required: bool = False
    constraints: list[str] = field(default_factory=list)
    enum_values: list[str] = field(default_factory=list)
    children: list[TreeNode] = field(default_factory=list)
    expanded: bool = False

    def is_expandable(self) -> bool:
        """Return True when the node has at least one child."""
        return bool(self.children)

    def type_label(self) -> str:
        """Return the short type label shown next to the node's name."""
        if self.kind is NodeKind.REF:
            return f"→{self.ref_target}"
        return str(self.kind)


@dataclass(frozen=True, slots=True)
class FlatNode:
    """One visible row of the flattened tree: a node and its nesting depth."""

    node: TreeNode
    depth: int
