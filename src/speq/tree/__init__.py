"""Tree subpackage: the schema display tree and its navigation state.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing one entry in the display tree
- NodeKind: StrEnum of the eleven node kinds
- FlatNode: one visible (node, depth) row
- TreeBuilder: converts decoded schema descriptions into TreeNode trees
- TreeNavigator: expand/collapse state and cursor over the built tree
"""

from speq.tree.builder import TreeBuilder
from speq.tree.navigator import TreeNavigator
from speq.tree.nodes import FlatNode, NodeKind, TreeNode

__all__ = ["FlatNode", "NodeKind", "TreeBuilder", "TreeNavigator", "TreeNode"]
