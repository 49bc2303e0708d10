"""Tests for TreeNode dataclass and NodeKind StrEnum.

Verifies:
- NodeKind has exactly 11 members with their display values
- TreeNode constructs correctly with defaults and all fields
- Each TreeNode instance gets independent mutable lists
- is_expandable depends only on children
- type_label renders references with their target
"""

import pytest

from speq.tree.nodes import FlatNode, NodeKind, TreeNode


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_eleven_members(self) -> None:
        assert len(NodeKind) == 11

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    @pytest.mark.parametrize(
        ("kind", "value"),
        [
            (NodeKind.OBJECT, "object"),
            (NodeKind.ARRAY, "array"),
            (NodeKind.STRING, "string"),
            (NodeKind.INTEGER, "integer"),
            (NodeKind.NUMBER, "number"),
            (NodeKind.BOOLEAN, "boolean"),
            (NodeKind.ALL_OF, "allOf"),
            (NodeKind.ONE_OF, "oneOf"),
            (NodeKind.ANY_OF, "anyOf"),
            (NodeKind.UNKNOWN, "?"),
        ],
    )
    def test_values(self, kind: NodeKind, value: str) -> None:
        assert kind == value


class TestTreeNode:
    """Tests for the TreeNode dataclass."""

    def test_defaults(self) -> None:
        node = TreeNode(name="id", kind=NodeKind.INTEGER)
        assert node.ref_target == ""
        assert node.format is None
        assert node.description is None
        assert node.example is None
        assert node.default is None
        assert node.required is False
        assert node.constraints == []
        assert node.enum_values == []
        assert node.children == []
        assert node.expanded is False

    def test_construction_with_all_fields(self) -> None:
        child = TreeNode(name="items", kind=NodeKind.STRING)
        node = TreeNode(
            name="tags",
            kind=NodeKind.ARRAY,
            description="Tags",
            example='["a"]',
            default="[]",
            required=True,
            constraints=["minItems: 1"],
            children=[child],
            expanded=True,
        )
        assert node.name == "tags"
        assert node.kind is NodeKind.ARRAY
        assert node.required is True
        assert node.constraints == ["minItems: 1"]
        assert node.children[0] is child
        assert node.expanded is True

    def test_independent_lists(self) -> None:
        a = TreeNode(name="a", kind=NodeKind.OBJECT)
        b = TreeNode(name="b", kind=NodeKind.OBJECT)
        a.children.append(TreeNode(name="x", kind=NodeKind.STRING))
        a.constraints.append("minProperties: 1")
        a.enum_values.append("1")
        assert b.children == []
        assert b.constraints == []
        assert b.enum_values == []

    def test_equality_is_identity(self) -> None:
        a = TreeNode(name="a", kind=NodeKind.STRING)
        b = TreeNode(name="a", kind=NodeKind.STRING)
        assert a != b
        assert len({a, b}) == 2


class TestExpandable:
    def test_leaf_is_not_expandable(self) -> None:
        node = TreeNode(name="x", kind=NodeKind.OBJECT, expanded=True)
        assert not node.is_expandable()

    def test_node_with_children_is_expandable(self) -> None:
        node = TreeNode(
            name="x",
            kind=NodeKind.OBJECT,
            children=[TreeNode(name="y", kind=NodeKind.STRING)],
        )
        assert node.is_expandable()


class TestTypeLabel:
    def test_reference_shows_target(self) -> None:
        node = TreeNode(name="items", kind=NodeKind.REF, ref_target="Pet")
        assert node.type_label() == "→Pet"

    def test_unknown(self) -> None:
        assert TreeNode(name="x", kind=NodeKind.UNKNOWN).type_label() == "?"

    def test_composition(self) -> None:
        assert TreeNode(name="x", kind=NodeKind.ONE_OF).type_label() == "oneOf"

    def test_primitive(self) -> None:
        assert TreeNode(name="x", kind=NodeKind.INTEGER).type_label() == "integer"


class TestFlatNode:
    def test_holds_node_and_depth(self) -> None:
        node = TreeNode(name="x", kind=NodeKind.STRING)
        row = FlatNode(node=node, depth=2)
        assert row.node is node
        assert row.depth == 2
