"""Shared fixtures: the petstore document and small schema trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from speq.parser import load_spec
from speq.spec import LoadedSpec
from speq.tree.builder import TreeBuilder
from speq.tree.nodes import NodeKind, TreeNode

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def petstore_path() -> Path:
    return FIXTURES / "petstore.yaml"


@pytest.fixture
def petstore(petstore_path: Path) -> LoadedSpec:
    """The petstore fixture loaded from disk."""
    return load_spec(petstore_path)


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


@pytest.fixture
def pet_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "required": ["id", "name"],
        "properties": {
            "id": {"type": "integer", "format": "int64"},
            "name": {"type": "string"},
            "tag": {"type": "string"},
        },
    }


def leaf(name: str, kind: NodeKind = NodeKind.STRING) -> TreeNode:
    return TreeNode(name=name, kind=kind)


def branch(name: str, *children: TreeNode) -> TreeNode:
    return TreeNode(name=name, kind=NodeKind.OBJECT, children=list(children))


@pytest.fixture
def sample_roots() -> list[TreeNode]:
    """Three roots shaped like::

        A            (object)
          a1         (object)
            a1x      (leaf)
            a1y      (leaf)
          a2         (leaf)
        B            (leaf)
        C            (object)
          c1         (leaf)
    """
    return [
        branch("A", branch("a1", leaf("a1x"), leaf("a1y")), leaf("a2")),
        leaf("B"),
        branch("C", leaf("c1")),
    ]
