"""speq - an interactive terminal browser for OpenAPI and Swagger schemas."""

from __future__ import annotations

from speq.app import App, Command, Pane
from speq.config import ViewerConfig
from speq.errors import SpecParseError, SpecReadError, SpecVersionError, SpeqError
from speq.parser import load_spec, parse_spec
from speq.spec import LoadedSpec, SpecVersion
from speq.tree import FlatNode, NodeKind, TreeBuilder, TreeNavigator, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "App",
    "Command",
    "FlatNode",
    "LoadedSpec",
    "NodeKind",
    "Pane",
    "SpecParseError",
    "SpecReadError",
    "SpecVersion",
    "SpecVersionError",
    "SpeqError",
    "TreeBuilder",
    "TreeNavigator",
    "TreeNode",
    "ViewerConfig",
    "load_spec",
    "parse_spec",
]
