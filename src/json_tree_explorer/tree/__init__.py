"""Tree subpackage: addressing, classification and per-node state.

Re-exports the public API for the tree module:
- JsonPath / format_path / parse_path: structural node addresses
- NodeKind, Classification, NodeView, ChildEntry: node records
- classify / format_primitive / display_text: the node classifier
- ExpansionState / default_expanded: the expansion policy and store
- WindowState: array windowing for large documents
"""

from json_tree_explorer.tree.classifier import (
    child_count,
    classify,
    display_text,
    format_primitive,
    is_container,
)
from json_tree_explorer.tree.expansion import ExpansionState, default_expanded
from json_tree_explorer.tree.nodes import ChildEntry, Classification, NodeKind, NodeView
from json_tree_explorer.tree.path import ROOT, JsonPath, Segment, format_path, parse_path
from json_tree_explorer.tree.window import WindowState

__all__ = [
    "ROOT",
    "ChildEntry",
    "Classification",
    "ExpansionState",
    "JsonPath",
    "NodeKind",
    "NodeView",
    "Segment",
    "WindowState",
    "child_count",
    "classify",
    "default_expanded",
    "display_text",
    "format_path",
    "format_primitive",
    "is_container",
    "parse_path",
]
