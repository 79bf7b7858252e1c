"""NodeKind StrEnum and the derived node records of the tree model.

Classification is what the classifier knows about a bare value; NodeView is
the transient per-node projection the tree model hands to a renderer.
Neither is persisted: both are recomputed on demand from the document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_tree_explorer.tree.path import JsonPath

__all__ = ["ChildEntry", "Classification", "NodeKind", "NodeView"]


class NodeKind(StrEnum):
    """The six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"   : container
    - OBJECT  -> "object"  : container
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.ARRAY, NodeKind.OBJECT)


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying a single JSON value.

    Attributes:
        kind:        Which of the six JSON kinds the value is.
        child_count: Number of elements (arrays) or keys (objects); 0 for primitives.
    """

    kind: NodeKind
    child_count: int = 0

    @property
    def is_container(self) -> bool:
        return self.kind.is_container


@dataclass(frozen=True, slots=True)
class ChildEntry:
    """One child exposed by a container: display name, address and value."""

    name: str
    path: JsonPath
    value: Any


@dataclass(frozen=True, slots=True)
class NodeView:
    """Everything a rendering layer needs to draw one node.

    Attributes:
        path:              Structural address of the node.
        name:              Display name ("root"/"records", an object key, or "[i]").
        depth:             Distance from the root (root is 0).
        kind:              The node's JSON kind.
        child_count:       True number of children; 0 for primitives.
        is_expanded:       Effective expansion (stored, default, or forced by search).
        visible_children:  Children to recurse into; empty when collapsed or primitive.
        matches_search:    True when this node is on the route to a search match.
        value:             Raw value for primitives; None for containers.
        visible_count:     How many array items the window exposes (child_count otherwise).
        can_load_more:     True when the array window hides some items.
        remaining:         Items not yet exposed by the window.
        next_page:         Items the next load-more call will add.
        all_loaded:        Large-document array longer than one page, now fully shown.
        showing_first:     Collapsed large-document array longer than one page.
    """

    path: JsonPath
    name: str
    depth: int
    kind: NodeKind
    child_count: int
    is_expanded: bool
    visible_children: tuple[ChildEntry, ...]
    matches_search: bool
    value: Any = None
    visible_count: int = 0
    can_load_more: bool = False
    remaining: int = 0
    next_page: int = 0
    all_loaded: bool = False
    showing_first: bool = False

    @property
    def is_container(self) -> bool:
        return self.kind.is_container
