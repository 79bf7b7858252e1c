"""TreeModel: orchestrator that wires classifier, expansion, windows and search.

This is the layer a renderer talks to.  It owns all mutable per-node state
(ExpansionState and WindowState, keyed by JsonPath) and answers, for any
path, what the node looks like right now: its kind, whether it is expanded,
which children are visible and whether it lies on the route to a search
match.

Architecture:
- node() builds a NodeView on demand from (value, path, depth); nothing is
  materialized ahead of time.
- walk() is the explicit tree walk a renderer uses instead of recursing
  through its own components; it only descends into expanded nodes and only
  through the children the window exposes.
- toggle_expanded() and load_more() are the only user-driven mutations;
  apply_search() and clear_search() change which nodes are forced open;
  apply_search() also grows array windows so every match is exposed.
- load() replaces the document and wipes every piece of per-path state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from json_tree_explorer.clipboard import copy_text
from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.loader import LoadedDocument
from json_tree_explorer.search.cache import SearchCache
from json_tree_explorer.search.engine import SearchEngine
from json_tree_explorer.search.result import SearchResult
from json_tree_explorer.search.spans import match_spans
from json_tree_explorer.tree.classifier import classify
from json_tree_explorer.tree.expansion import ExpansionState
from json_tree_explorer.tree.nodes import NodeView
from json_tree_explorer.tree.path import ROOT, JsonPath
from json_tree_explorer.tree.window import WindowState

__all__ = ["TreeModel"]

logger = logging.getLogger(__name__)

_NO_RESULT = SearchResult()


class TreeModel:
    """Lazy, path-addressed view model over one parsed JSON document.

    Example::

        model = TreeModel({"a": {"b": 1, "c": [1, 2, 3]}})
        model.is_expanded(JsonPath(("a",)))        # True  (depth 1)
        model.is_expanded(JsonPath(("a", "c")))    # False (depth 2)
        [view.name for view in model.walk()]       # ['root', 'a', 'b', 'c']
    """

    def __init__(
        self,
        document: Any = None,
        is_large_document: bool = False,
        config: ExplorerConfig | None = None,
        root_name: str = "root",
    ) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._document: Any = document
        self._root_name = root_name
        self._expansion = ExpansionState(is_large_document, self._config)
        self._windows = WindowState(is_large_document, self._config)
        self._search = SearchCache(
            SearchEngine(self._config), max_size=self._config.search_cache_size
        )
        self._result: SearchResult = _NO_RESULT

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def document(self) -> Any:
        return self._document

    @property
    def is_large_document(self) -> bool:
        return self._windows.is_large_document

    @property
    def root_name(self) -> str:
        return self._root_name

    @property
    def search_result(self) -> SearchResult:
        return self._result

    @property
    def query(self) -> str:
        return self._result.query

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def load(
        self,
        document: Any,
        is_large_document: bool = False,
        root_name: str = "root",
    ) -> None:
        """Replace the document, resetting every expansion, window and search."""
        self._document = document
        self._root_name = root_name
        self._reset_state(is_large_document)
        logger.debug("Tree model loaded (large=%s)", is_large_document)

    def load_document(self, loaded: LoadedDocument) -> None:
        self.load(loaded.value, loaded.is_large, loaded.root_label)

    def set_large_document(self, is_large_document: bool) -> None:
        """Switch the large-document flag; all per-path state starts over."""
        if is_large_document != self.is_large_document:
            self._reset_state(is_large_document)

    def clear(self) -> None:
        """Unload the document."""
        self.load(None, self.is_large_document)

    def _reset_state(self, is_large_document: bool) -> None:
        self._expansion.reset(is_large_document)
        self._windows.reset(is_large_document)
        self._search.clear()
        self._result = _NO_RESULT

    # ------------------------------------------------------------------
    # Node queries
    # ------------------------------------------------------------------

    def value_at(self, path: JsonPath) -> Any:
        """Return the value at ``path``.

        Raises:
            KeyError: If there is no document or the path does not exist.
        """
        if self._document is None:
            raise KeyError("No document loaded")
        return path.resolve(self._document)

    def node(self, path: JsonPath = ROOT) -> NodeView:
        """Return the current NodeView of the node at ``path``."""
        value = self.value_at(path)
        return self._view(path, value, self._name_of(path))

    def matches_search(self, path: JsonPath) -> bool:
        """True when ``path`` equals or is an ancestor of some current match."""
        return not self._result.is_empty and self._result.matches_path(path)

    def is_expanded(self, path: JsonPath) -> bool:
        value = self.value_at(path)
        if not isinstance(value, (dict, list)):
            return False
        return self._expansion.is_expanded(path, forced=self.matches_search(path))

    def can_load_more(self, path: JsonPath) -> bool:
        return self._windows.can_load_more(path, self.value_at(path))

    def walk(self) -> Iterator[NodeView]:
        """Yield the NodeView of every visible node, in display (pre-)order."""
        if self._document is None:
            return
        stack: list[tuple[JsonPath, Any, str]] = [(ROOT, self._document, self._root_name)]
        while stack:
            path, value, name = stack.pop()
            view = self._view(path, value, name)
            yield view
            stack.extend(
                (child.path, child.value, child.name)
                for child in reversed(view.visible_children)
            )

    def highlight_spans(self, text: str) -> list[tuple[int, int]]:
        """Offsets in ``text`` where the active query occurs."""
        return match_spans(text, self._result.query)

    def copy_text(self, path: JsonPath = ROOT) -> str:
        """Text the copy action places on the clipboard for the node at ``path``."""
        return copy_text(self.value_at(path))

    def _name_of(self, path: JsonPath) -> str:
        if not path:
            return self._root_name
        last = path[-1]
        return f"[{last}]" if isinstance(last, int) else last

    def _view(self, path: JsonPath, value: Any, name: str) -> NodeView:
        cls = classify(value)
        matched = self.matches_search(path)
        if not cls.is_container:
            return NodeView(
                path=path,
                name=name,
                depth=path.depth,
                kind=cls.kind,
                child_count=0,
                is_expanded=False,
                visible_children=(),
                matches_search=matched,
                value=value,
            )

        expanded = self._expansion.is_expanded(path, forced=matched)
        children = self._windows.visible_children(path, value) if expanded else ()
        visible = self._windows.visible_count(path, value)
        remaining = cls.child_count - visible
        windowed = self._windows.is_windowed(value)
        spans_pages = windowed and cls.child_count > self._windows.page_size
        return NodeView(
            path=path,
            name=name,
            depth=path.depth,
            kind=cls.kind,
            child_count=cls.child_count,
            is_expanded=expanded,
            visible_children=children,
            matches_search=matched,
            visible_count=visible,
            can_load_more=remaining > 0,
            remaining=remaining,
            next_page=min(self._windows.page_size, remaining),
            all_loaded=spans_pages and remaining == 0,
            showing_first=spans_pages and not expanded,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle_expanded(self, path: JsonPath) -> bool:
        """Flip the expansion of the container at ``path``; return the new state.

        Raises:
            KeyError: If the path does not exist.
            ValueError: If the node is a primitive.
        """
        value = self.value_at(path)
        if not isinstance(value, (dict, list)):
            msg = f"Cannot toggle primitive node {str(path)!r}"
            raise ValueError(msg)
        return self._expansion.toggle(path, forced=self.matches_search(path))

    def load_more(self, path: JsonPath) -> int:
        """Expose one more page of the array at ``path``; return the visible count."""
        return self._windows.load_more(path, self.value_at(path))

    def apply_search(self, query: str | None) -> SearchResult:
        """Run ``query`` now and make its matches drive forced expansion."""
        self._result = self._search.search(self._document, query)
        self._expansion.clear_overrides()
        self._reveal_matches()
        return self._result

    def clear_search(self) -> None:
        """Drop the active search; every node returns to its stored or default state."""
        self._result = _NO_RESULT
        self._expansion.clear_overrides()

    def _reveal_matches(self) -> None:
        # Forced-open arrays must also expose the matched items.
        if not self.is_large_document:
            return
        for match in self._result:
            value = self._document
            for depth, segment in enumerate(match.path):
                if isinstance(segment, int) and isinstance(value, list):
                    self._windows.reveal(JsonPath(match.path[:depth]), value, segment)
                value = value[segment]
