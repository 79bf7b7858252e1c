"""Expansion policy and the path-keyed expansion store.

Default expansion is shallow: a large document only opens the root, a small
one opens the root and its immediate children.  Nodes on the route to a
search match are forced open on top of that, without the forced state ever
being written into the store, so clearing the search restores exactly the
state observed before it.
"""

from __future__ import annotations

import logging

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.tree.path import JsonPath

__all__ = ["ExpansionState", "default_expanded"]

logger = logging.getLogger(__name__)


def default_expanded(
    depth: int,
    is_large_document: bool,
    config: ExplorerConfig | None = None,
) -> bool:
    """Return the default expansion of a node at ``depth``.

    With the default config: ``depth < 1`` for large documents, ``depth < 2``
    otherwise.
    """
    cfg = config if config is not None else ExplorerConfig()
    limit = cfg.large_expand_depth if is_large_document else cfg.small_expand_depth
    return depth < limit


class ExpansionState:
    """Central store of expand/collapse state, keyed by JsonPath.

    Entries are created lazily from the default policy the first time a node
    is observed, then only change through :meth:`toggle`.  A separate set
    records nodes the user collapsed while a search was forcing them open;
    that set is dropped whenever the search results change.

    Example::

        state = ExpansionState(is_large_document=False)
        state.observe(JsonPath(("a",)))        # True (depth 1 < 2)
        state.toggle(JsonPath(("a",)))         # False
    """

    def __init__(
        self,
        is_large_document: bool = False,
        config: ExplorerConfig | None = None,
    ) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._is_large = is_large_document
        self._stored: dict[JsonPath, bool] = {}
        self._suppressed: set[JsonPath] = set()

    @property
    def is_large_document(self) -> bool:
        return self._is_large

    def __len__(self) -> int:
        return len(self._stored)

    def __contains__(self, path: object) -> bool:
        return path in self._stored

    def observe(self, path: JsonPath) -> bool:
        """Return the stored state of ``path``, populating it from the default first."""
        stored = self._stored.get(path)
        if stored is None:
            stored = default_expanded(path.depth, self._is_large, self._config)
            self._stored[path] = stored
        return stored

    def is_expanded(self, path: JsonPath, forced: bool = False) -> bool:
        """Resolve the effective state of ``path``.

        Args:
            path:   The node address.
            forced: True when the node lies on the route to a search match.
        """
        if forced:
            return path not in self._suppressed
        return self.observe(path)

    def toggle(self, path: JsonPath, forced: bool = False) -> bool:
        """Flip the effective state of ``path`` and return the new state.

        A node held open by the search is collapsed by suppressing the
        override; toggling it again lifts the suppression.  The stored
        state is left untouched in both cases.
        """
        if forced:
            if path in self._suppressed:
                self._suppressed.discard(path)
                return True
            self._suppressed.add(path)
            return False
        new_state = not self.observe(path)
        self._stored[path] = new_state
        logger.debug("Toggled %r -> %s", str(path), new_state)
        return new_state

    def clear_overrides(self) -> None:
        """Forget every collapse the user made against a forced expansion."""
        self._suppressed.clear()

    def reset(self, is_large_document: bool | None = None) -> None:
        """Drop all state, optionally switching the large-document flag."""
        if is_large_document is not None:
            self._is_large = is_large_document
        self._stored.clear()
        self._suppressed.clear()
