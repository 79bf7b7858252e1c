"""Window controller: bounded, growable exposure of array children.

Arrays in large documents expose one page of items at first and grow by a
page per load-more call, saturating at the array length.  Objects are never
windowed, and small documents always expose every array item.  Visible
counts never shrink except when the whole store is reset for a new document
or a change of the large-document flag.
"""

from __future__ import annotations

import logging
from typing import Any

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.tree.classifier import child_count
from json_tree_explorer.tree.nodes import ChildEntry
from json_tree_explorer.tree.path import JsonPath

__all__ = ["WindowState"]

logger = logging.getLogger(__name__)


class WindowState:
    """Path-keyed visible counts for array windows.

    Args:
        is_large_document: Whether windowing is active at all.
        config: Supplies ``page_size``.  Defaults to ``ExplorerConfig()``.
    """

    def __init__(
        self,
        is_large_document: bool = False,
        config: ExplorerConfig | None = None,
    ) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._is_large = is_large_document
        self._counts: dict[JsonPath, int] = {}

    @property
    def page_size(self) -> int:
        return self._config.page_size

    @property
    def is_large_document(self) -> bool:
        return self._is_large

    def __len__(self) -> int:
        return len(self._counts)

    def is_windowed(self, container: Any) -> bool:
        """Return True if ``container`` is subject to windowing."""
        return self._is_large and isinstance(container, list)

    def visible_count(self, path: JsonPath, container: Any) -> int:
        """Return how many children of ``container`` are currently exposed."""
        total = child_count(container)
        if not self.is_windowed(container):
            return total
        count = self._counts.get(path)
        if count is None:
            count = min(self._config.page_size, total)
            self._counts[path] = count
        return min(count, total)

    def can_load_more(self, path: JsonPath, container: Any) -> bool:
        return self.visible_count(path, container) < child_count(container)

    def remaining(self, path: JsonPath, container: Any) -> int:
        return child_count(container) - self.visible_count(path, container)

    def load_more(self, path: JsonPath, container: Any) -> int:
        """Grow the window at ``path`` by one page and return the new count.

        A no-op for unwindowed containers and windows already covering the
        whole array.
        """
        current = self.visible_count(path, container)
        if not self.is_windowed(container):
            return current
        new_count = min(current + self._config.page_size, len(container))
        self._counts[path] = new_count
        logger.debug("Window %r grown %d -> %d of %d", str(path), current, new_count, len(container))
        return new_count

    def reveal(self, path: JsonPath, container: Any, index: int) -> int:
        """Grow the window at ``path`` in whole pages until item ``index`` is exposed.

        Never shrinks the window; returns the resulting visible count.
        """
        current = self.visible_count(path, container)
        if not self.is_windowed(container) or index < current:
            return current
        page = self._config.page_size
        pages = (index + page) // page
        new_count = min(pages * page, len(container))
        self._counts[path] = new_count
        logger.debug("Window %r grown %d -> %d to reveal [%d]", str(path), current, new_count, index)
        return new_count

    def visible_children(self, path: JsonPath, container: Any) -> tuple[ChildEntry, ...]:
        """Return the ordered children of ``container`` the window exposes.

        Object entries are named by key and appear in document order; array
        items are named ``[i]``.  Primitives have no children.
        """
        if isinstance(container, dict):
            return tuple(
                ChildEntry(name=str(key), path=path.child(str(key)), value=val)
                for key, val in container.items()
            )
        if isinstance(container, list):
            count = self.visible_count(path, container)
            return tuple(
                ChildEntry(name=f"[{idx}]", path=path.child(idx), value=container[idx])
                for idx in range(count)
            )
        return ()

    def reset(self, is_large_document: bool | None = None) -> None:
        """Drop every stored count, optionally switching the large-document flag."""
        if is_large_document is not None:
            self._is_large = is_large_document
        self._counts.clear()
