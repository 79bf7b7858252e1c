"""SearchEngine: bounded, pre-order search over a parsed JSON document.

Traversal is depth-first and pre-order: object entries are visited in the
document's own key order, array items by increasing index.  Visiting an
entry first tests its key (objects only), then its value if the value is a
primitive, then descends into it if it is a container.

Three bounds are enforced while walking, never after the fact:
- ``max_depth``:   nodes deeper than this are not visited (root is depth 0)
- ``max_breadth``: only the first N children of each container are visited
- ``max_results``: traversal stops as soon as the cap is reached

The walk uses an explicit stack, so document depth never touches the
interpreter recursion limit.  Because traversal stops at the cap, a capped
result is always a prefix of the uncapped match sequence.
"""

from __future__ import annotations

import logging
import time
from itertools import islice
from typing import Any

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.search.result import MatchKind, SearchMatch, SearchResult
from json_tree_explorer.search.spans import contains
from json_tree_explorer.tree.classifier import format_primitive
from json_tree_explorer.tree.path import ROOT, JsonPath

__all__ = ["SearchEngine", "normalize_query"]

logger = logging.getLogger(__name__)

# (path, value, depth, key as seen from the parent or None)
_Frame = tuple[JsonPath, Any, int, str | None]


def normalize_query(query: str | None) -> str:
    """Return the trimmed query; empty when there is nothing to search for."""
    return (query or "").strip()


class SearchEngine:
    """Bounded substring search over keys and primitive values.

    Stateless apart from its configuration: calling :meth:`search` twice
    with the same document and query yields identical results.

    Example::

        engine = SearchEngine()
        result = engine.search({"x": 42, "y": "value42"}, "42")
        [str(m.path) for m in result]   # ['x', 'y']
    """

    def __init__(self, config: ExplorerConfig | None = None) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    def search(self, document: Any, query: str | None) -> SearchResult:
        """Search ``document`` for ``query``.

        Args:
            document: Parsed JSON value.  ``None`` means no document is loaded.
            query:    Raw query text; surrounding whitespace is ignored.

        Returns:
            A SearchResult with at most ``max_results`` matches.
        """
        needle = normalize_query(query)
        if not needle or document is None:
            return SearchResult(query=query or "")

        t0 = time.perf_counter()
        cfg = self._config
        matches: list[SearchMatch] = []
        truncated = False
        stack: list[_Frame] = [(ROOT, document, 0, None)]

        while stack:
            path, value, depth, key = stack.pop()
            try:
                children = self._visit(path, value, depth, key, needle, matches)
            except Exception:
                # A value that cannot be inspected contributes no match.
                logger.debug("Skipping uninspectable node at %r", str(path), exc_info=True)
                children = []
            if len(matches) >= cfg.max_results:
                del matches[cfg.max_results :]
                truncated = True
                break
            if children:
                stack.extend(reversed(children))

        result = SearchResult.build(query=query or "", matches=matches, truncated=truncated)
        logger.info(
            "Search %r: %d matches%s in %.1fms",
            needle,
            len(result),
            " (truncated)" if truncated else "",
            (time.perf_counter() - t0) * 1000.0,
        )
        return result

    def _visit(
        self,
        path: JsonPath,
        value: Any,
        depth: int,
        key: str | None,
        needle: str,
        matches: list[SearchMatch],
    ) -> list[_Frame]:
        """Test one entry and return its children to visit, in traversal order."""
        if key is not None and contains(key, needle):
            matches.append(SearchMatch(kind=MatchKind.KEY, path=path, matched_key=key))

        if isinstance(value, dict):
            if depth >= self._config.max_depth:
                return []
            return [
                (path.child(k), v, depth + 1, k)
                for k, v in islice(value.items(), self._config.max_breadth)
            ]
        if isinstance(value, list):
            if depth >= self._config.max_depth:
                return []
            return [
                (path.child(idx), item, depth + 1, None)
                for idx, item in enumerate(islice(value, self._config.max_breadth))
            ]

        if contains(format_primitive(value), needle):
            matches.append(
                SearchMatch(kind=MatchKind.VALUE, path=path, matched_value=value)
            )
        return []
