"""SearchCache: LRU-backed memoization of search results for one document.

Wraps a SearchEngine and caches ``SearchResult`` objects by trimmed query.
The cache is bound to a single document: handing it a different document
object drops every cached entry first, so results from a previous document
can never leak into a new one.

Example::

    from json_tree_explorer.search import SearchCache, SearchEngine

    cache = SearchCache(SearchEngine(), max_size=64)
    cache.search(doc, "name")   # walks the document
    cache.search(doc, "name")   # served from memory
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from cachetools import LRUCache

from json_tree_explorer.search.engine import SearchEngine, normalize_query
from json_tree_explorer.search.result import SearchResult

__all__ = ["SearchCache"]

logger = logging.getLogger(__name__)


class SearchCache:
    """LRU-backed caching proxy around a SearchEngine.

    Args:
        engine: The engine that performs uncached searches.
        max_size: Maximum number of query results held.  ``0`` disables caching.
    """

    def __init__(self, engine: SearchEngine, max_size: int = 64) -> None:
        self._engine = engine
        self._max_size = max_size
        self._cache: LRUCache[str, SearchResult] | None = (
            LRUCache(maxsize=max_size) if max_size > 0 else None
        )
        self._document: Any = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize) if self._cache is not None else 0

    # ------------------------------------------------------------------
    # Search surface
    # ------------------------------------------------------------------

    def search(self, document: Any, query: str | None) -> SearchResult:
        """Return the result for ``query`` over ``document``, computing it at most once."""
        if document is not self._document:
            self.clear()
            self._document = document

        needle = normalize_query(query)
        if self._cache is None or not needle:
            return self._engine.search(document, query)

        cached = self._cache.get(needle)
        if cached is not None:
            logger.debug("Search cache hit for %r", needle)
            if cached.query != query:
                cached = replace(cached, query=query or "")
            return cached

        result = self._engine.search(document, query)
        self._cache[needle] = result
        return result

    def clear(self) -> None:
        """Drop every cached result and forget the bound document."""
        if self._cache is not None:
            self._cache.clear()
        self._document = None
