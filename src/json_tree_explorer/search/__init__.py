"""Search subpackage: bounded document search and its support pieces.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_tree_explorer.search import SearchEngine

    result = SearchEngine().search({"x": 42, "y": "value42"}, "42")
    len(result)   # 2
"""

from __future__ import annotations

from json_tree_explorer.search.cache import SearchCache
from json_tree_explorer.search.debounce import AsyncioScheduler, Debouncer
from json_tree_explorer.search.engine import SearchEngine, normalize_query
from json_tree_explorer.search.result import MatchKind, SearchMatch, SearchResult
from json_tree_explorer.search.spans import contains, match_spans

__all__ = [
    "AsyncioScheduler",
    "Debouncer",
    "MatchKind",
    "SearchCache",
    "SearchEngine",
    "SearchMatch",
    "SearchResult",
    "contains",
    "match_spans",
    "normalize_query",
]
