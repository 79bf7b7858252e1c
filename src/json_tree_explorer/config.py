"""ExplorerConfig: the tunable bounds of the lazy tree model and search engine.

ExplorerConfig is a frozen (immutable) dataclass.  The defaults suit an
interactive viewer; the relative roles of the bounds (depth cap,
breadth cap, result cap, page size) are fixed, only their values vary.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExplorerConfig"]


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Immutable configuration shared by every explorer component.

    Attributes:
        max_depth: Deepest node level the search engine descends into.
            The root is depth 0.
        max_breadth: Children inspected per container during search, taken
            from the front in traversal order.
        max_results: Maximum number of matches a search returns.
        page_size: Visible-count increment for array windows in large documents.
        large_file_threshold: Source size in bytes above which a document is
            treated as large.
        small_expand_depth: Nodes shallower than this are expanded by default
            in small documents.
        large_expand_depth: Nodes shallower than this are expanded by default
            in large documents.
        search_debounce: Quiescence delay in seconds before a search runs.
        load_defer: Delay in seconds before a newly opened document is parsed.
        search_cache_size: Number of query results memoized per document.
    """

    max_depth: int = 50
    max_breadth: int = 1000
    max_results: int = 1000
    page_size: int = 100
    large_file_threshold: int = 5 * 1024 * 1024
    small_expand_depth: int = 2
    large_expand_depth: int = 1
    search_debounce: float = 0.3
    load_defer: float = 0.1
    search_cache_size: int = 64

    def __post_init__(self) -> None:
        for name in ("max_depth", "max_breadth", "max_results", "page_size"):
            value = getattr(self, name)
            if value < 1:
                msg = f"{name} must be >= 1, got {value}"
                raise ValueError(msg)
        if self.large_file_threshold < 0:
            msg = f"large_file_threshold must be >= 0, got {self.large_file_threshold}"
            raise ValueError(msg)
        for name in ("small_expand_depth", "large_expand_depth", "search_cache_size"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)
        for name in ("search_debounce", "load_defer"):
            value = getattr(self, name)
            if value < 0.0:
                msg = f"{name} must be >= 0.0, got {value}"
                raise ValueError(msg)

    def is_large(self, size_bytes: int) -> bool:
        """Return True when a source of ``size_bytes`` counts as a large document."""
        return size_bytes > self.large_file_threshold
