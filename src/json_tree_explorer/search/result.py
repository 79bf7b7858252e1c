"""SearchMatch and SearchResult dataclasses for search output."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_tree_explorer.tree.path import JsonPath

__all__ = ["MatchKind", "SearchMatch", "SearchResult"]


class MatchKind(StrEnum):
    """What part of an entry matched the query.

    - KEY   -> "key"   : an object key, as seen from its parent
    - VALUE -> "value" : the canonical string form of a primitive
    """

    KEY = auto()
    VALUE = auto()


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """One search hit.

    Attributes:
        kind:          Whether the key or the value matched.
        path:          Full path from the document root to the matching entry.
        matched_key:   The object key, for KEY matches.
        matched_value: The primitive value, for VALUE matches.
    """

    kind: MatchKind
    path: JsonPath
    matched_key: str | None = None
    matched_value: Any = None

    @property
    def display_path(self) -> str:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Ordered, capped result of one search run.

    Attributes:
        query:     The query as supplied (before trimming).
        matches:   Matches in pre-order traversal order, at most ``max_results``.
        truncated: True when the result cap was reached and traversal stopped.
    """

    query: str = ""
    matches: tuple[SearchMatch, ...] = ()
    truncated: bool = False
    _routes: frozenset[JsonPath] = field(default=frozenset(), repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self) -> Iterator[SearchMatch]:
        return iter(self.matches)

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def matches_path(self, path: JsonPath) -> bool:
        """Return True if ``path`` equals or is an ancestor of some match path."""
        if self._routes:
            return path in self._routes
        return any(path.is_prefix_of(match.path) for match in self.matches)

    @classmethod
    def build(
        cls, query: str, matches: list[SearchMatch], truncated: bool
    ) -> SearchResult:
        """Create a result with the route index of every match precomputed."""
        routes = frozenset(
            prefix for match in matches for prefix in match.path.prefixes()
        )
        return cls(
            query=query, matches=tuple(matches), truncated=truncated, _routes=routes
        )
