"""Highlight spans: where a query occurs inside a piece of text.

The query is always taken literally and compared case-insensitively; it is
never interpreted as a pattern.  Presentation decides how to emphasise the
returned ``(start, end)`` offsets.
"""

from __future__ import annotations

import re

__all__ = ["contains", "match_spans"]


def contains(text: str, query: str) -> bool:
    """Case-insensitive substring containment used for search matching."""
    return query.lower() in text.lower()


def match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(start, end)`` offsets of ``query`` in ``text``.

    Offsets index into ``text`` itself, scanning left to right.  An empty or
    whitespace-only query yields no spans.

    Example::

        match_spans("Value42 and 42", "42")   # [(5, 7), (12, 14)]
    """
    needle = query.strip()
    if not needle:
        return []
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return [m.span() for m in pattern.finditer(text)]
