"""JsonPath: structural addresses of nodes inside a JSON value.

A path is an ordered sequence of segments from the document root: ``str``
segments name object keys, ``int`` segments index arrays.  Paths are the
identity under which expansion and window state are stored, so they are
immutable and hashable.

Display form (deterministic, parseable by :func:`parse_path`):
- Root is "" (empty string)
- Keys are dot-joined: ``a.b.c``
- Indices use brackets: ``items[0].name``
- Keys that are empty or contain ``.``, ``[``, ``]`` or ``"`` are written
  as a quoted bracket segment: ``a["x.y"]``
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable

__all__ = ["ROOT", "JsonPath", "Segment", "format_path", "parse_path"]

Segment = str | int

_NEEDS_QUOTING = re.compile(r'[.\[\]"]')

# One segment of a display path: ``[12]``, ``["quoted key"]``, ``.key`` or a leading bare key.
_TOKEN = re.compile(r'\[(\d+)\]|\[("(?:[^"\\]|\\.)*")\]|\.?([^.\[\]"]+)')


class JsonPath(tuple[Segment, ...]):
    """Immutable, hashable sequence of key/index segments.

    Equality is plain tuple equality: same length and pairwise-equal
    segments.  ``bool`` is rejected as a segment because it would compare
    equal to the indices 0 and 1.

    Example::

        path = JsonPath(("users", 3, "name"))
        str(path)                            # 'users[3].name'
        path.parent                          # JsonPath(('users', 3))
        JsonPath(("users",)).is_prefix_of(path)  # True
    """

    __slots__ = ()

    def __new__(cls, segments: Iterable[Segment] = ()) -> JsonPath:
        items = tuple(segments)
        for seg in items:
            if isinstance(seg, bool) or not isinstance(seg, (str, int)):
                msg = f"Path segments must be str or int, got {type(seg)!r}"
                raise TypeError(msg)
        return super().__new__(cls, items)

    def child(self, segment: Segment) -> JsonPath:
        """Return the path one level below this one."""
        return JsonPath((*self, segment))

    @property
    def parent(self) -> JsonPath | None:
        """The enclosing path, or None for the root."""
        if not self:
            return None
        return JsonPath(self[:-1])

    @property
    def depth(self) -> int:
        """Number of segments; the root has depth 0."""
        return len(self)

    def is_prefix_of(self, other: JsonPath) -> bool:
        """Return True if ``other`` equals this path or lies beneath it."""
        return len(other) >= len(self) and other[: len(self)] == tuple(self)

    def prefixes(self) -> Iterable[JsonPath]:
        """Yield every ancestor path, root first, ending with this path itself."""
        for end in range(len(self) + 1):
            yield JsonPath(self[:end])

    def resolve(self, document: object) -> object:
        """Return the value this path addresses inside ``document``.

        Raises:
            KeyError: If a segment does not exist in the document.
        """
        value = document
        for seg in self:
            try:
                if isinstance(seg, int) and isinstance(value, list):
                    value = value[seg]
                elif isinstance(seg, str) and isinstance(value, dict):
                    value = value[seg]
                else:
                    raise KeyError(seg)
            except (IndexError, KeyError):
                msg = f"Path {format_path(self)!r} does not exist in the document"
                raise KeyError(msg) from None
        return value

    def __str__(self) -> str:
        return format_path(self)

    def __repr__(self) -> str:
        return f"JsonPath({tuple(self)!r})"


ROOT = JsonPath()


def format_path(path: Iterable[Segment]) -> str:
    """Render a path in its display form (see module docstring)."""
    parts: list[str] = []
    for seg in path:
        if isinstance(seg, int):
            parts.append(f"[{seg}]")
        elif not seg or _NEEDS_QUOTING.search(seg):
            parts.append(f"[{json.dumps(seg, ensure_ascii=False)}]")
        elif parts:
            parts.append(f".{seg}")
        else:
            parts.append(seg)
    return "".join(parts)


def parse_path(text: str) -> JsonPath:
    """Parse a display-form path back into a JsonPath.

    Raises:
        ValueError: If ``text`` is not a well-formed display path.
    """
    segments: list[Segment] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None or (match.group(3) is not None and pos > 0 and text[pos] != "."):
            msg = f"Malformed path {text!r} at offset {pos}"
            raise ValueError(msg)
        index, quoted, key = match.groups()
        if index is not None:
            segments.append(int(index))
        elif quoted is not None:
            segments.append(json.loads(quoted))
        else:
            segments.append(key)
        pos = match.end()
    return JsonPath(segments)
