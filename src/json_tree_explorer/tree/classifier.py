"""Node classifier: maps any JSON value to its NodeKind and derived facts.

Also owns the canonical string forms of primitives, shared by search
matching, copy text and display.  The forms follow what a browser shows for
the same parsed document, so a float that holds an integral value prints
without a fractional part.
"""

from __future__ import annotations

import math
import re
from typing import Any

from json_tree_explorer.tree.nodes import Classification, NodeKind

__all__ = [
    "child_count",
    "classify",
    "display_text",
    "format_primitive",
    "is_container",
]

# Python writes 1e-07; the canonical form is 1e-7.
_EXPONENT = re.compile(r"e([+-])0*(\d)")

# Literal escape sequences left inside string values by double-encoded sources.
_DISPLAY_ESCAPES = re.compile(r"\\([ntr\"\\])")
_DISPLAY_REPLACEMENTS = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


def classify(value: Any) -> Classification:
    """Classify a JSON value.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python.

    Raises:
        TypeError: If value is not a JSON type.
    """
    if value is None:
        return Classification(NodeKind.NULL)
    if isinstance(value, bool):
        return Classification(NodeKind.BOOLEAN)
    if isinstance(value, (int, float)):
        return Classification(NodeKind.NUMBER)
    if isinstance(value, str):
        return Classification(NodeKind.STRING)
    if isinstance(value, list):
        return Classification(NodeKind.ARRAY, child_count=len(value))
    if isinstance(value, dict):
        return Classification(NodeKind.OBJECT, child_count=len(value))
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    return isinstance(value, (list, dict))


def child_count(value: Any) -> int:
    return len(value) if isinstance(value, (list, dict)) else 0


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _EXPONENT.sub(r"e\1\2", repr(value))


def format_primitive(value: Any) -> str:
    """Return the canonical string form of a primitive.

    Strings are returned as-is; numbers, booleans and null use their JSON
    spelling.

    Raises:
        TypeError: If value is a container or not a JSON type.
    """
    kind = classify(value).kind
    if kind is NodeKind.STRING:
        return str(value)
    if kind is NodeKind.NULL:
        return "null"
    if kind is NodeKind.BOOLEAN:
        return "true" if value else "false"
    if kind is NodeKind.NUMBER:
        return _format_number(value)
    raise TypeError(f"Cannot format a {kind} as a primitive")


def display_text(value: Any) -> str:
    """Return the text a renderer shows for a primitive value.

    String values have literal ``\\n``, ``\\t``, ``\\r``, ``\\"`` and
    ``\\\\`` sequences turned into the characters they spell, in a single
    left-to-right pass, so escaped payloads embedded in strings read
    naturally.
    """
    if isinstance(value, str):
        return _DISPLAY_ESCAPES.sub(lambda m: _DISPLAY_REPLACEMENTS[m.group(1)], value)
    return format_primitive(value)
