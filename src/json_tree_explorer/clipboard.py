"""Copy-text production for the clipboard collaborator.

Primitives copy as their plain string form (strings without quotes);
containers copy as pretty-printed JSON with the document's key order
preserved.  The clipboard call itself belongs to the host.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_tree_explorer.tree.classifier import format_primitive

__all__ = ["copy_text"]

logger = logging.getLogger(__name__)


def copy_text(value: Any) -> str:
    """Return the exact text to place on the clipboard for ``value``.

    A value that cannot be serialized copies as the empty string.

    Example::

        copy_text("hello")         # 'hello'
        copy_text(3.0)             # '3'
        copy_text({"a": [1, 2]})   # '{\\n  "a": [\\n    1,\\n    2\\n  ]\\n}'
    """
    try:
        if isinstance(value, (dict, list)):
            return json.dumps(value, indent=2, ensure_ascii=False)
        return format_primitive(value)
    except (TypeError, ValueError, RecursionError):
        logger.debug("Value of type %s copies as empty text", type(value).__name__, exc_info=True)
        return ""
