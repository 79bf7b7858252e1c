"""Public API functions for json-tree-explorer.

Convenience entry points for one-shot use.  Each call creates fresh
components, so no state is shared between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.loader import LoadedDocument, load_path
from json_tree_explorer.model import TreeModel
from json_tree_explorer.search.engine import SearchEngine
from json_tree_explorer.search.result import SearchResult

__all__ = ["build_model", "open_document", "search"]


def open_document(
    path: str | Path,
    config: ExplorerConfig | None = None,
) -> LoadedDocument:
    """Read and parse a ``.json`` / ``.jsonl`` / ``.ndjson`` file.

    Raises:
        DocumentLoadError: If the file is unsupported, unreadable or invalid.
    """
    return load_path(path, config=config)


def search(
    document: Any,
    query: str,
    config: ExplorerConfig | None = None,
) -> SearchResult:
    """Search a parsed JSON value for ``query`` under the configured bounds.

    Args:
        document: Parsed JSON value.
        query:    Case-insensitive literal substring to look for in keys and
                  primitive values.
        config:   Bounds.  Defaults to ``ExplorerConfig()`` when None.

    Returns:
        A SearchResult with matches in pre-order traversal order.
    """
    return SearchEngine(config).search(document, query)


def build_model(
    document: LoadedDocument | Any,
    is_large_document: bool = False,
    config: ExplorerConfig | None = None,
) -> TreeModel:
    """Return a TreeModel over ``document``.

    A LoadedDocument brings its own large-document flag and root label;
    ``is_large_document`` applies to bare values only.
    """
    model = TreeModel(config=config)
    if isinstance(document, LoadedDocument):
        model.load_document(document)
    else:
        model.load(document, is_large_document)
    return model
