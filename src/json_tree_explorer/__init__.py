"""JSON tree explorer - lazy tree model and bounded search for large JSON documents."""

from __future__ import annotations

from json_tree_explorer.api import build_model, open_document, search
from json_tree_explorer.clipboard import copy_text
from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.exceptions import DocumentLoadError, ExplorerError
from json_tree_explorer.loader import LoadedDocument, format_file_size, load_text
from json_tree_explorer.model import TreeModel
from json_tree_explorer.search import MatchKind, SearchMatch, SearchResult
from json_tree_explorer.session import ExplorerSession
from json_tree_explorer.tree import JsonPath, NodeKind, NodeView, classify

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentLoadError",
    "ExplorerConfig",
    "ExplorerError",
    "ExplorerSession",
    "JsonPath",
    "LoadedDocument",
    "MatchKind",
    "NodeKind",
    "NodeView",
    "SearchMatch",
    "SearchResult",
    "TreeModel",
    "build_model",
    "classify",
    "copy_text",
    "format_file_size",
    "load_text",
    "open_document",
    "search",
]
