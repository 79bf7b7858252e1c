"""Exception classes raised by json-tree-explorer."""

from __future__ import annotations

__all__ = ["DocumentLoadError", "ExplorerError"]


class ExplorerError(Exception):
    """Base class for expected explorer failures."""


class DocumentLoadError(ExplorerError, ValueError):
    """Raised when a document cannot be read, parsed or is of an unsupported type."""
