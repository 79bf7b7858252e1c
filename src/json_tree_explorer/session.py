"""ExplorerSession: the event surface an application drives.

Holds one TreeModel and turns discrete UI events into model updates on a
single asyncio thread:
- open_path() / open_text(): show a loading state, yield for ``load_defer``
  so it can paint, then parse and load.  A newer open supersedes an older
  one still in flight.
- on_query_changed(): debounce keystrokes by ``search_debounce`` and run
  only the latest query.
- toggle_expanded() / load_more(): forwarded straight to the model.

Load failures become the ``error`` message instead of propagating, the way
the viewer shows an error banner and an empty tree.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from json_tree_explorer.config import ExplorerConfig
from json_tree_explorer.exceptions import DocumentLoadError
from json_tree_explorer.loader import LoadedDocument, load_path, load_text
from json_tree_explorer.model import TreeModel
from json_tree_explorer.protocols import Scheduler
from json_tree_explorer.search.debounce import Debouncer
from json_tree_explorer.search.engine import normalize_query
from json_tree_explorer.search.result import SearchResult
from json_tree_explorer.tree.path import JsonPath

__all__ = ["ExplorerSession"]

logger = logging.getLogger(__name__)


class ExplorerSession:
    """Application-level state around a TreeModel.

    Args:
        config:    Shared configuration.  Defaults to ``ExplorerConfig()``.
        scheduler: Timer source for search debouncing.  Defaults to the
            running asyncio loop.
        on_change: Called with no arguments after every state change that
            needs a re-render (load finished, search applied, toggle, load-more).
    """

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        scheduler: Scheduler | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self.model = TreeModel(config=self._config)
        self._debouncer: Debouncer[str] = Debouncer(
            self._run_search, delay=self._config.search_debounce, scheduler=scheduler
        )
        self._on_change = on_change
        self._load_generation = 0
        self.document: LoadedDocument | None = None
        self.error = ""
        self.is_loading = False
        self.query = ""

    @property
    def search_result(self) -> SearchResult:
        return self.model.search_result

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # Document events
    # ------------------------------------------------------------------

    async def open_path(
        self, path: str | Path, content_type: str | None = None
    ) -> LoadedDocument | None:
        """Open a file; returns the loaded document, or None on failure/supersession."""
        return await self._open(lambda: load_path(path, content_type, config=self._config))

    async def open_text(
        self, text: str, name: str = "", is_jsonl: bool | None = None
    ) -> LoadedDocument | None:
        """Open in-memory text; returns the loaded document, or None on failure/supersession."""
        return await self._open(
            lambda: load_text(text, name=name, is_jsonl=is_jsonl, config=self._config)
        )

    async def _open(self, load: Callable[[], LoadedDocument]) -> LoadedDocument | None:
        self._load_generation += 1
        generation = self._load_generation
        self.is_loading = True
        self.error = ""
        self._notify()

        await asyncio.sleep(self._config.load_defer)
        if generation != self._load_generation:
            logger.debug("Open #%d superseded before parsing", generation)
            return None

        try:
            document = load()
        except DocumentLoadError as exc:
            logger.info("Open failed: %s", exc)
            self.error = str(exc)
            self.document = None
            self.is_loading = False
            self.model.clear()
            self._notify()
            return None

        self.is_loading = False
        self.document = document
        self.model.load_document(document)
        if normalize_query(self.query):
            self._debouncer.flush(self.query)
        self._notify()
        return document

    def close(self) -> None:
        """Unload the current document and cancel any pending search."""
        self._debouncer.cancel()
        self.document = None
        self.error = ""
        self.model.clear()
        self._notify()

    # ------------------------------------------------------------------
    # Search events
    # ------------------------------------------------------------------

    def on_query_changed(self, query: str) -> None:
        """Record a keystroke; the search runs once typing pauses."""
        self.query = query
        self._debouncer.submit(query)

    def search_now(self) -> SearchResult:
        """Skip the debounce delay and run the current query immediately."""
        self._debouncer.flush(self.query)
        return self.model.search_result

    def _run_search(self, query: str) -> None:
        if normalize_query(query):
            self.model.apply_search(query)
        else:
            self.model.clear_search()
        self._notify()

    # ------------------------------------------------------------------
    # Tree events
    # ------------------------------------------------------------------

    def toggle_expanded(self, path: JsonPath) -> bool:
        expanded = self.model.toggle_expanded(path)
        self._notify()
        return expanded

    def load_more(self, path: JsonPath) -> int:
        count = self.model.load_more(path)
        self._notify()
        return count

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
