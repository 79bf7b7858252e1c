"""Debouncer: run an action only after its input has been quiet for a while.

Every :meth:`Debouncer.submit` cancels the pending timer and schedules a new
one, so only the latest submitted value is ever acted upon.  Superseded
values are dropped, never merged.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from json_tree_explorer.protocols import Scheduler, TimerHandle

__all__ = ["AsyncioScheduler", "Debouncer"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    Args:
        loop: Loop to schedule on.  Defaults to the running loop at call time.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class Debouncer(Generic[T]):
    """Cancellable delayed invocation of ``action`` with the latest value.

    Args:
        action:    Called with the most recently submitted value once quiet.
        delay:     Quiescence interval in seconds.
        scheduler: Timer source.  Defaults to :class:`AsyncioScheduler`.

    Example::

        debouncer = Debouncer(model.apply_search, delay=0.3)
        debouncer.submit("al")
        debouncer.submit("alice")   # "al" is superseded and never searched
    """

    def __init__(
        self,
        action: Callable[[T], None],
        delay: float,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._action = action
        self._delay = delay
        self._scheduler: Scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._handle: TimerHandle | None = None
        self._generation = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a submitted value is waiting for its timer."""
        return self._handle is not None

    def submit(self, value: T) -> None:
        """Schedule ``action(value)``, superseding any pending submission."""
        self.cancel()
        generation = self._generation

        def fire() -> None:
            # A handle cancelled too late to stop the timer still must not act.
            if generation != self._generation:
                return
            self._handle = None
            self._action(value)

        self._handle = self._scheduler.call_later(self._delay, fire)
        logger.debug("Debounced submission #%d scheduled in %.3fs", generation, self._delay)

    def flush(self, value: T) -> None:
        """Cancel any pending submission and act on ``value`` immediately."""
        self.cancel()
        self._action(value)

    def cancel(self) -> None:
        """Drop the pending submission, if any."""
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Pending debounced submission cancelled")
