"""Scheduler Protocol: the timer extension point used for debouncing.

Defines the structural interface a timer source must satisfy.  The default
implementation is backed by the running asyncio event loop; tests and GUI
hosts can plug in their own (a manual clock, a toolkit's ``after`` call)
without inheriting from any base class.

Example::

    from json_tree_explorer.protocols import Scheduler

    class ManualScheduler:
        def call_later(self, delay, callback):
            ...  # return an object with cancel()

    assert isinstance(ManualScheduler(), Scheduler)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

__all__ = ["Scheduler", "TimerHandle"]


@runtime_checkable
class TimerHandle(Protocol):
    """A pending callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Structural protocol for single-threaded timer sources.

    ``call_later`` must run ``callback`` on the same thread that owns the
    tree model, after at least ``delay`` seconds, unless the returned handle
    is cancelled first.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...
