"""Tests for Debouncer and AsyncioScheduler.

The ``clock`` fixture (a manual scheduler) makes timing deterministic:
only the latest submission fires, superseded ones never act, and
cancellation and flushing behave as documented.
"""

from __future__ import annotations

import asyncio
from typing import Any

from json_tree_explorer.protocols import Scheduler
from json_tree_explorer.search.debounce import AsyncioScheduler, Debouncer


class TestProtocol:
    def test_manual_scheduler_conforms(self, clock: Any) -> None:
        assert isinstance(clock, Scheduler)

    def test_asyncio_scheduler_conforms(self) -> None:
        assert isinstance(AsyncioScheduler(), Scheduler)


class TestDebouncer:
    def test_fires_after_delay(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        debouncer.submit("a")
        clock.advance(0.25)
        assert seen == []
        assert debouncer.pending
        clock.advance(0.25)
        assert seen == ["a"]
        assert not debouncer.pending

    def test_only_latest_submission_acts(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        for text in ("a", "al", "ali"):
            debouncer.submit(text)
            clock.advance(0.25)
        clock.advance(0.5)
        assert seen == ["ali"]

    def test_each_keystroke_restarts_delay(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        debouncer.submit("a")
        clock.advance(0.25)
        debouncer.submit("ab")
        clock.advance(0.25)
        assert seen == []
        clock.advance(0.25)
        assert seen == ["ab"]

    def test_cancel(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        debouncer.submit("a")
        debouncer.cancel()
        clock.advance(1.0)
        assert seen == []
        assert not debouncer.pending

    def test_late_cancelled_timer_does_not_act(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        debouncer.submit("stale")
        stale_timer = clock.timers[0]
        debouncer.submit("fresh")
        # A host whose cancel() could not stop an already-due timer
        stale_timer.callback()
        assert seen == []
        clock.advance(0.5)
        assert seen == ["fresh"]

    def test_flush_acts_immediately(self, clock: Any) -> None:
        seen: list[str] = []
        debouncer = Debouncer(seen.append, delay=0.5, scheduler=clock)
        debouncer.submit("a")
        debouncer.flush("b")
        assert seen == ["b"]
        clock.advance(1.0)
        assert seen == ["b"]

    def test_delay_property(self, clock: Any) -> None:
        assert Debouncer(print, delay=0.3, scheduler=clock).delay == 0.3


class TestAsyncioScheduler:
    def test_debounce_on_running_loop(self) -> None:
        seen: list[str] = []

        async def scenario() -> None:
            debouncer = Debouncer(seen.append, delay=0.01)
            debouncer.submit("x")
            debouncer.submit("xy")
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert seen == ["xy"]
