"""Tick schedulers that drive playback.

A scheduler runs a callback once after a delay and hands back a handle whose
``cancel()`` guarantees the callback will not run.  The player only ever has
one pending tick and schedules the next one from inside the current tick.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Protocol


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Abstract one-shot timer."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TickHandle:
        """Run *callback* after *delay* seconds."""
        ...


class AsyncioScheduler(Scheduler):
    """Schedules ticks on an asyncio event loop with ``loop.call_later``.

    Uses the running loop at call time unless a loop is injected.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class _ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler; time only moves when ``advance`` is called."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, Callable[[], None], _ManualHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TickHandle:
        handle = _ManualHandle()
        heapq.heappush(
            self._queue, (self.now + max(0.0, delay), next(self._seq), callback, handle)
        )
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for *_, handle in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Callbacks scheduled by a running callback fire in the same call if
        they fall due before the new time.  Returns the number run.
        """
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = due
            callback()
            ran += 1
        self.now = target
        return ran

    def run_until_idle(self, max_callbacks: int = 1_000_000) -> int:
        """Run callbacks in due order until none remain (or the cap is hit)."""
        ran = 0
        while ran < max_callbacks:
            live = [entry for entry in self._queue if not entry[3].cancelled]
            if not live:
                break
            due = min(entry[0] for entry in live)
            ran += self.advance(due - self.now)
        self._queue = [entry for entry in self._queue if not entry[3].cancelled]
        heapq.heapify(self._queue)
        return ran
