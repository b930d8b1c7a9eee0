"""Cancelable delayed callbacks.

The engine never sleeps. Every delay (preview, match confirm, mismatch
reveal, chrono tick) is a callback scheduled through a Scheduler and
canceled when the owning session is replaced or ends.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class TimerHandle(ABC):
    """Handle to a scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the callback. No effect if it already ran."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """Whether cancel() was called."""


class Scheduler(ABC):
    """Source of cancelable delayed callbacks."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callback) -> TimerHandle:
        """Schedule callback to run once after delay_ms milliseconds.

        Args:
            delay_ms: Delay in milliseconds.
            callback: Function called with no arguments.

        Returns:
            Handle that can cancel the callback.
        """


class _ManualTimer(TimerHandle):
    def __init__(self, due_ms: int, callback: Callback):
        self.due_ms = due_ms
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(Scheduler):
    """Scheduler driven by an explicit virtual clock.

    Time only moves when advance() is called, which makes timer-driven
    behavior deterministic for tests and for hosts with their own frame loop.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: list[tuple[int, int, _ManualTimer]] = []
        self._counter = itertools.count()  # FIFO among equal due times

    def call_later(self, delay_ms: int, callback: Callback) -> TimerHandle:
        timer = _ManualTimer(self.now_ms + max(0, delay_ms), callback)
        heapq.heappush(self._queue, (timer.due_ms, next(self._counter), timer))
        return timer

    def advance(self, delay_ms: int) -> int:
        """Move the clock forward and run every callback that becomes due.

        Callbacks scheduled while advancing run too if they fall inside the
        window.

        Args:
            delay_ms: Milliseconds to advance.

        Returns:
            Number of callbacks run.
        """
        target = self.now_ms + delay_ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = due_ms
            timer.callback()
            ran += 1
        self.now_ms = target
        return ran

    def pending(self) -> int:
        """Get number of callbacks still waiting to run."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)


class _AsyncioTimer(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Initialize scheduler.

        Args:
            loop: Event loop to use. If None, the running loop is looked up
                on each call.
        """
        self._loop = loop

    def call_later(self, delay_ms: int, callback: Callback) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimer(loop.call_later(max(0, delay_ms) / 1000, callback))
