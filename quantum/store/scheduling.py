"""
Delayed callbacks for the workspace store.

The store never sleeps itself. Anything that has to happen later
(notification expiry) is handed to a scheduler, which calls back into the
store through its normal mutation API.
"""

import asyncio
import heapq
import itertools
import logging
import threading
from typing import Callable, List, Optional, Protocol, Tuple


class ScheduledHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay, with cancellation."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle: ...


class AsyncioScheduler:
    """
    Scheduler backed by an asyncio event loop.

    Uses the loop given at construction time, or the loop running when
    ``call_later`` is invoked. Synchronous callers with no loop get a
    daemon ``threading.Timer`` instead, so expiry still happens.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logging.debug("No running event loop, scheduling callback on a timer thread")
                timer = threading.Timer(delay, callback)
                timer.daemon = True
                timer.start()
                return timer
        return loop.call_later(delay, callback)


class ManualCall:
    """Handle returned by ``ManualScheduler``."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Scheduler driven by an explicit clock.

    Callbacks run only when ``advance`` moves the clock past their due
    time, which makes expiry deterministic in tests and synchronous drivers.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: List[Tuple[float, int, ManualCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(self.now + delay, callback)
        heapq.heappush(self._queue, (call.when, next(self._counter), call))
        return call

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have not run or been cancelled."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every callback that became due.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks that ran
        """
        self.now += seconds
        ran = 0

        while self._queue and self._queue[0][0] <= self.now:
            _, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            call.callback()
            ran += 1

        return ran
