"""
Timers used by deferred cube computations.

Delays are expressed in milliseconds. `AsyncioClock` waits in real time,
`FakeClock` only moves forward when a test calls `tick()` (or `run_for()`),
so a 1000 ms wait can be exercised without sleeping.
"""
import asyncio
import heapq
import itertools
import logging
from typing import List, Tuple

log = logging.getLogger(__name__)


class AsyncioClock:
    """Real-time clock backed by the running event loop."""

    async def sleep(self, delay_ms: float) -> None:
        await asyncio.sleep(delay_ms / 1000)


class FakeClock:
    """
    A fast-forwardable clock.

    Every call to `sleep()` registers a timer at `now + delay_ms` and parks the
    caller on a future. `tick()` advances simulated time and releases the
    timers whose deadline has been reached, earliest first.
    """

    def __init__(self, start_ms: float = 0):
        self._now = start_ms
        self._timers: List[Tuple[float, int, asyncio.Future]] = [] # (deadline, seq, future)
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of sleepers still waiting."""
        return sum(1 for _, _, fut in self._timers if not fut.done())

    async def sleep(self, delay_ms: float) -> None:
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        deadline = self._now + max(delay_ms, 0)
        heapq.heappush(self._timers, (deadline, next(self._seq), future))
        log.debug(f"Timer registered for t={deadline} (now={self._now})")
        await future

    def tick(self, ms: float) -> int:
        """
        Advances simulated time by `ms` milliseconds.

        Returns:
            The number of sleepers released.

        Raises:
            ValueError: If `ms` is negative.
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards (tick of {ms} ms)")
        self._now += ms
        released = 0
        while self._timers and self._timers[0][0] <= self._now:
            deadline, _, future = heapq.heappop(self._timers)
            if future.done(): # Cancelled while waiting
                continue
            future.set_result(None)
            released += 1
            log.debug(f"Released timer due at t={deadline}")
        return released

    async def run_for(self, ms: float) -> int:
        """Lets pending tasks reach their timers, ticks, then lets woken tasks run."""
        await asyncio.sleep(0)
        released = self.tick(ms)
        await asyncio.sleep(0)
        return released
