"""Cooperative timer queue standing in for the artificial delays.

Everything runs on the caller's thread. The runtime drains due timers
with `run_due()` on every script run; tests move a manual clock with
`advance()`.
"""

import heapq
import itertools
import logging
import time
from typing import Callable, List, Optional

log = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, due: float, seq: int, callback: Callable[[], None], label: str) -> None:
        self.due = due
        self.seq = seq
        self.callback = callback
        self.label = label
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        if not self.fired and not self.cancelled:
            log.debug(f"Timer cancelled: {self.label}")
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def __lt__(self, other: "TimerHandle") -> bool:
        return (self.due, self.seq) < (other.due, other.seq)


class TimerQueue:
    def __init__(self, now: Optional[Callable[[], float]] = None) -> None:
        self._now = now or time.monotonic
        self._offset = 0.0
        self._heap: List[TimerHandle] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now() + self._offset

    def call_later(self, delay: float, callback: Callable[[], None], label: str = "timer") -> TimerHandle:
        handle = TimerHandle(self.now() + max(delay, 0.0), next(self._seq), callback, label)
        heapq.heappush(self._heap, handle)
        log.debug(f"Timer scheduled: {label} in {delay:.2f}s")
        return handle

    def next_due(self) -> Optional[float]:
        """Seconds until the next pending timer, or None when idle."""
        self._drop_cancelled()
        if not self._heap:
            return None
        return max(self._heap[0].due - self.now(), 0.0)

    def has_pending(self) -> bool:
        return self.next_due() is not None

    def run_due(self) -> int:
        """Fire every timer that is due now, in due order. Returns how many fired."""
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._heap or self._heap[0].due > self.now():
                return fired
            handle = heapq.heappop(self._heap)
            handle.fired = True
            handle.callback()
            fired += 1

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire whatever became due, step by step."""
        target = self.now() + seconds
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._heap or self._heap[0].due > target:
                break
            self._offset += max(self._heap[0].due - self.now(), 0.0)
            fired += self.run_due()
        self._offset += max(target - self.now(), 0.0)
        return fired

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)
