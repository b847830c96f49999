# screen_core/timeline.py
"""Virtual millisecond clock with cancellable one-shot timers.

Games schedule their pacing (countdown ticks, digit reveals, stimulus windows)
on a Timeline instead of sleeping, so a terminal front end can feed it real
elapsed time while tests and autoplay jump straight to the next event.
"""
from __future__ import annotations
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .config import DEBUG_TRACE, TRACE_FIELDS


@dataclass(eq=False)
class TimerHandle:
    due_ms: int
    callback: Callable[[], None] = field(repr=False)
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class Timeline:
    def __init__(self, start_ms: int = 0) -> None:
        self._now = int(start_ms)
        self._queue: List[Tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    def now(self) -> int:
        return self._now

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(due_ms=self._now + max(0, int(delay_ms)), callback=callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancelled = True

    def cancel_all(self) -> None:
        for _, _, h in self._queue:
            h.cancelled = True
        self._queue.clear()

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def next_due(self) -> Optional[int]:
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
        return self._queue[0][0] if self._queue else None

    def advance(self, ms: int) -> int:
        """Move the clock forward ``ms`` and fire every timer due by then.

        Callbacks run in due order and may schedule further timers; those
        fire too if they fall inside the window. Returns the number fired.
        """
        target = self._now + max(0, int(ms))
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > target:
                break
            _, _, handle = heapq.heappop(self._queue)
            self._now = max(self._now, handle.due_ms)
            handle.fired = True
            handle.callback()
            fired += 1
        self._now = target
        return fired

    def advance_to_next(self) -> bool:
        due = self.next_due()
        if due is None:
            return False
        self.advance(due - self._now)
        return True


def emit_trace(log: logging.Logger, **values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = []
    for key in TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(str(val) for val in ordered))
