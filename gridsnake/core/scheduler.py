# gridsnake/core/scheduler.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from .interfaces import Scheduler, TimerHandle


@dataclass
class _Timer:
    interval_ms: int
    due_ms: int
    callback: Callable[[], None]


class ManualScheduler(Scheduler):
    """Virtual-time scheduler. Nothing fires until `advance()` moves the clock.

    Timers repeat every `interval_ms` from the moment they were scheduled,
    and a callback may cancel or schedule timers while it runs.
    """

    def __init__(self):
        self.now_ms = 0
        self._timers: Dict[int, _Timer] = {}
        self._next_id = 1
        self.scheduled = 0   # total schedule() calls
        self.cancelled = 0   # cancel() calls that removed a live timer

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        interval_ms = max(1, int(interval_ms))
        handle = self._next_id
        self._next_id += 1
        self._timers[handle] = _Timer(interval_ms, self.now_ms + interval_ms, callback)
        self.scheduled += 1
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if self._timers.pop(handle, None) is not None:
            self.cancelled += 1

    @property
    def active(self) -> int:
        return len(self._timers)

    def next_due(self) -> Optional[int]:
        if not self._timers:
            return None
        return min(t.due_ms for t in self._timers.values())

    def advance(self, ms: int) -> int:
        """Move the clock forward `ms`, firing every timer that comes due. Returns the fire count."""
        target = self.now_ms + ms
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > target:
                break
            handle = min(self._timers, key=lambda h: (self._timers[h].due_ms, h))
            timer = self._timers[handle]
            self.now_ms = timer.due_ms
            timer.due_ms += timer.interval_ms
            timer.callback()
            fired += 1
        self.now_ms = target
        return fired

    def step(self) -> bool:
        """Jump straight to the next due timer and fire it."""
        due = self.next_due()
        if due is None:
            return False
        self.advance(due - self.now_ms)
        return True
