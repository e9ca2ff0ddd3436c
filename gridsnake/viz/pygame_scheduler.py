# gridsnake/viz/pygame_scheduler.py
from __future__ import annotations
from typing import Callable, Optional
import pygame as pg
from gridsnake.core.interfaces import Scheduler, TimerHandle


class PygameScheduler(Scheduler):
    """One repeating timer on its own pygame event type.

    The main loop must pass every event through `dispatch()`. Timer events
    carry the handle that posted them, so ticks still queued from a
    cancelled or replaced timer are dropped.
    """

    def __init__(self):
        if not pg.get_init():
            pg.init()
        self.event_type = pg.event.custom_type()
        self._handle = 0
        self._callback: Optional[Callable[[], None]] = None

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        self._stop_timer()
        self._handle += 1
        self._callback = callback
        pg.time.set_timer(pg.event.Event(self.event_type, handle=self._handle), max(1, int(interval_ms)))
        return self._handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is None or handle != self._handle or self._callback is None:
            return
        self._stop_timer()

    def dispatch(self, event: pg.event.Event) -> bool:
        if event.type != self.event_type:
            return False
        if self._callback is not None and getattr(event, "handle", None) == self._handle:
            self._callback()
        return True

    def _stop_timer(self) -> None:
        pg.time.set_timer(self.event_type, 0)
        pg.event.clear(self.event_type)
        self._callback = None
