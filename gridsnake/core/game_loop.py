# gridsnake/core/game_loop.py
from __future__ import annotations
import logging
from typing import Callable, Optional
from gridsnake.config import DIFFICULTY_INTERVALS
from .game_state import GameState
from .interfaces import (
    Cell, Command, CommandKind, Renderer, RunPhase, Scheduler, Snapshot, TimerHandle,
)

logger = logging.getLogger(__name__)


class GameLoop:
    """Phase machine around a GameState, ticked by an injected Scheduler.

    IDLE -> RUNNING <-> PAUSED, RUNNING/PAUSED -> OVER, and stop() from
    anywhere goes back to IDLE with a fresh board. The renderer sees a
    snapshot on construction, after every tick and on every phase change.
    """

    def __init__(
        self,
        state: GameState,
        scheduler: Scheduler,
        renderer: Optional[Renderer] = None,
        on_game_over: Optional[Callable[[Snapshot], None]] = None,
        interval_ms: Optional[int] = None,
    ):
        self.state = state
        self.scheduler = scheduler
        self.renderer = renderer
        self.on_game_over = on_game_over
        self.interval_ms = int(interval_ms or state.cfg.tick_ms)
        self._timer: Optional[TimerHandle] = None
        self._render()

    @property
    def phase(self) -> RunPhase:
        return self.state.phase

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    # ---- lifecycle commands ----
    def start(self) -> None:
        if self.state.phase is not RunPhase.IDLE:
            return
        self.state.phase = RunPhase.RUNNING
        self._schedule()
        logger.debug("started at %d ms/tick", self.interval_ms)
        self._render()

    def toggle_pause(self) -> None:
        if self.state.phase is RunPhase.RUNNING:
            self._cancel()
            self.state.phase = RunPhase.PAUSED
        elif self.state.phase is RunPhase.PAUSED:
            # fresh timer; time already elapsed before the pause is not carried over
            self.state.phase = RunPhase.RUNNING
            self._schedule()
        else:
            return
        self._render()

    def stop(self) -> None:
        self._cancel()
        self.state.reset()
        self._render()

    def set_speed(self, interval_ms: int) -> None:
        try:
            interval_ms = int(interval_ms)
        except (TypeError, ValueError, OverflowError):
            return
        if interval_ms <= 0:
            return
        self.interval_ms = interval_ms
        if self.state.phase is RunPhase.RUNNING:
            self._cancel()
            self._schedule()

    def set_difficulty(self, name: str) -> None:
        if not isinstance(name, str):
            return
        interval = DIFFICULTY_INTERVALS.get(name)
        if interval is not None:
            self.set_speed(interval)

    def propose(self, direction) -> None:
        self.state.snake.propose(direction)

    def handle(self, cmd: Command) -> None:
        kind = getattr(cmd, "kind", None)
        if kind is CommandKind.DIRECTION:
            self.propose(cmd.value)
        elif kind is CommandKind.START:
            self.start()
        elif kind is CommandKind.PAUSE:
            self.toggle_pause()
        elif kind is CommandKind.STOP:
            self.stop()
        elif kind is CommandKind.DIFFICULTY:
            self.set_difficulty(cmd.value)

    def close(self) -> None:
        self._cancel()
        self.state.teardown()

    # ---- tick ----
    def tick(self) -> None:
        s = self.state
        if s.phase is not RunPhase.RUNNING:
            return
        s.snake.apply_pending()
        head = s.snake.peek()
        reason = self.check_collision(head)
        s.tick += 1
        if reason is not None:
            self._game_over(reason)
            return

        _, eaten = s.snake.advance(s.spawner.cells())
        if eaten is not None:
            food = s.spawner.consume(head)
            s.score += food.points
        if s.spawner.exhausted:
            s.spawner.spawn(s.snake.cells())
        self._render()

    def check_collision(self, head: Cell) -> Optional[str]:
        """'wall' or 'self' if moving the head to `head` ends the game."""
        if not self.state.grid.is_in_bounds(head):
            return "wall"
        if self.state.snake.occupies(head):
            return "self"
        return None

    # ---- internals ----
    def _game_over(self, reason: str) -> None:
        self._cancel()
        self.state.phase = RunPhase.OVER
        self.state.reason = reason
        logger.info("game over (%s) score=%d length=%d ticks=%d",
                    reason, self.state.score, len(self.state.snake), self.state.tick)
        snap = self._render()
        if self.on_game_over is not None:
            self.on_game_over(snap)

    def _schedule(self) -> None:
        self._timer = self.scheduler.schedule(self.interval_ms, self.tick)

    def _cancel(self) -> None:
        if self._timer is not None:
            self.scheduler.cancel(self._timer)
            self._timer = None

    def _render(self) -> Snapshot:
        snap = self.state.snapshot()
        if self.renderer is not None:
            self.renderer.render(snap)
        return snap
