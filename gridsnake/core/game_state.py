# gridsnake/core/game_state.py
from __future__ import annotations
import random
from typing import Optional
from gridsnake.config import AppConfig
from .food import FoodSpawner
from .grid import GridModel
from .interfaces import RunPhase, Snapshot, RIGHT
from .snake_state import SnakeState


class GameState:
    """Snake, live food, score and phase for one board. Owned by GameLoop."""

    def __init__(self, cfg: AppConfig, rng: Optional[random.Random] = None):
        self.cfg = cfg.validate()
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.grid = GridModel(cfg.board_extent, cfg.cell_size, self.rng)
        self.spawner = FoodSpawner(self.grid, cfg.food_policy, cfg.max_spawn_attempts)
        self.init()

    def init(self) -> None:
        self.snake = SnakeState(self.cfg.start_cell, self.cfg.cell_size, RIGHT)
        self.score = 0
        self.tick = 0
        self.phase = RunPhase.IDLE
        self.reason: str | None = None
        self.spawner.reset()
        self.spawner.spawn(self.snake.cells())

    def reset(self) -> Snapshot:
        self.init()
        return self.snapshot()

    def teardown(self) -> None:
        self.spawner.reset()
        self.snake.body.clear()
        self.snake.pending = None
        self.phase = RunPhase.IDLE

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.cells(),
            foods=tuple(self.spawner.live),
            direction=self.snake.direction,
            score=self.score,
            phase=self.phase,
            tick=self.tick,
            reason=self.reason,
            board_extent=self.grid.board_extent,
            cell_size=self.grid.cell_size,
        )
