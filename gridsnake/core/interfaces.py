# gridsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional, Callable, Protocol, List, Union, Hashable
import numpy as np

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# unit vectors; scaled by the grid unit in SnakeState
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
UNIT_DIRS = (UP, DOWN, LEFT, RIGHT)


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class FoodKind(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def points(self) -> int:
        return _FOOD_POINTS[self]

    @property
    def color(self) -> Tuple[int, int, int]:
        return _FOOD_COLORS[self]


_FOOD_POINTS = {FoodKind.SMALL: 1, FoodKind.MEDIUM: 3, FoodKind.LARGE: 5}
_FOOD_COLORS = {
    FoodKind.SMALL: (220, 70, 70),
    FoodKind.MEDIUM: (235, 160, 50),
    FoodKind.LARGE: (170, 90, 230),
}


@dataclass(frozen=True)
class Food:
    kind: FoodKind
    cell: Cell

    @property
    def points(self) -> int:
        return self.kind.points


# occupancy codes used by Snapshot.to_grid()
EMPTY, BODY, HEAD = 0, 1, 2
FOOD_CODES = {FoodKind.SMALL: 3, FoodKind.MEDIUM: 4, FoodKind.LARGE: 5}
_TEXT = {EMPTY: ".", BODY: "o", HEAD: "H", 3: "s", 4: "m", 5: "L"}


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    foods: Tuple[Food, ...]
    direction: Direction
    score: int
    phase: RunPhase
    tick: int
    reason: str | None        # "wall" | "self" once phase is OVER
    board_extent: int
    cell_size: int

    @property
    def cell_count(self) -> int:
        return self.board_extent // self.cell_size

    def to_grid(self) -> np.ndarray:
        """Occupancy grid indexed [row, col], one entry per lattice cell.

        Segments outside the board are left out.
        """
        n, c = self.cell_count, self.cell_size
        grid = np.zeros((n, n), dtype=np.int8)
        for f in self.foods:
            fx, fy = f.cell
            grid[fy // c, fx // c] = FOOD_CODES[f.kind]
        for i, (x, y) in enumerate(self.snake):
            if 0 <= x < self.board_extent and 0 <= y < self.board_extent:
                grid[y // c, x // c] = HEAD if i == 0 else BODY
        return grid

    def to_text(self) -> List[str]:
        return ["".join(_TEXT[int(v)] for v in row) for row in self.to_grid()]


def score_text(s: Snapshot) -> str:
    return f"Score: {s.score}"


class CommandKind(Enum):
    DIRECTION = "direction"
    START = "start"
    PAUSE = "pause"            # toggles pause/resume
    STOP = "stop"
    DIFFICULTY = "difficulty"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    value: Union[Direction, str, None] = None


TimerHandle = Hashable


class Renderer(Protocol):
    def render(self, snap: Snapshot) -> None: ...


class InputSource(Protocol):
    def poll(self) -> List[Command]: ...


class Scheduler(Protocol):
    """Repeating timer capability injected into GameLoop."""
    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle: ...
    def cancel(self, handle: Optional[TimerHandle]) -> None: ...
