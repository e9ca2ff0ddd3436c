from .interfaces import (
    Cell, Direction, UP, DOWN, LEFT, RIGHT,
    RunPhase, FoodKind, Food, Snapshot, Command, CommandKind,
    Renderer, InputSource, Scheduler, score_text,
)
from .grid import GridModel
from .food import FoodSpawner, SinglePolicy, TieredPolicy, MAX_LIVE_FOOD
from .snake_state import SnakeState
from .game_state import GameState
from .game_loop import GameLoop
from .scheduler import ManualScheduler
