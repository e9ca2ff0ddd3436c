# gridsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal, Tuple

DIFFICULTY_INTERVALS = {"easy": 450, "medium": 350, "hard": 220, "very-hard": 170}

FoodPolicyName = Literal["single", "tiered"]

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board (pixels, like the cell coordinates)
    board_extent: int = 300
    cell_size: int = 20
    start_cell: Tuple[int, int] = (100, 100)
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = DIFFICULTY_INTERVALS["easy"]
    food_policy: FoodPolicyName = "single"
    max_spawn_attempts: int = 1000       # rejected draws before an item is skipped

    # render
    fps: int = 60                        # UI poll rate, not the tick rate
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    hud_px: int = 28

    # logging
    log_path: Optional[str] = None       # per-game CSV results, off by default

    # sim (headless runner)
    sim_games: int = 5
    sim_turn_prob: float = 0.2

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.cell_size <= 0 or self.board_extent <= 0:
            raise ValueError("board_extent and cell_size must be positive")
        if self.board_extent % self.cell_size != 0:
            raise ValueError(
                f"board_extent ({self.board_extent}) must be a multiple of cell_size ({self.cell_size})"
            )
        if self.food_policy not in ("single", "tiered"):
            raise ValueError(f"unknown food_policy: {self.food_policy!r}")
        sx, sy = self.start_cell
        if sx % self.cell_size or sy % self.cell_size or not (
            0 <= sx < self.board_extent and 0 <= sy < self.board_extent
        ):
            raise ValueError(f"start_cell {self.start_cell} is not a cell of the board")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        return self
