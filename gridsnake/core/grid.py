# gridsnake/core/grid.py  (pure coordinate arithmetic)
from __future__ import annotations
import random
from typing import Iterator, Optional
from .interfaces import Cell


class GridModel:
    """Square board of `board_extent` pixels cut into `cell_size` cells.

    Cells are addressed by the pixel coordinate of their top-left corner,
    so every valid coordinate is a multiple of `cell_size`.
    """

    def __init__(self, board_extent: int, cell_size: int, rng: Optional[random.Random] = None):
        if board_extent <= 0 or cell_size <= 0:
            raise ValueError("board_extent and cell_size must be positive")
        if board_extent % cell_size != 0:
            raise ValueError(f"board_extent ({board_extent}) must be a multiple of cell_size ({cell_size})")
        self.board_extent = board_extent
        self.cell_size = cell_size
        self.cell_count = board_extent // cell_size
        self.rng = rng if rng is not None else random.Random()

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.board_extent and 0 <= y < self.board_extent

    def random_cell(self) -> Cell:
        c = self.cell_size
        return (self.rng.randrange(self.cell_count) * c, self.rng.randrange(self.cell_count) * c)

    def cells(self) -> Iterator[Cell]:
        c = self.cell_size
        for y in range(self.cell_count):
            for x in range(self.cell_count):
                yield (x * c, y * c)

    @property
    def area(self) -> int:
        return self.cell_count * self.cell_count
