# gridsnake/core/snake_state.py  (pure rules, no pygame)
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
from .interfaces import Cell, Direction, RIGHT, UNIT_DIRS


class SnakeState:
    def __init__(self, origin: Cell, cell_size: int, direction: Direction = RIGHT):
        self.cell_size = cell_size
        self.body: List[Cell] = [tuple(origin)]
        self.direction: Direction = self._scale(direction)
        self.pending: Optional[Direction] = None

    @classmethod
    def from_cells(cls, cells: Sequence[Cell], cell_size: int, direction: Direction) -> "SnakeState":
        """Build a snake with an explicit body, head first (`direction` in pixels)."""
        s = cls(cells[0], cell_size)
        s.body = [tuple(c) for c in cells]
        s.direction = tuple(direction)
        return s

    def _scale(self, unit: Direction) -> Direction:
        return (unit[0] * self.cell_size, unit[1] * self.cell_size)

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.body)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    # ---- steering ----
    def propose(self, direction) -> bool:
        """Buffer a turn for the next tick.

        `direction` may be a unit vector or already scaled by the cell size.
        Only turns onto the other axis are accepted, which rules out
        reversing; anything unrecognised is ignored.
        """
        unit = self._as_unit(direction)
        if unit is None:
            return False
        dx, dy = self._scale(unit)
        cdx, cdy = self.direction
        if (dx != 0 and cdx == 0) or (dy != 0 and cdy == 0):
            self.pending = (dx, dy)
            return True
        return False

    def _as_unit(self, direction) -> Optional[Direction]:
        try:
            dx, dy = direction
        except (TypeError, ValueError):
            return None
        if not (isinstance(dx, int) and isinstance(dy, int)):
            return None
        c = self.cell_size
        if (dx, dy) in UNIT_DIRS:
            return (dx, dy)
        if dx % c == 0 and dy % c == 0 and (dx // c, dy // c) in UNIT_DIRS:
            return (dx // c, dy // c)
        return None

    def apply_pending(self) -> None:
        if self.pending is not None:
            self.direction = self.pending
            self.pending = None

    # ---- movement ----
    def peek(self) -> Cell:
        hx, hy = self.body[0]
        dx, dy = self.direction
        return (hx + dx, hy + dy)

    def advance(self, food_cells: Sequence[Cell] = ()) -> Tuple[Cell, Optional[int]]:
        """Move one cell. Returns the new head and the index of the food eaten, if any.

        Eating keeps the tail, so the body grows by exactly one.
        """
        new_head = self.peek()
        self.body.insert(0, new_head)
        eaten = None
        for i, cell in enumerate(food_cells):
            if cell == new_head:
                eaten = i
                break
        if eaten is None:
            self.body.pop()
        return new_head, eaten
