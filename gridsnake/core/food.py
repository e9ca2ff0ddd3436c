# gridsnake/core/food.py
from __future__ import annotations
import logging
import random
from typing import Protocol, List, Optional, Iterable, Tuple, Union
from .grid import GridModel
from .interfaces import Food, FoodKind, Cell

logger = logging.getLogger(__name__)

MAX_LIVE_FOOD = 2


class FoodPolicy(Protocol):
    """Decides which kinds of food make up the next live batch."""
    def decide(self, rng: random.Random) -> List[FoodKind]: ...
    def reset(self) -> None: ...


class SinglePolicy(FoodPolicy):
    def decide(self, rng: random.Random) -> List[FoodKind]:
        return [FoodKind.SMALL]

    def reset(self) -> None:
        pass


class TieredPolicy(FoodPolicy):
    """Streak-biased mix of small, medium and large food.

    Small food is guaranteed for the first two batches, then becomes a coin
    flip. Medium food needs a run of smalls behind it; two mediums or five
    smalls in a row earn a large one. A lone item may get a bonus small.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.small_streak = 0
        self.medium_streak = 0
        self.large_streak = 0

    def decide(self, rng: random.Random) -> List[FoodKind]:
        # an empty cycle leaves the counters untouched, so redrawing is safe
        while True:
            kinds = self._cycle(rng)
            if kinds:
                return kinds

    def _cycle(self, rng: random.Random) -> List[FoodKind]:
        kinds: List[FoodKind] = []

        if self.small_streak < 2 or (self.small_streak < 8 and rng.random() > 0.5):
            kinds.append(FoodKind.SMALL)
            self.small_streak += 1

        if self.small_streak >= 2 and self.medium_streak < 3 and rng.random() > 0.6:
            kinds.append(FoodKind.MEDIUM)
            self.medium_streak += 1
            self.small_streak = 0

        if self.medium_streak >= 2 or self.small_streak >= 5:
            kinds.append(FoodKind.LARGE)
            self.large_streak += 1
            self.medium_streak = 0
            self.small_streak = 0

        # bonus small, not counted toward the streak
        if len(kinds) == 1 and rng.random() > 0.7:
            kinds.append(FoodKind.SMALL)

        if len(kinds) > MAX_LIVE_FOOD:
            # small + medium + large: the large one stands in for the small
            kinds.remove(FoodKind.SMALL)
        return kinds

    def streaks(self) -> Tuple[int, int, int]:
        return (self.small_streak, self.medium_streak, self.large_streak)


def make_policy(name: str) -> FoodPolicy:
    if name == "single":
        return SinglePolicy()
    if name == "tiered":
        return TieredPolicy()
    raise ValueError(f"unknown food policy: {name!r}")


class FoodSpawner:
    """Owns the live food batch and replaces it once it has been eaten."""

    def __init__(self, grid: GridModel, policy: Union[str, FoodPolicy] = "single", max_attempts: int = 1000):
        self.grid = grid
        self.policy = make_policy(policy) if isinstance(policy, str) else policy
        self.max_attempts = max(1, int(max_attempts))
        self.live: List[Food] = []

    def reset(self) -> None:
        self.live = []
        self.policy.reset()

    @property
    def exhausted(self) -> bool:
        return not self.live

    def spawn(self, occupied: Iterable[Cell]) -> Tuple[Food, ...]:
        """Replace the live set with a fresh batch placed off `occupied`."""
        kinds = self.policy.decide(self.grid.rng)
        blocked = set(occupied)
        batch: List[Food] = []
        for kind in kinds:
            cell = self._place(blocked)
            if cell is None:
                logger.warning("no free cell for %s food after %d draws; skipping",
                               kind.value, self.max_attempts)
                continue
            blocked.add(cell)
            batch.append(Food(kind, cell))
        self.live = batch
        logger.debug("spawned %s", [(f.kind.value, f.cell) for f in batch])
        return tuple(batch)

    def _place(self, blocked: set) -> Optional[Cell]:
        if len(blocked) >= self.grid.area:
            return None
        for _ in range(self.max_attempts):
            cell = self.grid.random_cell()
            if cell not in blocked:
                return cell
        return None

    def cells(self) -> List[Cell]:
        return [f.cell for f in self.live]

    def consume(self, cell: Cell) -> Optional[Food]:
        for i, f in enumerate(self.live):
            if f.cell == cell:
                return self.live.pop(i)
        return None
