from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable, Optional
from .interfaces import Snapshot

ALL_KEYS = [
    "game", "score", "length", "ticks", "reason", "interval_ms", "food_policy",
]

class Logger(Protocol):
    def log(self, game: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class NullLogger:
    """Drops every row; stands in when no log path is configured."""
    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        scalars = {"game": game, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def make_game_logger(
    logger: Logger,
    *,
    interval_getter: Callable[[], int],
    food_policy: str,
    on_logged: Optional[Callable[[int, Dict[str, Any]], None]] = None,
) -> Callable[[Snapshot], None]:
    """
    Returns a game-over callback that numbers games and writes one row each.
    `on_logged` sees the same row, e.g. for a console summary.
    """
    count = 0

    def _on_game_over(snap: Snapshot) -> None:
        nonlocal count
        count += 1
        row = {
            "score": snap.score,
            "length": len(snap.snake),
            "ticks": snap.tick,
            "reason": snap.reason or "",
            "interval_ms": int(interval_getter()),
            "food_policy": food_policy,
        }
        logger.log(count, row)
        logger.flush()
        if on_logged is not None:
            on_logged(count, row)

    return _on_game_over
