# gridsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
import numpy as np
from gridsnake.core.interfaces import Snapshot, Renderer, score_text


class HeadlessRenderer(Renderer):
    """Keeps every snapshot it is handed; used by tests and the sim runner."""

    def __init__(self, keep_frames: bool = True):
        self.keep_frames = keep_frames
        self.frames: List[Snapshot] = []
        self.calls = 0
        self.last: Optional[Snapshot] = None

    def render(self, snap: Snapshot) -> None:
        self.calls += 1
        self.last = snap
        if self.keep_frames:
            self.frames.append(snap)

    @property
    def score_text(self) -> str:
        return score_text(self.last) if self.last else "Score: 0"

    def frame_stack(self) -> np.ndarray:
        """All kept frames as a (frames, rows, cols) occupancy array."""
        if not self.frames:
            return np.zeros((0, 0, 0), dtype=np.int8)
        return np.stack([f.to_grid() for f in self.frames])

    def clear(self) -> None:
        self.frames.clear()
        self.calls = 0
        self.last = None
