# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so gridsnake.* imports work without installing)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest


class ScriptedRng:
    """Hands out queued values first, then falls back to a seeded Random."""
    def __init__(self, floats=(), ints=(), seed=0):
        self.floats = list(floats)
        self.ints = list(ints)
        self._fallback = random.Random(seed)

    def random(self):
        return self.floats.pop(0) if self.floats else self._fallback.random()

    def randrange(self, *args):
        return self.ints.pop(0) if self.ints else self._fallback.randrange(*args)

    def seed(self, seed=None):
        self._fallback.seed(seed)


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((300, 300))

@pytest.fixture
def scripted_rng():
    def make(floats=(), ints=(), seed=0):
        return ScriptedRng(floats=floats, ints=ints, seed=seed)
    return make

@pytest.fixture
def cfg():
    from gridsnake.config import AppConfig
    return AppConfig(seed=7)

@pytest.fixture
def loop_factory(cfg):
    from gridsnake.core.game_state import GameState
    from gridsnake.core.game_loop import GameLoop
    from gridsnake.core.scheduler import ManualScheduler
    from gridsnake.viz.renderer_headless import HeadlessRenderer

    def make(rng=None, on_game_over=None, **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        state = GameState(c, rng=rng)
        sched = ManualScheduler()
        rend = HeadlessRenderer()
        loop = GameLoop(state, sched, renderer=rend, on_game_over=on_game_over)
        return loop, sched, rend
    return make
