# gridsnake/runners/run_headless.py
from __future__ import annotations
import random
from dataclasses import replace
from typing import List, Optional
from gridsnake.config import AppConfig
from gridsnake.core.game_state import GameState
from gridsnake.core.game_loop import GameLoop
from gridsnake.core.game_log import CSVLogger, NullLogger, ALL_KEYS, make_game_logger
from gridsnake.core.interfaces import Command, CommandKind, RunPhase, UNIT_DIRS
from gridsnake.core.scheduler import ManualScheduler
from gridsnake.viz.renderer_headless import HeadlessRenderer


class RandomInput:
    """Input source that occasionally asks for a random turn."""

    def __init__(self, turn_prob: float = 0.2, seed: Optional[int] = None):
        self.turn_prob = turn_prob
        self.rng = random.Random(seed)

    def poll(self) -> List[Command]:
        if self.rng.random() < self.turn_prob:
            return [Command(CommandKind.DIRECTION, self.rng.choice(UNIT_DIRS))]
        return []


def play_one(loop: GameLoop, sched: ManualScheduler, inp: RandomInput, max_ticks: int) -> RunPhase:
    loop.stop()
    loop.start()
    while loop.phase is RunPhase.RUNNING and loop.state.tick < max_ticks:
        for cmd in inp.poll():
            loop.handle(cmd)
        sched.step()
    return loop.phase


def main(cfg: AppConfig, max_ticks: Optional[int] = None) -> List[dict]:
    """Play `cfg.sim_games` games with random steering, no window, no waiting.

    A game still running after `max_ticks` ticks is ended as a "timeout";
    it is numbered and logged like any other game.
    """
    state = GameState(cfg)
    sched = ManualScheduler()
    rend = HeadlessRenderer(keep_frames=False)
    inp = RandomInput(cfg.sim_turn_prob, seed=cfg.seed)
    if max_ticks is None:
        max_ticks = state.grid.area * 20

    results: List[dict] = []
    log = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else NullLogger()

    def _collect(game: int, row: dict) -> None:
        results.append(row)
        print(f"[game {game}] score={row['score']} length={row['length']} "
              f"ticks={row['ticks']} reason={row['reason']}")

    loop = GameLoop(state, sched, renderer=rend)
    loop.on_game_over = make_game_logger(log, interval_getter=lambda: loop.interval_ms,
                                         food_policy=cfg.food_policy, on_logged=_collect)

    print(f"=== Snake sim: {cfg.sim_games} games, food={cfg.food_policy}, seed={cfg.seed} ===")
    try:
        for _ in range(cfg.sim_games):
            if play_one(loop, sched, inp, max_ticks) is RunPhase.RUNNING:
                loop.on_game_over(replace(loop.snapshot(), reason="timeout"))
    finally:
        loop.close()
        log.close()

    if results:
        best = max(r["score"] for r in results)
        mean = sum(r["score"] for r in results) / len(results)
        print(f"best={best} mean={mean:.2f} virtual_ms={sched.now_ms}")
    return results
