# gridsnake/runners/run_snake.py
from __future__ import annotations
import pygame as pg
from gridsnake.config import AppConfig
from gridsnake.core.game_state import GameState
from gridsnake.core.game_loop import GameLoop
from gridsnake.core.game_log import CSVLogger, NullLogger, ALL_KEYS, make_game_logger
from gridsnake.core.interfaces import CommandKind
from gridsnake.viz.renderer_pygame import PygameRenderer
from gridsnake.viz.pygame_scheduler import PygameScheduler
from gridsnake.viz.keyboard import Keyboard


def main(cfg: AppConfig) -> None:
    """Human play in a pygame window."""
    state = GameState(cfg)

    rend = PygameRenderer()
    rend.open(cfg)
    sched = PygameScheduler()
    kbd = Keyboard()

    log = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else NullLogger()

    def _summary(game: int, row: dict) -> None:
        print(f"[game {game}] score={row['score']} length={row['length']} reason={row['reason']}")

    loop: GameLoop

    on_over = make_game_logger(log, interval_getter=lambda: loop.interval_ms,
                               food_policy=cfg.food_policy, on_logged=_summary)

    loop = GameLoop(state, sched, renderer=rend, on_game_over=on_over)

    print("=== Snake ===")
    print(f"board: {cfg.board_extent}px / {cfg.cell_size}px cells  food: {cfg.food_policy}  tick: {loop.interval_ms} ms")
    print("arrows steer | space start | p pause | s stop | 1-4 difficulty | esc quit")

    running = True
    try:
        while running:
            # one event at a time so ticks and key presses keep their order
            for e in pg.event.get():
                if sched.dispatch(e):
                    continue
                cmd = kbd.translate(e)
                if cmd is None:
                    continue
                if cmd.kind is CommandKind.QUIT:
                    running = False
                    break
                loop.handle(cmd)
            rend.redraw()
            rend.tick(cfg.fps)
    finally:
        loop.close()
        rend.close()
        log.close()
