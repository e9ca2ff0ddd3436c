# gridsnake/viz/keyboard.py
from typing import Iterable, List, Optional
import pygame as pg
from gridsnake.core.interfaces import Command, CommandKind, UP, DOWN, LEFT, RIGHT

_DIRS = {pg.K_UP: UP, pg.K_DOWN: DOWN, pg.K_LEFT: LEFT, pg.K_RIGHT: RIGHT}
_DIFFICULTY = {pg.K_1: "easy", pg.K_2: "medium", pg.K_3: "hard", pg.K_4: "very-hard"}


class Keyboard:
    def poll(self, events: Optional[Iterable[pg.event.Event]] = None) -> List[Command]:
        """Commands for `events`, or for everything waiting in the pygame queue."""
        if events is None:
            events = pg.event.get()
        cmds = []
        for e in events:
            cmd = self.translate(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return Command(CommandKind.QUIT)
        if e.type != pg.KEYDOWN:
            return None
        if e.key in _DIRS:           return Command(CommandKind.DIRECTION, _DIRS[e.key])
        if e.key == pg.K_SPACE:      return Command(CommandKind.START)
        if e.key == pg.K_p:          return Command(CommandKind.PAUSE)
        if e.key == pg.K_s:          return Command(CommandKind.STOP)
        if e.key in _DIFFICULTY:     return Command(CommandKind.DIFFICULTY, _DIFFICULTY[e.key])
        if e.key == pg.K_ESCAPE:     return Command(CommandKind.QUIT)
        return None
