# gridsnake/viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot, RunPhase, score_text
import gridsnake.viz.renderer_colors as theme


_PHASE_TEXT = {
    RunPhase.IDLE: "Space: start",
    RunPhase.RUNNING: "",
    RunPhase.PAUSED: "Paused (P to resume)",
    RunPhase.OVER: "Game Over! S to reset",
}


class PygameRenderer:
    """Flat-colored cells; cell coordinates are already pixels."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None
        self.last: Optional[Snapshot] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.board_extent, cfg.board_extent + self._hud_height()))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False

    def render(self, s: Snapshot) -> None:
        self.last = s
        self.draw(s)

    def redraw(self) -> None:
        if self.last is not None:
            self.draw(self.last)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = s.cell_size

        surf.fill(theme.BG)

        if self.cfg.render_grid_lines:
            for p in range(0, s.board_extent + 1, c):
                pg.draw.line(surf, theme.GRID, (p, 0), (p, s.board_extent))
                pg.draw.line(surf, theme.GRID, (0, p), (s.board_extent, p))

        for f in s.foods:
            fx, fy = f.cell
            pg.draw.rect(surf, f.kind.color, pg.Rect(fx, fy, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x, y, c, c))

        if self.cfg.render_show_hud:
            self._draw_hud(s)

        if self._auto_flip:
            pg.display.flip()

    def _hud_height(self) -> int:
        assert self.cfg is not None
        return self.cfg.hud_px if self.cfg.render_show_hud else 0

    def _draw_hud(self, s: Snapshot) -> None:
        surf = self.surf
        top = s.board_extent
        pg.draw.rect(surf, theme.HUD_BG, pg.Rect(0, top, surf.get_width(), self._hud_height()))
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        txt = self._font.render(score_text(s), True, theme.TEXT)
        surf.blit(txt, (6, top + 6))
        status = _PHASE_TEXT[s.phase]
        if status:
            ovr = self._font.render(status, True, theme.OVERLAY)
            surf.blit(ovr, (surf.get_width() - ovr.get_width() - 6, top + 6))

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None
