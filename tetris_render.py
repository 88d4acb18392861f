"""
Rendering helpers for the Tetris front end.

- Pre-render the static background (grid lines + panel frame) once per Dims.
- Cache a BOARD SURFACE with the settled cells; rebuild it only when the grid changes.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_layout import Dims
from tetris_board import Grid
from tetris_piece import Piece

BG = (0,0,0)
GRID_LINE = (169,169,169)
PANEL = (240,240,240)
PREVIEW_BG = (211,211,211)
TEXT = (20,20,20)
GAME_OVER = (255,0,0)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    game_over: Optional[bool] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    over_s: Optional[list] = None


class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(PANEL)
        pygame.draw.rect(self.bg, BG, (d.board_x, d.board_y, d.board_w, d.board_h))
        # Next preview frame
        self.pv_x = d.panel_x + d.margin
        self.pv_y = d.panel_y + 30
        pygame.draw.rect(self.bg, PREVIEW_BG, (self.pv_x, self.pv_y, d.cell*5, d.cell*5))
        self.next_label = self.font.render("Next Piece:", True, TEXT)

    def _draw_grid_lines(self, screen: pygame.Surface):
        d = self.dims
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(screen, GRID_LINE, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(screen, GRID_LINE, (d.board_x, Y), (d.board_x + d.board_w, Y))

    def _cell(self, surf: pygame.Surface, color: Tuple[int,int,int], px: int, py: int):
        c = self.dims.cell
        pygame.draw.rect(surf, color, (px+1, py+1, c-2, c-2))
        pygame.draw.rect(surf, BG, (px+1, py+1, c-2, c-2), 1)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid: Grid):
        """Rebuilds the settled-cells surface from grid contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid.rows()):
            for x, color in enumerate(row):
                if color:
                    self._cell(self.board_surface, color, x*c, y*c)

    # ---------- Falling piece ----------
    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        d = self.dims
        for bx, by in piece.cells():
            if 0 <= by < d.rows:
                self._cell(screen, piece.color, d.board_x + bx*d.cell, d.board_y + by*d.cell)

    # ---------- HUD / Panel ----------
    def draw_panel(self, screen: pygame.Surface, score: int, level: int, game_over: bool, nxt: Piece):
        d = self.dims
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.big_font.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = self.big_font.render(f"Level: {level}", True, TEXT)
        if game_over != self.hud.game_over:
            self.hud.game_over = game_over
            self.hud.over_s = [self.big_font.render("GAME OVER!", True, GAME_OVER),
                               self.big_font.render("Press SPACE", True, GAME_OVER)] if game_over else []
        screen.blit(self.next_label, (d.panel_x + d.margin, d.panel_y + 6))
        half = d.cell // 2
        for bx, by in nxt.cells():
            px = self.pv_x + (bx - nxt.x)*d.cell + half
            py = self.pv_y + (by - nxt.y)*d.cell + half
            self._cell(screen, nxt.color, px, py)
        y = self.pv_y + d.cell*5 + 10
        for surf in (self.hud.score_s, self.hud.level_s, *self.hud.over_s):
            screen.blit(surf, (d.panel_x + d.margin, y)); y += 30

    def draw(self, screen: pygame.Surface, engine):
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        self.draw_piece(screen, engine.current)
        self._draw_grid_lines(screen)
        self.draw_panel(screen, engine.score, engine.level, engine.game_over, engine.next)
