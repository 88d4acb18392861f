"""Grid of settled cells: collide, lock, line clear"""
import logging
from typing import List, Optional, Tuple

from tetris_piece import Piece

log = logging.getLogger(__name__)

Color = Tuple[int,int,int]


class Grid:
    """``width`` x ``height`` cells, each with a filled flag and a color.

    ``colors[y][x]`` is only meaningful while ``filled[y][x]`` is set.
    Reads and writes outside the grid are neutral no-ops.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.filled: List[List[bool]] = [[False] * width for _ in range(height)]
        self.colors: List[List[Optional[Color]]] = [[None] * width for _ in range(height)]

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        return self.inside(x, y) and self.filled[y][x]

    def get_color(self, x: int, y: int) -> Optional[Color]:
        if not self.inside(x, y):
            return None
        return self.colors[y][x]

    def set_cell(self, x: int, y: int, color: Color):
        if self.inside(x, y):
            self.filled[y][x] = True
            self.colors[y][x] = color

    def check_collision(self, piece: Piece) -> bool:
        """True if the piece leaves the walls/floor or overlaps a settled cell.

        Cells above the top edge (y < 0) only count against the walls.
        """
        for bx, by in piece.cells():
            if bx < 0 or bx >= self.width or by >= self.height:
                return True
            if by >= 0 and self.filled[by][bx]:
                return True
        return False

    def lock_block(self, piece: Piece):
        for bx, by in piece.cells():
            self.set_cell(bx, by, piece.color)
        log.debug("locked %r", piece)

    def is_line_full(self, y: int) -> bool:
        return all(self.filled[y])

    def _remove_line(self, line_y: int):
        for y in range(line_y, 0, -1):
            self.filled[y] = self.filled[y - 1][:]
            self.colors[y] = self.colors[y - 1][:]
        self.filled[0] = [False] * self.width
        self.colors[0] = [None] * self.width

    def clear_lines(self) -> int:
        """Remove full rows bottom-up and return how many were removed."""
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_line_full(y):
                self._remove_line(y)
                cleared += 1
                # re-check y: the row above just shifted into it
            else:
                y -= 1
        if cleared:
            log.debug("cleared %d line(s)", cleared)
        return cleared

    def reset(self):
        for y in range(self.height):
            self.filled[y] = [False] * self.width
            self.colors[y] = [None] * self.width

    def rows(self) -> List[List[Optional[Color]]]:
        """Row-major copy: a color per filled cell, None elsewhere."""
        return [[self.colors[y][x] if self.filled[y][x] else None
                 for x in range(self.width)] for y in range(self.height)]
