"""Piece model, shapes, clockwise rotation"""
import random
from typing import Dict, List, Optional, Tuple

Matrix = List[List[int]]

PIECE_TYPES = ["I", "O", "T", "S", "Z", "J", "L"]

SHAPES: Dict[str, Matrix] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (0,255,255),
    "O": (255,255,0),
    "T": (128,0,128),
    "S": (0,128,0),
    "Z": (255,0,0),
    "J": (0,0,255),
    "L": (255,165,0),
}

SPAWN_X, SPAWN_Y = 3, 0


def rotate_cw(m: Matrix) -> Matrix:
    """new[x][rows-1-y] = old[y][x]"""
    rows, cols = len(m), len(m[0])
    out = [[0] * rows for _ in range(cols)]
    for y in range(rows):
        for x in range(cols):
            out[x][rows - 1 - y] = m[y][x]
    return out


class Piece:
    """A tetromino: fixed type and color, mutable shape and position.

    Every operation here is unconditional. Whether the result is a legal
    placement is decided by ``Grid.check_collision``.
    """

    def __init__(self, t: str, x: int = SPAWN_X, y: int = SPAWN_Y):
        if t not in SHAPES:
            raise ValueError(f"unknown piece type {t!r}")
        self.t = t
        self.shape: Matrix = [r[:] for r in SHAPES[t]]
        self.color = COLORS[t]
        self.x = x
        self.y = y

    @staticmethod
    def create(t: Optional[str] = None, rng: Optional[random.Random] = None,
               x: int = SPAWN_X, y: int = SPAWN_Y) -> "Piece":
        if t is None:
            t = (rng or random).choice(PIECE_TYPES)
        return Piece(t, x, y)

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> List[Tuple[int,int]]:
        """Absolute (x, y) grid coordinates of the occupied cells."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    # rotation

    def rotate(self):
        self.shape = rotate_cw(self.shape)

    def undo_rotate(self):
        # three clockwise turns equal one counter-clockwise turn
        for _ in range(3):
            self.rotate()

    # translation

    def move_left(self): self.x -= 1
    def move_right(self): self.x += 1
    def move_down(self): self.y += 1
    def undo_move_left(self): self.x += 1
    def undo_move_right(self): self.x -= 1
    def undo_move_down(self): self.y -= 1

    def __repr__(self):
        return f"Piece({self.t!r}, x={self.x}, y={self.y})"
