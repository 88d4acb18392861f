"""Game engine: drop timing, locking, scoring, levels, game over"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tetris_board import Grid
from tetris_config import CONFIG, drop_interval_ms
from tetris_piece import Matrix, Piece
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)

# base points per simultaneous line clear, multiplied by the level
SCORE_TABLE: Dict[int, int] = {1: 100, 2: 300, 3: 500, 4: 800}


@dataclass(frozen=True)
class GameSnapshot:
    score: int
    level: int
    lines_cleared: int
    game_over: bool
    drop_interval: int
    current_type: str
    current_shape: Tuple[Tuple[int, ...], ...]
    current_pos: Tuple[int, int]
    next_type: str
    next_shape: Tuple[Tuple[int, ...], ...]


def _frozen(m: Matrix) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(r) for r in m)


class Engine:
    """Owns the grid plus the current and next piece.

    The frame driver feeds elapsed time to :meth:`tick`; input handlers call
    :meth:`move_left`, :meth:`move_right`, :meth:`soft_drop`, :meth:`rotate`
    and :meth:`reset` directly. Moves are attempted, checked against the
    grid and undone on collision. Once ``game_over`` is set everything but
    :meth:`reset` is a no-op.

    ``rng`` is any object with ``next_piece() -> str``.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None, rng=None):
        width = CONFIG["GRID_WIDTH"] if width is None else width
        height = CONFIG["GRID_HEIGHT"] if height is None else height
        self._grid = Grid(width, height)
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.spawn_x = width // 2 - 2
        self._new_game()

    def _new_game(self):
        self._score = 0
        self._level = 1
        self._lines_cleared = 0
        self._game_over = False
        self._drop_interval = drop_interval_ms(1)
        self._elapsed = 0
        self._current = self._make_piece()
        self._next = self._make_piece()

    def _make_piece(self) -> Piece:
        return Piece.create(self.rng.next_piece(), x=self.spawn_x, y=0)

    # ---------- read-only state ----------
    @property
    def grid(self) -> Grid: return self._grid

    @property
    def current(self) -> Piece: return self._current

    @property
    def next(self) -> Piece: return self._next

    @property
    def score(self) -> int: return self._score

    @property
    def level(self) -> int: return self._level

    @property
    def lines_cleared(self) -> int: return self._lines_cleared

    @property
    def game_over(self) -> bool: return self._game_over

    @property
    def drop_interval(self) -> int:
        """Milliseconds between automatic drop steps."""
        return self._drop_interval

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            score=self._score, level=self._level,
            lines_cleared=self._lines_cleared, game_over=self._game_over,
            drop_interval=self._drop_interval,
            current_type=self._current.t, current_shape=_frozen(self._current.shape),
            current_pos=(self._current.x, self._current.y),
            next_type=self._next.t, next_shape=_frozen(self._next.shape),
        )

    # ---------- timing ----------
    def tick(self, elapsed_ms: float) -> bool:
        """Accumulate frame time; run one drop step once ``drop_interval`` has passed."""
        if self._game_over:
            return False
        self._elapsed += max(0, elapsed_ms)
        if self._elapsed < self._drop_interval:
            return False
        self._elapsed = 0
        self.update()
        return True

    def update(self):
        """One logical drop step: fall, or lock + clear + spawn."""
        if self._game_over:
            return
        piece = self._current
        piece.move_down()
        if not self._grid.check_collision(piece):
            return
        piece.undo_move_down()
        self._grid.lock_block(piece)
        lines = self._grid.clear_lines()
        if lines > 0:
            self._add_score(lines)
            self._lines_cleared += lines
            self._update_level()
        self._spawn()

    def _add_score(self, lines: int):
        if lines in SCORE_TABLE:
            self._score += SCORE_TABLE[lines] * self._level

    def _update_level(self):
        new_level = self._lines_cleared // CONFIG["LINES_PER_LEVEL"] + 1
        if new_level > self._level:
            self._level = new_level
            self._drop_interval = drop_interval_ms(new_level)
            log.info("level %d, drop interval %dms", new_level, self._drop_interval)

    def _spawn(self):
        self._current = self._next
        self._next = self._make_piece()
        if self._grid.check_collision(self._current):
            self._game_over = True
            log.info("game over: score=%d level=%d lines=%d",
                     self._score, self._level, self._lines_cleared)

    # ---------- player actions ----------
    def move_left(self):
        if self._game_over: return
        self._current.move_left()
        if self._grid.check_collision(self._current):
            self._current.undo_move_left()

    def move_right(self):
        if self._game_over: return
        self._current.move_right()
        if self._grid.check_collision(self._current):
            self._current.undo_move_right()

    def soft_drop(self):
        """Step down one row for a point. A blocked drop does not lock."""
        if self._game_over: return
        self._current.move_down()
        if self._grid.check_collision(self._current):
            self._current.undo_move_down()
        else:
            self._score += 1

    def rotate(self):
        if self._game_over: return
        self._current.rotate()
        if self._grid.check_collision(self._current):
            self._current.undo_rotate()

    def reset(self):
        self._grid.reset()
        self._new_game()
        log.info("game reset")
