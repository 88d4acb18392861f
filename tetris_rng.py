"""Piece randomizers: uniform and fixed-sequence"""
import random
from typing import Iterable, Optional

from tetris_piece import PIECE_TYPES


class PieceRandom:
    """Uniform choice over the seven types; pass ``seed`` for reproducible games."""
    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rand = random.Random(seed)

    def next_piece(self) -> str:
        return self._rand.choice(self.PIECES)


class SequenceRandom:
    """Replays ``sequence`` forever, e.g. ``SequenceRandom("IOT")``."""

    def __init__(self, sequence: Iterable[str]):
        self.sequence = list(sequence)
        if not self.sequence:
            raise ValueError("piece sequence is empty")
        bad = [t for t in self.sequence if t not in PIECE_TYPES]
        if bad:
            raise ValueError(f"unknown piece types in sequence: {bad}")
        self.index = 0

    def next_piece(self) -> str:
        t = self.sequence[self.index % len(self.sequence)]
        self.index += 1
        return t
