"""Piece kinds and their capture patterns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Piece(StrEnum):
    """Cell contents, keyed by the marker used in board files."""

    EMPTY = "."
    BISHOP = "B"
    KING = "K"
    KNIGHT = "N"
    PAWN = "P"
    QUEEN = "Q"
    ROOK = "R"

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY


@dataclass(frozen=True)
class MovePattern:
    """How a piece reaches its capture targets.

    Fixed patterns land exactly on ``origin + offset``.  Sliding patterns walk
    each offset as a ray and may only capture the first occupied cell on it.
    """

    offsets: tuple[tuple[int, int], ...]
    sliding: bool = False


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# Pawns only capture forward, i.e. toward row 0.
PAWN_OFFSETS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1))

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


PATTERNS: dict[Piece, MovePattern] = {
    Piece.KING: MovePattern(KING_OFFSETS),
    Piece.KNIGHT: MovePattern(KNIGHT_OFFSETS),
    Piece.PAWN: MovePattern(PAWN_OFFSETS),
    Piece.BISHOP: MovePattern(BISHOP_DIRS, sliding=True),
    Piece.ROOK: MovePattern(ROOK_DIRS, sliding=True),
    Piece.QUEEN: MovePattern(QUEEN_DIRS, sliding=True),
}
