from chess_solitaire.backend.models.board import (
    Board,
    BoardLoadError,
    Capture,
    Coordinate,
    load_board,
)
from chess_solitaire.backend.models.pieces import PATTERNS, MovePattern, Piece

__all__ = [
    "PATTERNS",
    "Board",
    "BoardLoadError",
    "Capture",
    "Coordinate",
    "MovePattern",
    "Piece",
    "load_board",
]
