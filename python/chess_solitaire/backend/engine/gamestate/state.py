"""Tracks the state of a puzzle in progress."""

from __future__ import annotations

import time

from chess_solitaire.backend.models.board import Board


class GameState:
    """Holds the current board, capture counter, and elapsed time.

    The clock starts with the session and stops on the capture that leaves
    a single piece.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self._started: float = time.time()
        self._finished: float | None = None

    @property
    def elapsed_time(self) -> float:
        end = time.time() if self._finished is None else self._finished
        return end - self._started

    def advance(self, board: Board) -> None:
        """Replace the board with the result of one capture."""
        self.board = board
        self.moves += 1
        if board.is_solution() and self._finished is None:
            self._finished = time.time()

    @property
    def pieces_left(self) -> int:
        return self.board.piece_count

    @property
    def is_solved(self) -> bool:
        return self.board.is_solution()
