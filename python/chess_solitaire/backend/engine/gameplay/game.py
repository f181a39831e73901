"""Core gameplay logic: selections, captures, hints and the win condition."""

from __future__ import annotations

import logging
from enum import StrEnum
from os import PathLike
from pathlib import Path

from chess_solitaire.backend.engine.gamesolver import Solver
from chess_solitaire.backend.engine.gamestate import GameState
from chess_solitaire.backend.models.board import Board, Capture, Coordinate, load_board

_LOGGER = logging.getLogger(__name__)


class GameStatus(StrEnum):
    NEW = "new"
    SELECT_NEXT = "select_next"
    CAPTURE = "capture"
    INVALID_MOVE = "invalid_move"
    HINT = "hint"
    WON = "won"
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"


STATUS_MESSAGES: dict[GameStatus, str] = {
    GameStatus.NEW: "Loaded",
    GameStatus.SELECT_NEXT: "Selected",
    GameStatus.CAPTURE: "Captured",
    GameStatus.INVALID_MOVE: "Invalid selection",
    GameStatus.HINT: "Next move!",
    GameStatus.WON: "You won!",
    GameStatus.SOLVED: "Already solved!",
    GameStatus.NO_SOLUTION: "No more valid moves",
}


class GamePlay:
    """Orchestrates a single puzzle session.

    Every action returns a :class:`GameStatus`; ``message`` holds the text a
    frontend should show for it.  Invalid moves and dead ends are reported
    this way rather than raised.
    """

    def __init__(self, board: Board, source: Path | None = None) -> None:
        self.source = source
        self._initial = board
        self.state = GameState(board)
        self.selection: Coordinate | None = None
        self.last_capture: Capture | None = None
        self.status = GameStatus.NEW
        self.message = self._describe(GameStatus.NEW)
        self._solver: Solver[Board] = Solver()

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        return cls(board)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> GamePlay:
        """Start a session from a board file (raises ``BoardLoadError``)."""
        return cls(load_board(path), source=Path(path))

    # -- session management ---------------------------------------------------

    def load(self, path: str | PathLike[str]) -> GameStatus:
        """Switch to a new board file.

        On ``BoardLoadError`` the exception propagates and the current
        session is left as it was.
        """
        board = load_board(path)
        self.source = Path(path)
        self._initial = board
        return self._restart()

    def reset(self) -> GameStatus:
        """Go back to the board the session started from."""
        return self._restart()

    def _restart(self) -> GameStatus:
        self.state = GameState(self._initial)
        self.selection = None
        self.last_capture = None
        return self._set_status(GameStatus.NEW)

    # -- moves ----------------------------------------------------------------

    def select(self, coord: Coordinate) -> GameStatus:
        """Handle one click on *coord*.

        The first click picks a piece to move, the second names the piece
        to capture.
        """
        if self.selection is None:
            if coord not in self.state.board.occupied:
                return self._set_status(GameStatus.INVALID_MOVE, coord)
            self.selection = coord
            return self._set_status(GameStatus.SELECT_NEXT, coord)

        origin, self.selection = self.selection, None
        return self.capture(origin, coord)

    def capture(self, origin: Coordinate, target: Coordinate) -> GameStatus:
        """Apply the capture *origin* x *target* if it is legal."""
        board = self.state.board
        capture = Capture(Coordinate(*origin), Coordinate(*target))
        if capture not in board.captures():
            _LOGGER.debug("Rejected capture %s", capture)
            return self._set_status(GameStatus.INVALID_MOVE, capture.target)

        self._apply(capture)
        if self.state.is_solved:
            return self._set_status(GameStatus.WON)
        return self._set_status(GameStatus.CAPTURE, capture)

    def hint(self) -> GameStatus:
        """Play the first capture of a shortest solution from here."""
        board = self.state.board
        if board.is_solution():
            return self._set_status(GameStatus.SOLVED)

        following = self._solver.hint(board)
        if following is None:
            return self._set_status(GameStatus.NO_SOLUTION)

        capture = board.capture_to(following)
        self.selection = None
        self.state.advance(following)
        self.last_capture = capture
        if self.state.is_solved:
            return self._set_status(GameStatus.WON)
        return self._set_status(GameStatus.HINT, capture)

    def solve(self) -> list[Capture]:
        """Return the captures of a shortest solution from the current board.

        Empty when the board is already solved or has no solution.
        """
        path = self._solver.shortest_path(self.state.board)
        return [
            capture
            for before, after in zip(path, path[1:])
            if (capture := before.capture_to(after)) is not None
        ]

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _apply(self, capture: Capture) -> None:
        self.selection = None
        self.state.advance(self.state.board.with_capture(*capture))
        self.last_capture = capture

    def _set_status(
        self, status: GameStatus, detail: Coordinate | Capture | None = None
    ) -> GameStatus:
        self.status = status
        self.message = self._describe(status, detail)
        return status

    def _describe(
        self, status: GameStatus, detail: Coordinate | Capture | None = None
    ) -> str:
        text = STATUS_MESSAGES[status]
        if status is GameStatus.NEW and self.source is not None:
            return f"{text}: {self.source.name}"
        if isinstance(detail, Capture) and status is GameStatus.CAPTURE:
            return f"{text} {detail.target} from {detail.origin}"
        if detail is not None:
            return f"{text} {detail}"
        return text
