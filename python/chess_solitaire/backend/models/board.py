"""Board model for the chess solitaire puzzle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from chess_solitaire.backend.models.pieces import PATTERNS, Piece

_LOGGER = logging.getLogger(__name__)


class BoardLoadError(ValueError):
    """A board description could not be read or parsed."""


class Coordinate(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class Capture(NamedTuple):
    """The piece on *origin* takes the piece on *target*."""

    origin: Coordinate
    target: Coordinate

    def __str__(self) -> str:
        return f"{self.origin} x {self.target}"


@dataclass(frozen=True)
class Board:
    """An immutable chess solitaire position.

    Cells are stored as a tuple of rows of :class:`Piece`.  Two boards are
    equal (and hash alike) when every cell matches, no matter which captures
    produced them.  ``occupied`` is derived from the grid on construction.
    """

    grid: tuple[tuple[Piece, ...], ...]
    occupied: frozenset[Coordinate] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        grid = tuple(tuple(Piece(cell) for cell in row) for row in self.grid)
        if len({len(row) for row in grid}) > 1:
            raise ValueError("All board rows must have the same number of cells.")
        object.__setattr__(self, "grid", grid)
        object.__setattr__(
            self,
            "occupied",
            frozenset(
                Coordinate(r, c)
                for r, row in enumerate(grid)
                for c, cell in enumerate(row)
                if not cell.is_empty
            ),
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a board description.

        The first line holds the row and column counts, every following line
        one row of whitespace-separated markers::

            2 3
            R . N
            . P .
        """
        lines = [line.split() for line in text.splitlines()]
        while lines and not lines[-1]:
            lines.pop()
        if not lines:
            raise BoardLoadError("Board description is empty.")

        header, body = lines[0], lines[1:]
        if len(header) != 2:
            raise BoardLoadError(
                f"Expected a '<rows> <cols>' header, got {' '.join(header)!r}."
            )
        try:
            rows, cols = int(header[0]), int(header[1])
        except ValueError as exc:
            raise BoardLoadError(f"Invalid board dimensions: {exc}") from exc
        if rows < 1 or cols < 1:
            raise BoardLoadError(f"Board must be at least 1x1, got {rows}x{cols}.")

        if len(body) != rows:
            raise BoardLoadError(f"Expected {rows} rows, got {len(body)}.")

        grid: list[tuple[Piece, ...]] = []
        for r, tokens in enumerate(body):
            if len(tokens) != cols:
                raise BoardLoadError(
                    f"Row {r} has {len(tokens)} cells, expected {cols}."
                )
            row: list[Piece] = []
            for c, token in enumerate(tokens):
                try:
                    row.append(Piece(token))
                except ValueError as exc:
                    raise BoardLoadError(
                        f"Unknown cell marker {token!r} at ({r}, {c})."
                    ) from exc
            grid.append(tuple(row))
        return cls(grid=tuple(grid))

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Board:
        """Load a board from a text file, wrapping I/O failures."""
        try:
            text = Path(path).read_text()
        except (OSError, UnicodeDecodeError) as exc:
            raise BoardLoadError(str(exc)) from exc
        return cls.from_text(text)

    def with_capture(self, origin: Coordinate, target: Coordinate) -> Board:
        """Return the board after the piece on *origin* moves onto *target*.

        Legality is not checked here; :meth:`captures` only ever hands out
        legal pairs.
        """
        grid = [list(row) for row in self.grid]
        grid[target[0]][target[1]] = grid[origin[0]][origin[1]]
        grid[origin[0]][origin[1]] = Piece.EMPTY
        return Board(grid=tuple(tuple(row) for row in grid))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def piece_count(self) -> int:
        return len(self.occupied)

    def cell(self, row: int, col: int) -> Piece:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_solution(self) -> bool:
        """Check if exactly one piece is left on the board."""
        return self.piece_count == 1

    # -- move generation ------------------------------------------------------

    def captures(self) -> list[Capture]:
        """List every legal capture.

        Pieces are visited in row-major order and each piece's directions in
        the order of its pattern, so the result is stable across runs.
        """
        found: list[Capture] = []
        for origin in sorted(self.occupied):
            pattern = PATTERNS[self.cell(*origin)]
            for dr, dc in pattern.offsets:
                target = self._first_occupied(origin, dr, dc, pattern.sliding)
                if target is not None:
                    found.append(Capture(origin, target))
        return found

    def neighbors(self) -> list[Board]:
        """Return the boards reachable by exactly one capture."""
        return [self.with_capture(*capture) for capture in self.captures()]

    def capture_to(self, other: Board) -> Capture | None:
        """Find the capture that turns this board into *other*, if any."""
        for capture in self.captures():
            if self.with_capture(*capture) == other:
                return capture
        return None

    def _first_occupied(
        self, origin: Coordinate, dr: int, dc: int, sliding: bool
    ) -> Coordinate | None:
        # A ray ends at the first piece it meets; anything behind it is shielded.
        r, c = origin.row + dr, origin.col + dc
        while self.in_bounds(r, c):
            if not self.grid[r][c].is_empty:
                return Coordinate(r, c)
            if not sliding:
                break
            r, c = r + dr, c + dc
        return None

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.grid)


def load_board(path: str | PathLike[str]) -> Board:
    """Load a board file, logging what was read."""
    board = Board.from_file(path)
    _LOGGER.info(
        "Loaded %dx%d board with %d pieces from %s",
        board.rows,
        board.cols,
        board.piece_count,
        path,
    )
    return board
