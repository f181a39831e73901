"""Rich terminal frontend: a board with a movable cursor.

Move the cursor with the arrow keys or WASD, press Enter/space once on the
capturing piece and once on its victim.  N plays a hint, V animates a full
solution, R restarts, L loads another board file.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chess_solitaire.backend.engine.gameplay import GamePlay, GameStatus
from chess_solitaire.backend.models.board import Board, BoardLoadError, Coordinate
from chess_solitaire.backend.models.pieces import Piece
from chess_solitaire.frontend.cli.input_handler import get_action

console = Console()

GLYPHS: dict[Piece, str] = {
    Piece.EMPTY: "·",
    Piece.BISHOP: "♗",
    Piece.KING: "♔",
    Piece.KNIGHT: "♘",
    Piece.PAWN: "♙",
    Piece.QUEEN: "♕",
    Piece.ROOK: "♖",
}

_STATUS_STYLES: dict[GameStatus, str] = {
    GameStatus.NEW: "cyan",
    GameStatus.SELECT_NEXT: "bold yellow",
    GameStatus.CAPTURE: "green",
    GameStatus.INVALID_MOVE: "bold red",
    GameStatus.HINT: "cyan",
    GameStatus.WON: "bold green",
    GameStatus.SOLVED: "green",
    GameStatus.NO_SOLUTION: "yellow",
}

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    cursor: Coordinate | None = None,
    selection: Coordinate | None = None,
    landed: Coordinate | None = None,
) -> Table:
    """Return a Rich Table of the board with the interaction highlights."""
    table = Table(
        show_header=True,
        header_style="dim",
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for c in range(board.cols):
        table.add_column(str(c), justify="center")

    for r in range(board.rows):
        cells: list[Text] = [Text(str(r))]
        for c in range(board.cols):
            here = Coordinate(r, c)
            piece = board.cell(r, c)
            style = "dim" if piece.is_empty else "bold white"
            if here == landed:
                style = "bold green"
            if here == selection:
                style = "bold black on yellow"
            if here == cursor:
                style += " reverse"
            cells.append(Text(GLYPHS[piece], style=style))
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, cursor: Coordinate | None, title: str = "") -> None:
    console.clear()

    landed = game.last_capture.target if game.last_capture else None
    board_table = _render_board(game.board, cursor, game.selection, landed)

    stats = Text()
    stats.append("  Captures: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Pieces: ", style="dim")
    stats.append(str(game.state.pieces_left), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    status = Text(game.message, style=_STATUS_STYLES.get(game.status, ""))

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("L", style="bold cyan")
    controls.append("  load   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    name = game.source.name if game.source else "board"
    border = "bold green" if game.is_won else "bright_blue"
    panel = Panel(
        Group(Align.center(board_table), Text(""), Align.center(status)),
        title=f"[bold cyan]{title or 'Chess Solitaire'}  {name}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    console.print(Align.center(controls))


# -- actions ------------------------------------------------------------------


def _move_cursor(board: Board, cursor: Coordinate, action: str) -> Coordinate:
    dr, dc = _CURSOR_STEPS[action]
    row = min(max(cursor.row + dr, 0), board.rows - 1)
    col = min(max(cursor.col + dc, 0), board.cols - 1)
    return Coordinate(row, col)


def _auto_solve(game: GamePlay) -> None:
    """Animate the remaining shortest solution on screen."""
    captures = game.solve()
    if not captures:
        game.hint()  # sets SOLVED or NO_SOLUTION
        return

    for i, capture in enumerate(captures, 1):
        game.capture(*capture)
        _draw(game, None, title=f"Solving… {i}/{len(captures)}")
        sys.stdout.flush()
        time.sleep(0.4)


def _prompt_load(game: GamePlay, data_dir: Path) -> None:
    console.print()
    raw = console.input("  [bold cyan]Board file:[/bold cyan] ").strip()
    if not raw:
        return
    path = Path(raw)
    if not path.exists() and (data_dir / raw).exists():
        path = data_dir / raw
    try:
        game.load(path)
    except BoardLoadError as exc:
        game.message = f"Could not load {raw}: {exc}"


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay, data_dir: Path) -> None:
    cursor = Coordinate(0, 0)

    while True:
        _draw(game, cursor)
        action = get_action()

        if action in _CURSOR_STEPS:
            cursor = _move_cursor(game.board, cursor, action)
        elif action == "select":
            game.select(cursor)
        elif action == "hint":
            game.hint()
        elif action == "solve":
            _auto_solve(game)
        elif action == "reset":
            game.reset()
            cursor = Coordinate(0, 0)
        elif action == "load":
            _prompt_load(game, data_dir)
            cursor = Coordinate(0, 0)
        elif action == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(board_file: Path, data_dir: Path) -> None:
    """Launch the Rich CLI on *board_file*.

    Raises ``BoardLoadError`` if the first board cannot be loaded.
    """
    _play(GamePlay.from_file(board_file), data_dir)
