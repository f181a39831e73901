"""Chess Solitaire.

Usage::

    chess-solitaire solve data/chess/mixed.txt   # print a shortest solution
    chess-solitaire play                         # Rich terminal, first bundled board
    chess-solitaire play my_board.txt
    chess-solitaire list                         # bundled boards
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.table import Table

from chess_solitaire.backend.engine.gamesolver import Solver
from chess_solitaire.backend.models.board import Board, BoardLoadError, load_board

ROOT = Path(__file__).resolve().parent  # python/chess_solitaire/
PROJECT_ROOT = ROOT.parent.parent
DATA_DIR = PROJECT_ROOT / "data" / "chess"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(add_completion=False)


# -- helpers ------------------------------------------------------------------


def _bundled_boards(data_dir: Path) -> list[Path]:
    if not data_dir.is_dir():
        return []
    return sorted(data_dir.glob("*.txt"))


def _print_solution(start: Board) -> None:
    solver: Solver[Board] = Solver()
    path = solver.shortest_path(start)

    # The starting board counts as one configuration.
    print(f"Total Configs: {solver.total_edges_examined + 1}")
    print(f"Unique Configs: {solver.unique_states_seen}")
    if not path:
        print("No solution")
        return
    for step, board in enumerate(path):
        print(f"Step {step}:")
        print(board)
        print()


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search and loading details.",
    ),
) -> None:
    """Chess Solitaire: capture until a single piece remains."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@app.command()
def solve(
    board_file: Optional[Path] = typer.Argument(
        None, help="Board description to solve.",
    ),
) -> None:
    """Print a shortest capture sequence for BOARD_FILE."""
    if board_file is None:
        print("Usage: chess-solitaire solve BOARD_FILE")
        return

    try:
        start = load_board(board_file)
    except BoardLoadError as exc:
        print(exc)
        return

    print("Initial Board:")
    print(start)
    print()
    _print_solution(start)


@app.command()
def play(
    board_file: Optional[Path] = typer.Argument(
        None, help="Board to play. Defaults to the first bundled board.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Directory searched for bundled boards and relative load paths.",
    ),
) -> None:
    """Play a board interactively in the Rich terminal frontend."""
    if board_file is None:
        boards = _bundled_boards(data_dir)
        if not boards:
            print("Usage: chess-solitaire play BOARD_FILE")
            return
        board_file = boards[0]

    from chess_solitaire.frontend.cli.rich.app import run

    try:
        run(board_file, data_dir)
    except BoardLoadError as exc:
        print(exc)


@app.command("list")
def list_boards(
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Directory holding board files.",
    ),
) -> None:
    """Show the bundled boards."""
    console = Console()
    boards = _bundled_boards(data_dir)
    if not boards:
        console.print(f"No boards found in {data_dir}.")
        return

    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("Board", style="bold cyan")
    table.add_column("Size", justify="right")
    table.add_column("Pieces", justify="right", style="yellow")
    for path in boards:
        try:
            board = Board.from_file(path)
        except BoardLoadError as exc:
            table.add_row(path.name, "-", f"[red]{exc}[/red]")
            continue
        table.add_row(path.name, f"{board.rows}x{board.cols}", str(board.piece_count))
    console.print(table)


if __name__ == "__main__":
    app()
