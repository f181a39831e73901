"""Solver test suite.

Boards live under ``<project_root>/data/chess/`` and their expected outcomes
in ``<project_root>/fixtures/boards.json``.  Every returned path is replayed
through the real game engine to check that each step is a legal capture.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from chess_solitaire.backend.engine.gameplay import GamePlay, GameStatus
from chess_solitaire.backend.engine.gamesolver import SearchResult, Solver
from chess_solitaire.backend.models.board import Board, load_board

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"
BOARDS_DIR = PROJECT_ROOT / "data" / "chess"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("boards.json")
_SOLVABLE = [b for b in _BOARDS if b["moves"] is not None]
_UNSOLVABLE = [b for b in _BOARDS if b["moves"] is None]


# -- a tiny hand-made graph ---------------------------------------------------

_GRAPH: dict[str, list[str]] = {
    "start": ["left", "right"],
    "left": ["far"],
    "right": ["goal"],
    "far": ["deep_goal"],
    "goal": [],
    "deep_goal": [],
    # two equally short routes; the first neighbour wins
    "fork": ["x", "y"],
    "x": ["goal_x"],
    "y": ["goal_y"],
    "goal_x": [],
    "goal_y": [],
    # a cycle without any goal
    "loop": ["spin"],
    "spin": ["loop", "twirl"],
    "twirl": ["spin"],
}
_GOALS = {"goal", "deep_goal", "goal_x", "goal_y"}


@dataclass(frozen=True)
class Node:
    name: str

    def is_solution(self) -> bool:
        return self.name in _GOALS

    def neighbors(self) -> list[Node]:
        return [Node(n) for n in _GRAPH[self.name]]


def _names(path: list[Node]) -> list[str]:
    return [node.name for node in path]


# -- generic search ------------------------------------------------------------


def test_finds_nearest_goal() -> None:
    solver: Solver[Node] = Solver()
    path = solver.shortest_path(Node("start"))

    assert _names(path) == ["start", "right", "goal"]
    assert solver.solution == Node("goal")


def test_statistics_reflect_the_moment_search_stopped() -> None:
    result = Solver.search(Node("start"))

    # start, left, right and far are expanded before "goal" is dequeued
    assert result.total_edges_examined == 5
    assert result.unique_states_seen == 6


def test_ties_follow_neighbour_order() -> None:
    assert _names(Solver().shortest_path(Node("fork"))) == ["fork", "x", "goal_x"]


def test_exhausted_frontier_returns_empty_path() -> None:
    solver: Solver[Node] = Solver()

    assert solver.shortest_path(Node("loop")) == []
    assert solver.solution is None
    assert solver.unique_states_seen == 3
    assert solver.total_edges_examined == 4


def test_solved_start_is_not_expanded() -> None:
    start = Node("goal")
    solver: Solver[Node] = Solver()
    path = solver.shortest_path(start)

    assert path == [start]
    assert path[0] is start
    assert solver.total_edges_examined == 0
    assert solver.unique_states_seen == 0


def test_path_starts_with_the_given_object() -> None:
    start = Node("start")
    path = Solver().shortest_path(start)

    assert path[0] is start


def test_search_does_not_touch_instance_results() -> None:
    solver: Solver[Node] = Solver()
    solver.shortest_path(Node("start"))

    other = solver.search(Node("loop"))

    assert isinstance(other, SearchResult)
    assert not other.found
    assert solver.solution == Node("goal")
    assert solver.total_edges_examined == 5


def test_solvers_keep_separate_results() -> None:
    first: Solver[Node] = Solver()
    second: Solver[Node] = Solver()
    first.shortest_path(Node("start"))
    second.shortest_path(Node("loop"))

    assert first.solution == Node("goal")
    assert second.solution is None


def test_fresh_solver_has_no_results() -> None:
    solver: Solver[Node] = Solver()

    assert solver.solution is None
    assert solver.total_edges_examined == 0
    assert solver.unique_states_seen == 0
    assert solver.last_result.moves == -1


def test_hint_returns_next_state() -> None:
    solver: Solver[Node] = Solver()

    assert solver.hint(Node("start")) == Node("right")
    assert solver.hint(Node("goal")) is None
    assert solver.hint(Node("loop")) is None


# -- chess boards --------------------------------------------------------------


def _board(data: dict) -> Board:
    return load_board(BOARDS_DIR / data["file"])


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_board(board_data: dict) -> None:
    """Solve the board and replay the path through the game engine."""
    board = _board(board_data)
    assert board.piece_count == board_data["pieces"]

    solver: Solver[Board] = Solver()
    path = solver.shortest_path(board)

    # ---- path sanity ---------------------------------------------------------
    assert path, f"Solvable board returned no path ({board_data['id']})"
    assert path[0] == board
    assert path[-1].is_solution()
    assert solver.solution == path[-1]
    assert len(path) - 1 == board_data["moves"]

    # ---- replay every step as a capture --------------------------------------
    game = GamePlay.from_board(board)
    for i, (before, after) in enumerate(zip(path, path[1:])):
        assert after in before.neighbors(), f"Step {i} is not a legal capture"
        capture = before.capture_to(after)
        assert capture is not None
        status = game.capture(*capture)
        assert status is not GameStatus.INVALID_MOVE
        assert game.board == after

    assert game.is_won


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_no_shorter_solution_exists(board_data: dict) -> None:
    board = _board(board_data)
    path = Solver().shortest_path(board)

    layer = {board}
    for _ in range(len(path) - 1):
        assert not any(b.is_solution() for b in layer)
        layer = {n for b in layer for n in b.neighbors()}


@pytest.mark.parametrize("board_data", _UNSOLVABLE, ids=_ids)
def test_unsolvable_board(board_data: dict) -> None:
    solver: Solver[Board] = Solver()

    assert solver.shortest_path(_board(board_data)) == []
    assert solver.solution is None


def test_already_solved_board() -> None:
    board = Board.from_text("1 2\nR .\n")
    solver: Solver[Board] = Solver()

    assert board.is_solution()
    assert solver.shortest_path(board) == [board]
    assert solver.total_edges_examined == 0
    assert solver.unique_states_seen == 0


def test_rook_takes_knight() -> None:
    board = Board.from_text("1 2\nR N\n")
    solver: Solver[Board] = Solver()
    path = solver.shortest_path(board)

    assert path == [board, Board.from_text("1 2\n. R\n")]
    assert path[-1].is_solution()
    assert solver.total_edges_examined == 1
    assert solver.unique_states_seen == 2


def test_unreachable_pair_statistics() -> None:
    solver: Solver[Board] = Solver()

    assert solver.shortest_path(Board.from_text("1 3\nN . P\n")) == []
    assert solver.solution is None
    assert solver.total_edges_examined == 0
    assert solver.unique_states_seen == 1


def test_dead_end_statistics() -> None:
    result = Solver.search(Board.from_text("2 2\nP .\nN B\n"))

    assert result.path == []
    assert result.total_edges_examined == 1
    assert result.unique_states_seen == 2


def test_blocked_rook_needs_two_captures() -> None:
    result = Solver.search(Board.from_text("1 4\nR . N B\n"))

    assert [str(b) for b in result.path] == ["R . N B", ". . R B", ". . . R"]
    assert result.total_edges_examined == 2
    assert result.unique_states_seen == 3
