"""Breadth-first puzzle solver."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Generic

from chess_solitaire.backend.engine.gamesolver.configuration import C

_LOGGER = logging.getLogger(__name__)


@dataclass
class SearchResult(Generic[C]):
    """Outcome of one search.

    Both counters are sampled after each expansion, so they describe the
    search at the moment it stopped.  A start state that is already solved
    is never expanded and reports zero for both.
    """

    path: list[C] = field(default_factory=list)
    solution: C | None = None
    total_edges_examined: int = 0
    unique_states_seen: int = 0

    @property
    def found(self) -> bool:
        return self.solution is not None

    @property
    def moves(self) -> int:
        """Number of moves on the path, or -1 when there is no solution."""
        return len(self.path) - 1 if self.path else -1


class Solver(Generic[C]):
    """Finds shortest move sequences between puzzle configurations.

    :meth:`search` keeps all bookkeeping local and returns a
    :class:`SearchResult`.  :meth:`shortest_path` does the same but also
    remembers the result on the instance, for callers that want to read the
    solution and statistics afterwards.
    """

    def __init__(self) -> None:
        self._last: SearchResult[C] = SearchResult()

    # -- searching -------------------------------------------------------------

    @staticmethod
    def search(start: C) -> SearchResult[C]:
        """Run a BFS from *start* to the nearest solved configuration."""
        frontier: deque[C] = deque([start])
        predecessors: dict[C, C] = {start: start}
        solution: C | None = None
        total_edges = 0
        unique_states = 0

        while frontier:
            current = frontier.popleft()
            if current.is_solution():
                solution = current
                break

            neighbors = current.neighbors()
            for neighbor in neighbors:
                if neighbor not in predecessors:
                    predecessors[neighbor] = current
                    frontier.append(neighbor)
            total_edges += len(neighbors)
            unique_states = len(predecessors)

        path = Solver._construct_path(predecessors, start, solution)
        _LOGGER.debug(
            "Search finished: %s after %d edges, %d unique configurations",
            f"{len(path) - 1} moves" if path else "no solution",
            total_edges,
            unique_states,
        )
        return SearchResult(
            path=path,
            solution=solution,
            total_edges_examined=total_edges,
            unique_states_seen=unique_states,
        )

    def shortest_path(self, start: C) -> list[C]:
        """Return the configurations from *start* to a solution, or ``[]``."""
        self._last = self.search(start)
        return self._last.path

    def hint(self, start: C) -> C | None:
        """Return the next configuration on a shortest path.

        ``None`` when *start* is already solved or cannot be solved.  Every
        call searches from scratch.
        """
        path = self.shortest_path(start)
        if len(path) < 2:
            return None
        return path[1]

    # -- results of the most recent search -------------------------------------

    @property
    def last_result(self) -> SearchResult[C]:
        return self._last

    @property
    def solution(self) -> C | None:
        return self._last.solution

    @property
    def total_edges_examined(self) -> int:
        return self._last.total_edges_examined

    @property
    def unique_states_seen(self) -> int:
        return self._last.unique_states_seen

    # -- helpers ----------------------------------------------------------------

    @staticmethod
    def _construct_path(
        predecessors: dict[C, C], start: C, end: C | None
    ) -> list[C]:
        if end is None or end not in predecessors:
            return []
        path: list[C] = []
        current = end
        # The start maps to itself, so stop on identity rather than equality.
        while current is not start:
            path.append(current)
            current = predecessors[current]
        path.append(start)
        path.reverse()
        return path
