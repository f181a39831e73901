"""The contract a puzzle state has to meet to be searched by :class:`Solver`."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

C = TypeVar("C", bound="Configuration")


class Configuration(Protocol):
    """One immutable snapshot of a puzzle.

    Implementations must compare and hash by value, so that the same layout
    reached along different paths is a single graph node.
    """

    def __hash__(self) -> int: ...

    def is_solution(self) -> bool: ...

    def neighbors(self: C) -> Sequence[C]:
        """States reachable in one move, in a stable order."""
        ...
