from chess_solitaire.backend.engine.gamesolver.configuration import Configuration
from chess_solitaire.backend.engine.gamesolver.solver import SearchResult, Solver

__all__ = ["Configuration", "SearchResult", "Solver"]
