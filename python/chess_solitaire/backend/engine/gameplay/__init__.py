from chess_solitaire.backend.engine.gameplay.game import GamePlay, GameStatus

__all__ = ["GamePlay", "GameStatus"]
