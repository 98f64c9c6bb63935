"""
Tic-tac-toe with a three-tier computer opponent.
"""
from .core import has_win, is_draw, select_move
from .exceptions import (
    TicTacToeError, MoveSelectionError, InvalidDifficulty, NoMovesAvailable, InvalidMoveError
)
from .game.board import Board
from .models.enums import Symbol, Difficulty, GameState, GameMode

__version__ = "1.0.0"

__all__ = [
    'has_win', 'is_draw', 'select_move',
    'Board', 'Symbol', 'Difficulty', 'GameState', 'GameMode',
    'TicTacToeError', 'MoveSelectionError', 'InvalidDifficulty', 'NoMovesAvailable', 'InvalidMoveError',
]
