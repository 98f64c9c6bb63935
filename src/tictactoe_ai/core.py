"""
The narrow interface a game loop needs from the engine.

    >>> from tictactoe_ai import Board, Symbol, has_win, select_move
    >>> board = Board.from_string("XX_______")
    >>> select_move(board, "hard", Symbol.O, Symbol.X)
    2
"""
import random
from typing import Optional, Union
from .ai.engine import MoveSelector
from .ai.evaluation.win_detector import WinDetector
from .game.board import Board
from .models.enums import Difficulty, Symbol

_win_detector = WinDetector()


def has_win(board: Board, symbol: Symbol) -> bool:
    """True iff ``symbol`` occupies a complete row, column or diagonal."""
    return _win_detector.has_win(board, symbol)


def is_draw(board: Board) -> bool:
    """True iff no cell is empty. Check ``has_win`` for both symbols first."""
    return _win_detector.is_draw(board)


def select_move(board: Board, difficulty: Union[Difficulty, str], ai_symbol: Symbol,
                human_symbol: Symbol, rng: Optional[random.Random] = None) -> int:
    """
    Choose the computer's cell without touching the board.

    Raises:
        InvalidDifficulty: If the difficulty is not a known tier
        NoMovesAvailable: If the board is full or already won
    """
    return MoveSelector(rng=rng).select_move(board, difficulty, ai_symbol, human_symbol)
