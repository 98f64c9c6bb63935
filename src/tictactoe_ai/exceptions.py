"""
Exceptions raised by the tic-tac-toe engine and game session.
"""
from typing import Optional


class TicTacToeError(Exception):
    """Base class for all errors raised by this package."""


class MoveSelectionError(TicTacToeError):
    """Raised when a computer move cannot be chosen."""

    def __init__(self, message: str, board: Optional[object] = None):
        super().__init__(message)
        self.board = board


class InvalidDifficulty(MoveSelectionError, ValueError):
    """The requested difficulty tier does not exist."""


class NoMovesAvailable(MoveSelectionError):
    """A mover was asked for a move on a full board."""


class InvalidMoveError(TicTacToeError, ValueError):
    """A placement that the board or session cannot accept."""
