"""
Core enums for the tic-tac-toe game.
"""
from enum import Enum
from typing import Union

from ..exceptions import InvalidDifficulty


class Symbol(Enum):
    """A player's mark on the board."""
    X = 'X'
    O = 'O'

    def opponent(self) -> "Symbol":
        """Get the other player's mark."""
        return Symbol.O if self is Symbol.X else Symbol.X


class Difficulty(Enum):
    """Computer opponent tiers."""
    EASY = 'easy'
    HARD = 'hard'
    DIFFICULT = 'difficult'

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Resolve a difficulty from a member or its (case-insensitive) name.

        Raises:
            InvalidDifficulty: If the value names no known tier
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDifficulty(f"Unknown difficulty: {value!r}")


class GameState(Enum):
    """Represents the current state of the game."""
    IN_PROGRESS = 'in_progress'
    X_WINS = 'x_wins'
    O_WINS = 'o_wins'
    DRAW = 'draw'

    @classmethod
    def win_for(cls, symbol: Symbol) -> "GameState":
        return cls.X_WINS if symbol is Symbol.X else cls.O_WINS


class GameMode(Enum):
    """Who the human is playing against."""
    TWO_PLAYER = 'two-player'
    VERSUS_AI = 'ai'


class LineType(Enum):
    """Kinds of winning lines on a 3x3 board."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
