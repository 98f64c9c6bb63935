"""
Winning line models for the 3x3 board.
"""
from dataclasses import dataclass
from typing import Tuple
from .enums import Symbol, LineType


@dataclass(frozen=True)
class WinLine:
    """
    One of the eight index triples that win the game.

    Attributes:
        type: Row, column or diagonal
        positions: The three cell indices, in board order
    """
    type: LineType
    positions: Tuple[int, int, int]

    def __post_init__(self):
        if len(self.positions) != 3:
            raise ValueError(f"Win line must have exactly 3 positions, got {len(self.positions)}")

        for pos_id in self.positions:
            if not (0 <= pos_id <= 8):
                raise ValueError(f"Position ID must be between 0 and 8, got {pos_id}")

    def __str__(self) -> str:
        return f"{self.type.value.title()} {self.positions}"


# Declaration order matters: scans that stop at the first match use it
WIN_LINES: Tuple[WinLine, ...] = (
    WinLine(LineType.ROW, (0, 1, 2)),
    WinLine(LineType.ROW, (3, 4, 5)),
    WinLine(LineType.ROW, (6, 7, 8)),
    WinLine(LineType.COLUMN, (0, 3, 6)),
    WinLine(LineType.COLUMN, (1, 4, 7)),
    WinLine(LineType.COLUMN, (2, 5, 8)),
    WinLine(LineType.DIAGONAL, (0, 4, 8)),
    WinLine(LineType.DIAGONAL, (2, 4, 6)),
)


@dataclass(frozen=True)
class WinResult:
    """
    Represents the result of a winning condition check.

    Attributes:
        winner: Symbol that completed the line
        line: The completed line
    """
    winner: Symbol
    line: WinLine

    @property
    def winning_positions(self) -> Tuple[int, int, int]:
        return self.line.positions

    def __str__(self) -> str:
        return f"{self.winner.value} wins with {self.line}"
