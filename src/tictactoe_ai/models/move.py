"""
Record of a mark placed on the 3x3 grid.
"""
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple
from .enums import Symbol

# Mirrors Board.SIZE; models must not import the game package
GRID_SIZE = 3


@dataclass
class Move:
    """
    One entry of a session's move history.

    ``evaluation_score`` is the minimax score when the difficult tier chose
    the cell and None for human moves and the other tiers.
    """
    position: int
    symbol: Symbol
    timestamp: float = field(default_factory=time.time)
    evaluation_score: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise ValueError(f"Cell index must be an int, got {self.position!r}")
        if self.position not in range(GRID_SIZE * GRID_SIZE):
            raise ValueError(f"Cell index out of range: {self.position}")
        if not isinstance(self.symbol, Symbol):
            raise ValueError(f"Expected a Symbol, got {self.symbol!r}")

    @property
    def row_col(self) -> Tuple[int, int]:
        return divmod(self.position, GRID_SIZE)

    def __str__(self) -> str:
        row, col = self.row_col
        text = f"{self.symbol.value} at {self.position} (row {row}, col {col})"
        if self.evaluation_score is not None:
            text += f" [{self.evaluation_score:+d}]"
        return text
