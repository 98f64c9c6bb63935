"""
Board representation for the 3x3 tic-tac-toe game.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
from ..exceptions import InvalidMoveError
from ..models.enums import Symbol


Cells = Tuple[Optional[Symbol], ...]


@dataclass
class ValidationResult:
    """Result of board validation."""
    is_valid: bool
    error_message: Optional[str] = None


class Board:
    """
    The 3x3 tic-tac-toe grid.

    Cells are indexed 0-8 in row-major order:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    Each cell holds ``None`` (empty) or a Symbol. The board does not track whose
    turn it is; turn order belongs to the caller.
    """

    SIZE = 3
    TOTAL_CELLS = 9
    EMPTY_CHAR = '_'

    def __init__(self, cells: Optional[Iterable[Optional[Symbol]]] = None):
        """
        Initialize the board.

        Args:
            cells: Optional initial contents, nine entries of None or Symbol
        """
        if cells is None:
            self._cells: List[Optional[Symbol]] = [None] * self.TOTAL_CELLS
        else:
            self._cells = list(cells)
            if len(self._cells) != self.TOTAL_CELLS:
                raise ValueError(f"Board must have exactly {self.TOTAL_CELLS} cells, got {len(self._cells)}")
            for index, cell in enumerate(self._cells):
                if cell is not None and not isinstance(cell, Symbol):
                    raise ValueError(f"Cell {index} must be None or a Symbol, got {cell!r}")

    @property
    def cells(self) -> Cells:
        """Immutable snapshot of the cell contents."""
        return tuple(self._cells)

    @staticmethod
    def row_col(index: int) -> Tuple[int, int]:
        """Convert a cell index to (row, col)."""
        return divmod(index, Board.SIZE)

    @staticmethod
    def index_of(row: int, col: int) -> int:
        """Convert (row, col) to a cell index."""
        if not (0 <= row < Board.SIZE and 0 <= col < Board.SIZE):
            raise InvalidMoveError(f"Invalid coordinates: ({row}, {col})")
        return row * Board.SIZE + col

    def get_cell(self, index: int) -> Optional[Symbol]:
        """Get the symbol in a cell, or None if it is empty."""
        self._check_index(index)
        return self._cells[index]

    def is_empty(self, index: int) -> bool:
        return self.get_cell(index) is None

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells in ascending order."""
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def get_occupied_cells(self, symbol: Optional[Symbol] = None) -> List[int]:
        """Get occupied cell indices, optionally filtered by symbol."""
        if symbol is None:
            return [i for i, cell in enumerate(self._cells) if cell is not None]
        return [i for i, cell in enumerate(self._cells) if cell is symbol]

    def count(self, symbol: Symbol) -> int:
        return sum(1 for cell in self._cells if cell is symbol)

    def is_full(self) -> bool:
        """Check if the board is full."""
        return None not in self._cells

    def place(self, index: int, symbol: Symbol) -> None:
        """
        Place a symbol in an empty cell.

        Args:
            index: Cell index (0-8)
            symbol: Mark to place

        Raises:
            InvalidMoveError: If the index is out of range or the cell is taken
        """
        if not isinstance(symbol, Symbol):
            raise InvalidMoveError(f"Symbol must be a Symbol enum, got {symbol!r}")
        self._check_index(index)
        if self._cells[index] is not None:
            raise InvalidMoveError(f"Cell {index} is already occupied by {self._cells[index].value}")
        self._cells[index] = symbol

    def with_move(self, index: int, symbol: Symbol) -> 'Board':
        """Return a copy of the board with one more mark placed."""
        board = self.copy()
        board.place(index, symbol)
        return board

    def reset(self):
        """Reset every cell to empty."""
        self._cells = [None] * self.TOTAL_CELLS

    def copy(self) -> 'Board':
        return Board(self._cells)

    def validate(self) -> ValidationResult:
        """
        Check that the mark counts could come from alternating play.

        Returns:
            ValidationResult describing the first problem found
        """
        x_count = self.count(Symbol.X)
        o_count = self.count(Symbol.O)
        if abs(x_count - o_count) > 1:
            return ValidationResult(
                False,
                f"Invalid move count: X has {x_count} moves, O has {o_count} moves"
            )
        return ValidationResult(True)

    @classmethod
    def from_string(cls, board_string: str) -> 'Board':
        """
        Parse a nine character board string.

        Each character is 'X', 'O' or '_' (empty), in cell order.

        Raises:
            ValueError: If the string is malformed
        """
        if len(board_string) != cls.TOTAL_CELLS:
            raise ValueError(
                f"Board string must be exactly {cls.TOTAL_CELLS} characters, got {len(board_string)}"
            )

        cells: List[Optional[Symbol]] = []
        for i, char in enumerate(board_string.upper()):
            if char == cls.EMPTY_CHAR:
                cells.append(None)
            elif char in ('X', 'O'):
                cells.append(Symbol(char))
            else:
                raise ValueError(f"Invalid character '{board_string[i]}' at position {i}. Use 'X', 'O', or '_'")
        return cls(cells)

    def to_string(self) -> str:
        """Inverse of from_string."""
        return ''.join(cell.value if cell else self.EMPTY_CHAR for cell in self._cells)

    def _check_index(self, index: int):
        if not isinstance(index, int) or isinstance(index, bool) or not (0 <= index < self.TOTAL_CELLS):
            raise InvalidMoveError(f"Invalid cell index: {index!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __str__(self) -> str:
        rows = []
        for row in range(self.SIZE):
            cells = self._cells[row * self.SIZE:(row + 1) * self.SIZE]
            rows.append(" " + " | ".join(cell.value if cell else ' ' for cell in cells))
        return "\n---+---+---\n".join(rows)


def render_index_map(cells: Sequence[Optional[Symbol]] = (None,) * Board.TOTAL_CELLS) -> str:
    """Render a board where empty cells show their index, for prompting humans."""
    rows = []
    for row in range(Board.SIZE):
        parts = []
        for col in range(Board.SIZE):
            index = row * Board.SIZE + col
            cell = cells[index]
            parts.append(cell.value if cell else str(index))
        rows.append(" " + " | ".join(parts))
    return "\n---+---+---\n".join(rows)
