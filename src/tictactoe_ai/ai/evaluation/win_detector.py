"""
Win detection for 3x3 tic-tac-toe.
"""
from typing import Optional, Sequence, Union
from ...models.enums import Symbol, GameState
from ...models.win_line import WinLine, WinResult, WIN_LINES
from ...game.board import Board


BoardLike = Union[Board, Sequence[Optional[Symbol]]]

# Plain index triples for the hot path in the search
_LINE_POSITIONS = tuple(line.positions for line in WIN_LINES)


def _cells_of(board: BoardLike) -> Sequence[Optional[Symbol]]:
    return board.cells if isinstance(board, Board) else board


def line_complete(cells: Sequence[Optional[Symbol]], symbol: Symbol) -> bool:
    """Check whether ``symbol`` fills any winning line in a raw cell sequence."""
    for a, b, c in _LINE_POSITIONS:
        if cells[a] is symbol and cells[b] is symbol and cells[c] is symbol:
            return True
    return False


class WinDetector:
    """
    Detects wins, draws and one-move threats.

    Every method accepts either a Board or a plain sequence of nine cells so
    the search can work on immutable tuples.
    """

    def has_win(self, board: BoardLike, symbol: Symbol) -> bool:
        """True iff some winning line holds three of ``symbol``."""
        return line_complete(_cells_of(board), symbol)

    def is_draw(self, board: BoardLike) -> bool:
        """
        True iff no cell is empty.

        A full board can coincide with the last move completing a line, so
        check for a win first.
        """
        return None not in _cells_of(board)

    def check_win(self, board: BoardLike) -> Optional[WinResult]:
        """
        Check if there's a winning condition on the board.

        Args:
            board: Current board state

        Returns:
            WinResult for the first completed line in declaration order, None otherwise
        """
        cells = _cells_of(board)
        for line in WIN_LINES:
            a, b, c = line.positions
            if cells[a] is not None and cells[a] is cells[b] is cells[c]:
                return WinResult(winner=cells[a], line=line)
        return None

    def get_winning_line(self, board: BoardLike, symbol: Symbol) -> Optional[WinLine]:
        """Get the first line completed by ``symbol``, if any."""
        cells = _cells_of(board)
        for line in WIN_LINES:
            if all(cells[pos] is symbol for pos in line.positions):
                return line
        return None

    def find_completing_cell(self, board: BoardLike, symbol: Symbol) -> Optional[int]:
        """
        Find the cell that would complete a line for ``symbol``.

        Lines are scanned in declaration order and the first line holding two
        of ``symbol`` plus one empty cell wins.

        Args:
            board: Current board state
            symbol: Symbol whose two-in-a-row to look for

        Returns:
            Index of the empty cell on that line, or None
        """
        cells = _cells_of(board)
        for line in WIN_LINES:
            owned = [pos for pos in line.positions if cells[pos] is symbol]
            empty = [pos for pos in line.positions if cells[pos] is None]
            if len(owned) == 2 and len(empty) == 1:
                return empty[0]
        return None

    def get_game_state(self, board: BoardLike) -> GameState:
        """Classify a board as won, drawn or still in progress."""
        result = self.check_win(board)
        if result is not None:
            return GameState.win_for(result.winner)
        if self.is_draw(board):
            return GameState.DRAW
        return GameState.IN_PROGRESS
