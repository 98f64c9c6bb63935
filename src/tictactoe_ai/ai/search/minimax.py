"""
Exhaustive minimax search for the Difficult tier.

The search visits the full remaining game tree with no pruning, no depth limit
and no transposition table. A 3x3 board has at most nine plies, so the
worst case (the empty board) is a little over half a million nodes.
"""
import time
from dataclasses import dataclass
from typing import Optional, Tuple
from ...exceptions import NoMovesAvailable
from ...game.board import Board, Cells
from ...models.enums import Symbol
from ..evaluation.win_detector import line_complete


@dataclass
class SearchResult:
    """
    Result of a minimax search.

    Attributes:
        move: Chosen cell, or None for a terminal position
        score: +10 (AI wins), 0 (draw) or -10 (AI loses) under perfect play
        nodes_evaluated: Positions visited; only filled in on the top-level result
        time_elapsed: Seconds spent; only filled in on the top-level result
    """
    move: Optional[int]
    score: int
    nodes_evaluated: int = 0
    time_elapsed: float = 0.0


class MinimaxSolver:
    """
    Plain recursive minimax over immutable cell tuples.

    Scores are from the AI's point of view. Ties are resolved in favour of the
    lowest cell index, so the result for a given board never changes.
    """

    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    def pick(self, board: Board, ai_symbol: Symbol, human_symbol: Symbol) -> int:
        """
        Get the optimal cell for ``ai_symbol``.

        Raises:
            NoMovesAvailable: If the board is full
        """
        return self.solve(board, ai_symbol, human_symbol).move

    def solve(self, board: Board, ai_symbol: Symbol, human_symbol: Symbol) -> SearchResult:
        """
        Search the position with the AI to move.

        Args:
            board: Current board state
            ai_symbol: Maximizing player
            human_symbol: Minimizing player

        Returns:
            Top-level SearchResult with node count and timing

        Raises:
            NoMovesAvailable: If the board is full
            ValueError: If both players use the same symbol
        """
        if ai_symbol is human_symbol:
            raise ValueError("AI and human must play different symbols")
        if board.is_full():
            raise NoMovesAvailable("No empty cells for minimax search", board)

        start_time = time.time()
        nodes = [0]

        def search(cells: Cells, turn: Symbol) -> Tuple[Optional[int], int]:
            nodes[0] += 1

            if line_complete(cells, human_symbol):
                return None, self.LOSS_SCORE
            if line_complete(cells, ai_symbol):
                return None, self.WIN_SCORE
            if None not in cells:
                return None, self.DRAW_SCORE

            next_turn = human_symbol if turn is ai_symbol else ai_symbol
            maximizing = turn is ai_symbol
            best_move = None
            best_score = None

            for index, cell in enumerate(cells):
                if cell is not None:
                    continue
                child = cells[:index] + (turn,) + cells[index + 1:]
                _, score = search(child, next_turn)

                # Strict comparison keeps the first (lowest-index) candidate on ties
                if (best_score is None
                        or (maximizing and score > best_score)
                        or (not maximizing and score < best_score)):
                    best_move, best_score = index, score

            return best_move, best_score

        move, score = search(board.cells, ai_symbol)
        # A completed line with empty cells left still counts as terminal
        if move is None:
            raise NoMovesAvailable("Position is already decided", board)
        return SearchResult(
            move=move,
            score=score,
            nodes_evaluated=nodes[0],
            time_elapsed=time.time() - start_time,
        )
