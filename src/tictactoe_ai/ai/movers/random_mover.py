"""
Uniform random move selection (Easy tier and last-resort fallback).
"""
import random
from typing import Optional, Sequence
from ...exceptions import NoMovesAvailable
from ...game.board import Board


class RandomMover:
    """Picks any empty cell with equal probability."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source; a private unseeded one is created if omitted
        """
        self.rng = rng if rng is not None else random.Random()

    def pick(self, board: Board) -> int:
        """
        Pick a random empty cell.

        Raises:
            NoMovesAvailable: If the board is full
        """
        return self.pick_from(board.get_empty_cells(), board)

    def pick_from(self, candidates: Sequence[int], board: Optional[Board] = None) -> int:
        """Pick uniformly from an ascending list of candidate cells."""
        if not candidates:
            raise NoMovesAvailable("No empty cells for random move", board)
        return candidates[self.rng.randrange(len(candidates))]
