"""
One-ply heuristic move selection for the Hard tier.

The policy blocks the opponent's open two before anything else, then takes the
center, then a random free corner, then any random cell. It never looks for its
own winning move.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from ...exceptions import NoMovesAvailable
from ...game.board import Board
from ...models.enums import Symbol
from ..evaluation.win_detector import WinDetector
from .random_mover import RandomMover


class HeuristicRule(Enum):
    """Which step of the policy produced a move."""
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    RANDOM = "random"


@dataclass
class HeuristicChoice:
    position: int
    rule: HeuristicRule


class HeuristicMover:
    """
    Block, center, corner, random.

    Features:
    - Blocks the first opponent two-in-a-row found in line declaration order
    - Prefers the center cell
    - Picks uniformly among free corners
    - Falls back to a uniformly random empty cell
    """

    CENTER = 4
    CORNERS = (0, 2, 6, 8)

    def __init__(self, rng: Optional[random.Random] = None,
                 random_mover: Optional[RandomMover] = None):
        """
        Initialize the mover.

        Args:
            rng: Random source for corner and fallback choices
            random_mover: Fallback mover; built on ``rng`` if omitted
        """
        self.rng = rng if rng is not None else random.Random()
        self.random_mover = random_mover if random_mover is not None else RandomMover(self.rng)
        self.win_detector = WinDetector()

    def pick(self, board: Board, own_symbol: Symbol, opponent_symbol: Symbol) -> int:
        """Pick a cell for ``own_symbol``; see ``choose`` for the policy."""
        return self.choose(board, own_symbol, opponent_symbol).position

    def choose(self, board: Board, own_symbol: Symbol, opponent_symbol: Symbol) -> HeuristicChoice:
        """
        Apply the policy and report which rule fired.

        Args:
            board: Current board state
            own_symbol: Mark the mover plays
            opponent_symbol: Mark to block

        Returns:
            HeuristicChoice with the cell and the rule that chose it

        Raises:
            NoMovesAvailable: If the board is full
        """
        empty_cells = board.get_empty_cells()
        if not empty_cells:
            raise NoMovesAvailable("No empty cells for heuristic move", board)

        block = self.win_detector.find_completing_cell(board, opponent_symbol)
        if block is not None:
            return HeuristicChoice(block, HeuristicRule.BLOCK)

        if board.is_empty(self.CENTER):
            return HeuristicChoice(self.CENTER, HeuristicRule.CENTER)

        empty_corners = [idx for idx in self.CORNERS if board.is_empty(idx)]
        if empty_corners:
            corner = empty_corners[self.rng.randrange(len(empty_corners))]
            return HeuristicChoice(corner, HeuristicRule.CORNER)

        return HeuristicChoice(self.random_mover.pick_from(empty_cells, board), HeuristicRule.RANDOM)
