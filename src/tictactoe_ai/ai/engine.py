"""
Move selection controller for the computer opponent.

This module maps a difficulty tier onto one of the three movers, records
per-decision metrics and logs every decision.
"""
import time
import random
import logging
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass

from ..exceptions import NoMovesAvailable
from ..game.board import Board
from ..models.enums import Difficulty, Symbol
from .evaluation.win_detector import WinDetector
from .movers.random_mover import RandomMover
from .movers.heuristic_mover import HeuristicMover
from .search.minimax import MinimaxSolver


@dataclass
class DecisionMetrics:
    """
    Performance metrics for one decision.

    Attributes:
        move_time: Time taken to select the move (seconds)
        nodes_evaluated: Positions visited by the search (1 for non-search tiers)
        evaluation_score: Minimax score of the move, None for non-search tiers
    """
    move_time: float
    nodes_evaluated: int
    evaluation_score: Optional[int]


@dataclass
class MoveDecision:
    """
    A selected move together with how it was chosen.

    Attributes:
        move: The chosen cell index (0-8)
        symbol: Mark the computer will place
        difficulty: Tier that chose the move
        reasoning: Human-readable explanation
        metrics: Performance metrics for this decision
    """
    move: int
    symbol: Symbol
    difficulty: Difficulty
    reasoning: str
    metrics: DecisionMetrics


class MoveSelector:
    """
    Chooses the computer's move for a difficulty tier.

    - EASY: uniform random empty cell
    - HARD: block / center / corner / random heuristic
    - DIFFICULT: exhaustive minimax

    The selector never mutates the board it is given.
    """

    LOGGER_NAME = 'tictactoe_ai'

    def __init__(self, rng: Optional[random.Random] = None, enable_logging: bool = False):
        """
        Initialize the selector.

        Args:
            rng: Random source shared by the random and heuristic movers
            enable_logging: Whether to log every decision
        """
        self.rng = rng if rng is not None else random.Random()
        self.enable_logging = enable_logging

        self.win_detector = WinDetector()
        self.random_mover = RandomMover(self.rng)
        self.heuristic_mover = HeuristicMover(self.rng, self.random_mover)
        self.minimax_solver = MinimaxSolver()

        self.decision_history: List[MoveDecision] = []
        self.total_time = 0.0

        self.logger = logging.getLogger(self.LOGGER_NAME)
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up console logging for decisions."""
        self.logger.setLevel(logging.INFO)

        # Create console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def select_move(self, board: Board, difficulty: Union[Difficulty, str],
                    ai_symbol: Symbol, human_symbol: Symbol) -> int:
        """
        Select the computer's cell.

        Args:
            board: Current board state
            difficulty: Tier, as a Difficulty or its name
            ai_symbol: Mark the computer plays
            human_symbol: Mark the opponent plays

        Returns:
            Index of an empty cell

        Raises:
            InvalidDifficulty: If the difficulty is not a known tier
            NoMovesAvailable: If the board is full or already won
            ValueError: If both players use the same symbol
        """
        return self.select_decision(board, difficulty, ai_symbol, human_symbol).move

    def select_decision(self, board: Board, difficulty: Union[Difficulty, str],
                        ai_symbol: Symbol, human_symbol: Symbol) -> MoveDecision:
        """Like ``select_move`` but returns the full MoveDecision."""
        tier = Difficulty.parse(difficulty)

        if not isinstance(ai_symbol, Symbol) or not isinstance(human_symbol, Symbol):
            raise ValueError(f"Invalid symbols: {ai_symbol!r}, {human_symbol!r}")
        if ai_symbol is human_symbol:
            raise ValueError("AI and human must play different symbols")

        if board.is_full():
            raise NoMovesAvailable("No legal moves available", board)
        win_result = self.win_detector.check_win(board)
        if win_result:
            raise NoMovesAvailable(f"Game is already over, winner: {win_result.winner.value}", board)

        start_time = time.time()
        nodes_evaluated = 1
        evaluation_score = None

        if tier is Difficulty.EASY:
            move = self.random_mover.pick(board)
            reasoning = "Random empty cell"
        elif tier is Difficulty.HARD:
            choice = self.heuristic_mover.choose(board, ai_symbol, human_symbol)
            move = choice.position
            reasoning = self._describe_rule(choice.rule.value)
        else:
            result = self.minimax_solver.solve(board, ai_symbol, human_symbol)
            move = result.move
            nodes_evaluated = result.nodes_evaluated
            evaluation_score = result.score
            reasoning = self._describe_score(result.score)

        move_time = time.time() - start_time
        decision = MoveDecision(
            move=move,
            symbol=ai_symbol,
            difficulty=tier,
            reasoning=reasoning,
            metrics=DecisionMetrics(
                move_time=move_time,
                nodes_evaluated=nodes_evaluated,
                evaluation_score=evaluation_score,
            ),
        )

        self.total_time += move_time
        self.decision_history.append(decision)
        self._log_decision(decision)
        return decision

    @staticmethod
    def _describe_rule(rule: str) -> str:
        return {
            "block": "Blocking opponent's winning line",
            "center": "Taking the center",
            "corner": "Taking a free corner",
            "random": "Random empty cell",
        }[rule]

    @staticmethod
    def _describe_score(score: int) -> str:
        if score > 0:
            return "Forced win"
        if score < 0:
            return "Opponent can force a win"
        return "Best play leads to a draw"

    def _log_decision(self, decision: MoveDecision):
        """Log a decision for performance monitoring."""
        if not self.enable_logging:
            return

        score = decision.metrics.evaluation_score
        self.logger.info(
            f"{decision.difficulty.value.upper()} - Move: {decision.move}, "
            f"Symbol: {decision.symbol.value}, "
            f"Time: {decision.metrics.move_time:.3f}s, "
            f"Nodes: {decision.metrics.nodes_evaluated}, "
            f"Score: {score if score is not None else '-'}, "
            f"Reasoning: {decision.reasoning}"
        )

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of decision statistics.

        Returns:
            Dictionary with performance metrics
        """
        total = len(self.decision_history)
        if total == 0:
            return {
                'total_decisions': 0,
                'average_time': 0.0,
                'total_nodes': 0,
                'decisions_by_difficulty': {},
            }

        by_difficulty: Dict[str, int] = {}
        for decision in self.decision_history:
            key = decision.difficulty.value
            by_difficulty[key] = by_difficulty.get(key, 0) + 1

        return {
            'total_decisions': total,
            'average_time': self.total_time / total,
            'total_nodes': sum(d.metrics.nodes_evaluated for d in self.decision_history),
            'decisions_by_difficulty': by_difficulty,
        }

    def reset_performance_tracking(self):
        """Reset all performance tracking data."""
        self.decision_history.clear()
        self.total_time = 0.0
