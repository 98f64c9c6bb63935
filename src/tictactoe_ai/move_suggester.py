#!/usr/bin/env python3
"""
Move Suggester Script

This script takes a board representation as input and prints the computer's
suggested move for the given difficulty.

Usage:
    tictactoe-suggest <board_string> <ai_symbol> [options]

Board String Format:
    9-character string representing cells 0-8 (row-major), where:
    - 'X' = X occupies this cell
    - 'O' = O occupies this cell
    - '_' = Empty cell

Example:
    tictactoe-suggest "XX_______" O --difficulty hard
    tictactoe-suggest "X___O____" X --difficulty difficult --format json
"""

import sys
import random
import argparse
import json
from typing import List, Optional

from .ai.engine import MoveSelector, MoveDecision
from .ai.evaluation.win_detector import WinDetector
from .game.board import Board
from .models.enums import Difficulty, Symbol


def parse_board_string(board_string: str) -> Board:
    """
    Parse a board string into a Board, rejecting impossible positions.

    Args:
        board_string: 9-character string representing the board state

    Returns:
        Board with the specified state

    Raises:
        ValueError: If board string is invalid or the game is already over
    """
    board = Board.from_string(board_string)

    validation = board.validate()
    if not validation.is_valid:
        raise ValueError(validation.error_message)

    result = WinDetector().check_win(board)
    if result is not None:
        raise ValueError(f"Game is already over: {result}")
    if board.is_full():
        raise ValueError("Board is full")

    return board


def format_output(decision: MoveDecision, format_type: str = 'human') -> str:
    """
    Format the decision output.

    Args:
        decision: MoveDecision object
        format_type: Output format ('human', 'json', 'simple')

    Returns:
        Formatted output string
    """
    if format_type == 'json':
        output = {
            'suggested_move': decision.move,
            'row': decision.move // Board.SIZE,
            'col': decision.move % Board.SIZE,
            'symbol': decision.symbol.value,
            'difficulty': decision.difficulty.value,
            'reasoning': decision.reasoning,
            'metrics': {
                'move_time': decision.metrics.move_time,
                'nodes_evaluated': decision.metrics.nodes_evaluated,
                'evaluation_score': decision.metrics.evaluation_score,
            }
        }
        return json.dumps(output, indent=2)

    elif format_type == 'simple':
        return str(decision.move)

    else:  # human format
        row, col = Board.row_col(decision.move)
        output = []
        output.append(f"Suggested Move: {decision.move} (row {row}, col {col})")
        output.append(f"Symbol: {decision.symbol.value}")
        output.append(f"Difficulty: {decision.difficulty.value}")
        output.append(f"Reasoning: {decision.reasoning}")
        output.append("")
        output.append("Performance Metrics:")
        output.append(f"  Time taken: {decision.metrics.move_time:.3f}s")
        output.append(f"  Nodes evaluated: {decision.metrics.nodes_evaluated}")
        if decision.metrics.evaluation_score is not None:
            output.append(f"  Evaluation score: {decision.metrics.evaluation_score}")

        return "\n".join(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tictactoe-suggest',
        description="Get the computer's move suggestion for a tic-tac-toe board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Block X's top row as O
  tictactoe-suggest "XX_______" O --difficulty hard

  # Perfect play for X on an empty board, JSON output
  tictactoe-suggest "_________" X --difficulty difficult --format json

  # Simple output (just the cell index), reproducible randomness
  tictactoe-suggest "X___O____" X --seed 7 --format simple
        """
    )

    parser.add_argument(
        'board_string',
        help='9-character board representation (X/O/_ for each cell 0-8)'
    )

    parser.add_argument(
        'ai_symbol',
        choices=['X', 'O'],
        help='Symbol the computer plays (X or O)'
    )

    parser.add_argument(
        '--difficulty',
        default=Difficulty.DIFFICULT.value,
        help='easy, hard or difficult (default: difficult)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the random source used by easy and hard'
    )

    parser.add_argument(
        '--format',
        choices=['human', 'json', 'simple'],
        default='human',
        help='Output format (default: human)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable decision logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to handle command line arguments and run the suggestion."""
    args = build_parser().parse_args(argv)

    try:
        board = parse_board_string(args.board_string)
        ai_symbol = Symbol(args.ai_symbol)

        selector = MoveSelector(
            rng=random.Random(args.seed),
            enable_logging=args.verbose
        )
        decision = selector.select_decision(board, args.difficulty, ai_symbol, ai_symbol.opponent())

        print(format_output(decision, args.format))

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
