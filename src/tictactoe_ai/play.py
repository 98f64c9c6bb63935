"""
Terminal front end: play tic-tac-toe against a friend or the computer.
"""
import sys
import time
import random
import argparse
from typing import List, Optional

from .ai.engine import MoveSelector
from .exceptions import InvalidMoveError
from .game.board import render_index_map
from .game.session import GameSession, MoveOutcome
from .models.enums import Difficulty, GameMode, Symbol

QUIT_COMMANDS = ('q', 'quit')
RESET_COMMANDS = ('r', 'reset')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog='tictactoe-play', description="Play tic-tac-toe in the terminal")
    p.add_argument("--mode", choices=[m.value for m in GameMode], default=GameMode.VERSUS_AI.value,
                   help="opponent type")
    p.add_argument("--symbol", choices=["X", "O"], default="X", help="your mark against the computer (X moves first)")
    p.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.EASY.value,
                   help="computer strength")
    p.add_argument("--seed", type=int, default=None, help="seed for the computer's random choices")
    p.add_argument("--delay", type=float, default=GameSession.AI_MOVE_DELAY,
                   help="seconds to wait before the computer moves")
    p.add_argument("--verbose", action="store_true", help="log every computer decision")
    return p.parse_args(argv)


def describe(outcome: MoveOutcome) -> str:
    text = f"{outcome.move.symbol.value} plays {outcome.move.position}"
    if outcome.winning_line is not None:
        text += f" (completes {outcome.winning_line})"
    return text


def run_game(session: GameSession, delay: float = GameSession.AI_MOVE_DELAY) -> None:
    """
    Drive a session until the player quits.

    After each finished game the player may press Enter (or 'r') to play again.
    """
    print("Cells are numbered 0-8. Type 'r' to restart, 'q' to quit.")

    while True:
        print()
        print(render_index_map(session.board.cells))
        print(session.status_message())

        if session.is_computer_turn:
            # Let the human's mark show before the reply appears
            time.sleep(delay)
            print(describe(session.computer_move()))
            continue

        prompt = f"Play {session.current_player.value} at [0-8]: " if session.active else "Play again? [Enter/q]: "
        try:
            raw = input(prompt).strip().lower()
        except EOFError:
            return

        if raw in QUIT_COMMANDS:
            return
        if raw in RESET_COMMANDS or (not session.active and raw == ''):
            session.reset()
            continue
        if not session.active:
            continue

        try:
            index = int(raw)
        except ValueError:
            print("Please type a number 0..8.")
            continue

        try:
            print(describe(session.play(index)))
        except InvalidMoveError as e:
            print(f"Illegal move: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    session = GameSession(
        mode=GameMode(args.mode),
        player_symbol=Symbol(args.symbol),
        difficulty=Difficulty(args.difficulty),
        selector=MoveSelector(rng=random.Random(args.seed), enable_logging=args.verbose),
    )
    try:
        run_game(session, delay=args.delay)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
