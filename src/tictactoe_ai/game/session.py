"""
Game session: the state a front end keeps between clicks.

A session owns the board, the mode, both players' symbols, the difficulty and
whose turn it is. The engine itself never sees any of this; the session asks
it for a move and applies the answer.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union
from ..ai.engine import MoveSelector
from ..ai.evaluation.win_detector import WinDetector
from ..exceptions import InvalidMoveError
from ..models.enums import Difficulty, GameMode, GameState, Symbol
from ..models.move import Move
from ..models.win_line import WinLine
from .board import Board


@dataclass
class MoveOutcome:
    """
    What happened after a move was applied.

    Attributes:
        move: The applied move
        state: Game state after the move
        winning_line: Completed line to highlight, if the move won
    """
    move: Move
    state: GameState
    winning_line: Optional[WinLine] = None

    @property
    def is_game_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS


@dataclass
class GameSession:
    """
    One game of tic-tac-toe, against a friend or the computer.

    X always moves first. In VERSUS_AI mode with the human on O, the computer
    opens: check ``is_computer_turn`` after every reset.
    """

    # Seconds a front end should wait before showing the computer's reply
    AI_MOVE_DELAY = 0.5

    mode: GameMode = GameMode.TWO_PLAYER
    player_symbol: Symbol = Symbol.X
    difficulty: Difficulty = Difficulty.EASY
    selector: MoveSelector = field(default_factory=MoveSelector)

    board: Board = field(default_factory=Board, init=False)
    current_player: Symbol = field(default=Symbol.X, init=False)
    active: bool = field(default=True, init=False)
    state: GameState = field(default=GameState.IN_PROGRESS, init=False)
    winning_line: Optional[WinLine] = field(default=None, init=False)
    move_history: List[Move] = field(default_factory=list, init=False)

    def __post_init__(self):
        self.mode = GameMode(self.mode)
        self.player_symbol = Symbol(self.player_symbol)
        self.difficulty = Difficulty.parse(self.difficulty)
        self._win_detector = WinDetector()

    @property
    def ai_symbol(self) -> Symbol:
        return self.player_symbol.opponent()

    @property
    def is_computer_turn(self) -> bool:
        return (self.mode is GameMode.VERSUS_AI and self.active
                and self.current_player is self.ai_symbol)

    def reset(self):
        """Start a new game with the current settings."""
        self.board.reset()
        self.current_player = Symbol.X
        self.active = True
        self.state = GameState.IN_PROGRESS
        self.winning_line = None
        self.move_history.clear()

    def set_mode(self, mode: Union[GameMode, str]):
        self.mode = GameMode(mode)
        self.reset()

    def set_player_symbol(self, symbol: Union[Symbol, str]):
        self.player_symbol = Symbol(symbol)
        self.reset()

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        self.difficulty = Difficulty.parse(difficulty)
        self.reset()

    def play(self, index: int) -> MoveOutcome:
        """
        Apply a human move for the current player.

        Args:
            index: Cell index (0-8)

        Returns:
            MoveOutcome after the move

        Raises:
            InvalidMoveError: If the game is over, it is the computer's turn,
                or the cell is out of range or taken
        """
        if not self.active:
            raise InvalidMoveError("The game is over; reset to play again")
        if self.is_computer_turn:
            raise InvalidMoveError(f"It's the computer's turn ({self.ai_symbol.value})")
        return self._apply(index, self.current_player)

    def computer_move(self) -> MoveOutcome:
        """
        Ask the selector for a move and apply it.

        Raises:
            InvalidMoveError: If it is not the computer's turn
        """
        if not self.is_computer_turn:
            raise InvalidMoveError("It's not the computer's turn")

        decision = self.selector.select_decision(
            self.board, self.difficulty, self.ai_symbol, self.player_symbol
        )
        return self._apply(decision.move, self.ai_symbol, decision.metrics.evaluation_score)

    def _apply(self, index: int, symbol: Symbol, score: Optional[float] = None) -> MoveOutcome:
        self.board.place(index, symbol)
        move = Move(position=index, symbol=symbol, evaluation_score=score)
        self.move_history.append(move)

        result = self._win_detector.check_win(self.board)
        if result is not None:
            self.state = GameState.win_for(result.winner)
            self.winning_line = result.line
            self.active = False
        elif self._win_detector.is_draw(self.board):
            self.state = GameState.DRAW
            self.active = False
        else:
            self.current_player = symbol.opponent()

        return MoveOutcome(move=move, state=self.state, winning_line=self.winning_line)

    def status_message(self) -> str:
        """The one-line status a front end shows under the board."""
        if self.state is GameState.DRAW:
            return "It's a draw!"
        if self.state is GameState.IN_PROGRESS:
            return f"It's {self.current_player.value}'s turn"

        winner = Symbol.X if self.state is GameState.X_WINS else Symbol.O
        if self.mode is GameMode.VERSUS_AI:
            if winner is self.ai_symbol:
                return "Bot wins! Better luck next time!"
            return "You win! Congratulations!"
        return f"Player {winner.value} wins!"
