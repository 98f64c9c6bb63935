import random

import pytest

from tictactoe_ai.ai.engine import MoveSelector
from tictactoe_ai.exceptions import InvalidDifficulty, InvalidMoveError
from tictactoe_ai.game.board import Board
from tictactoe_ai.game.session import GameSession
from tictactoe_ai.models.enums import Difficulty, GameMode, GameState, Symbol
from tictactoe_ai.models.move import Move

X, O = Symbol.X, Symbol.O


@pytest.fixture
def vs_ai():
    return GameSession(mode=GameMode.VERSUS_AI, difficulty=Difficulty.HARD,
                       selector=MoveSelector(rng=random.Random(0)))


def test_two_player_turns_alternate():
    session = GameSession()
    assert session.status_message() == "It's X's turn"
    session.play(0)
    assert session.current_player is O
    assert session.status_message() == "It's O's turn"
    session.play(4)
    assert session.current_player is X
    assert [m.symbol for m in session.move_history] == [X, O]


def test_two_player_win():
    session = GameSession()
    for cell in (0, 3, 1, 4):
        session.play(cell)
    outcome = session.play(2)
    assert outcome.state is GameState.X_WINS
    assert outcome.is_game_over
    assert outcome.winning_line.positions == (0, 1, 2)
    assert session.status_message() == "Player X wins!"
    assert not session.active


def test_draw():
    session = GameSession()
    # X O X / X O O / O X X
    for cell in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        outcome = session.play(cell)
    assert outcome.state is GameState.DRAW
    assert session.status_message() == "It's a draw!"


def test_no_moves_after_game_over():
    session = GameSession()
    for cell in (0, 3, 1, 4, 2):
        session.play(cell)
    with pytest.raises(InvalidMoveError, match="over"):
        session.play(8)


def test_occupied_cell_keeps_the_turn():
    session = GameSession()
    session.play(4)
    with pytest.raises(InvalidMoveError):
        session.play(4)
    assert session.current_player is O
    assert len(session.move_history) == 1


def test_reset_starts_over():
    session = GameSession()
    for cell in (0, 3, 1, 4, 2):
        session.play(cell)
    session.reset()
    assert session.board == Board()
    assert session.active
    assert session.state is GameState.IN_PROGRESS
    assert session.winning_line is None
    assert session.move_history == []
    assert session.current_player is X


def test_computer_replies_after_human(vs_ai):
    vs_ai.play(0)
    assert vs_ai.is_computer_turn
    with pytest.raises(InvalidMoveError, match="computer's turn"):
        vs_ai.play(1)

    outcome = vs_ai.computer_move()
    assert outcome.move.symbol is O
    assert outcome.move.position == 4
    assert not vs_ai.is_computer_turn
    assert vs_ai.status_message() == "It's X's turn"


def test_computer_move_out_of_turn_is_rejected(vs_ai):
    with pytest.raises(InvalidMoveError):
        vs_ai.computer_move()


def test_computer_opens_when_human_plays_o():
    session = GameSession(mode=GameMode.VERSUS_AI, player_symbol=O, difficulty="hard")
    assert session.ai_symbol is X
    assert session.is_computer_turn
    assert session.computer_move().move.position == 4
    assert session.current_player is O
    assert not session.is_computer_turn


def test_bot_win_message():
    session = GameSession(mode=GameMode.VERSUS_AI, difficulty=Difficulty.DIFFICULT)
    session.board = Board.from_string("OO_XX_X__")
    session.current_player = O
    outcome = session.computer_move()
    assert outcome.move.position == 2
    assert outcome.move.evaluation_score == 10
    assert str(outcome.move) == "O at 2 (row 0, col 2) [+10]"
    assert outcome.winning_line.positions == (0, 1, 2)
    assert session.status_message() == "Bot wins! Better luck next time!"


def test_human_win_message(vs_ai):
    vs_ai.board = Board.from_string("XX_OO____")
    vs_ai.play(2)
    assert vs_ai.state is GameState.X_WINS
    assert vs_ai.status_message() == "You win! Congratulations!"


def test_settings_changes_reset_the_game(vs_ai):
    vs_ai.play(0)
    vs_ai.set_difficulty("difficult")
    assert vs_ai.difficulty is Difficulty.DIFFICULT
    assert vs_ai.board == Board()

    vs_ai.play(0)
    vs_ai.set_player_symbol("O")
    assert vs_ai.player_symbol is O
    assert vs_ai.is_computer_turn

    vs_ai.set_mode(GameMode.TWO_PLAYER)
    assert not vs_ai.is_computer_turn
    assert vs_ai.board == Board()


def test_unknown_difficulty_is_rejected(vs_ai):
    with pytest.raises(InvalidDifficulty):
        vs_ai.set_difficulty("impossible")
    assert vs_ai.difficulty is Difficulty.HARD
    with pytest.raises(InvalidDifficulty):
        GameSession(difficulty="impossible")


def test_full_game_against_minimax_never_loses():
    session = GameSession(mode=GameMode.VERSUS_AI, difficulty=Difficulty.DIFFICULT,
                          selector=MoveSelector(rng=random.Random(0)))
    rng = random.Random(11)
    while session.active:
        if session.is_computer_turn:
            session.computer_move()
        else:
            session.play(rng.choice(session.board.get_empty_cells()))
    assert session.state in (GameState.O_WINS, GameState.DRAW)


def test_move_history_records_grid_coordinates():
    move = Move(position=7, symbol=X)
    assert move.row_col == (2, 1)
    assert move.evaluation_score is None
    assert str(move) == "X at 7 (row 2, col 1)"


@pytest.mark.parametrize("position", [-1, 9, True, "4"])
def test_move_rejects_cells_off_the_grid(position):
    with pytest.raises(ValueError):
        Move(position=position, symbol=O)
