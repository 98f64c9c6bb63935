import logging
import random

import pytest

from tictactoe_ai import core
from tictactoe_ai.ai.engine import MoveSelector
from tictactoe_ai.exceptions import InvalidDifficulty, NoMovesAvailable
from tictactoe_ai.models.enums import Difficulty, Symbol

X, O = Symbol.X, Symbol.O


@pytest.mark.parametrize("value, expected", [
    ("easy", Difficulty.EASY),
    ("Hard", Difficulty.HARD),
    (" DIFFICULT ", Difficulty.DIFFICULT),
    (Difficulty.HARD, Difficulty.HARD),
])
def test_difficulty_parse(value, expected):
    assert Difficulty.parse(value) is expected


@pytest.mark.parametrize("value", ["impossible", "", None, 2])
def test_unknown_difficulty_is_rejected(seeded_selector, board, value):
    with pytest.raises(InvalidDifficulty):
        seeded_selector.select_move(board("XX__O____"), value, O, X)
    assert seeded_selector.decision_history == []


def test_invalid_difficulty_is_a_value_error():
    assert issubclass(InvalidDifficulty, ValueError)


def test_easy_returns_an_empty_cell(seeded_selector, board):
    b = board("XOX_O_X__")
    for _ in range(20):
        assert seeded_selector.select_move(b, Difficulty.EASY, O, X) in (3, 5, 7, 8)


def test_hard_uses_the_heuristic(seeded_selector, board):
    decision = seeded_selector.select_decision(board("XX_______"), "hard", O, X)
    assert decision.move == 2
    assert decision.reasoning == "Blocking opponent's winning line"
    assert decision.metrics.evaluation_score is None


def test_difficult_uses_minimax(seeded_selector, board):
    decision = seeded_selector.select_decision(board("XX__O____"), "difficult", O, X)
    assert decision.move == 2
    assert decision.metrics.evaluation_score in (-10, 0, 10)
    assert decision.metrics.nodes_evaluated > 1
    assert decision.symbol is O
    assert decision.difficulty is Difficulty.DIFFICULT


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_every_tier_fills_the_last_cell(seeded_selector, board, difficulty):
    assert seeded_selector.select_move(board("XOXXOOOX_"), difficulty, O, X) == 8


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_raises(seeded_selector, board, difficulty):
    with pytest.raises(NoMovesAvailable):
        seeded_selector.select_move(board("XOXXOOOXX"), difficulty, O, X)


def test_won_board_raises(seeded_selector, board):
    with pytest.raises(NoMovesAvailable, match="already over"):
        seeded_selector.select_move(board("XXXOO____"), "easy", O, X)


def test_board_is_not_mutated(seeded_selector, board):
    b = board("X___O____")
    for difficulty in Difficulty:
        seeded_selector.select_move(b, difficulty, X, O)
    assert b.to_string() == "X___O____"


def test_symbols_must_differ(seeded_selector, board):
    with pytest.raises(ValueError):
        seeded_selector.select_move(board("X________"), "easy", O, O)
    with pytest.raises(ValueError):
        seeded_selector.select_move(board("X________"), "easy", "O", X)


def test_same_seed_gives_same_choices(board):
    b = board("____X____")
    a = MoveSelector(rng=random.Random(5))
    c = MoveSelector(rng=random.Random(5))
    assert [a.select_move(b, "easy", O, X) for _ in range(10)] == \
           [c.select_move(b, "easy", O, X) for _ in range(10)]


def test_performance_summary(seeded_selector, board):
    assert seeded_selector.get_performance_summary()['total_decisions'] == 0

    seeded_selector.select_move(board("XX__O____"), "easy", O, X)
    seeded_selector.select_move(board("XX__O____"), "difficult", O, X)
    summary = seeded_selector.get_performance_summary()
    assert summary['total_decisions'] == 2
    assert summary['decisions_by_difficulty'] == {'easy': 1, 'difficult': 1}
    assert summary['total_nodes'] > 2

    seeded_selector.reset_performance_tracking()
    assert seeded_selector.get_performance_summary()['total_decisions'] == 0


def test_decisions_are_logged_when_enabled(board, caplog):
    caplog.set_level(logging.INFO, logger=MoveSelector.LOGGER_NAME)
    selector = MoveSelector(rng=random.Random(0), enable_logging=True)
    selector.select_move(board("XX__O____"), "hard", O, X)
    assert "HARD - Move: 2" in caplog.text


def test_decisions_are_silent_by_default(board, caplog):
    caplog.set_level(logging.INFO, logger=MoveSelector.LOGGER_NAME)
    MoveSelector(rng=random.Random(0)).select_move(board("XX__O____"), "hard", O, X)
    assert caplog.text == ""


def test_core_facade(board):
    b = board("XX_______")
    assert not core.has_win(b, X)
    assert not core.is_draw(b)
    assert core.select_move(b, "hard", O, X, rng=random.Random(0)) == 2
    assert core.select_move(board("_________"), Difficulty.HARD, O, X) == 4
    assert core.has_win(board("XXX_OO___"), X)
    assert core.is_draw(board("XOXXOOOXX"))
    with pytest.raises(InvalidDifficulty):
        core.select_move(b, "nightmare", O, X)
