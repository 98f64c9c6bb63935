import pytest

from tictactoe_ai.exceptions import InvalidMoveError
from tictactoe_ai.game.board import Board, render_index_map
from tictactoe_ai.models.enums import Symbol


def test_new_board_is_empty():
    b = Board()
    assert b.get_empty_cells() == list(range(9))
    assert not b.is_full()
    assert b.to_string() == "_________"


def test_place_and_read_back():
    b = Board()
    b.place(4, Symbol.X)
    assert b.get_cell(4) is Symbol.X
    assert not b.is_empty(4)
    assert b.get_occupied_cells() == [4]
    assert b.get_occupied_cells(Symbol.O) == []
    assert b.count(Symbol.X) == 1


@pytest.mark.parametrize("index", [-1, 9, 100, True, "3"])
def test_place_rejects_bad_index(index):
    with pytest.raises(InvalidMoveError):
        Board().place(index, Symbol.X)


def test_place_rejects_occupied_cell():
    b = Board.from_string("X________")
    with pytest.raises(InvalidMoveError, match="already occupied"):
        b.place(0, Symbol.O)
    assert b.get_cell(0) is Symbol.X


def test_with_move_leaves_original_untouched():
    b = Board.from_string("X________")
    child = b.with_move(4, Symbol.O)
    assert b.to_string() == "X________"
    assert child.to_string() == "X___O____"


def test_copy_is_independent():
    b = Board.from_string("XO_______")
    c = b.copy()
    c.place(2, Symbol.X)
    assert b != c
    assert b.is_empty(2)


def test_reset_clears_all_cells():
    b = Board.from_string("XOXOXOXOX")
    b.reset()
    assert b == Board()


def test_string_round_trip_is_case_insensitive():
    assert Board.from_string("xo_______").to_string() == "XO_______"


@pytest.mark.parametrize("text", ["", "XO", "__________", "XO_-_____", "XO_ _____"])
def test_from_string_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        Board.from_string(text)


def test_constructor_validates_cells():
    with pytest.raises(ValueError):
        Board([None] * 8)
    with pytest.raises(ValueError):
        Board(["X"] + [None] * 8)


def test_validate_reports_impossible_counts():
    assert Board.from_string("XO_X_____").validate().is_valid
    result = Board.from_string("XX_X_____").validate()
    assert not result.is_valid
    assert "X has 3 moves, O has 0 moves" in result.error_message


def test_row_col_mapping():
    assert Board.row_col(0) == (0, 0)
    assert Board.row_col(5) == (1, 2)
    assert Board.row_col(7) == (2, 1)
    assert Board.index_of(2, 1) == 7
    with pytest.raises(InvalidMoveError):
        Board.index_of(3, 0)


def test_rendering():
    b = Board.from_string("XO__X___O")
    assert str(b).splitlines()[0] == " X | O |  "
    assert render_index_map(b.cells).splitlines()[2] == " 3 | X | 5"
