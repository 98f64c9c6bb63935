import random

import pytest

from tictactoe_ai.ai.engine import MoveSelector
from tictactoe_ai.game.board import Board


@pytest.fixture
def board():
    """Build a Board from a nine character X/O/_ string."""
    return Board.from_string


@pytest.fixture
def seeded_selector():
    return MoveSelector(rng=random.Random(1234))
