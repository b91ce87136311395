"""Shared fixtures for game/tests and test/."""
import pytest

from game import Player, UltimateBoard

# X owns boards 0 and 1 and holds squares 0 and 4 on board 2.
# X to move on board 2; square 8 (move 26) completes the top row of boards.
WIN_IN_ONE = (
    "XXX......"
    "XXX......"
    "X...X...."
    "OO......."
    "O.O......"
    "........."
    "O.......O"
    ".O......."
    "........O"
)
WINNING_MOVE = 26


@pytest.fixture
def empty_board():
    return UltimateBoard()


@pytest.fixture
def winning_move():
    return WINNING_MOVE


@pytest.fixture
def win_in_one():
    return UltimateBoard.from_string(WIN_IN_ONE, next_board_index=2,
                                     current_player=Player.ONE)
