"""Heuristic evaluation tests."""
import pytest

from game import Player, UltimateBoard
from ai.heuristics import (MAX_VALUE, MIN_VALUE, NUM_FEATURES, CustomHeuristic,
                           CustomMiniBoardHeuristic, ParameterizedHeuristic)
from ai.heuristics.base import NUM_SMALL_BOARD_STATES
from ai.heuristics.custom import small_board_table
from ai.heuristics.parameterized import DEFAULT_WEIGHTS


def _only_weight(index, value=1.0):
    weights = [0.0] * NUM_FEATURES
    weights[index] = value
    return weights


class TestCustomHeuristic:

    def test_table_covers_every_small_board(self):
        table = small_board_table()
        assert len(table) == NUM_SMALL_BOARD_STATES
        assert table[0] == 0.0
        assert small_board_table() is table

    def test_empty_board_is_even(self, empty_board):
        assert CustomHeuristic(Player.ONE).evaluate(empty_board) == 0.0
        assert CustomHeuristic(Player.TWO).evaluate(empty_board) == 0.0

    def test_decided_game_uses_bounds(self, win_in_one, winning_move):
        win_in_one.make_move(winning_move)
        assert CustomHeuristic(Player.ONE).evaluate(win_in_one) == MAX_VALUE
        assert CustomHeuristic(Player.TWO).evaluate(win_in_one) == MIN_VALUE

    def test_perspectives_are_opposite(self, empty_board):
        for move in (40, 36, 4, 37):
            empty_board.make_move(move)
        one = CustomHeuristic(Player.ONE).evaluate(empty_board)
        two = CustomHeuristic(Player.TWO).evaluate(empty_board)
        assert one == -two

    def test_won_boards_count(self, win_in_one):
        one = CustomHeuristic(Player.ONE).evaluate(win_in_one)
        assert one > 20.0
        assert CustomHeuristic(Player.TWO).evaluate(win_in_one) == -one

    def test_mini_board_lead_only_counts_positive(self):
        board = UltimateBoard.from_string("X" + "." * 80).boards[0]
        assert CustomMiniBoardHeuristic().evaluate(board) == 1.0

        board = UltimateBoard.from_string("O" + "." * 80).boards[0]
        assert CustomMiniBoardHeuristic().evaluate(board) == 0.0

    def test_mini_board_counts_blocked_pairs(self):
        # lead 1, pair (0, 1) counts although square 2 is taken
        board = UltimateBoard.from_string("XXO" + "." * 78).boards[0]
        assert CustomMiniBoardHeuristic().evaluate(board) == 3.0

    def test_small_board_pairs_feature(self):
        board = UltimateBoard.from_string("XXO" + "." * 78)
        heuristic = ParameterizedHeuristic(Player.ONE, _only_weight(4))
        assert heuristic.evaluate(board) == 1.0


class TestParameterizedHeuristic:

    def test_rejects_wrong_weight_count(self):
        with pytest.raises(ValueError):
            ParameterizedHeuristic(Player.ONE, [1.0] * (NUM_FEATURES - 1))

    def test_default_weights(self):
        assert len(DEFAULT_WEIGHTS) == NUM_FEATURES

    def test_free_choice_feature(self, empty_board):
        heuristic = ParameterizedHeuristic(Player.ONE, _only_weight(12, 3.0))
        assert heuristic.evaluate(empty_board) == 3.0

        empty_board.make_move(40)
        assert heuristic.evaluate(empty_board) == -3.0

    def test_board_won_features(self, win_in_one):
        heuristic = ParameterizedHeuristic(Player.ONE, _only_weight(0, 2.0))
        assert heuristic.evaluate(win_in_one) == 4.0

        heuristic = ParameterizedHeuristic(Player.TWO, _only_weight(1, -2.0))
        assert heuristic.evaluate(win_in_one) == -4.0

    def test_meta_partial_wins(self, win_in_one):
        heuristic = ParameterizedHeuristic(Player.ONE, _only_weight(11))
        assert heuristic.evaluate(win_in_one) == 9.0

    def test_small_board_centre(self, empty_board):
        empty_board.make_move(40)
        heuristic = ParameterizedHeuristic(Player.ONE, _only_weight(5))
        assert heuristic.evaluate(empty_board) == 1.0
        heuristic = ParameterizedHeuristic(Player.TWO, _only_weight(5))
        assert heuristic.evaluate(empty_board) == -1.0

    def test_decided_game_uses_bounds(self, win_in_one, winning_move):
        win_in_one.make_move(winning_move)
        assert ParameterizedHeuristic(Player.ONE).evaluate(win_in_one) == MAX_VALUE
        assert ParameterizedHeuristic(Player.TWO).evaluate(win_in_one) == MIN_VALUE
