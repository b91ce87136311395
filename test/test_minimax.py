"""Minimax agent tests: tactics, determinism, quiescence and the transposition table."""
from functools import partial

import pytest

from game import Player, UltimateBoard
from ai.baselines import MinimaxAgent, RandomAgent
from ai.heuristics import MAX_VALUE, MIN_VALUE, CustomHeuristic, ParameterizedHeuristic


class TestMinimaxTactics:

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_finds_win_in_one(self, win_in_one, winning_move, depth):
        agent = MinimaxAgent(depth=depth)
        assert agent.act(win_in_one) == winning_move

    def test_finds_win_with_parameterized_heuristic(self, win_in_one, winning_move):
        agent = MinimaxAgent(depth=2, heuristic=ParameterizedHeuristic)
        assert agent.act(win_in_one) == winning_move

    def test_accepts_heuristic_instance(self, win_in_one, winning_move):
        heuristic = CustomHeuristic(Player.ONE)
        agent = MinimaxAgent(depth=1, heuristic=heuristic)
        assert agent.act(win_in_one) == winning_move
        assert agent.heuristic is heuristic

    def test_rejects_heuristic_for_other_player(self, win_in_one):
        agent = MinimaxAgent(depth=1, heuristic=CustomHeuristic(Player.TWO))
        with pytest.raises(ValueError):
            agent.act(win_in_one)

    def test_board_not_modified(self, win_in_one):
        before = win_in_one.hash
        MinimaxAgent(depth=2).act(win_in_one)
        assert win_in_one.hash == before
        assert win_in_one.compute_hash() == before


class TestMinimaxContract:

    def test_returns_none_when_game_over(self, win_in_one, winning_move):
        win_in_one.make_move(winning_move)
        assert MinimaxAgent(depth=1).act(win_in_one) is None

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            MinimaxAgent(depth=0)
        with pytest.raises(ValueError):
            MinimaxAgent(depth=2, quiescence_depth=-1)

    def test_deterministic(self):
        board = UltimateBoard()
        for move in (40, 36, 4):
            board.make_move(move)
        first = MinimaxAgent(depth=3)
        second = MinimaxAgent(depth=3)
        assert first.act(board) == second.act(board)
        assert first.nodes_searched == second.nodes_searched
        assert first.nodes_searched > 0

    def test_counters_reset_per_call(self, empty_board):
        empty_board.make_move(40)
        agent = MinimaxAgent(depth=2)
        agent.act(empty_board)
        nodes = agent.nodes_searched
        agent.act(empty_board)
        assert agent.nodes_searched == nodes

    @pytest.mark.parametrize("seed", range(5))
    def test_legal_moves_on_random_positions(self, seed):
        board = UltimateBoard()
        player = RandomAgent(seed)
        for _ in range(12):
            if board.is_game_over():
                break
            board.make_move(player.act(board))
        if not board.is_game_over():
            assert board.is_legal(MinimaxAgent(depth=2).act(board))

    def test_info(self):
        info = MinimaxAgent(depth=3, quiescence_depth=0).info()
        assert info.name == "Minimax"
        assert "depth: 3" in info.config


class TestQuiescence:

    def _agent(self, player=Player.ONE, quiescence_depth=1):
        agent = MinimaxAgent(depth=1, quiescence_depth=quiescence_depth)
        agent.heuristic = CustomHeuristic(player)
        return agent

    def test_depth_zero_is_static_eval(self, empty_board):
        agent = self._agent()
        score = agent.quiescence_search(empty_board, 0, True, MIN_VALUE, MAX_VALUE)
        assert score == agent.heuristic.evaluate(empty_board)

    def test_constrained_position_is_quiet(self, empty_board):
        empty_board.make_move(40)
        agent = self._agent(Player.TWO)
        score = agent.quiescence_search(empty_board, 3, True, MIN_VALUE, MAX_VALUE)
        assert score == agent.heuristic.evaluate(empty_board)
        assert agent.nodes_searched == 0

    def test_free_choice_position_is_extended(self, empty_board):
        agent = self._agent()
        score = agent.quiescence_search(empty_board, 1, True, MIN_VALUE, MAX_VALUE)

        children = []
        for move in empty_board.possible_moves():
            child = empty_board.clone()
            child.make_move(move)
            children.append(agent.heuristic.evaluate(child))
        assert score == max(children)
        assert agent.nodes_searched == 1

    def test_disabled_quiescence(self, win_in_one, winning_move):
        agent = MinimaxAgent(depth=1, quiescence_depth=0, heuristic=partial(CustomHeuristic))
        assert agent.act(win_in_one) == winning_move


# Boards 0-5 drawn; boards 6-8 each have squares 0 and 1 free. Every move
# sends the opponent to a drawn board, so each ply is a free choice and
# different move orders reach the same position.
TRANSPOSING = "XOXXOOOXX" * 6 + "..OXXOXOX" * 3


@pytest.fixture
def transposing_board():
    return UltimateBoard.from_string(TRANSPOSING, current_player=Player.ONE)


class TestTranspositionTable:

    def test_position_setup(self, transposing_board):
        assert transposing_board.next_board_index is None
        assert sorted(transposing_board.possible_moves()) == [54, 55, 63, 64, 72, 73]

    def test_move_orders_share_a_hash(self, transposing_board):
        first = transposing_board.clone()
        second = transposing_board.clone()
        for move in (54, 64, 72):
            first.make_move(move)
        for move in (72, 64, 54):
            second.make_move(move)
        assert first.hash == second.hash
        assert first.next_board_index is None

    def test_search_hits_table(self, transposing_board):
        agent = MinimaxAgent(depth=4, quiescence_depth=0)
        move = agent.act(transposing_board)
        assert transposing_board.is_legal(move)
        assert agent.table_hits > 0

    def test_stored_value_is_returned(self, transposing_board):
        agent = MinimaxAgent(depth=2, quiescence_depth=0)
        agent.heuristic = CustomHeuristic(Player.ONE)

        table = {}
        score = agent.minimax(transposing_board, 2, True, MIN_VALUE, MAX_VALUE, table)
        assert table[transposing_board.hash] == score
        assert agent.table_hits == 0

        nodes = agent.nodes_searched
        again = agent.minimax(transposing_board, 2, True, MIN_VALUE, MAX_VALUE, table)
        assert again == score
        assert agent.table_hits == 1
        assert agent.nodes_searched == nodes + 1

    def test_lookup_precedes_search(self, transposing_board):
        agent = MinimaxAgent(depth=2, quiescence_depth=0)
        agent.heuristic = CustomHeuristic(Player.ONE)
        table = {transposing_board.hash: 42.0}
        assert agent.minimax(transposing_board, 2, True, MIN_VALUE, MAX_VALUE, table) == 42.0
        assert agent.nodes_searched == 1

    def test_table_is_rebuilt_per_call(self, transposing_board):
        agent = MinimaxAgent(depth=4, quiescence_depth=0)
        first_move = agent.act(transposing_board)
        counts = (agent.nodes_searched, agent.table_hits)

        assert agent.act(transposing_board) == first_move
        assert (agent.nodes_searched, agent.table_hits) == counts
