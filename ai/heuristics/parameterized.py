"""
Linear heuristic over 13 weighted features.

Weights, in order:
   0  small boards won
   1  small boards lost
   2  small boards not won by anyone (open or drawn)
   3  lead in pieces on a small board (only counted when positive)
   4  win-line square pairs held, own minus opponent's, on a small board
   5  centre square of a small board
   6  corner squares of a small board
   7  edge squares of a small board
   8  centre board of the meta-board won
   9  corner boards won
  10  edge boards won
  11  win-line board pairs with own won boards only, minus the opponent's
  12  next player may choose any board
"""
from typing import Dict, Sequence

from game import Board, GameOutcome, Player, UltimateBoard
from game.ultimate_board import CENTER_INDEX, CORNER_INDICES, EDGE_INDICES

from .base import MAX_VALUE, MIN_VALUE, Heuristic, MiniBoardHeuristic

NUM_FEATURES = 13

DEFAULT_WEIGHTS = (
    10.0, -10.0, 0.0,
    1.0, 2.0, 1.0, 0.5, 0.25,
    10.0, 3.0, 1.0, 5.0, 1.0,
)


def _check_weights(weights: Sequence[float]) -> tuple:
    weights = tuple(float(w) for w in weights)
    if len(weights) != NUM_FEATURES:
        raise ValueError(f"Expected {NUM_FEATURES} weights, got {len(weights)}")
    return weights


class ParameterizedMiniBoardHeuristic(MiniBoardHeuristic):
    def __init__(self, weights: Sequence[float] = DEFAULT_WEIGHTS):
        self.weights = _check_weights(weights)

    def evaluate(self, board: Board) -> float:
        w = self.weights
        value = 0.0

        lead = board.positions_set_difference(Player.ONE)
        if lead > 0:
            value += lead * w[3]

        value += board.partial_wins_difference(Player.ONE) * w[4]
        value += board.center_occupied(Player.ONE) * w[5]
        value += board.corners_difference(Player.ONE) * w[6]
        value += board.edges_difference(Player.ONE) * w[7]
        return value


class ParameterizedHeuristic(Heuristic):
    def __init__(self, player: Player, weights: Sequence[float] = DEFAULT_WEIGHTS):
        self.player = Player(player)
        self.weights = _check_weights(weights)
        self._mini = ParameterizedMiniBoardHeuristic(self.weights)
        self._cache: Dict[int, float] = {}

    def _small_board_value(self, board: Board) -> float:
        key = board.to_key()
        value = self._cache.get(key)
        if value is None:
            value = self._mini.evaluate(board)
            self._cache[key] = value
        return value

    def evaluate(self, board: UltimateBoard) -> float:
        own = GameOutcome.win(self.player)
        if board.game_status == own:
            return MAX_VALUE
        if board.game_status == GameOutcome.win(self.player.opponent):
            return MIN_VALUE

        w = self.weights
        sign = 1.0 if self.player == Player.ONE else -1.0
        value = 0.0

        for small_board in board.boards:
            value += self._small_board_value(small_board) * sign

        for status in board.board_status:
            if status.is_win:
                value += w[0] if status == own else w[1]
            else:
                value += w[2]

        status = board.board_status
        value += w[8] if status[CENTER_INDEX] == own else -w[8]
        for index in CORNER_INDICES:
            value += w[9] if status[index] == own else -w[9]
        for index in EDGE_INDICES:
            value += w[10] if status[index] == own else -w[10]

        value += board.partial_wins_difference(self.player) * w[11]
        value += w[12] if board.next_board_index is None else -w[12]

        return value
