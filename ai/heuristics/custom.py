"""
Hand-tuned heuristic: small-board shape plus won boards.
"""
from functools import lru_cache
from typing import Dict

from game import Board, GameOutcome, Player, UltimateBoard
from game.ultimate_board import CENTER_INDEX

from .base import MAX_VALUE, MIN_VALUE, Heuristic, MiniBoardHeuristic

BOARD_WON_BONUS = 10.0
CENTER_BOARD_BONUS = 10.0


class CustomMiniBoardHeuristic(MiniBoardHeuristic):
    def evaluate(self, board: Board) -> float:
        value = 0.0

        lead = board.positions_set_difference(Player.ONE)
        if lead > 0:
            value += lead

        value += board.partial_wins_difference(Player.ONE) * 2.0
        return value


@lru_cache(maxsize=1)
def small_board_table() -> Dict[int, float]:
    """CustomMiniBoardHeuristic over all 3^9 small boards, built on first use."""
    return CustomMiniBoardHeuristic().initialize()


class CustomHeuristic(Heuristic):
    def __init__(self, player: Player):
        self.player = Player(player)
        self._table = small_board_table()

    def evaluate(self, board: UltimateBoard) -> float:
        own = GameOutcome.win(self.player)
        if board.game_status == own:
            return MAX_VALUE
        if board.game_status == GameOutcome.win(self.player.opponent):
            return MIN_VALUE

        sign = 1.0 if self.player == Player.ONE else -1.0
        value = 0.0

        for small_board in board.boards:
            value += self._table[small_board.to_key()] * sign

        if board.board_status[CENTER_INDEX] == own:
            value += CENTER_BOARD_BONUS

        for status in board.board_status:
            if status.is_win:
                value += BOARD_WON_BONUS if status == own else -BOARD_WON_BONUS

        return value
