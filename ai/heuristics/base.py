"""
Heuristic contracts and the score bounds shared with the search engines.

A Heuristic scores a whole UltimateBoard for one player. The returned value
must lie within [MIN_VALUE, MAX_VALUE]; the bounds themselves are reserved
for decided games (loss / win). Minimax uses them as its initial alpha and
beta, so anything outside the range breaks pruning. This is not checked.
"""
import sys
from abc import ABC, abstractmethod
from typing import Dict

from game import Board, UltimateBoard
from game.board import legal_boards

MIN_VALUE = -sys.float_info.max
MAX_VALUE = sys.float_info.max

NUM_SMALL_BOARD_STATES = 3 ** 9


class Heuristic(ABC):
    @abstractmethod
    def evaluate(self, board: UltimateBoard) -> float:
        """Score of the position for the heuristic's player."""

    @property
    def name(self) -> str:
        return type(self).__name__


class MiniBoardHeuristic(ABC):
    """Scores a single small board, always from Player.ONE's perspective."""

    @abstractmethod
    def evaluate(self, board: Board) -> float:
        ...

    def initialize(self) -> Dict[int, float]:
        """Lookup table over every legal small board, keyed by Board.to_key()."""
        table = {}
        for first, second in legal_boards():
            table[first | second << 9] = self.evaluate(Board(0, (first, second)))
        return table
