"""
Random Agent - selects random legal moves.
Used as performance floor baseline.
"""
import random
from typing import Optional

from game import CONTINUE, UltimateBoard
from ai.agent import Agent


class RandomAgent(Agent):
    """Agent that plays random legal moves."""

    def __init__(self, seed: Optional[int] = None):
        self.name = "Random"
        self.rng = random.Random(seed)

    def act(self, board: UltimateBoard) -> Optional[int]:
        if board.game_status != CONTINUE:
            return None
        return self.rng.choice(list(board.possible_moves()))
