"""
Opening randomiser: random moves for the first plies, then a real agent.

Used to diversify otherwise deterministic matches (e.g. minimax vs minimax).
"""
from typing import Optional

from game import UltimateBoard
from ai.agent import Agent, AgentInfo

from .random_agent import RandomAgent


class RandomStartAgent(Agent):
    def __init__(self, random_plies: int, agent: Agent, seed: Optional[int] = None):
        """
        Args:
            random_plies: Plies of the whole game (both players) played randomly
            agent: Agent used once the game is past random_plies
        """
        self.random_plies = random_plies
        self.agent = agent
        self.random_agent = RandomAgent(seed)
        self.name = f"RandomStart({agent.name})"

    def act(self, board: UltimateBoard) -> Optional[int]:
        if board.move_count() < self.random_plies:
            return self.random_agent.act(board)
        return self.agent.act(board)

    def info(self) -> AgentInfo:
        return self.agent.info()
