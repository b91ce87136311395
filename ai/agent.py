"""
Agent contract shared by every player of the game.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from game import UltimateBoard


@dataclass(frozen=True)
class AgentInfo:
    name: str
    config: str = ""


class Agent(ABC):
    """Something that picks a move for the side to move.

    act() receives a board it may keep or mutate; the driver always passes a
    copy. A search engine must return a legal move for any board whose game
    is still running. Returning None (or an illegal move) is a fatal error
    for the driver.
    """

    name: str = "Agent"

    @abstractmethod
    def act(self, board: UltimateBoard) -> Optional[int]:
        ...

    def info(self) -> AgentInfo:
        return AgentInfo(self.name)
