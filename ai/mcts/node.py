"""MCTS tree stored as an arena of nodes addressed by index."""
from dataclasses import dataclass, field
from typing import List, Optional
import math

from game import CONTINUE, UltimateBoard


@dataclass
class Stats:
    """Playout results counted from the searching player's point of view."""
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.draws + self.losses

    def merge(self, other: 'Stats') -> None:
        self.wins += other.wins
        self.draws += other.draws
        self.losses += other.losses

    def win_ratio(self) -> float:
        if self.total == 0:
            return -math.inf
        return self.wins / self.total


@dataclass
class Node:
    """Monte Carlo Tree Search node."""
    board: UltimateBoard
    move: Optional[int] = None
    stats: Stats = field(default_factory=Stats)
    children: List[int] = field(default_factory=list)

    def is_expanded(self) -> bool:
        return len(self.children) > 0

    def is_terminal(self) -> bool:
        return self.board.game_status != CONTINUE

    def uct_value(self, parent_visits: int) -> float:
        """wins / visits + sqrt(2 * ln(parent_visits) / wins).

        Unvisited nodes score -inf; visited nodes without wins score +inf.
        """
        visits = self.stats.total
        if visits == 0:
            return -math.inf
        wins = self.stats.wins
        if wins == 0:
            return math.inf
        return wins / visits + math.sqrt(2.0 * math.log(parent_visits) / wins)


class Tree:
    """Owns every node; parent/child links are index lists, index 0 is the root."""

    def __init__(self, root_board: UltimateBoard):
        self.nodes: List[Node] = [Node(root_board)]

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def add_child(self, parent: int, node: Node) -> int:
        index = len(self.nodes)
        self.nodes.append(node)
        self.nodes[parent].children.append(index)
        return index
