from dataclasses import dataclass, field
from typing import List

from ai.heuristics.parameterized import DEFAULT_WEIGHTS


@dataclass
class MinimaxConfig:
    depth: int = 4
    quiescence_depth: int = 1         # 0 disables quiescence search
    heuristic: str = "custom"         # custom | parameterized
    weights: List[float] = field(default_factory=lambda: list(DEFAULT_WEIGHTS))


@dataclass
class MCTSConfig:
    iterations: int = 1000
    seed: int = None


@dataclass
class MatchConfig:
    num_games: int = 100
    num_workers: int = 4
    random_opening_plies: int = 0     # random moves at start for diversity
    alternate: bool = True


@dataclass
class Config:
    minimax: MinimaxConfig = None
    mcts: MCTSConfig = None
    match: MatchConfig = None

    def __post_init__(self):
        if self.minimax is None:
            self.minimax = MinimaxConfig()
        if self.mcts is None:
            self.mcts = MCTSConfig()
        if self.match is None:
            self.match = MatchConfig()
