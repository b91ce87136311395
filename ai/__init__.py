from .agent import Agent, AgentInfo
from .heuristics import CustomHeuristic, Heuristic, ParameterizedHeuristic
from .baselines import BenchedAgent, MinimaxAgent, RandomAgent, RandomStartAgent
from .mcts import MCTSAgent

__all__ = [
    'Agent', 'AgentInfo',
    'Heuristic', 'CustomHeuristic', 'ParameterizedHeuristic',
    'MinimaxAgent', 'RandomAgent', 'RandomStartAgent', 'BenchedAgent',
    'MCTSAgent',
]
