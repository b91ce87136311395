"""
Baseline opponents and the minimax search agent.
"""
from .random_agent import RandomAgent
from .random_start import RandomStartAgent
from .benched import ActRecord, BenchedAgent
from .minimax_agent import MinimaxAgent

__all__ = ['RandomAgent', 'RandomStartAgent', 'BenchedAgent', 'ActRecord', 'MinimaxAgent']
