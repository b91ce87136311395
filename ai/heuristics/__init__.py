"""
Position evaluation for the minimax search.
"""
from .base import MAX_VALUE, MIN_VALUE, Heuristic, MiniBoardHeuristic
from .custom import CustomHeuristic, CustomMiniBoardHeuristic
from .parameterized import NUM_FEATURES, ParameterizedHeuristic, ParameterizedMiniBoardHeuristic

__all__ = [
    'MIN_VALUE', 'MAX_VALUE', 'Heuristic', 'MiniBoardHeuristic',
    'CustomHeuristic', 'CustomMiniBoardHeuristic',
    'ParameterizedHeuristic', 'ParameterizedMiniBoardHeuristic', 'NUM_FEATURES',
]
