"""Match-playing utilities for agent comparisons."""
from .evaluator import MatchResult, play_game, play_match

__all__ = ['MatchResult', 'play_game', 'play_match']
