from .node import Node, Stats, Tree
from .agent import MCTSAgent

__all__ = ['Node', 'Stats', 'Tree', 'MCTSAgent']
