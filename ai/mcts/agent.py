"""Monte Carlo Tree Search agent with random playouts."""
from typing import Optional
import random

from game import CONTINUE, GameOutcome, Player, UltimateBoard
from ai.agent import Agent, AgentInfo

from .node import Node, Stats, Tree


class MCTSAgent(Agent):
    """MCTS with UCT selection, one-ply expansion and random playouts.

    Every act() call builds a new tree. Each iteration walks down from the
    root to a leaf and expands it: one child per legal move, each scored by
    a single random playout. The playout statistics are returned up the
    recursion and added to every node on the path.
    """

    def __init__(self, iterations: int = 1000, seed: Optional[int] = None) -> None:
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        self.name = f"MCTS-{iterations}"
        self.iterations = iterations
        self.rng = random.Random(seed)
        self.player = Player.ONE
        self.tree: Optional[Tree] = None

    def info(self) -> AgentInfo:
        return AgentInfo("MCTS", f"iterations: {self.iterations}")

    def act(self, board: UltimateBoard) -> Optional[int]:
        if board.game_status != CONTINUE:
            return None

        self.player = board.current_player
        tree = self.search(board)

        root = tree.root
        if not root.children:
            # no iterations ran
            return next(board.possible_moves())

        best = max(root.children, key=lambda i: tree[i].stats.win_ratio())
        return tree[best].move

    def search(self, board: UltimateBoard) -> Tree:
        """Run the configured number of iterations from board."""
        self.tree = Tree(board.clone())
        for _ in range(self.iterations):
            self._tree_search(0)
        return self.tree

    def _tree_search(self, index: int) -> Stats:
        tree = self.tree
        node = tree[index]
        stats = Stats()

        if node.is_terminal():
            self._score(node.board.game_status, stats)
        elif not node.is_expanded():
            for move in node.board.possible_moves():
                child_board = node.board.clone()
                child_board.make_move(move)
                child_stats = self.playout(child_board.clone())
                tree.add_child(index, Node(child_board, move, child_stats))
                stats.merge(child_stats)
        else:
            parent_visits = node.stats.total
            best = max(node.children, key=lambda i: tree[i].uct_value(parent_visits))
            stats = self._tree_search(best)

        node.stats.merge(stats)
        return stats

    def playout(self, board: UltimateBoard) -> Stats:
        """Play uniformly random moves until the game ends. Mutates board."""
        while board.game_status == CONTINUE:
            board.make_move(self.rng.choice(list(board.possible_moves())))

        stats = Stats()
        self._score(board.game_status, stats)
        return stats

    def _score(self, outcome: GameOutcome, stats: Stats) -> None:
        if outcome.is_win:
            if outcome.winner == self.player:
                stats.wins += 1
            else:
                stats.losses += 1
        else:
            stats.draws += 1
