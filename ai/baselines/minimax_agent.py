"""
Minimax Agent with Alpha-Beta Pruning.
Depth-limited search with a per-move transposition table and quiescence
search at the horizon.
"""
from typing import Callable, Dict, Optional, Union

from game import CONTINUE, Player, UltimateBoard
from ai.agent import Agent, AgentInfo
from ai.heuristics import MAX_VALUE, MIN_VALUE, CustomHeuristic, Heuristic

HeuristicFactory = Callable[[Player], Heuristic]


class MinimaxAgent(Agent):
    """Agent using minimax search with alpha-beta pruning.

    Scores are always from the perspective of the player to move at the
    root. The transposition table (Zobrist hash -> score) lives for a single
    act() call only.

    Quiescence search only extends positions where the side to move may pick
    any board; positions forced into one board count as quiet.
    """

    def __init__(
        self,
        depth: int = 4,
        quiescence_depth: int = 1,
        heuristic: Union[Heuristic, HeuristicFactory] = CustomHeuristic,
    ):
        """
        Args:
            depth: Maximum search depth, at least 1
            quiescence_depth: Extra plies searched at the horizon, 0 disables it
            heuristic: Heuristic instance (used as-is; one built for a player
                only searches positions where that player is to move), or a callable
                building one for a given player
        """
        if depth < 1:
            raise ValueError(f"depth must be >= 1, got {depth}")
        if quiescence_depth < 0:
            raise ValueError(f"quiescence_depth must be >= 0, got {quiescence_depth}")

        self.name = f"Minimax-{depth}"
        self.depth = depth
        self.quiescence_depth = quiescence_depth
        self._heuristic = heuristic
        self._heuristics: Dict[Player, Heuristic] = {}
        self.heuristic: Optional[Heuristic] = None
        self.nodes_searched = 0
        self.table_hits = 0

    def info(self) -> AgentInfo:
        return AgentInfo(
            "Minimax",
            f"depth: {self.depth}, quiescence_depth: {self.quiescence_depth}",
        )

    def _heuristic_for(self, player: Player) -> Heuristic:
        if isinstance(self._heuristic, Heuristic):
            owner = getattr(self._heuristic, 'player', None)
            if owner is not None and owner != player:
                raise ValueError(
                    f"{self._heuristic.name} scores for {Player(owner).name}, "
                    f"but {player.name} is to move")
            return self._heuristic
        if player not in self._heuristics:
            self._heuristics[player] = self._heuristic(player)
        return self._heuristics[player]

    def act(self, board: UltimateBoard) -> Optional[int]:
        """Select best move using minimax search.

        Returns:
            Move index 0-80, or None when the game is already decided
        """
        if board.game_status != CONTINUE:
            return None
        return self.get_best_move(board, self.depth)

    def get_best_move(self, board: UltimateBoard, depth: int) -> int:
        """Root of the search: the first move that raises alpha wins ties."""
        self.nodes_searched = 0
        self.table_hits = 0
        self.heuristic = self._heuristic_for(board.current_player)

        transposition_table: Dict[int, float] = {}

        best_move = None
        alpha = MIN_VALUE
        beta = MAX_VALUE

        for move in board.possible_moves():
            if best_move is None:
                best_move = move  # fallback when every move loses

            new_board = board.clone()
            new_board.make_move(move)

            score = self.minimax(new_board, depth - 1, False, alpha, beta, transposition_table)

            if score > alpha:
                alpha = score
                best_move = move

        return best_move

    def minimax(self, board: UltimateBoard, depth: int, maximizing: bool,
                alpha: float, beta: float, transposition_table: Dict[int, float]) -> float:
        """Minimax with alpha-beta pruning."""
        self.nodes_searched += 1

        if depth == 0:
            return self.quiescence_search(board, self.quiescence_depth, maximizing, alpha, beta)

        if board.game_status != CONTINUE:
            return self.heuristic.evaluate(board)

        cached = transposition_table.get(board.hash)
        if cached is not None:
            self.table_hits += 1
            return cached

        if maximizing:
            for move in board.possible_moves():
                new_board = board.clone()
                new_board.make_move(move)
                alpha = max(alpha, self.minimax(new_board, depth - 1, False, alpha, beta,
                                                transposition_table))
                if alpha >= beta:
                    break  # Beta cutoff
            transposition_table[board.hash] = alpha
            return alpha
        else:
            for move in board.possible_moves():
                new_board = board.clone()
                new_board.make_move(move)
                beta = min(beta, self.minimax(new_board, depth - 1, True, alpha, beta,
                                              transposition_table))
                if alpha >= beta:
                    break  # Alpha cutoff
            transposition_table[board.hash] = beta
            return beta

    def quiescence_search(self, board: UltimateBoard, depth: int, maximizing: bool,
                          alpha: float, beta: float) -> float:
        """Keep searching noisy (free choice) positions, evaluate quiet ones."""
        if depth == 0 or board.game_status != CONTINUE or board.next_board_index is not None:
            return self.heuristic.evaluate(board)

        self.nodes_searched += 1

        if maximizing:
            for move in board.possible_moves():
                new_board = board.clone()
                new_board.make_move(move)
                alpha = max(alpha, self.quiescence_search(new_board, depth - 1, False, alpha, beta))
                if alpha >= beta:
                    break
            return alpha
        else:
            for move in board.possible_moves():
                new_board = board.clone()
                new_board.make_move(move)
                beta = min(beta, self.quiescence_search(new_board, depth - 1, True, alpha, beta))
                if alpha >= beta:
                    break
            return beta
