"""
Plays two agents against each other on one UltimateBoard.
"""
from typing import List, Optional, Sequence

from .outcome import CONTINUE, GameOutcome
from .ultimate_board import UltimateBoard


class AgentError(ValueError):
    """An agent returned no move for a position that still has legal moves."""

    def __init__(self, agent, board: UltimateBoard):
        self.agent = agent
        self.board = board.clone()
        self.possible_moves = list(board.possible_moves())
        name = getattr(agent, 'name', type(agent).__name__)
        super().__init__(
            f"Agent {name} returned None instead of a move "
            f"(player {board.current_player.name})\n"
            f"{board}\n"
            f"Possible moves: {self.possible_moves}"
        )


class Game:
    def __init__(self, agent_one, agent_two, board: Optional[UltimateBoard] = None):
        """
        Args:
            agent_one: Agent playing Player.ONE (X)
            agent_two: Agent playing Player.TWO (O)
            board: Starting position (defaults to an empty board)
        """
        self.agents: Sequence = (agent_one, agent_two)
        self.board = board if board is not None else UltimateBoard()
        self.history: List[int] = []

    def play(self) -> GameOutcome:
        """Play until the game is decided.

        Raises:
            AgentError: an agent returned None.
            IllegalMoveError: an agent returned a move the board rejects.
        """
        while self.board.game_status == CONTINUE:
            self.step()
        return self.board.game_status

    def step(self) -> int:
        """Ask the agent to move for one ply and apply its move."""
        agent = self.agents[self.board.current_player]
        move = agent.act(self.board.clone())
        if move is None:
            raise AgentError(agent, self.board)
        self.board.make_move(move)
        self.history.append(move)
        return move
