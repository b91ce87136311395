from .bitset import BitSet9
from .outcome import CONTINUE, DRAW, GameOutcome, Player
from .zobrist import DEFAULT_ZOBRIST, ZobristTable
from .board import Board
from .ultimate_board import IllegalMoveError, UltimateBoard
from .driver import AgentError, Game

__all__ = [
    'BitSet9', 'Player', 'GameOutcome', 'CONTINUE', 'DRAW',
    'ZobristTable', 'DEFAULT_ZOBRIST', 'Board',
    'UltimateBoard', 'IllegalMoveError', 'Game', 'AgentError',
]
