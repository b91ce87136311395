"""
Players and game outcomes.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Player(IntEnum):
    ONE = 0
    TWO = 1

    @property
    def opponent(self) -> 'Player':
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def symbol(self) -> str:
        return "X" if self is Player.ONE else "O"


@dataclass(frozen=True)
class GameOutcome:
    """Result of a board or of the whole game: continue, draw or a win.

    Outcomes compare for equality only. Use the module constants
    CONTINUE / DRAW and GameOutcome.win(player) instead of the constructor.
    """
    kind: str
    winner: Optional[Player] = None

    @staticmethod
    def win(player: Player) -> 'GameOutcome':
        return _WINS[player]

    @property
    def is_win(self) -> bool:
        return self.kind == "win"

    @property
    def is_draw(self) -> bool:
        return self.kind == "draw"

    @property
    def is_terminal(self) -> bool:
        return self.kind != "continue"

    def __repr__(self) -> str:
        if self.is_win:
            return f"Win({self.winner.name})"
        return self.kind.capitalize()


CONTINUE = GameOutcome("continue")
DRAW = GameOutcome("draw")
_WINS = {player: GameOutcome("win", player) for player in Player}
