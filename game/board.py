"""
Single 3x3 board of Ultimate Tic-Tac-Toe packed into two BitSet9s.

Squares are addressed in human reading order:

    0 | 1 | 2
    --+---+--
    3 | 4 | 5
    --+---+--
    6 | 7 | 8

Internally the bits walk the outer ring clockwise and keep the centre last,
so corners are the even bits, edges the odd bits and the centre is bit 8:

    0 | 1 | 2
    --+---+--
    7 | 8 | 3
    --+---+--
    6 | 5 | 4
"""
from itertools import combinations
from typing import Iterator, List, Optional, Tuple

from .bitset import BitSet9
from .outcome import CONTINUE, DRAW, GameOutcome, Player

HUMAN_TO_BIT = (0, 1, 2, 7, 8, 3, 6, 5, 4)
BIT_TO_HUMAN = tuple(HUMAN_TO_BIT.index(bit) for bit in range(9))

# Lines in human indices
HUMAN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)

# The 24 square pairs inside the win lines (3 per line)
LINE_PAIRS = tuple(pair for line in HUMAN_LINES for pair in combinations(line, 2))


def _mask(*human_squares: int) -> int:
    value = 0
    for square in human_squares:
        value |= 1 << HUMAN_TO_BIT[square]
    return value


WIN_MASKS = tuple(_mask(*line) for line in HUMAN_LINES)
PAIR_MASKS = tuple(_mask(*pair) for pair in LINE_PAIRS)
CORNER_MASK = _mask(0, 2, 6, 8)
EDGE_MASK = _mask(1, 3, 5, 7)
CENTER_MASK = _mask(4)


class Board:
    """One small board: marks per player plus its position on the meta-board."""

    __slots__ = ('marks', 'board_id')

    def __init__(self, board_id: int = 0, marks: Optional[Tuple[int, int]] = None):
        if not 0 <= board_id < 9:
            raise ValueError(f"board_id out of range: {board_id}")
        if marks is None:
            self.marks: List[BitSet9] = [BitSet9.EMPTY, BitSet9.EMPTY]
        else:
            first, second = BitSet9(marks[0]), BitSet9(marks[1])
            if first & second:
                raise ValueError("A square cannot belong to both players")
            self.marks = [first, second]
        self.board_id = board_id

    def clone(self) -> 'Board':
        new_board = Board.__new__(Board)
        new_board.marks = self.marks[:]
        new_board.board_id = self.board_id
        return new_board

    @staticmethod
    def human_to_bit(index: int) -> int:
        return HUMAN_TO_BIT[index]

    @staticmethod
    def bit_to_human(bit: int) -> int:
        return BIT_TO_HUMAN[bit]

    def occupied(self) -> BitSet9:
        return self.marks[0] | self.marks[1]

    def empty_squares(self) -> BitSet9:
        return ~(self.marks[0] | self.marks[1])

    def get(self, index: int) -> Optional[Player]:
        """Owner of the square at human index, None when empty."""
        bit = 1 << HUMAN_TO_BIT[index]
        if self.marks[0] & bit:
            return Player.ONE
        if self.marks[1] & bit:
            return Player.TWO
        return None

    def set(self, index: int, player: Player) -> None:
        """Mark the square at human index for player. The square must be empty."""
        if not 0 <= index < 9:
            raise ValueError(f"Index out of bounds: {index}")
        bit = 1 << HUMAN_TO_BIT[index]
        if (self.marks[0] | self.marks[1]) & bit:
            raise ValueError(f"Square {index} on board {self.board_id} is already set")
        self.marks[player] = self.marks[player] | bit

    def possible_moves(self) -> Iterator[int]:
        """Global move indices (board_id * 9 + local) of the empty squares."""
        offset = self.board_id * 9
        for bit in self.empty_squares():
            yield offset + BIT_TO_HUMAN[bit]

    def is_full(self) -> bool:
        return self.occupied() == BitSet9.MASK

    def check_if_won(self) -> GameOutcome:
        for mask in WIN_MASKS:
            for player in Player:
                if self.marks[player] & mask == mask:
                    return GameOutcome.win(player)
        if self.is_full():
            return DRAW
        return CONTINUE

    # Features used by the heuristics, all as (player - opponent)

    def positions_set_difference(self, player: Player) -> int:
        return len(self.marks[player]) - len(self.marks[player.opponent])

    def partial_wins_difference(self, player: Player) -> int:
        """Square pairs of a win line held entirely by one side, own minus opponent's.

        The third square of the line is ignored, so each line contributes up
        to three pairs.
        """
        own, other = self.marks[player], self.marks[player.opponent]
        diff = 0
        for mask in PAIR_MASKS:
            if own & mask == mask:
                diff += 1
            elif other & mask == mask:
                diff -= 1
        return diff

    def center_occupied(self, player: Player) -> int:
        if self.marks[player] & CENTER_MASK:
            return 1
        if self.marks[player.opponent] & CENTER_MASK:
            return -1
        return 0

    def corners_difference(self, player: Player) -> int:
        return len(self.marks[player] & CORNER_MASK) - len(self.marks[player.opponent] & CORNER_MASK)

    def edges_difference(self, player: Player) -> int:
        return len(self.marks[player] & EDGE_MASK) - len(self.marks[player.opponent] & EDGE_MASK)

    def to_key(self) -> int:
        """18-bit key: player one's marks in the low 9 bits, player two's above."""
        return int(self.marks[0]) | int(self.marks[1]) << 9

    @classmethod
    def from_key(cls, key: int, board_id: int = 0) -> 'Board':
        return cls(board_id, (key & BitSet9.MASK, key >> 9))

    def extract_row(self, row: int) -> List[Optional[Player]]:
        return [self.get(row * 3 + col) for col in range(3)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.board_id == other.board_id and self.marks == other.marks

    def __hash__(self) -> int:
        return hash((self.board_id, self.to_key()))

    def __repr__(self) -> str:
        return f"Board(id={self.board_id}, marks=({self.marks[0]!r}, {self.marks[1]!r}))"

    def __str__(self) -> str:
        lines = []
        for row in range(3):
            cells = self.extract_row(row)
            lines.append(" ".join(p.symbol if p is not None else "." for p in cells))
        return "\n".join(lines)


def legal_boards() -> Iterator[Tuple[int, int]]:
    """Every (player one marks, player two marks) pair with no shared square.

    There are 3^9 of them. Reachability in play (mark counts, double wins)
    is not checked.
    """
    for key in range(1 << 18):
        first = key & BitSet9.MASK
        second = key >> 9
        if first & second == 0:
            yield first, second
