"""
Ultimate Tic-Tac-Toe position: nine small boards, cached statuses and an
incrementally maintained Zobrist hash.

Moves are global indices 0-80: move // 9 is the small board, move % 9 the
square inside it (both in human reading order).
"""
from typing import Iterator, List, Optional

from .board import HUMAN_LINES, LINE_PAIRS, Board
from .outcome import CONTINUE, DRAW, GameOutcome, Player
from .zobrist import DEFAULT_ZOBRIST, NEXT_BOARD_OFFSET, ZobristTable

NUM_MOVES = 81

CORNER_INDICES = (0, 2, 6, 8)
EDGE_INDICES = (1, 3, 5, 7)
CENTER_INDEX = 4


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules; keeps the position for diagnostics."""

    def __init__(self, move: int, board: 'UltimateBoard', reason: str):
        self.move = move
        self.board = board.clone()
        self.reason = reason
        if board.game_status == CONTINUE:
            self.possible_moves = list(board.possible_moves())
        else:
            self.possible_moves = []
        super().__init__(
            f"Illegal move {move}: {reason}\n"
            f"{board}\n"
            f"Possible moves: {self.possible_moves}"
        )


class UltimateBoard:
    __slots__ = ('boards', 'board_status', 'game_status', 'next_board_index',
                 'current_player', 'hash', 'zobrist')

    def __init__(self, zobrist: Optional[ZobristTable] = None):
        self.boards: List[Board] = [Board(i) for i in range(9)]
        self.board_status: List[GameOutcome] = [CONTINUE] * 9
        self.game_status: GameOutcome = CONTINUE
        self.next_board_index: Optional[int] = None  # None: free choice
        self.current_player = Player.ONE
        self.hash = 0
        self.zobrist = zobrist if zobrist is not None else DEFAULT_ZOBRIST

    @classmethod
    def from_string(cls, cells: str, next_board_index: Optional[int] = None,
                    current_player: Optional[Player] = None,
                    zobrist: Optional[ZobristTable] = None) -> 'UltimateBoard':
        """Set up a position from 81 cells in move order ('X', 'O' or '.').

        Whitespace is ignored. The side to move defaults to whoever has fewer
        marks (X on a tie). Statuses and the hash are computed from scratch.
        """
        cells = "".join(cells.split())
        if len(cells) != NUM_MOVES:
            raise ValueError(f"Expected {NUM_MOVES} cells, got {len(cells)}")

        board = cls(zobrist)
        counts = [0, 0]
        for move, cell in enumerate(cells):
            if cell == '.':
                continue
            if cell not in 'XO':
                raise ValueError(f"Unknown cell {cell!r} at {move}")
            player = Player.ONE if cell == 'X' else Player.TWO
            board.boards[move // 9].set(move % 9, player)
            counts[player] += 1

        board.board_status = [b.check_if_won() for b in board.boards]
        board._update_game_status()

        if current_player is None:
            current_player = Player.ONE if counts[0] <= counts[1] else Player.TWO
        board.current_player = Player(current_player)

        if next_board_index is not None:
            if not 0 <= next_board_index < 9:
                raise ValueError(f"next_board_index out of range: {next_board_index}")
            if board.board_status[next_board_index] != CONTINUE:
                raise ValueError(f"Board {next_board_index} is finished and cannot be active")
        board.next_board_index = next_board_index
        board.hash = board.compute_hash()
        return board

    def clone(self) -> 'UltimateBoard':
        """Copy for hypothetical moves. The Zobrist table is shared, never copied."""
        new_board = UltimateBoard.__new__(UltimateBoard)
        new_board.boards = [b.clone() for b in self.boards]
        new_board.board_status = self.board_status[:]
        new_board.game_status = self.game_status
        new_board.next_board_index = self.next_board_index
        new_board.current_player = self.current_player
        new_board.hash = self.hash
        new_board.zobrist = self.zobrist
        return new_board

    def is_game_over(self) -> bool:
        return self.game_status != CONTINUE

    def possible_moves(self) -> Iterator[int]:
        """Lazily yield the legal moves.

        Only meaningful while the game continues; a continuing game always
        has at least one legal move since a full board is a draw.
        """
        if self.next_board_index is not None:
            yield from self.boards[self.next_board_index].possible_moves()
            return
        for board, status in zip(self.boards, self.board_status):
            if status == CONTINUE:
                yield from board.possible_moves()

    def is_legal(self, move: int) -> bool:
        if self.game_status != CONTINUE or not 0 <= move < NUM_MOVES:
            return False
        board_index, square = divmod(move, 9)
        if self.next_board_index is not None and self.next_board_index != board_index:
            return False
        if self.board_status[board_index] != CONTINUE:
            return False
        return self.boards[board_index].get(square) is None

    def make_move(self, move: int) -> None:
        if self.game_status != CONTINUE:
            raise IllegalMoveError(move, self, "game is over")
        if not 0 <= move < NUM_MOVES:
            raise IllegalMoveError(move, self, "index out of range")

        board_index, square = divmod(move, 9)

        if self.next_board_index is not None and self.next_board_index != board_index:
            raise IllegalMoveError(
                move, self, f"must play on board {self.next_board_index}")
        if self.board_status[board_index] != CONTINUE:
            raise IllegalMoveError(move, self, f"board {board_index} is finished")

        board = self.boards[board_index]
        if board.get(square) is not None:
            raise IllegalMoveError(move, self, "square is taken")

        player = self.current_player
        board.set(square, player)
        self.hash ^= self.zobrist.keys[move * 2 + player]

        self.board_status[board_index] = board.check_if_won()
        self._update_game_status()

        self.current_player = player.opponent

        if self.next_board_index is not None:
            self.hash ^= self.zobrist.keys[NEXT_BOARD_OFFSET + self.next_board_index]

        if self.board_status[square] == CONTINUE:
            self.hash ^= self.zobrist.keys[NEXT_BOARD_OFFSET + square]
            self.next_board_index = square
        else:
            self.next_board_index = None

    def _update_game_status(self) -> None:
        status = self.board_status
        for a, b, c in HUMAN_LINES:
            if status[a].is_win and status[a] == status[b] == status[c]:
                self.game_status = status[a]
                return
        if all(s != CONTINUE for s in status):
            self.game_status = DRAW
            return
        self.game_status = CONTINUE

    def compute_hash(self) -> int:
        """Zobrist hash recomputed from the marks and the active board."""
        return self.zobrist.compute(self.boards, self.next_board_index)

    def partial_wins_difference(self, player: Player) -> int:
        """Meta-board line pairs with at least one own won board and none of the opponent's.

        Drawn and open boards are neutral. Pairs favouring the opponent count -1.
        """
        own = GameOutcome.win(player)
        other = GameOutcome.win(player.opponent)
        diff = 0
        for pair in LINE_PAIRS:
            cells = [self.board_status[i] for i in pair]
            if own in cells and other not in cells:
                diff += 1
            elif other in cells and own not in cells:
                diff -= 1
        return diff

    def move_count(self) -> int:
        return sum(len(b.occupied()) for b in self.boards)

    def get_cell(self, move: int) -> Optional[Player]:
        board_index, square = divmod(move, 9)
        return self.boards[board_index].get(square)

    def __eq__(self, other) -> bool:
        # Hash equality only; collisions are accepted for transposition lookups
        if not isinstance(other, UltimateBoard):
            return NotImplemented
        return self.hash == other.hash

    def __hash__(self) -> int:
        return self.hash

    def __repr__(self) -> str:
        return (f"UltimateBoard(hash={self.hash:#018x}, status={self.game_status!r}, "
                f"next_board={self.next_board_index}, player={self.current_player.name})")

    def __str__(self) -> str:
        lines = []
        for meta_row in range(3):
            for row in range(3):
                parts = []
                for meta_col in range(3):
                    cells = self.boards[meta_row * 3 + meta_col].extract_row(row)
                    parts.append(" ".join(p.symbol if p is not None else "." for p in cells))
                lines.append(" | ".join(parts))
            if meta_row < 2:
                lines.append("------+-------+------")
        lines.append(f"Game status: {self.game_status!r}")
        lines.append(f"Board status: {self.board_status!r}")
        lines.append(f"Next board index: {self.next_board_index}")
        lines.append(f"Current player: {self.current_player.name}")
        return "\n".join(lines)
