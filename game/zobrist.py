"""
Zobrist keys for incremental hashing of UltimateBoard.

Layout of the key array:
  [square * 2 + player]          for square in 0..80, player in {0, 1}
  [NEXT_BOARD_OFFSET + index]    for the active small board 0..8

DEFAULT_ZOBRIST is built once when this module is imported and never
mutated afterwards, so it can be shared freely between boards and threads.
Pass an explicit ZobristTable to UltimateBoard to use a different seed.
"""
from typing import List, Optional, Sequence

import numpy as np

NUM_SQUARES = 81
NEXT_BOARD_OFFSET = NUM_SQUARES * 2
NUM_KEYS = NEXT_BOARD_OFFSET + 9

DEFAULT_SEED = 0


class ZobristTable:
    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        rng = np.random.default_rng(seed)
        raw = rng.integers(0, np.iinfo(np.uint64).max, size=NUM_KEYS,
                           dtype=np.uint64, endpoint=True)
        # plain ints: xor on numpy scalars is several times slower
        self.keys: List[int] = [int(v) for v in raw]

    def __len__(self) -> int:
        return len(self.keys)

    def __getitem__(self, index: int) -> int:
        return self.keys[index]

    def square(self, index: int, player: int) -> int:
        return self.keys[index * 2 + player]

    def next_board(self, board_index: int) -> int:
        return self.keys[NEXT_BOARD_OFFSET + board_index]

    def compute(self, boards: Sequence, next_board_index: Optional[int]) -> int:
        """Hash of a position computed from scratch (no incremental state)."""
        value = 0
        for board in boards:
            for player, marks in enumerate(board.marks):
                for bit in marks:
                    index = board.board_id * 9 + board.bit_to_human(bit)
                    value ^= self.keys[index * 2 + player]
        if next_board_index is not None:
            value ^= self.keys[NEXT_BOARD_OFFSET + next_board_index]
        return value


DEFAULT_ZOBRIST = ZobristTable(DEFAULT_SEED)
