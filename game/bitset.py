"""
9-bit set over the squares of one small board.
"""
from typing import Iterator, Optional, Tuple


class BitSet9(int):
    """Immutable set of squares 0-8 packed into the low 9 bits of an int."""

    __slots__ = ()

    MASK = 0b111111111

    def __new__(cls, value: int = 0):
        if not 0 <= value <= cls.MASK:
            raise ValueError(f"BitSet9 value out of range: {value}")
        return super().__new__(cls, value)

    def __or__(self, other):
        return BitSet9(int(self) | int(other))

    def __and__(self, other):
        return BitSet9(int(self) & int(other))

    def __xor__(self, other):
        return BitSet9(int(self) ^ int(other))

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __invert__(self):
        return BitSet9(~int(self) & BitSet9.MASK)

    def __iter__(self) -> Iterator[int]:
        bits = int(self)
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __len__(self) -> int:
        return bin(self).count("1")

    def __contains__(self, square: int) -> bool:
        return 0 <= square < 9 and bool(int(self) >> square & 1)

    def __repr__(self) -> str:
        return f"BitSet9(0b{int(self):09b})"

    def first_square(self) -> Optional[int]:
        """Index of the lowest set bit, or None when empty."""
        if not self:
            return None
        return (int(self) & -int(self)).bit_length() - 1

    def pop_first_square(self) -> Tuple[Optional[int], 'BitSet9']:
        """Return the lowest set square and the set without it."""
        square = self.first_square()
        if square is None:
            return None, self
        return square, BitSet9(int(self) ^ (1 << square))

    @classmethod
    def of(cls, *squares: int) -> 'BitSet9':
        value = 0
        for square in squares:
            if not 0 <= square < 9:
                raise ValueError(f"Square out of range: {square}")
            value |= 1 << square
        return cls(value)


BitSet9.EMPTY = BitSet9(0)
BitSet9.FULL = BitSet9(BitSet9.MASK)
