"""BitSet9 tests."""

import pytest
from game import BitSet9


class TestBitSet9:

    def test_range_checked(self):
        with pytest.raises(ValueError):
            BitSet9(1 << 9)
        with pytest.raises(ValueError):
            BitSet9(-1)

    def test_set_operations_stay_bitsets(self):
        a = BitSet9.of(0, 1, 2)
        b = BitSet9.of(2, 3)
        assert isinstance(a | b, BitSet9)
        assert a | b == BitSet9.of(0, 1, 2, 3)
        assert a & b == BitSet9.of(2)
        assert a ^ b == BitSet9.of(0, 1, 3)

    def test_complement_is_masked(self):
        a = BitSet9.of(0, 8)
        assert ~a == BitSet9.of(1, 2, 3, 4, 5, 6, 7)
        assert ~BitSet9.EMPTY == BitSet9.FULL
        assert ~BitSet9.FULL == BitSet9.EMPTY

    def test_iterates_lowest_first(self):
        assert list(BitSet9.of(7, 2, 5)) == [2, 5, 7]
        assert list(BitSet9.EMPTY) == []

    def test_len_and_contains(self):
        a = BitSet9.of(1, 4, 8)
        assert len(a) == 3
        assert 4 in a
        assert 0 not in a
        assert 9 not in a

    def test_pop_first_square(self):
        square, rest = BitSet9.of(3, 6).pop_first_square()
        assert square == 3
        assert rest == BitSet9.of(6)
        assert BitSet9.EMPTY.pop_first_square() == (None, BitSet9.EMPTY)
        assert BitSet9.EMPTY.first_square() is None
