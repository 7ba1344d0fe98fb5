"""Tests for the bit-vector."""

import pytest

from scheduler.bits import BitVector


class TestBitVector:
    def test_from_values(self):
        bits = BitVector.from_values(8, [1, 3, 7])
        assert bits.mask == 0b10001010
        assert list(bits) == [1, 3, 7]
        assert len(bits) == 3

    def test_test_outside_vector_is_unset(self):
        bits = BitVector.from_values(4, [0, 3])
        assert bits.test(3)
        assert not bits.test(4)
        assert not bits.test(-1)

    def test_next_set_bit(self):
        bits = BitVector.from_values(61, [0, 15, 60])
        assert bits.next_set_bit(0) == 0
        assert bits.next_set_bit(1) == 15
        assert bits.next_set_bit(16) == 60
        assert bits.next_set_bit(61) is None
        assert bits.next_set_bit(500) is None

    def test_next_set_bit_rejects_negative_index(self):
        with pytest.raises(ValueError):
            BitVector.from_values(4, [1]).next_set_bit(-1)

    def test_empty(self):
        bits = BitVector(size=10)
        assert list(bits) == []
        assert bits.next_set_bit(0) is None
        assert len(bits) == 0

    def test_contains(self):
        bits = BitVector.from_values(4, [2])
        assert 2 in bits
        assert 1 not in bits
        assert "2" not in bits

    def test_str(self):
        assert str(BitVector.from_values(4, [0, 2])) == "1010"

    def test_equality_and_hash(self):
        a = BitVector.from_values(8, [1, 2])
        b = BitVector.from_values(8, [2, 1, 1])
        assert a == b
        assert hash(a) == hash(b)
        assert a != BitVector.from_values(9, [1, 2])

    def test_value_outside_size_rejected(self):
        with pytest.raises(ValueError):
            BitVector.from_values(4, [4])

    def test_mask_must_fit(self):
        with pytest.raises(ValueError):
            BitVector(size=4, mask=0b10000)
