"""Tests for tinybn/shift.py."""

import pytest

from tinybn import (
    BigNum,
    Cmp,
    PreconditionError,
    and_,
    cmp,
    from_string,
    lshift,
    or_,
    rshift,
    xor,
)
from tinybn.config import CAPACITY_MASK
from tinybn.shift import lshift_one_bit, rshift_one_bit

MAX = CAPACITY_MASK
PATTERN = 0x0123456789ABCDEF_FEDCBA9876543210_DEADBEEF_CAFEBABE_8000000000000001


def _shifted(op, value, nbits):
    return int(op(BigNum(value), BigNum(), nbits))


class TestRshift:
    def test_largish_number(self):
        n1 = from_string(BigNum(), "11112222333344445555666677778888", 32)
        n3 = from_string(BigNum(), "1111222233334444", 16)
        n2 = rshift(n1, BigNum(), 64)
        assert cmp(n2, n3) == Cmp.EQUAL

    @pytest.mark.parametrize("nbits", [0, 1, 5, 31, 32, 33, 64, 100, 255, 1000, 1023])
    def test_matches_native(self, nbits):
        value = PATTERN << 700
        assert _shifted(rshift, value, nbits) == value >> nbits

    def test_everything_shifted_out(self):
        assert _shifted(rshift, MAX, 1024) == 0
        assert _shifted(rshift, MAX, 5000) == 0

    def test_source_untouched(self):
        a = BigNum(PATTERN)
        rshift(a, BigNum(), 17)
        assert int(a) == PATTERN

    def test_in_place(self):
        a = BigNum(PATTERN)
        rshift(a, a, 40)
        assert int(a) == PATTERN >> 40


class TestLshift:
    @pytest.mark.parametrize("nbits", [0, 1, 7, 31, 32, 33, 64, 96, 500, 1000])
    def test_matches_native(self, nbits):
        assert _shifted(lshift, PATTERN, nbits) == (PATTERN << nbits) & MAX

    def test_top_bit(self):
        assert _shifted(lshift, 1, 1023) == 1 << 1023

    def test_bits_past_capacity_are_dropped(self):
        assert _shifted(lshift, 1, 1024) == 0
        assert _shifted(lshift, MAX, 1) == MAX - 1
        assert _shifted(lshift, MAX, 5000) == 0

    def test_in_place(self):
        a = BigNum(PATTERN)
        lshift(a, a, 45)
        assert int(a) == (PATTERN << 45) & MAX


class TestShiftPreconditions:
    @pytest.mark.parametrize("op", [lshift, rshift])
    def test_negative(self, op):
        b = BigNum(9)
        with pytest.raises(PreconditionError, match="no negative shifts"):
            op(BigNum(1), b, -1)
        assert int(b) == 9

    @pytest.mark.parametrize("op", [lshift, rshift])
    def test_non_integer(self, op):
        with pytest.raises(PreconditionError):
            op(BigNum(1), BigNum(), 1.5)

    def test_null(self):
        with pytest.raises(PreconditionError, match="a is null"):
            lshift(None, BigNum(), 1)

    def test_negative_operator_shift(self):
        with pytest.raises(PreconditionError):
            BigNum(1) << -1


class TestOneBit:
    def test_left_carries_into_next_word(self):
        n = BigNum(0x80000000)
        lshift_one_bit(n)
        assert int(n) == 1 << 32

    def test_left_drops_top_bit(self):
        n = BigNum(1 << 1023)
        lshift_one_bit(n)
        assert int(n) == 0

    def test_right_carries_into_previous_word(self):
        n = BigNum(1 << 32)
        rshift_one_bit(n)
        assert int(n) == 0x80000000

    def test_right_top_word_gets_no_carry_in(self):
        n = BigNum(MAX)
        rshift_one_bit(n)
        assert int(n) == MAX >> 1


class TestBitwise:
    A = PATTERN << 300 | 0xF0F0F0F0
    B = (MAX >> 3) ^ 0x0FF00FF0

    def test_and(self):
        assert int(and_(BigNum(self.A), BigNum(self.B), BigNum())) == self.A & self.B

    def test_or(self):
        assert int(or_(BigNum(self.A), BigNum(self.B), BigNum())) == self.A | self.B

    def test_xor(self):
        assert int(xor(BigNum(self.A), BigNum(self.B), BigNum())) == self.A ^ self.B

    def test_xor_with_self_is_zero(self):
        a = BigNum(self.A)
        xor(a, a, a)
        assert int(a) == 0
