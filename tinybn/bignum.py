"""
Fixed-capacity unsigned big numbers.

A BigNum is BN_ARRAY_SIZE words of DTYPE, least significant word first.
Every value lives in [0, 2**CAPACITY_BITS); results that do not fit wrap.
"""

import threading
from contextlib import contextmanager
from enum import IntEnum

import numpy as np

from .config import BN_ARRAY_SIZE, CAPACITY_MASK, DTYPE, MAX_VAL, SCRATCH_POOL_LIMIT, WORD_BITS
from .errors import PreconditionError


class Cmp(IntEnum):
    SMALLER = -1
    EQUAL = 0
    LARGER = 1


class BigNum:
    __slots__ = ("words",)

    def __init__(self, value=0):
        # value can be an integer or a numpy array of DTYPE words
        if isinstance(value, (int, np.integer)):
            self.words = np.zeros(BN_ARRAY_SIZE, dtype=DTYPE)
            temp_value = int(value) & CAPACITY_MASK
            for i in range(BN_ARRAY_SIZE):
                if temp_value == 0:
                    break
                self.words[i] = temp_value & MAX_VAL
                temp_value >>= WORD_BITS
        elif isinstance(value, np.ndarray):
            if value.dtype != DTYPE or value.size != BN_ARRAY_SIZE:
                raise ValueError(f"Value must be a numpy array of {BN_ARRAY_SIZE} {np.dtype(DTYPE).name} elements")
            self.words = value.reshape(BN_ARRAY_SIZE).copy()
        else:
            raise TypeError("Unsupported type for BigNum initialization")

    def copy(self):
        return BigNum(self.words)

    def __int__(self):
        value = 0
        for word in reversed(self.words.tolist()):
            value = (value << WORD_BITS) | word
        return value

    def __bool__(self):
        return not is_zero(self)

    def __add__(self, other):
        return _binary(self, other, arith.add)

    def __radd__(self, other):
        return _binary(other, self, arith.add)

    def __sub__(self, other):
        return _binary(self, other, arith.sub)

    def __rsub__(self, other):
        return _binary(other, self, arith.sub)

    def __mul__(self, other):
        return _binary(self, other, arith.mul)

    def __rmul__(self, other):
        return _binary(other, self, arith.mul)

    def __floordiv__(self, other):
        return _binary(self, other, arith.div)

    def __rfloordiv__(self, other):
        return _binary(other, self, arith.div)

    def __mod__(self, other):
        return _binary(self, other, arith.mod)

    def __rmod__(self, other):
        return _binary(other, self, arith.mod)

    def __divmod__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return arith.divmod(self, other, BigNum(), BigNum())

    def __pow__(self, exponent):
        return _binary(self, exponent, arith.pow)

    def __and__(self, other):
        return _binary(self, other, shift.and_)

    __rand__ = __and__

    def __or__(self, other):
        return _binary(self, other, shift.or_)

    __ror__ = __or__

    def __xor__(self, other):
        return _binary(self, other, shift.xor)

    __rxor__ = __xor__

    def __lshift__(self, n):
        if not isinstance(n, (int, np.integer)):
            return NotImplemented
        return shift.lshift(self, BigNum(), int(n))

    def __rshift__(self, n):
        if not isinstance(n, (int, np.integer)):
            return NotImplemented
        return shift.rshift(self, BigNum(), int(n))

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return np.array_equal(self.words, other.words)

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return cmp(self, other) == Cmp.SMALLER

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return cmp(self, other) != Cmp.LARGER

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return cmp(self, other) == Cmp.LARGER

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return cmp(self, other) != Cmp.SMALLER

    __hash__ = None

    def __repr__(self):
        return "0x" + convert.to_string(self)

    def __str__(self):
        return self.__repr__()


def _coerce(value):
    if isinstance(value, BigNum):
        return value
    if isinstance(value, (int, np.integer)):
        return BigNum(value)
    return NotImplemented


def _binary(a, b, op):
    a = _coerce(a)
    b = _coerce(b)
    if a is NotImplemented or b is NotImplemented:
        return NotImplemented
    return op(a, b, BigNum())


def _require(n, name):
    if n is None:
        raise PreconditionError(f"{name} is null")
    if not isinstance(n, BigNum):
        raise PreconditionError(f"{name} must be a BigNum, got {type(n).__name__}")


# Scratch numbers are pooled per thread so that multi-step operations do not
# allocate fresh arrays on every call.
_local = threading.local()


def _free_list():
    free = getattr(_local, "free", None)
    if free is None:
        free = _local.free = []
    return free


@contextmanager
def scratch(count=1):
    """Borrow `count` zeroed BigNums for the duration of a with-block.

    The numbers are wiped and handed back to the pool when the block exits,
    whether it returns normally or raises. They must not escape the block.
    """
    free = _free_list()
    taken = [free.pop() if free else BigNum() for _ in range(count)]
    try:
        yield taken
    finally:
        for n in taken:
            n.words.fill(0)
            if len(free) < SCRATCH_POOL_LIMIT:
                free.append(n)


def init(n=None):
    """Zero every word of `n`; allocates a new BigNum when `n` is None.

    Safe to call repeatedly on the same instance, the word array is reused.
    """
    if n is None:
        return BigNum()
    _require(n, "n")
    n.words.fill(0)
    return n


def assign(dst, src):
    _require(dst, "dst")
    _require(src, "src")
    np.copyto(dst.words, src.words)
    return dst


def cmp(a, b):
    """Compare from the most significant word down; the first difference decides."""
    _require(a, "a")
    _require(b, "b")
    diff = np.flatnonzero(a.words != b.words)
    if diff.size == 0:
        return Cmp.EQUAL
    i = diff[-1]
    return Cmp.LARGER if a.words[i] > b.words[i] else Cmp.SMALLER


def is_zero(n):
    _require(n, "n")
    return not n.words.any()


# operator support; these modules import from here
from . import arith, convert, shift  # noqa: E402
