"""Shifts and word-wise bitwise operations.

Shifts are truncating: bits moved past either end of the word array are lost.
"""

import numpy as np

from .bignum import _require
from .config import BN_ARRAY_SIZE, DTYPE, WORD_BITS
from .errors import PreconditionError


def _check_shift(nbits):
    if not isinstance(nbits, (int, np.integer)) or isinstance(nbits, bool):
        raise PreconditionError(f"shift count must be an integer, got {type(nbits).__name__}")
    if nbits < 0:
        raise PreconditionError("no negative shifts")
    return int(nbits)


def lshift_words(words, nwords):
    """Move whole words towards the top in place, zero-filling from word 0."""
    if nwords >= BN_ARRAY_SIZE:
        words.fill(0)
        return
    words[nwords:] = words[:BN_ARRAY_SIZE - nwords].copy()
    words[:nwords] = 0


def rshift_words(words, nwords):
    """Move whole words towards word 0 in place, zero-filling the top."""
    if nwords >= BN_ARRAY_SIZE:
        words.fill(0)
        return
    words[:BN_ARRAY_SIZE - nwords] = words[nwords:].copy()
    words[BN_ARRAY_SIZE - nwords:] = 0


def _lshift_bits(words, nbits):
    # 0 < nbits < WORD_BITS; each word takes the top bits of the word below it
    carry = words[:-1] >> DTYPE(WORD_BITS - nbits)
    words <<= DTYPE(nbits)
    words[1:] |= carry


def _rshift_bits(words, nbits):
    # 0 < nbits < WORD_BITS; each word takes the bottom bits of the word above it
    carry = words[1:] << DTYPE(WORD_BITS - nbits)
    words >>= DTYPE(nbits)
    words[:-1] |= carry


def lshift_one_bit(n):
    _lshift_bits(n.words, 1)


def rshift_one_bit(n):
    _rshift_bits(n.words, 1)


def lshift(a, b, nbits):
    """b = a << nbits, truncated to capacity."""
    _require(a, "a")
    _require(b, "b")
    nbits = _check_shift(nbits)

    words = a.words.copy()
    # Handle shift in multiples of word-size
    nwords = nbits // WORD_BITS
    if nwords != 0:
        lshift_words(words, nwords)
        nbits -= nwords * WORD_BITS

    if nbits != 0:
        _lshift_bits(words, nbits)
    np.copyto(b.words, words)
    return b


def rshift(a, b, nbits):
    """b = a >> nbits."""
    _require(a, "a")
    _require(b, "b")
    nbits = _check_shift(nbits)

    words = a.words.copy()
    nwords = nbits // WORD_BITS
    if nwords != 0:
        rshift_words(words, nwords)
        nbits -= nwords * WORD_BITS

    if nbits != 0:
        _rshift_bits(words, nbits)
    np.copyto(b.words, words)
    return b


def and_(a, b, c):
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")
    np.bitwise_and(a.words, b.words, out=c.words)
    return c


def or_(a, b, c):
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")
    np.bitwise_or(a.words, b.words, out=c.words)
    return c


def xor(a, b, c):
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")
    np.bitwise_xor(a.words, b.words, out=c.words)
    return c
