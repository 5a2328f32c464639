"""
Conversions between BigNums, native integers and hex text.

Hex text is big-endian: the most significant word comes first and the trailing
group of HEX_DIGITS_PER_WORD characters is word 0.
"""

import string

import numpy as np

from .bignum import _require, init
from .config import (
    BN_ARRAY_SIZE,
    HEX_DIGITS_PER_WORD,
    HEX_DIGITS_TOTAL,
    MAX_VAL,
    NATIVE_INT_BITS,
    NATIVE_TMP_BITS,
    WORD_BITS,
)
from .errors import PreconditionError

_HEX_CHARS = frozenset(string.hexdigits)


def _low_bits(n, bits):
    value = 0
    nwords = min(-(-bits // WORD_BITS), BN_ARRAY_SIZE)
    for word in reversed(n.words[:nwords].tolist()):
        value = (value << WORD_BITS) | word
    return value & ((1 << bits) - 1)


def from_int(n, value):
    """Load a native 64-bit unsigned value into the low words of n.

    Wider or negative Python ints are first truncated to 64 bits, the way a C
    conversion to uint64_t would.
    """
    _require(n, "n")
    if not isinstance(value, (int, np.integer)):
        raise PreconditionError(f"value must be an integer, got {type(value).__name__}")
    value = int(value) & ((1 << NATIVE_TMP_BITS) - 1)

    init(n)
    for i in range(min(NATIVE_TMP_BITS // WORD_BITS, BN_ARRAY_SIZE)):
        n.words[i] = value & MAX_VAL
        value >>= WORD_BITS
    return n


def to_int(n):
    """Low 32 bits of n; anything above is silently dropped."""
    _require(n, "n")
    return _low_bits(n, NATIVE_INT_BITS)


def to_uint64(n):
    _require(n, "n")
    return _low_bits(n, NATIVE_TMP_BITS)


def from_string(n, text, nbytes=None):
    """Parse zero-padded hex text of nbytes characters into n.

    The text is read from its tail backward, one word per
    HEX_DIGITS_PER_WORD characters. Only the first nbytes characters are
    used; shorter text counts as if padded with leading zeros.
    """
    _require(n, "n")
    if text is None:
        raise PreconditionError("str is null")
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("ascii", errors="replace")
    if not isinstance(text, str):
        raise PreconditionError(f"str must be text, got {type(text).__name__}")
    if nbytes is None:
        nbytes = len(text)
    if nbytes <= 0:
        raise PreconditionError("nbytes must be positive")
    if nbytes & 1:
        raise PreconditionError("string format must be in hex -> equal number of bytes")
    if nbytes % HEX_DIGITS_PER_WORD:
        raise PreconditionError(
            f"string length must be a multiple of {HEX_DIGITS_PER_WORD} characters"
        )
    if nbytes > HEX_DIGITS_TOTAL:
        raise PreconditionError(f"string length must be at most {HEX_DIGITS_TOTAL} characters")

    text = text[:nbytes].rjust(nbytes, "0")
    bad = set(text) - _HEX_CHARS
    if bad:
        raise PreconditionError(f"invalid hex digits: {''.join(sorted(bad))!r}")

    words = [int(text[i - HEX_DIGITS_PER_WORD:i], 16) for i in range(nbytes, 0, -HEX_DIGITS_PER_WORD)]
    init(n)
    n.words[:len(words)] = words
    return n


def to_string(n, nbytes=None):
    """Hex digits of n with leading zeros stripped; zero gives "0".

    nbytes is the most digits the caller can take; its buffer holds one more
    byte for the terminator. The result is never truncated.
    """
    _require(n, "n")
    text = "".join(f"{word:0{HEX_DIGITS_PER_WORD}x}" for word in reversed(n.words.tolist()))
    text = text.lstrip("0") or "0"
    if nbytes is not None and len(text) > nbytes:
        raise PreconditionError(f"{len(text)} hex digits do not fit in {nbytes}")
    return text
