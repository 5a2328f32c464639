"""
Arithmetic on BigNums.

Every function writes its result into the last argument and returns it. The
destination may be one of the sources: results are built in scratch numbers
and copied out once complete. All results are reduced modulo 2**CAPACITY_BITS.
"""

import logging

import numpy as np

from .bignum import Cmp, _require, assign, cmp, is_zero, scratch
from .config import BN_ARRAY_SIZE, DTYPE, DTYPE_TMP, MAX_VAL, WORD_BITS
from .errors import DivisionByZero, PreconditionError
from .shift import lshift_one_bit, or_, rshift_one_bit

logger = logging.getLogger(__name__)

# Division stops aligning once the divisor's top word reaches this value.
HALF_MAX = 1 + MAX_VAL // 2
# A number with any of these words set squares past capacity.
HALF_WORDS = BN_ARRAY_SIZE // 2


def add(a, b, c):
    """c = a + b; the carry out of the top word is dropped."""
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")

    sums = a.words.astype(DTYPE_TMP) + b.words
    out = []
    carry = 0
    for total in sums.tolist():
        total += carry
        carry = int(total > MAX_VAL)
        out.append(total & MAX_VAL)
    c.words[:] = out
    return c


def sub(a, b, c):
    """c = a - b; wraps to 2**CAPACITY_BITS - (b - a) when b > a."""
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")

    # Borrow from the next word up front so the difference never goes negative
    biased = a.words.astype(DTYPE_TMP) + (MAX_VAL + 1)
    out = []
    borrow = 0
    for tmp1, tmp2 in zip(biased.tolist(), b.words.tolist()):
        res = tmp1 - (tmp2 + borrow)
        out.append(res & MAX_VAL)
        borrow = int(res <= MAX_VAL)
    c.words[:] = out
    return c


def mul(a, b, c):
    """c = a * b, schoolbook. Partial products above the top word are dropped."""
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")

    products = np.outer(a.words.astype(DTYPE_TMP), b.words.astype(DTYPE_TMP))
    with scratch(3) as (row, high, total):
        # zero words of a contribute empty rows
        for i in np.flatnonzero(a.words).tolist():
            width = BN_ARRAY_SIZE - i
            p = products[i, :width]
            # product (i, j) lands at word i + j, its high half one word up
            row.words.fill(0)
            row.words[i:] = (p & MAX_VAL).astype(DTYPE)
            high.words.fill(0)
            high.words[i + 1:] = (p[:width - 1] >> WORD_BITS).astype(DTYPE)
            add(row, high, row)
            add(total, row, total)
        assign(c, total)
    return c


def div(a, b, c):
    """c = a / b (floor), by restoring binary long division."""
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")
    if is_zero(b):
        raise DivisionByZero()

    with scratch(4) as (current, denom, rem, answer):
        current.words[0] = 1
        assign(denom, b)
        assign(rem, a)

        overflow = False
        while cmp(denom, a) != Cmp.LARGER:
            if denom.words[-1] >= HALF_MAX:
                # another shift would push the divisor's top bit out
                logger.debug("division alignment stopped at the top word")
                overflow = True
                break
            lshift_one_bit(current)
            lshift_one_bit(denom)
        if not overflow:
            rshift_one_bit(denom)
            rshift_one_bit(current)

        while not is_zero(current):
            if cmp(rem, denom) != Cmp.SMALLER:
                sub(rem, denom, rem)
                or_(answer, current, answer)
            rshift_one_bit(current)
            rshift_one_bit(denom)
        assign(c, answer)
    return c


def divmod(a, b, c, d):
    """Quotient and remainder: c = a / b and d = a % b.

    The remainder is computed as a - (a / b) * b. Returns (c, d).
    """
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")
    _require(d, "d")
    if c is d:
        raise PreconditionError("quotient and remainder must be distinct BigNums")
    if is_zero(b):
        raise DivisionByZero()

    with scratch(2) as (quotient, tmp):
        div(a, b, quotient)
        mul(quotient, b, tmp)
        sub(a, tmp, tmp)
        assign(c, quotient)
        assign(d, tmp)
    return c, d


def mod(a, b, c):
    """c = a % b; divmod with the quotient thrown away."""
    _require(c, "c")
    with scratch(1) as (quotient,):
        divmod(a, b, quotient, c)
    return c


def inc(n):
    _require(n, "n")
    words = n.words
    for i in range(BN_ARRAY_SIZE):
        res = (int(words[i]) + 1) & MAX_VAL
        words[i] = res
        # stop once a word absorbs the carry
        if res != 0:
            break
    return n


def dec(n):
    """n -= 1; zero wraps to the maximum value."""
    _require(n, "n")
    words = n.words
    for i in range(BN_ARRAY_SIZE):
        tmp = int(words[i])
        words[i] = (tmp - 1) & MAX_VAL
        if tmp != 0:
            break
    return n


def pow(a, b, c):
    """c = a ** b by repeated multiplication.

    Runs b - 1 multiplications, so the cost follows the value of the exponent
    rather than its bit length. a ** 0 == 1 for every a, including 0.
    """
    _require(a, "a")
    _require(b, "b")
    _require(c, "c")

    with scratch(2) as (acc, count):
        if is_zero(b):
            acc.words[0] = 1
        elif not a.words[1:].any() and a.words[0] <= 1:
            # 0 and 1 are fixed points of repeated multiplication
            assign(acc, a)
        else:
            assign(count, b)
            assign(acc, a)
            dec(count)
            while not is_zero(count):
                mul(a, acc, acc)
                dec(count)
        assign(c, acc)
    return c


def _midpoint(low, high, mid):
    # mid = low + (high - low) / 2 + 1, never forming low + high
    sub(high, low, mid)
    rshift_one_bit(mid)
    add(low, mid, mid)
    inc(mid)


def isqrt(a, b):
    """b = floor(sqrt(a)), by binary search between 0 and a."""
    _require(a, "a")
    _require(b, "b")

    with scratch(4) as (low, high, mid, square):
        assign(high, a)
        _midpoint(low, high, mid)

        while cmp(high, low) == Cmp.LARGER:
            if mid.words[HALF_WORDS:].any():
                too_big = True
            else:
                mul(mid, mid, square)
                too_big = cmp(square, a) == Cmp.LARGER
            if too_big:
                assign(high, mid)
                dec(high)
            else:
                assign(low, mid)
            _midpoint(low, high, mid)
        assign(b, low)
    return b
