import numpy as np

# Bytes per word. 1, 2 and 4 are supported; 4 is the canonical build.
WORD_SIZE = 4

_DTYPES = {
    1: np.uint8,
    2: np.uint16,
    4: np.uint32,
}

if WORD_SIZE not in _DTYPES:
    raise ImportError("unsupported WORD_SIZE %r, expected one of %r" % (WORD_SIZE, sorted(_DTYPES)))

DTYPE = _DTYPES[WORD_SIZE]
# Wide enough to hold a word product plus carry.
DTYPE_TMP = np.uint64

WORD_BITS = WORD_SIZE * 8
MAX_VAL = (1 << WORD_BITS) - 1

# Number of words per BigNum: 128 bytes -> 1024-bit numbers.
BN_ARRAY_SIZE = 128 // WORD_SIZE
CAPACITY_BITS = BN_ARRAY_SIZE * WORD_BITS
CAPACITY_MASK = (1 << CAPACITY_BITS) - 1

HEX_DIGITS_PER_WORD = 2 * WORD_SIZE
# Length of the fully zero-padded hex text of one BigNum.
HEX_DIGITS_TOTAL = BN_ARRAY_SIZE * HEX_DIGITS_PER_WORD

# Widths of the native integer types used by from_int/to_int.
NATIVE_INT_BITS = 32
NATIVE_TMP_BITS = 64

# Upper bound on idle scratch numbers kept per thread.
SCRATCH_POOL_LIMIT = 16
