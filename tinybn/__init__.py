"""Fixed-capacity unsigned big-integer arithmetic."""

from .arith import add, dec, div, divmod, inc, isqrt, mod, mul, pow, sub
from .bignum import BigNum, Cmp, assign, cmp, init, is_zero, scratch
from .config import BN_ARRAY_SIZE, CAPACITY_BITS, WORD_SIZE
from .convert import from_int, from_string, to_int, to_string, to_uint64
from .errors import BigNumError, DivisionByZero, PreconditionError
from .shift import and_, lshift, or_, rshift, xor

__version__ = "0.1.0"

__all__ = [
    "BN_ARRAY_SIZE",
    "CAPACITY_BITS",
    "WORD_SIZE",
    "BigNum",
    "BigNumError",
    "Cmp",
    "DivisionByZero",
    "PreconditionError",
    "add",
    "and_",
    "assign",
    "cmp",
    "dec",
    "div",
    "divmod",
    "from_int",
    "from_string",
    "inc",
    "init",
    "is_zero",
    "isqrt",
    "lshift",
    "mod",
    "mul",
    "or_",
    "pow",
    "rshift",
    "scratch",
    "sub",
    "to_int",
    "to_string",
    "to_uint64",
    "xor",
]
