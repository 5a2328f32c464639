"""
Command-line drivers.

    tinybn check OPER A B EXPECTED
    tinybn factorial N [--repeat K]

`check` applies OPER to the hex operands A and B and compares the result with
EXPECTED. It exits 0 on a match, 1 on a mismatch and 2 on bad input.
"""

import argparse
import logging
import sys
import time

from . import arith, shift
from .bignum import BigNum, Cmp, assign, cmp, is_zero
from .convert import from_int, from_string, to_int, to_string
from .errors import PreconditionError

logger = logging.getLogger(__name__)


def _shift_by(op):
    def run(a, b, res):
        return op(a, res, to_int(b))
    return run


def _unary(op):
    def run(a, b, res):
        return op(a, res)
    return run


# Numbered the same way as the randomized test vectors.
OPERATIONS = {
    "add": (0, arith.add),
    "sub": (1, arith.sub),
    "mul": (2, arith.mul),
    "div": (3, arith.div),
    "and": (4, shift.and_),
    "or": (5, shift.or_),
    "xor": (6, shift.xor),
    "pow": (7, arith.pow),
    "mod": (8, arith.mod),
    "rshift": (9, _shift_by(shift.rshift)),
    "lshift": (10, _shift_by(shift.lshift)),
    "isqrt": (11, _unary(arith.isqrt)),
}

_BY_NUMBER = {number: name for name, (number, _) in OPERATIONS.items()}


def operation_name(oper):
    """Resolve an operation given by name or by number."""
    key = oper.strip().lower()
    if key in OPERATIONS:
        return key
    if key.isdigit() and int(key) in _BY_NUMBER:
        return _BY_NUMBER[int(key)]
    raise argparse.ArgumentTypeError(f"unknown operator {oper!r}")


def factorial(n, res):
    """res = n!, by multiplying down from n. Consumes n (leaves it at zero)."""
    if is_zero(n):
        return from_int(res, 1)
    tmp = BigNum()
    assign(tmp, n)
    arith.dec(n)
    while not is_zero(n):
        arith.mul(tmp, n, res)
        arith.dec(n)
        assign(tmp, res)
    assign(res, tmp)
    return res


def run_check(oper, a_hex, b_hex, expected_hex, out=None):
    out = out or sys.stdout
    a = from_string(BigNum(), a_hex)
    b = from_string(BigNum(), b_hex)
    expected = from_string(BigNum(), expected_hex)
    a_before = a.copy()
    b_before = b.copy()
    res = BigNum()

    _, op = OPERATIONS[oper]
    op(a, b, res)

    if cmp(res, expected) != Cmp.EQUAL:
        print(f"\ngot {to_string(res)}", file=out)
        print(f" a  = {to_int(a)} ", file=out)
        print(f" b  = {to_int(b)} ", file=out)
        print(f"res = {to_int(res)} ", file=out)
        return 1
    if cmp(a_before, a) != Cmp.EQUAL or cmp(b_before, b) != Cmp.EQUAL:
        print(f"{oper} modified its operands", file=out)
        return 1
    return 0


def _cmd_check(args):
    try:
        return run_check(args.oper, args.a, args.b, args.expected)
    except PreconditionError as e:
        logger.error("%s: %s", args.oper, e)
        return 2


def _cmd_factorial(args):
    num = BigNum()
    result = BigNum()
    start = time.perf_counter()
    for _ in range(args.repeat):
        from_int(num, args.n)
        factorial(num, result)
    elapsed = time.perf_counter() - start
    print(f"factorial({args.n}) = {to_string(result)}")
    logger.info("%dx factorial(%d) took %f s", args.repeat, args.n, elapsed)
    return 0


def _non_negative(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("N must not be negative")
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog="tinybn", description="Fixed-width big-number drivers")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="apply an operation to hex operands and compare the result")
    check.add_argument("oper", type=operation_name, help="operation name or number (0 = add, 1 = sub, 2 = mul, 3 = div, ...)")
    check.add_argument("a", help="first operand, zero-padded hex")
    check.add_argument("b", help="second operand, zero-padded hex")
    check.add_argument("expected", help="expected result, zero-padded hex")
    check.set_defaults(func=_cmd_check)

    fact = sub.add_parser("factorial", help="compute N! and print it in hex")
    fact.add_argument("n", type=_non_negative)
    fact.add_argument("--repeat", type=int, default=1, help="run the computation K times for timing")
    fact.set_defaults(func=_cmd_factorial)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)
