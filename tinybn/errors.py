"""Exception types raised by the BigNum engine.

Fixed-width wraparound (overflow on add/sub/mul/inc/dec, truncating shifts and
conversions) is defined behavior and never raises.
"""


class BigNumError(Exception):
    """Base class for engine errors."""


class PreconditionError(BigNumError, ValueError):
    """Raised when an operand or argument violates an operation's precondition.

    Always raised before the destination operand is touched.
    """


class DivisionByZero(PreconditionError, ZeroDivisionError):
    """Raised by div, divmod and mod when the divisor is zero."""

    def __init__(self, message="division by zero"):
        super().__init__(message)
