"""Error classes for exactmath.

All errors are raised synchronously at the point of the call; no value is
ever partially constructed.
"""


class MathError(Exception):
    """Base error for exactmath operations."""

    pass


class InvalidOperation(MathError, ArithmeticError):
    """Operation cannot be performed on the given value.

    Raised, for example, when a Ratio cannot be lowered to a Fraction.
    """

    pass


class InvalidArgument(InvalidOperation, ValueError):
    """Structurally impossible value requested.

    Zero Fraction denominator, zero Ratio divisor, infinite or NaN float,
    negative scale.
    """

    pass


class InvalidFormat(InvalidArgument):
    """Malformed input string passed to a parse entry point."""

    pass


class DivisionByZero(MathError, ZeroDivisionError):
    """Decimal division by a zero-valued divisor."""

    pass
