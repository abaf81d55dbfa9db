"""Truncating arithmetic on arbitrary-precision base-10 strings.

This is the narrow primitive the value types are built on. Every operation
takes plain digit strings ("-12.5", "0.004", "100") and returns a plain digit
string with exactly `scale` fractional digits. Results are truncated toward
zero, never rounded, and never carry a sign on a zero magnitude.

The arithmetic itself is delegated to the standard library decimal module.
Each call runs in a local context whose precision is derived from the operand
lengths, so results are exact up to the requested scale regardless of how
long the inputs are.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

from exactmath.errors import DivisionByZero, InvalidFormat

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "compare",
    "pow10",
]


def _to_decimal(value: str) -> Decimal:
    """Parse a digit string, rejecting anything that is not a finite number."""
    try:
        result = Decimal(value)
    except decimal.InvalidOperation as err:
        raise InvalidFormat(f"Not a decimal digit string: '{value}'") from err
    if not result.is_finite():
        raise InvalidFormat(f"Not a finite decimal digit string: '{value}'")
    return result


def _span(value: Decimal) -> int:
    """Count digit positions from the most significant digit down to the last one."""
    exponent = value.as_tuple().exponent
    assert isinstance(exponent, int)
    return max(value.adjusted(), 0) + max(-exponent, 0) + 1


def _fractional_digits(value: Decimal) -> int:
    exponent = value.as_tuple().exponent
    assert isinstance(exponent, int)
    return max(-exponent, 0)


def _context(*values: Decimal, scale: int = 0) -> decimal.Context:
    """Context wide enough to hold any sum, product or quotient digit of the operands.

    The sum of the operand spans bounds the integer digits of every result the
    module produces, so adding the scale keeps truncation at 10^-scale exact.
    """
    prec = sum(_span(v) for v in values) + scale + 2
    return decimal.Context(
        prec=prec,
        rounding=ROUND_DOWN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )


def _render(value: Decimal, scale: int, context: decimal.Context) -> str:
    """Truncate to `scale` fractional digits and render in fixed-point notation."""
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    quantized = value.quantize(Decimal(f"1e-{scale}"), rounding=ROUND_DOWN, context=context)
    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return format(quantized, "f")


def add(a: str, b: str, scale: int) -> str:
    """a + b truncated to `scale` fractional digits."""
    x, y = _to_decimal(a), _to_decimal(b)
    context = _context(x, y, scale=scale)
    return _render(context.add(x, y), scale, context)


def sub(a: str, b: str, scale: int) -> str:
    """a - b truncated to `scale` fractional digits."""
    x, y = _to_decimal(a), _to_decimal(b)
    context = _context(x, y, scale=scale)
    return _render(context.subtract(x, y), scale, context)


def mul(a: str, b: str, scale: int) -> str:
    """a * b truncated to `scale` fractional digits."""
    x, y = _to_decimal(a), _to_decimal(b)
    context = _context(x, y, scale=scale)
    return _render(context.multiply(x, y), scale, context)


def div(a: str, b: str, scale: int) -> str:
    """a / b truncated to `scale` fractional digits.

    Raises:
        DivisionByZero: If b is zero
    """
    x, y = _to_decimal(a), _to_decimal(b)
    if y.is_zero():
        raise DivisionByZero(f"Division by zero: {a} / {b}")
    context = _context(x, y, scale=scale)
    return _render(context.divide(x, y), scale, context)


def mod(a: str, b: str) -> str:
    """Remainder of a / b with the quotient truncated toward zero.

    The remainder takes the sign of the dividend (-7 mod 3 = -1), and is exact:
    it carries as many fractional digits as the more precise operand.

    Raises:
        DivisionByZero: If b is zero
    """
    x, y = _to_decimal(a), _to_decimal(b)
    if y.is_zero():
        raise DivisionByZero(f"Modulo by zero: {a} % {b}")
    scale = max(_fractional_digits(x), _fractional_digits(y))
    context = _context(x, y, scale=scale)
    return _render(context.remainder(x, y), scale, context)


def compare(a: str, b: str, scale: int) -> int:
    """Compare a and b after truncating both to `scale` fractional digits.

    Returns:
        -1, 0 or 1 when a is respectively less than, equal to or greater than b
    """
    x, y = _to_decimal(a), _to_decimal(b)
    context = _context(x, y, scale=scale)
    exponent = Decimal(f"1e-{scale}")
    x = x.quantize(exponent, rounding=ROUND_DOWN, context=context)
    y = y.quantize(exponent, rounding=ROUND_DOWN, context=context)
    return int(context.compare(x, y))


def pow10(exponent: int) -> str:
    """10^exponent as a digit string, for non-negative exponents."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return "1" + "0" * exponent
