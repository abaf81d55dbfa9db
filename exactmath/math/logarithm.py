"""Base-10 magnitude estimation over arbitrary-precision digit strings.

Values handled by exactmath can be far beyond float range, so log10 is not
taken on the value itself. Instead the exponent is read off the digit string
and only a short window of leading significant digits goes through
math.log10:

    log10(x) = exponent + log10(d.ddd...)

For |x| >= 1 the exponent is the number of integer digits minus one. For
|x| < 1 it is minus (leading fractional zeros + 1).

Example:
    "9875412"  -> 6 + log10(9.875412) ~ 6.99454
    "0.00042"  -> -4 + log10(4.2)     ~ -3.37675
"""

from __future__ import annotations

import math

from exactmath.constants import LOG_WINDOW_DIGITS
from exactmath.errors import InvalidArgument

__all__ = ["log10", "decimal_exponent"]


def _split(characteristic: str, mantissa: str | None) -> tuple[int, str]:
    """Return (exponent, significant digits) for |characteristic.mantissa|.

    Raises:
        InvalidArgument: If the value is zero
    """
    integer = characteristic.lstrip("+-").lstrip("0")
    fraction = mantissa or ""

    if integer:
        return len(integer) - 1, integer + fraction

    significant = fraction.lstrip("0")
    if not significant:
        raise InvalidArgument("Logarithm of zero is undefined")
    leading_zeros = len(fraction) - len(significant)
    return -(leading_zeros + 1), significant


def decimal_exponent(characteristic: str, mantissa: str | None = None) -> int:
    """Exponent of the leading significant digit, i.e. floor(log10(|x|))."""
    exponent, _ = _split(characteristic, mantissa)
    return exponent


def log10(
    characteristic: str,
    mantissa: str | None = None,
    window: int = LOG_WINDOW_DIGITS,
) -> float:
    """Approximate log10(|x|) for x = characteristic.mantissa.

    Args:
        characteristic: Integer digits, optionally signed
        mantissa: Fractional digits, or None for an integer
        window: Number of leading significant digits used for refinement

    Returns:
        Estimated base-10 logarithm of the magnitude

    Raises:
        InvalidArgument: If the value is zero
    """
    exponent, significant = _split(characteristic, mantissa)
    head = significant[:window]
    refinement = math.log10(float(f"{head[0]}.{head[1:] or '0'}"))
    return exponent + refinement
