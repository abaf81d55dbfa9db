"""Arithmetic primitives for exactmath.

This package provides the building blocks the value types sit on:
- digits: truncating add/sub/mul/div/mod/compare on base-10 strings
- logarithm: base-10 magnitude estimation over digit strings
"""

from exactmath.math import digits
from exactmath.math.logarithm import decimal_exponent, log10

__all__ = ["digits", "decimal_exponent", "log10"]
