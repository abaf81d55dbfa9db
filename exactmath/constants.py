"""Library-wide constants for exactmath.

Centralizes default scales, machine integer bounds and text formats.
"""

import re

# Scale used when bridging from binary floating point without an explicit scale
DEFAULT_SCALE = 20

# Working scale for Ratio -> Decimal conversion before trailing zeros are stripped
RATIO_SCALE = 20

# Number of significant digits fed to math.log10 by the magnitude estimator.
# A double carries 15-17 significant digits, anything beyond is noise.
LOG_WINDOW_DIGITS = 15

# Fraction components are fixed-width signed machine integers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# [sign]digits[.digits], the integer part may be empty (".5"). Match with fullmatch().
DECIMAL_PATTERN = re.compile(r"(?P<sign>[+-])?(?P<characteristic>[0-9]*)(?:\.(?P<mantissa>[0-9]+))?")

# N/D, unsigned integers only. Match with fullmatch().
FRACTION_PATTERN = re.compile(r"(?P<numerator>[0-9]+)/(?P<denominator>[0-9]+)")

RATIO_SEPARATOR = ":"
