"""Shared data tables for Decimal and Ratio tests.

Usage:
    from tests.helpers.cases import STRING_TO_EXPECTED_STRING
"""

# =============================================================================
# Decimal text (input, canonical output, scale)
# =============================================================================

STRING_TO_EXPECTED_STRING = [
    ("0", "0", 0),
    ("-0", "0", 0),
    ("+0", "0", 0),
    ("1", "1", 0),
    ("-1", "-1", 0),
    ("+1", "1", 0),
    ("123456789", "123456789", 0),
    ("-123456789", "-123456789", 0),
    ("+123456789", "123456789", 0),
    ("123456789.987654321", "123456789.987654321", 9),
    ("-123456789.987654321", "-123456789.987654321", 9),
    ("+123456789.987654321", "123456789.987654321", 9),
    ("0", "0.0", 1),
    ("0", "0.0000000000", 10),
    ("0", "0." + "0" * 50, 50),
]

VALID_STRINGS = [row[0] for row in STRING_TO_EXPECTED_STRING]

INVALID_DECIMAL_STRINGS = [
    "",
    "+",
    "-",
    ".",
    "5.",
    "a.b",
    "12a.10",
    "1.2.3",
    "--1",
    "+-1",
    " 1",
    "1 ",
    "1\n",
    "1e5",
    "0x10",
    "1_000",
    "inf",
    "NaN",
    "١٢",  # Arabic-Indic digits
]

# =============================================================================
# Floats (input, expected string, scale)
# =============================================================================

FLOAT_TO_EXPECTED_STRING = [
    (0.0, "0", 0),
    (0.0, "0.0", 1),
    (0.0, "0.0000000000", 10),
    (0.0, "0." + "0" * 50, 50),
    (-0.0, "0.0", 1),
    (1.0, "1", 0),
    (-1.0, "-1", 0),
    (123456789.0, "123456789.00", 2),
    (-123456789.0, "-123456789.00", 2),
    (123456789.987654321, "123456789.987654328", 9),  # Floating point imprecision
    (-123456789.987654321, "-123456789.987654328", 9),
    (123456789.987654321, "123456789.988", 3),
    (-123456789.987654321, "-123456789.988", 3),
]

INTEGER_TO_EXPECTED_STRING = [
    (0, "0"),
    (-0, "0"),
    (1, "1"),
    (-1, "-1"),
    (123456789, "123456789"),
    (-123456789, "-123456789"),
    (10**40, "1" + "0" * 40),
]

# =============================================================================
# Ratio <-> Decimal
# =============================================================================

# (ratio, expected decimal, scale)
RATIO_TO_EXPECTED_DECIMAL = [
    ("0.5:1", "0.5", 1),
    ("0.5:1", "0.5", None),
    ("0.5:1", "0.50000", 5),
    ("3:2", "1.50", 2),
    ("3:2", "1.5", None),
    ("1:2", "0.5", None),
    ("501:400", "1.2525", None),
    ("501:400", "1.25", 2),
    ("501:400", "1.252500", 6),
    ("1:2", "0.5", 1),
    ("1:2", "0.50", 2),
    ("3:4", "0.75", 2),
    ("4:3", "1.33", 2),
    ("4:3", "1.33333333333333333333", 20),
    ("4:3", "1.3333333333333333333333333333333333333333", 40),
]

# (decimal, expected ratio)
DECIMAL_TO_EXPECTED_RATIO = [
    ("0.5", "1:2"),
    ("0.50000", "1:2"),
    ("1.50", "3:2"),
    ("1.5", "3:2"),
    ("1.2525", "501:400"),
    ("1.25", "5:4"),
    ("1.252500", "501:400"),
    ("0.50", "1:2"),
    ("0.75", "3:4"),
    ("1.33", "133:100"),
    ("1.33333333333333333333", "133333333333333333333:100000000000000000000"),
    (
        "1.3333333333333333333333333333333333333333",
        "13333333333333333333333333333333333333333:10000000000000000000000000000000000000000",
    ),
    ("10", "10:1"),
    ("-0.25", "-1:4"),
]
