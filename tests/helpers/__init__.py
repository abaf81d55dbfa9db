"""Test helpers module for shared test utilities.

- cases: data tables shared by Decimal and Ratio tests
"""

from tests.helpers.cases import (
    DECIMAL_TO_EXPECTED_RATIO,
    FLOAT_TO_EXPECTED_STRING,
    INTEGER_TO_EXPECTED_STRING,
    INVALID_DECIMAL_STRINGS,
    RATIO_TO_EXPECTED_DECIMAL,
    STRING_TO_EXPECTED_STRING,
    VALID_STRINGS,
)

__all__ = [
    "STRING_TO_EXPECTED_STRING",
    "VALID_STRINGS",
    "INVALID_DECIMAL_STRINGS",
    "FLOAT_TO_EXPECTED_STRING",
    "INTEGER_TO_EXPECTED_STRING",
    "RATIO_TO_EXPECTED_DECIMAL",
    "DECIMAL_TO_EXPECTED_RATIO",
]
