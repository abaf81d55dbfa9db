"""Tests for base-10 magnitude estimation over digit strings."""

import math

import pytest

from exactmath.errors import InvalidArgument
from exactmath.math.logarithm import decimal_exponent, log10


class TestLog10:
    """Tests for log10 estimation."""

    @pytest.mark.parametrize(
        "characteristic,mantissa,expected",
        [
            ("1", None, 0.0),
            ("1000", None, 3.0),
            ("9875412", None, math.log10(9875412)),
            ("7821", None, math.log10(7821)),
            ("3", "14159", math.log10(3.14159)),
            ("0", "00042", math.log10(0.00042)),
            ("0", "5", math.log10(0.5)),
        ],
    )
    def test_matches_native_log10(self, characteristic, mantissa, expected):
        assert log10(characteristic, mantissa) == pytest.approx(expected, abs=1e-12)

    def test_sign_is_ignored(self):
        assert log10("-250") == pytest.approx(math.log10(250))

    def test_beyond_float_range(self):
        """Exponent is read from the digit count, not from a float."""
        assert log10("1" + "0" * 400) == pytest.approx(400.0)
        assert log10("0", "0" * 399 + "1") == pytest.approx(-400.0)

    def test_window_limits_refinement(self):
        """Digits past the window do not affect the estimate."""
        assert log10("1234", "56789", window=2) == pytest.approx(3 + math.log10(1.2))

    def test_zero_raises(self):
        with pytest.raises(InvalidArgument):
            log10("0")
        with pytest.raises(InvalidArgument):
            log10("-0", "000")


class TestDecimalExponent:
    """Tests for decimal_exponent."""

    def test_integer(self):
        assert decimal_exponent("12345") == 4

    def test_fraction(self):
        assert decimal_exponent("0", "05") == -2

    def test_one(self):
        assert decimal_exponent("1") == 0
