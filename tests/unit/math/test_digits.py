"""Tests for the truncating digit-string primitive."""

import pytest

from exactmath.errors import DivisionByZero, InvalidFormat
from exactmath.math import digits


class TestAdd:
    """Tests for digits.add."""

    def test_add_at_exact_scale(self):
        assert digits.add("1.5", "2.25", 2) == "3.75"

    def test_add_truncates(self):
        """3.75 at scale 1 is 3.7, not 3.8."""
        assert digits.add("1.5", "2.25", 1) == "3.7"

    def test_add_pads(self):
        assert digits.add("1", "2", 3) == "3.000"

    def test_add_large(self):
        """Values far beyond machine range stay exact."""
        assert (
            digits.add("4323874085395586898689868986900219865", "1", 0)
            == "4323874085395586898689868986900219866"
        )

    def test_add_mixed_magnitudes(self):
        """A huge and a tiny operand keep every digit up to the scale."""
        result = digits.add("1" + "0" * 30, "0." + "0" * 29 + "1", 30)
        assert result == "1" + "0" * 30 + "." + "0" * 29 + "1"


class TestSub:
    """Tests for digits.sub."""

    def test_sub_negative_result(self):
        assert digits.sub("1", "3", 0) == "-2"

    def test_sub_zero_result_has_no_sign(self):
        assert digits.sub("0.5", "0.5", 2) == "0.00"

    def test_sub_truncates_toward_zero(self):
        """-0.75 at scale 1 is -0.7."""
        assert digits.sub("1.5", "2.25", 1) == "-0.7"


class TestMul:
    """Tests for digits.mul."""

    def test_mul_exact(self):
        assert digits.mul("1.5", "1.5", 2) == "2.25"

    def test_mul_truncates(self):
        assert digits.mul("1.5", "1.5", 1) == "2.2"

    def test_mul_negative_truncates_toward_zero(self):
        assert digits.mul("-1.5", "1.5", 1) == "-2.2"

    def test_mul_large(self):
        big = "1" + "0" * 30
        assert digits.mul(big, big, 0) == "1" + "0" * 60


class TestDiv:
    """Tests for digits.div."""

    def test_div_repeating(self):
        assert digits.div("1", "3", 5) == "0.33333"

    def test_div_negative(self):
        assert digits.div("-1", "3", 2) == "-0.33"

    def test_div_scale_zero(self):
        assert digits.div("2", "3", 0) == "0"

    def test_div_negative_zero_result_has_no_sign(self):
        assert digits.div("-1", "3", 0) == "0"

    def test_div_by_small_divisor(self):
        assert digits.div("1", "0.001", 0) == "1000"

    def test_div_at_scale_20(self):
        assert digits.div("9875412", "7821", 20) == "1262.67894131185270425776"

    def test_div_by_zero_raises(self):
        """Division by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero) as exc_info:
            digits.div("1", "0", 2)
        assert "Division by zero" in str(exc_info.value)

    def test_div_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            digits.div("1", "0.000", 2)


class TestMod:
    """Tests for digits.mod."""

    def test_mod(self):
        assert digits.mod("10", "3") == "1"

    def test_mod_exact(self):
        assert digits.mod("200", "4") == "0"

    def test_mod_takes_dividend_sign(self):
        """Remainder follows the dividend: truncated, not floored."""
        assert digits.mod("-7", "3") == "-1"
        assert digits.mod("7", "-3") == "1"

    def test_mod_large(self):
        assert digits.mod("30315475", "24440870") == "5874605"

    def test_mod_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            digits.mod("10", "0")


class TestCompare:
    """Tests for digits.compare."""

    def test_compare_ordering(self):
        assert digits.compare("2", "10", 0) == -1
        assert digits.compare("10", "2", 0) == 1
        assert digits.compare("2", "2.0", 1) == 0

    def test_compare_truncates_before_comparing(self):
        """1.00001 and 1.00002 are the same at scale 4."""
        assert digits.compare("1.00001", "1.00002", 4) == 0
        assert digits.compare("1.00001", "1.00002", 5) == -1

    def test_compare_negative_zero(self):
        assert digits.compare("-0.000", "0", 3) == 0


class TestPow10:
    """Tests for digits.pow10."""

    def test_pow10(self):
        assert digits.pow10(0) == "1"
        assert digits.pow10(3) == "1000"

    def test_pow10_negative_raises(self):
        with pytest.raises(ValueError):
            digits.pow10(-1)


class TestInvalidInput:
    """Tests for operand validation."""

    @pytest.mark.parametrize("value", ["abc", "inf", "NaN", ""])
    def test_invalid_operand_raises(self, value):
        with pytest.raises(InvalidFormat):
            digits.add(value, "1", 0)
