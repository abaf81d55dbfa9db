"""The ratio between two Decimal values.

Both sides can be integers or decimals of any length. Simplification runs the
Euclidean algorithm on arbitrary-precision digit strings, so ratios whose
components exceed machine integer range can still be reduced. Lowering to a
Fraction is only possible when the cleared components fit in 64 bits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from exactmath.config import DEFAULT_CONFIG, MathConfig
from exactmath.constants import RATIO_SEPARATOR
from exactmath.decimal_value import Decimal
from exactmath.errors import InvalidArgument, InvalidFormat, InvalidOperation
from exactmath.fraction import fits_int64
from exactmath.math import digits

if TYPE_CHECKING:
    from exactmath.fraction import Fraction

logger = structlog.get_logger()

__all__ = ["Ratio"]


class Ratio:
    """Immutable dividend:divisor pair of Decimals.

    Derived values (GCD, decimal equivalent) are computed on first use and
    cached for the life of the instance.

    Attributes:
        dividend: Value before the colon
        divisor: Value after the colon, never zero
    """

    config: ClassVar[MathConfig] = DEFAULT_CONFIG

    __slots__ = ("_dividend", "_divisor", "_gcd", "_decimal_value")
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, dividend: Decimal, divisor: Decimal) -> None:
        """Create a Ratio.

        Raises:
            InvalidArgument: If divisor is zero
        """
        if not isinstance(dividend, Decimal) or not isinstance(divisor, Decimal):
            raise TypeError(
                f"Ratio requires Decimal components, got "
                f"{type(dividend).__name__}:{type(divisor).__name__}"
            )
        if divisor.is_zero():
            raise InvalidArgument("Cannot create Ratio with zero divisor.")

        self._dividend = dividend
        self._divisor = divisor
        self._gcd: Decimal | None = None
        self._decimal_value: Decimal | None = None

    @classmethod
    def parse(cls, text: str) -> Ratio:
        """Create from "A:B", where A and B are decimal strings.

        Raises:
            InvalidFormat: If text has no colon or either side is not a decimal
            InvalidArgument: If B is zero
        """
        if not isinstance(text, str):
            raise TypeError(f"Ratio.parse requires str, got {type(text).__name__}")

        dividend_text, separator, divisor_text = text.partition(RATIO_SEPARATOR)
        if not separator:
            raise InvalidFormat(f"Ratio must be created with a string in the form 'A:B', got '{text}'.")

        try:
            dividend = Decimal.parse(dividend_text)
            divisor = Decimal.parse(divisor_text)
        except InvalidFormat as err:
            raise InvalidFormat(
                f"Ratio must be created with a string in the form 'A:B', got '{text}'."
            ) from err

        return cls(dividend, divisor)

    @classmethod
    def from_decimal_string(cls, text: str) -> Ratio:
        """Create value:1 from a decimal string. ".5" becomes 0.5:1."""
        return cls(Decimal.parse(text), Decimal.one())

    @property
    def dividend(self) -> Decimal:
        return self._dividend

    @property
    def divisor(self) -> Decimal:
        return self._divisor

    # --- Simplification ---

    def clear_decimals(self) -> Ratio:
        """Scale both sides by a power of ten until neither has a mantissa.

        1.5:2 becomes 15:20, 0.2:0.004 becomes 200:4.
        """
        if self._dividend.is_integer() and self._divisor.is_integer():
            return self

        decimal_places = Decimal.resolve_scale(self._dividend, self._divisor)
        multiplier = digits.pow10(decimal_places)

        dividend = digits.mul(str(self._dividend), multiplier, 0)
        divisor = digits.mul(str(self._divisor), multiplier, 0)

        return Ratio(Decimal(dividend), Decimal(divisor))

    def greatest_common_divisor(self) -> Decimal:
        """GCD of the cleared dividend and divisor, always non-negative."""
        if self._gcd is not None:
            return self._gcd

        cleared = self.clear_decimals()
        a = str(cleared.dividend)
        b = str(cleared.divisor)

        while digits.compare(b, "0", 0) != 0:
            a, b = b, digits.mod(a, b)

        self._gcd = Decimal(a).abs()
        return self._gcd

    def is_simplified(self) -> bool:
        return self.greatest_common_divisor().equals(Decimal.one())

    def simplify(self) -> Ratio:
        """Reduce to the smallest integers with the same ratio. 0.2:0.004 becomes 50:1."""
        if self.is_simplified():
            return self.clear_decimals()

        gcd = self.greatest_common_divisor()
        cleared = self.clear_decimals()

        return Ratio(cleared.dividend.divide_by(gcd, 0), cleared.divisor.divide_by(gcd, 0))

    def invert(self) -> Ratio:
        """Swap dividend and divisor. A ratio with equal sides is returned as-is."""
        if self._dividend.equals(self._divisor):
            return self
        return Ratio(self._divisor, self._dividend)

    # --- Comparison ---

    def compare(self, other: Ratio, scale: int | None = None) -> int:
        """Compare the decimal equivalents of both ratios.

        Returns:
            -1, 0 or 1 when self is respectively less than, equal to or greater than other
        """
        if other is self:
            return 0
        return self.to_decimal().compare(other.to_decimal(), scale)

    def is_one(self) -> bool:
        return self.compare(Ratio.parse("1:1")) == 0

    # --- Conversion ---

    def to_decimal(self, scale: int | None = None) -> Decimal:
        """Divide the ratio out.

        With a scale, the quotient is truncated to exactly that many digits.
        Without one, it is computed at config.ratio_scale and trailing zeros
        are dropped, giving the shortest decimal that does not add precision
        the ratio does not have: 3:2 becomes 1.5, not 1.50000000000000000000.
        """
        dividend = str(self._dividend)
        divisor = str(self._divisor)

        if scale is not None:
            return Decimal(digits.div(dividend, divisor, scale))

        if self._decimal_value is not None:
            return self._decimal_value

        value = digits.div(dividend, divisor, self.config.ratio_scale)
        if "." in value:
            value = value.rstrip("0").rstrip(".")

        self._decimal_value = Decimal(value)
        return self._decimal_value

    def to_decimal_string(self, scale: int | None = None) -> str:
        return self.to_decimal(scale).to_string()

    def to_fraction(self) -> Fraction:
        """Lower to a simplified Fraction of 64-bit integers.

        Raises:
            InvalidOperation: If the divisor is zero, or the cleared components
                do not fit in a signed 64-bit integer
        """
        from exactmath.fraction import Fraction

        if self._divisor.is_zero():
            raise InvalidOperation("Cannot convert Ratio with zero divisor to Fraction.")

        cleared = self.clear_decimals()
        numerator = cleared.dividend.to_integer()
        denominator = cleared.divisor.to_integer()

        if not (fits_int64(numerator) and fits_int64(denominator)):
            logger.debug(
                "ratio_to_fraction_overflow",
                ratio=str(self),
                numerator_digits=len(str(abs(numerator))),
                denominator_digits=len(str(abs(denominator))),
            )
            raise InvalidOperation(f"Ratio {self} exceeds signed 64-bit range for Fraction.")

        return Fraction(numerator, denominator).simplify()

    def to_integer(self) -> int:
        """Integer part of the quotient, truncated toward zero."""
        return self.to_decimal().to_integer()

    def to_float(self) -> float:
        """Nearest binary float of the quotient. Precision loss is accepted."""
        return self.to_decimal().to_float()

    def to_string(self) -> str:
        return f"{self._dividend}{RATIO_SEPARATOR}{self._divisor}"

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Ratio('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.compare(other) >= 0
