"""Ratio of two fixed-width machine integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from exactmath.constants import FRACTION_PATTERN, INT64_MAX, INT64_MIN
from exactmath.errors import InvalidArgument, InvalidFormat

if TYPE_CHECKING:
    from exactmath.ratio import Ratio

__all__ = ["Fraction", "fits_int64"]


def fits_int64(value: int) -> bool:
    """Check if value fits in a signed 64-bit integer without raising."""
    return INT64_MIN <= value <= INT64_MAX


def _validate_component(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Fraction {name} must be int, got {type(value).__name__}")
    if not fits_int64(value):
        raise InvalidArgument(f"Fraction {name} {value} exceeds signed 64-bit range")


@dataclass(frozen=True)
class Fraction:
    """Immutable numerator/denominator pair of signed 64-bit integers.

    Fractions compare structurally: 1/2 and 2/4 are different fractions that
    simplify to the same one.

    Examples:
        Fraction(18, 78).greatest_common_divisor()  # 6
        Fraction(18, 78).simplify()                 # Fraction(3, 13)
        Fraction.parse("2/3").to_ratio()            # Ratio 2:3
    """

    numerator: int
    denominator: int
    _gcd: int | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate_component("numerator", self.numerator)
        _validate_component("denominator", self.denominator)
        if self.denominator == 0:
            raise InvalidArgument("Denominator cannot be zero.")

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """Create from "<numerator>/<denominator>", e.g. "2/3". Unsigned only.

        Raises:
            InvalidFormat: If text is not of the form N/D
            InvalidArgument: If D is zero or either part exceeds 64 bits
        """
        match = FRACTION_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidFormat(f"Cannot create Fraction from invalid string '{text}'.")
        return cls(int(match["numerator"]), int(match["denominator"]))

    def greatest_common_divisor(self) -> int:
        """Euclidean GCD of numerator and denominator, always non-negative."""
        if self._gcd is None:
            a, b = self.numerator, self.denominator
            while b != 0:
                a, b = b, a % b
            object.__setattr__(self, "_gcd", abs(a))
        assert self._gcd is not None
        return self._gcd

    def is_simplified(self) -> bool:
        return self.greatest_common_divisor() == 1

    def simplify(self) -> Fraction:
        """Divide both components by their GCD. 4/8 becomes 1/2."""
        gcd = self.greatest_common_divisor()
        # Already reduced: reuse this instance
        if gcd == 1:
            return self
        return Fraction(self.numerator // gcd, self.denominator // gcd)

    def to_ratio(self) -> Ratio:
        from exactmath.decimal_value import Decimal
        from exactmath.ratio import Ratio

        return Ratio(Decimal.from_integer(self.numerator), Decimal.from_integer(self.denominator))

    def to_string(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()
