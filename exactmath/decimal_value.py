"""Arbitrary-precision signed decimal value type.

A Decimal is stored as two digit strings: the characteristic (integer part,
carrying the sign) and the mantissa (fractional part, or None). All
arithmetic is delegated to the truncating digit-string primitive in
exactmath.math.digits; this module only decides the scale each result is
computed at.

Usage pattern:
    from exactmath import Decimal

    price = Decimal("19.99")
    total = price.multiply_by(Decimal("3"))   # 59.97, scale 2 + 0
    share = total.divide_by(Decimal("7"))     # scale chosen from magnitudes
    share.round(2)                            # 8.57, half-up

The presence of a mantissa is significant: "10" is an integer, "10.0" is not,
and the two render differently even though they compare equal.
"""

from __future__ import annotations

import math
from decimal import Decimal as _NumericValue
from typing import TYPE_CHECKING, ClassVar

import structlog

from exactmath.config import DEFAULT_CONFIG, MathConfig
from exactmath.constants import DECIMAL_PATTERN
from exactmath.errors import DivisionByZero, InvalidArgument, InvalidFormat
from exactmath.math import digits
from exactmath.math.logarithm import log10

if TYPE_CHECKING:
    from exactmath.ratio import Ratio

logger = structlog.get_logger()

__all__ = ["Decimal"]


def _check_scale(scale: int) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"scale must be int, got {type(scale).__name__}")
    if scale < 0:
        raise InvalidArgument(f"scale must be non-negative, got {scale}")
    return scale


def _parse_parts(text: str) -> tuple[str, str | None]:
    """Split and canonicalize a decimal string into (characteristic, mantissa).

    Raises:
        TypeError: If text is not a str
        InvalidFormat: If text does not match [sign]digits[.digits]
    """
    if not isinstance(text, str):
        raise TypeError(f"Decimal requires str, got {type(text).__name__}")

    match = DECIMAL_PATTERN.fullmatch(text)
    if match is None or (not match["characteristic"] and match["mantissa"] is None):
        raise InvalidFormat(f"Cannot create Decimal from invalid string '{text}'.")

    characteristic = match["characteristic"].lstrip("0") or "0"
    mantissa = match["mantissa"]

    # -0 and -0.000 lose their sign, -0.001 keeps it
    is_zero = characteristic == "0" and (mantissa is None or not mantissa.strip("0"))
    if match["sign"] == "-" and not is_zero:
        characteristic = "-" + characteristic

    return characteristic, mantissa


class Decimal:
    """Immutable arbitrary-precision signed decimal.

    Attributes:
        characteristic: Integer digits, prefixed with "-" for negative values
        mantissa: Fractional digits, or None for an integer
    """

    config: ClassVar[MathConfig] = DEFAULT_CONFIG

    __slots__ = ("_characteristic", "_mantissa")
    _characteristic: str
    _mantissa: str | None

    def __init__(self, text: str, scale: int | None = None) -> None:
        """Create a Decimal from a decimal string.

        Args:
            text: String of the form [+-]digits[.digits]; either the integer
                or the fractional digits may be omitted, but not both
            scale: If given, pad or truncate the mantissa to this many digits

        Raises:
            InvalidFormat: If text is malformed
        """
        characteristic, mantissa = _parse_parts(text)
        if scale is not None:
            mantissa = _rescale_mantissa(mantissa, _check_scale(scale))
            if mantissa is None or not mantissa.strip("0"):
                if characteristic == "-0":
                    characteristic = "0"
        self._characteristic = characteristic
        self._mantissa = mantissa

    @classmethod
    def _from_parts(cls, characteristic: str, mantissa: str | None) -> Decimal:
        """Build from parts that are already canonical, skipping validation."""
        instance = cls.__new__(cls)
        instance._characteristic = characteristic
        instance._mantissa = mantissa
        return instance

    # --- Factories ---

    @classmethod
    def parse(cls, text: str, scale: int | None = None) -> Decimal:
        """Create a Decimal from a decimal string. See __init__."""
        return cls(text, scale)

    @classmethod
    def from_integer(cls, value: int, scale: int | None = None) -> Decimal:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_integer requires int, got {type(value).__name__}")
        return cls(str(value), scale)

    @classmethod
    def from_float(cls, value: float, scale: int | None = None) -> Decimal:
        """Create a Decimal from a binary float.

        The float is rendered in fixed-point notation at `scale` digits
        (default: config.default_scale), so the result carries the binary
        representation error: 0.1 becomes 0.10000000000000000555.

        Raises:
            InvalidArgument: If value is infinite or NaN
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"from_float requires float, got {type(value).__name__}")
        if math.isinf(value) or math.isnan(value):
            raise InvalidArgument(f"Cannot create Decimal from non-finite float {value}.")

        if scale is None:
            scale = cls.config.default_scale
        text = f"{float(value):.{_check_scale(scale)}f}"
        logger.debug("decimal_from_float", value=value, scale=scale, text=text)
        return cls(text)

    @classmethod
    def from_decimal(cls, value: Decimal, scale: int | None = None) -> Decimal:
        if not isinstance(value, Decimal):
            raise TypeError(f"from_decimal requires Decimal, got {type(value).__name__}")
        result = value if type(value) is cls else cls._from_parts(value.characteristic, value.mantissa)
        return result if scale is None else result.scale(scale)

    @classmethod
    def from_ratio(cls, value: Ratio, scale: int | None = None) -> Decimal:
        """Divide the ratio out. Without a scale, the shortest exact-looking decimal."""
        from exactmath.ratio import Ratio

        if not isinstance(value, Ratio):
            raise TypeError(f"from_ratio requires Ratio, got {type(value).__name__}")
        return cls.from_decimal(value.to_decimal(scale))

    @classmethod
    def create(cls, value: int | float | str | Decimal | Ratio, scale: int | None = None) -> Decimal:
        """Create a Decimal from any supported source.

        Each source kind has its own factory; this only routes to it.

        Raises:
            TypeError: If value is not an int, float, str, Decimal or Ratio
        """
        from exactmath.ratio import Ratio

        if isinstance(value, bool):
            raise TypeError("Cannot create Decimal from bool")
        if isinstance(value, Decimal):
            return cls.from_decimal(value, scale)
        if isinstance(value, int):
            return cls.from_integer(value, scale)
        if isinstance(value, float):
            return cls.from_float(value, scale)
        if isinstance(value, str):
            return cls.parse(value, scale)
        if isinstance(value, Ratio):
            return cls.from_ratio(value, scale)
        raise TypeError(f"Cannot create Decimal from {type(value).__name__}")

    @classmethod
    def zero(cls) -> Decimal:
        """The canonical Decimal 0. Always the same instance."""
        return _ZERO

    @classmethod
    def one(cls) -> Decimal:
        """The canonical Decimal 1. Always the same instance."""
        return _ONE

    # --- Accessors ---

    @property
    def characteristic(self) -> str:
        """Integer component, with a leading "-" when negative."""
        return self._characteristic

    @property
    def mantissa(self) -> str | None:
        """Fractional component, or None for an integer."""
        return self._mantissa

    def is_integer(self) -> bool:
        """True only if there is no mantissa at all: 10.0 is not an integer."""
        return self._mantissa is None

    def number_of_decimal_places(self) -> int:
        return len(self._mantissa) if self._mantissa is not None else 0

    def number_of_significant_digits(self) -> int:
        """Count significant digits.

        Leading zeros of the integer part never count. Trailing zeros of the
        mantissa always count (7.90 has 3). Leading zeros of the mantissa are
        only dropped when the integer part contributes nothing (0.046 has 2).
        Trailing zeros of the integer part count as well, so 4200 has 4.
        """
        integer = self._characteristic.lstrip("-").lstrip("0")
        fraction = self._mantissa or ""
        if not integer:
            fraction = fraction.lstrip("0")
        return len(integer) + len(fraction)

    @staticmethod
    def resolve_scale(*values: Decimal) -> int:
        """The largest number of decimal places among the values."""
        return max((v.number_of_decimal_places() for v in values), default=0)

    # --- Scaling and rounding ---

    def scale(self, scale: int) -> Decimal:
        """Pad or truncate the mantissa to exactly `scale` digits.

        Truncation discards digits without rounding. A scale of 0 drops the
        mantissa, making the result an integer.
        """
        _check_scale(scale)
        if self._mantissa is not None and len(self._mantissa) == scale:
            return self
        if self._mantissa is None and scale == 0:
            return self
        return Decimal(str(self), scale)

    def round(self, decimal_places: int = 0) -> Decimal:
        """Round half-up to `decimal_places` and drop trailing zeros.

        A nudge of 0.{zeros}5 is added one digit past the target, then the
        value is truncated. Negative values subtract the nudge, so halves move
        away from zero. Only this rounding mode is supported.
        """
        _check_scale(decimal_places)
        if decimal_places == self.number_of_decimal_places():
            return self

        nudge = "0." + "0" * decimal_places + "5"
        if self.is_negative():
            value = digits.sub(str(self), nudge, decimal_places + 1)
        else:
            value = digits.add(str(self), nudge, decimal_places + 1)
        value = digits.div(value, "1", decimal_places)

        if "." in value:
            value = value.rstrip("0").rstrip(".")
        return Decimal(value)

    # --- Arithmetic ---

    def abs(self) -> Decimal:
        if not self._characteristic.startswith("-"):
            return self
        return Decimal._from_parts(self._characteristic[1:], self._mantissa)

    def negate(self) -> Decimal:
        if self._characteristic.startswith("-"):
            return Decimal._from_parts(self._characteristic[1:], self._mantissa)
        return Decimal("-" + str(self))

    def plus(self, other: Decimal, scale: int | None = None) -> Decimal:
        """self + other. Default scale: the larger number of decimal places."""
        other = _coerce(other)
        scale = self.resolve_scale(self, other) if scale is None else _check_scale(scale)
        return Decimal(digits.add(str(self), str(other), scale))

    def minus(self, other: Decimal, scale: int | None = None) -> Decimal:
        """self - other. Default scale: the larger number of decimal places."""
        other = _coerce(other)
        scale = self.resolve_scale(self, other) if scale is None else _check_scale(scale)
        return Decimal(digits.sub(str(self), str(other), scale))

    def multiply_by(self, other: Decimal, scale: int | None = None) -> Decimal:
        """self * other. Default scale: the sum of both decimal places (exact)."""
        other = _coerce(other)
        if self.is_zero() or other.is_zero():
            return Decimal.zero()
        if scale is None:
            scale = self.number_of_decimal_places() + other.number_of_decimal_places()
        return Decimal(digits.mul(str(self), str(other), _check_scale(scale)))

    def divide_by(self, other: Decimal, scale: int | None = None) -> Decimal:
        """self / other, truncated.

        Without an explicit scale, the scale is estimated from the magnitude
        of the quotient so that the significant precision of the inputs
        survives. See _division_scale.

        Raises:
            DivisionByZero: If other is zero
        """
        other = _coerce(other)
        if other.is_zero():
            raise DivisionByZero(f"Cannot divide {self} by zero.")
        if scale is None:
            if other.is_one():
                return self
            scale = self._division_scale(other)
        return Decimal(digits.div(str(self), str(other), _check_scale(scale)))

    def _division_scale(self, other: Decimal) -> int:
        """Pick a scale for self / other.

        The largest of:
        - the sum of both operands' decimal places
        - the larger significant digit count minus ceil(log10(quotient))
        - ceil(-log10(quotient)) + 1, so small quotients keep a digit
        """
        decimal_places = self.number_of_decimal_places() + other.number_of_decimal_places()
        if self.is_zero():
            return decimal_places

        window = self.config.log_window_digits
        quotient_log = log10(self._characteristic, self._mantissa, window) - log10(
            other._characteristic, other._mantissa, window
        )
        significant = (
            max(self.number_of_significant_digits(), other.number_of_significant_digits())
            - math.ceil(quotient_log)
        )
        leading = math.ceil(-quotient_log) + 1
        scale = max(decimal_places, significant, leading, 0)

        logger.debug(
            "decimal_division_scale",
            dividend=str(self),
            divisor=str(other),
            quotient_log10=round(quotient_log, 6),
            scale=scale,
        )
        return scale

    # --- Comparison ---

    def compare(self, other: Decimal, scale: int | None = None) -> int:
        """Compare with other at `scale` (default: the larger decimal places).

        Returns:
            -1, 0 or 1 when self is respectively less than, equal to or greater than other
        """
        if other is self:
            return 0
        other = _coerce(other)
        scale = self.resolve_scale(self, other) if scale is None else _check_scale(scale)
        return digits.compare(str(self), str(other), scale)

    def equals(self, other: object, scale: int | None = None) -> bool:
        """Value equality restricted to the exact same type."""
        if type(other) is not type(self):
            return False
        assert isinstance(other, Decimal)
        return self.compare(other, scale) == 0

    def is_negative(self) -> bool:
        return self.compare(Decimal.zero()) < 0

    def is_zero(self) -> bool:
        return self.compare(Decimal.zero()) == 0

    def is_one(self) -> bool:
        return self.compare(Decimal.one()) == 0

    def is_positive(self) -> bool:
        return self.compare(Decimal.zero()) > 0

    # --- Conversion ---

    def to_string(self, scale: int | None = None) -> str:
        """characteristic[.mantissa], optionally re-rendered at `scale` digits."""
        if scale is not None:
            return str(self.scale(scale))
        if self._mantissa is None:
            return self._characteristic
        return f"{self._characteristic}.{self._mantissa}"

    def to_ratio(self) -> Ratio:
        """Represent as value:1, simplified. 1.5 becomes 3:2."""
        from exactmath.ratio import Ratio

        return Ratio(self, Decimal.one()).simplify()

    def to_integer(self) -> int:
        """Integer part, truncated toward zero."""
        return int(self._characteristic)

    def to_float(self) -> float:
        """Nearest binary float. Precision loss is accepted."""
        return float(self.to_string())

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self}')"

    def __hash__(self) -> int:
        # 1 and 1.0 compare equal, so hash the numeric value
        return hash(_NumericValue(self.to_string()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) < 0

    def __le__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) <= 0

    def __gt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) > 0

    def __ge__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) >= 0

    def __add__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.plus(operand)

    def __radd__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.plus(self)

    def __sub__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.minus(operand)

    def __rsub__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.minus(self)

    def __mul__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.multiply_by(operand)

    def __rmul__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.multiply_by(self)

    def __truediv__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.divide_by(operand)

    def __rtruediv__(self, other: object) -> Decimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.divide_by(self)

    def __neg__(self) -> Decimal:
        return self.negate()

    def __pos__(self) -> Decimal:
        return self

    def __abs__(self) -> Decimal:
        return self.abs()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_integer()

    def __float__(self) -> float:
        return self.to_float()


def _rescale_mantissa(mantissa: str | None, scale: int) -> str | None:
    if scale == 0:
        return None
    return (mantissa or "")[:scale].ljust(scale, "0")


def _coerce(value: object) -> Decimal:
    """Accept a Decimal as-is, or build one from int/str for named operations."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return Decimal.create(value)
    raise TypeError(f"Expected Decimal, got {type(value).__name__}")


def _operand(value: object) -> Decimal | None:
    """Operator operand: Decimal or int, otherwise None (NotImplemented)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal.from_integer(value)
    return None


_ZERO = Decimal("0")
_ONE = Decimal("1")
