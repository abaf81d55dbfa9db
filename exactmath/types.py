"""pydantic field types for exactmath text formats.

These let models carry decimal, ratio and fraction values as canonical
strings, validated on the way in:

    class Invoice(BaseModel):
        total: DecimalString
        exchange_rate: RatioString

    Invoice(total="+0019.90", exchange_rate="3:2").total  # "19.90"
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from exactmath.decimal_value import Decimal
from exactmath.fraction import Fraction
from exactmath.ratio import Ratio


def validate_decimal_string(value: Any) -> str:
    """Validate a decimal string (or int) and return its canonical form.

    Args:
        value: Value to validate (string, int or Decimal)

    Returns:
        Canonical decimal string: no "+", no leading zeros, no sign on zero

    Raises:
        ValueError: If value is not a valid decimal
    """
    if isinstance(value, Decimal):
        return value.to_string()
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal.from_integer(value).to_string()
    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or int, got {type(value).__name__}")
    # InvalidFormat is a ValueError, pydantic reports it as a validation error
    return Decimal.parse(value).to_string()


def validate_ratio_string(value: Any) -> str:
    """Validate an "A:B" ratio string and return its canonical form.

    Raises:
        ValueError: If value is not a valid ratio or its divisor is zero
    """
    if isinstance(value, Ratio):
        return value.to_string()
    if not isinstance(value, str):
        raise ValueError(f"Ratio must be string, got {type(value).__name__}")
    return Ratio.parse(value).to_string()


def validate_fraction_string(value: Any) -> str:
    """Validate an "N/D" fraction string.

    Raises:
        ValueError: If value is not a valid fraction or its denominator is zero
    """
    if isinstance(value, Fraction):
        return value.to_string()
    if not isinstance(value, str):
        raise ValueError(f"Fraction must be string, got {type(value).__name__}")
    return Fraction.parse(value).to_string()


# Arbitrary-precision decimal as canonical string
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Arbitrary-precision decimal as canonical string"),
]

# Ratio of two decimals, "A:B"
RatioString = Annotated[
    str,
    BeforeValidator(validate_ratio_string),
    Field(description="Ratio of two decimals in the form A:B"),
]

# Fraction of two unsigned 64-bit integers, "N/D"
FractionString = Annotated[
    str,
    BeforeValidator(validate_fraction_string),
    Field(description="Fraction of two integers in the form N/D"),
]
