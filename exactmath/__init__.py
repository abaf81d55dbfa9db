"""exactmath - exact decimal and rational arithmetic."""

from exactmath.config import DEFAULT_CONFIG, MathConfig, load_config
from exactmath.decimal_value import Decimal
from exactmath.errors import (
    DivisionByZero,
    InvalidArgument,
    InvalidFormat,
    InvalidOperation,
    MathError,
)
from exactmath.fraction import Fraction
from exactmath.ratio import Ratio

__version__ = "0.1.0"
__all__ = [
    # Value types
    "Decimal",
    "Fraction",
    "Ratio",
    # Errors
    "MathError",
    "InvalidOperation",
    "InvalidArgument",
    "InvalidFormat",
    "DivisionByZero",
    # Configuration
    "MathConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "__version__",
]
