"""Configuration for exactmath arithmetic policy."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from exactmath.constants import DEFAULT_SCALE, LOG_WINDOW_DIGITS, RATIO_SCALE
from exactmath.errors import InvalidArgument

ENV_DEFAULT_SCALE = "EXACTMATH_DEFAULT_SCALE"
ENV_RATIO_SCALE = "EXACTMATH_RATIO_SCALE"
ENV_LOG_WINDOW_DIGITS = "EXACTMATH_LOG_WINDOW_DIGITS"


@dataclass(frozen=True)
class MathConfig:
    """Centralized configuration for scale defaults.

    Attributes:
        default_scale: Scale used by Decimal.from_float when none is given (default: 20)
        ratio_scale: Working scale for Ratio.to_decimal() before trailing zeros
            are stripped (default: 20)
        log_window_digits: Significant digits passed to math.log10 when
            estimating magnitudes for the division scale (default: 15)
    """

    default_scale: int = DEFAULT_SCALE
    ratio_scale: int = RATIO_SCALE
    log_window_digits: int = LOG_WINDOW_DIGITS

    def __post_init__(self) -> None:
        for name in ("default_scale", "ratio_scale"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidArgument(f"{name} must be non-negative, got {value}")
        if self.log_window_digits < 1:
            raise InvalidArgument(
                f"log_window_digits must be positive, got {self.log_window_digits}"
            )


def _int_from_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise InvalidArgument(f"{key} must be an integer, got '{raw}'") from err


def load_config(environ: Mapping[str, str] | None = None) -> MathConfig:
    """Build a MathConfig from environment variables.

    Configuration via environment variables:
    - EXACTMATH_DEFAULT_SCALE: float bridging scale (default: 20)
    - EXACTMATH_RATIO_SCALE: ratio division scale (default: 20)
    - EXACTMATH_LOG_WINDOW_DIGITS: magnitude estimator window (default: 15)

    Raises:
        InvalidArgument: If a variable is set to something other than a valid integer
    """
    if environ is None:
        environ = os.environ
    return MathConfig(
        default_scale=_int_from_env(environ, ENV_DEFAULT_SCALE, DEFAULT_SCALE),
        ratio_scale=_int_from_env(environ, ENV_RATIO_SCALE, RATIO_SCALE),
        log_window_digits=_int_from_env(environ, ENV_LOG_WINDOW_DIGITS, LOG_WINDOW_DIGITS),
    )


# Default configuration instance
DEFAULT_CONFIG = load_config()
