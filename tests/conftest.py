"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from exactmath import Decimal, Ratio


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test performs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def zero() -> Decimal:
    """The canonical Decimal zero."""
    return Decimal.zero()


@pytest.fixture
def one() -> Decimal:
    """The canonical Decimal one."""
    return Decimal.one()


@pytest.fixture
def large_ratio() -> Ratio:
    """A ratio whose components exceed signed 64-bit range."""
    return Ratio.parse("100000000000000000000000:300000000000000000000000")
