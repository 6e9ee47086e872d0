# Top-level API for bigrational.
"""
Top-level API for bigrational.

Exposes the exact rational value type and its error taxonomy:
  - Rational: ratio of two arbitrary-precision integers, immutable and exact
  - Outcome / attempt: typed results for expected failures

Everything is implemented in the `bigrational.core` subpackage; import helpers
(integer and Decimal bridges) from there when needed.
"""

from __future__ import annotations

from .core import (
    Rational,
    RationalLike,
    Outcome,
    attempt,
    ErrorKind,
    RationalError,
    DivisionByZeroError,
    InvalidArgumentError,
    NumberFormatError,
    NotIntegralError,
    RoundingNecessaryError,
)

__version__ = "0.1.0"

__all__ = [
    # value type
    "Rational",
    "RationalLike",
    # typed results
    "Outcome",
    "attempt",
    # exceptions
    "ErrorKind",
    "RationalError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "NumberFormatError",
    "NotIntegralError",
    "RoundingNecessaryError",
]
