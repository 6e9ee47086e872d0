"""
Core exception types for bigrational.core.

These are dependency-free and may be imported by all core modules. Each
exception carries an ``ErrorKind`` so that callers using the typed-result API
(see ``result.py``) can branch on the kind without catching.
"""

from enum import Enum

__all__ = [
    "ErrorKind",
    "RationalError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "NumberFormatError",
    "NotIntegralError",
    "RoundingNecessaryError",
    "error_class_for",
]


class ErrorKind(Enum):
    """Failure categories surfaced by Rational operations."""
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_ARGUMENT = "invalid_argument"
    NUMBER_FORMAT = "number_format"
    ARITHMETIC = "arithmetic"
    ROUNDING_NECESSARY = "rounding_necessary"


class RationalError(Exception):
    """Base class for all errors raised by the rational core."""
    kind: ErrorKind = ErrorKind.ARITHMETIC


class DivisionByZeroError(RationalError, ZeroDivisionError):
    """Raised on a zero denominator, a reciprocal of zero, or division by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidArgumentError(RationalError, ValueError):
    """Raised for unusable arguments: min()/max() without values, non-finite Decimal."""
    kind = ErrorKind.INVALID_ARGUMENT


class NumberFormatError(RationalError, ValueError):
    """Raised when text does not match the rational or integer grammar."""
    kind = ErrorKind.NUMBER_FORMAT


class NotIntegralError(RationalError, ArithmeticError):
    """Raised when a non-integral value is converted to an integer."""
    kind = ErrorKind.ARITHMETIC


class RoundingNecessaryError(RationalError, ArithmeticError):
    """Raised when a value has no finite decimal expansion."""
    kind = ErrorKind.ROUNDING_NECESSARY


_CLASS_BY_KIND = {
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.NUMBER_FORMAT: NumberFormatError,
    ErrorKind.ARITHMETIC: NotIntegralError,
    ErrorKind.ROUNDING_NECESSARY: RoundingNecessaryError,
}


def error_class_for(kind: ErrorKind) -> type:
    """Return the exception class raised for ``kind``."""
    return _CLASS_BY_KIND[kind]
