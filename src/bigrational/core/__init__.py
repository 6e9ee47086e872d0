"""
bigrational Core
================

Unified exports for the exact rational value type and its helpers.
All arithmetic is exact and works on integer (numerator, denominator) pairs.
Decimal helpers exist only for conversion to and from ``decimal.Decimal``.
"""

# NOTE:
#   Values are never reduced implicitly. Use Rational.simplified() when lowest
#   terms are needed; equality and ordering are value based either way.

# Grammar and classification constants
from .constants import (
    FRACTION_SEPARATOR,
    INTEGER_PATTERN,
    RATIONAL_PATTERN,
    FINITE_DECIMAL_FACTORS,
    DECIMAL_BASE,
)

# Integer-domain helpers
from .integers import (
    trunc_divmod,
    pow_by_squaring,
    strip_factor,
    parse_integer,
)

# Decimal bridges (conversion only)
from .fmt import (
    exact_decimal,
    strip_trailing_zeros,
    decimal_to_components,
)

# Value type
from .rational import (
    Rational,
    RationalLike,
)

# Typed results
from .result import (
    Outcome,
    attempt,
)

# Core exceptions
from .exc import (
    ErrorKind,
    RationalError,
    DivisionByZeroError,
    InvalidArgumentError,
    NumberFormatError,
    NotIntegralError,
    RoundingNecessaryError,
)

__all__ = [
    # constants
    "FRACTION_SEPARATOR",
    "INTEGER_PATTERN",
    "RATIONAL_PATTERN",
    "FINITE_DECIMAL_FACTORS",
    "DECIMAL_BASE",
    # integers
    "trunc_divmod",
    "pow_by_squaring",
    "strip_factor",
    "parse_integer",
    # fmt
    "exact_decimal",
    "strip_trailing_zeros",
    "decimal_to_components",
    # rational
    "Rational",
    "RationalLike",
    # result
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
