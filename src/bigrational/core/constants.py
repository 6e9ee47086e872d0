"""
bigrational Core Constants
==========================

Grammar patterns, prime factors and separators shared by the core modules.
Decimal contexts are built locally where needed; the global Decimal context is
never modified here.
"""

# NOTE: Patterns use [0-9] rather than \d so that non-ASCII digits are rejected.

import re

# ---------------------------------------------------------------------------
# Textual grammar
# ---------------------------------------------------------------------------

#: Separator between numerator and denominator in text and persisted form.
FRACTION_SEPARATOR: str = "/"

#: Signed integer text (numerator or standalone integer).
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

#: rational := ['+'|'-'] digits [ '.' digits | '/' digits | ('e'|'E') ['+'|'-'] digits ]
RATIONAL_PATTERN = re.compile(
    r"(?P<integral>[+-]?[0-9]+)"
    r"(?:"
    r"\.(?P<fraction>[0-9]+)"
    r"|/(?P<denominator>[0-9]+)"
    r"|[eE](?P<exponent>[+-]?[0-9]+)"
    r")?"
)


# ---------------------------------------------------------------------------
# Finite decimal classification
# ---------------------------------------------------------------------------

#: A simplified denominator made only of these primes has a finite decimal expansion.
FINITE_DECIMAL_FACTORS: tuple = (2, 5)

#: Base of the decimal-point and exponential text forms.
DECIMAL_BASE: int = 10


__all__ = [
    "FRACTION_SEPARATOR",
    "INTEGER_PATTERN",
    "RATIONAL_PATTERN",
    "FINITE_DECIMAL_FACTORS",
    "DECIMAL_BASE",
]
