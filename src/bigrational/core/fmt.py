"""
Decimal bridges (conversion only).

Core arithmetic works on integer pairs. Decimal appears only at the edges:
converting a finite-decimal Rational to ``Decimal`` and accepting ``Decimal``
operands. All Decimal work uses a local context so the caller's global
``getcontext()`` never influences (or is influenced by) these conversions.
"""

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    ROUND_DOWN,
    Rounded,
)
from typing import Tuple

from .constants import DECIMAL_BASE
from .exc import InvalidArgumentError, RoundingNecessaryError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Exact contexts
# ---------------------------------------------------------------------------

def _digits_upper_bound(n: int) -> int:
    """Upper bound on the decimal digit count of |n| (no str() round-trip).

    Uses 30103/100000 >= log10(2), so the bound holds for any bit length.
    """
    return n.bit_length() * 30103 // 100000 + 2


def exact_context(prec: int) -> Context:
    """Decimal context where any rounding raises instead of approximating."""
    return Context(
        prec=max(prec, 1),
        rounding=ROUND_DOWN,
        traps=[InvalidOperation, DivisionByZero, Inexact, Rounded],
    )


# ---------------------------------------------------------------------------
# Rational -> Decimal
# ---------------------------------------------------------------------------

def exact_decimal(numerator: int, denominator: int, scale: int) -> Decimal:
    """Return numerator/denominator as a Decimal with exactly ``scale`` places.

    The quotient must be representable at ``scale``; otherwise
    RoundingNecessaryError is raised (no rounding mode is ever applied).
    """
    if denominator <= 0:
        raise InvalidArgumentError("exact_decimal expects a positive denominator")
    if scale < 0:
        raise InvalidArgumentError("exact_decimal expects a non-negative scale")
    ctx = exact_context(_digits_upper_bound(numerator) + scale + 2)
    _dbg(f"exact_decimal: n_bits={numerator.bit_length()}, d_bits={denominator.bit_length()}, scale={scale}, prec={ctx.prec}")
    try:
        q = ctx.divide(Decimal(numerator), Decimal(denominator))
        return q.quantize(Decimal((0, (1,), -scale)), context=ctx)
    except (Inexact, Rounded) as e:
        raise RoundingNecessaryError(f"quotient is not exact at scale {scale}") from e


def strip_trailing_zeros(x: Decimal) -> Decimal:
    """Drop trailing fractional zeros; the scale never goes below zero.

      Decimal('1.2500') -> Decimal('1.25')
      Decimal('50')     -> Decimal('50')   (not 5E+1)
      Decimal('0.000')  -> Decimal('0')
    """
    sign, digits, exponent = x.as_tuple()
    if not any(digits):
        return Decimal(0)
    digits = list(digits)
    while exponent < 0 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return Decimal((sign, tuple(digits), exponent))


# ---------------------------------------------------------------------------
# Decimal -> integer pair
# ---------------------------------------------------------------------------

def decimal_to_components(x: Decimal) -> Tuple[int, int]:
    """Exact (numerator, denominator) of a finite Decimal; denominator is a power of ten."""
    if x.is_nan() or x.is_infinite():
        raise InvalidArgumentError(f"non-finite Decimal has no rational value: {x}")
    sign, digits, exponent = x.as_tuple()
    coefficient = 0
    for d in digits:
        coefficient = coefficient * DECIMAL_BASE + d
    if sign:
        coefficient = -coefficient
    if exponent >= 0:
        return coefficient * DECIMAL_BASE ** exponent, 1
    return coefficient, DECIMAL_BASE ** (-exponent)


__all__ = [
    "exact_context",
    "exact_decimal",
    "strip_trailing_zeros",
    "decimal_to_components",
]
