"""
Integer-domain helpers for the rational core.

Python's ``int`` is the arbitrary-precision integer primitive. The helpers here
add the few semantics it does not provide directly:

- truncating (toward-zero) divide-with-remainder, since ``divmod`` floors;
- exponentiation by squaring on a single integer;
- repeated removal of a prime factor with a count;
- strict integer text parsing (ASCII digits, optional sign, no whitespace).
"""

from __future__ import annotations

from typing import Tuple, Union

from .constants import INTEGER_PATTERN
from .exc import NumberFormatError

IntegerLike = Union[int, str]


# ----------------------------
# Integer division helpers (centralised)
# ----------------------------

def trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``a``.

    >>> trunc_divmod(-25, 10)
    (-2, -5)
    """
    if b == 0:
        raise ZeroDivisionError("trunc_divmod by zero")
    q, r = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        q = -q
    if a < 0:
        r = -r
    return q, r


def exact_div(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` where ``b`` is known to divide ``a`` evenly."""
    q, r = trunc_divmod(a, b)
    if r != 0:
        raise ArithmeticError("exact_div: divisor does not divide the dividend")
    return q


def sign_of(a: int) -> int:
    return (a > 0) - (a < 0)


def pow_by_squaring(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` for ``exponent >= 0`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("pow_by_squaring expects a non-negative exponent")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base
    return result


def strip_factor(n: int, factor: int) -> Tuple[int, int]:
    """Divide ``factor`` out of ``n`` while the remainder is zero.

    Returns ``(remaining, count)``. ``n`` must be non-zero.
    """
    count = 0
    while True:
        q, r = trunc_divmod(n, factor)
        if r != 0:
            return n, count
        n = q
        count += 1


# ----------------------------
# Text bridge
# ----------------------------

def excerpt(text: str, limit: int = 40) -> str:
    """Shortened repr of ``text`` for error messages."""
    if len(text) <= limit:
        return repr(text)
    return repr(text[:limit]) + f"... ({len(text)} chars)"


def digits_to_int(text: str) -> int:
    """``int(text)`` for grammar-checked digit text.

    CPython refuses str -> int conversions past its digit limit with a plain
    ValueError; that surfaces here as NumberFormatError.
    """
    try:
        return int(text)
    except ValueError as e:
        raise NumberFormatError(f"integer text too long to convert: {excerpt(text)}") from e


def parse_integer(value: IntegerLike) -> int:
    """Return ``value`` as an ``int``; text must be ``[+-]?[0-9]+`` exactly."""
    if isinstance(value, bool):
        raise TypeError("bool is not accepted as an integer value")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if INTEGER_PATTERN.fullmatch(value) is None:
            raise NumberFormatError(f"invalid integer string representation: {excerpt(value)}")
        return digits_to_int(value)
    raise TypeError(f"expected int or str, got {type(value).__name__}")


__all__ = [
    "IntegerLike",
    "trunc_divmod",
    "exact_div",
    "sign_of",
    "pow_by_squaring",
    "strip_factor",
    "excerpt",
    "digits_to_int",
    "parse_integer",
]
