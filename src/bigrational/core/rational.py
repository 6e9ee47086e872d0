"""
Rational: an exact ratio of two arbitrary-precision integers.

- Canonical form: the denominator is strictly positive. A negative denominator
  given at construction moves its sign to the numerator; zero is rejected.
- No automatic reduction: operators cross-multiply and keep the unreduced pair.
  ``simplified()`` is the explicit, opt-in reduction. Equality, ordering and
  hashing are value based, so ``1/2 == 2/4``.
- Immutable: every operation returns a new instance.
- Exact: conversions that would lose precision raise instead of rounding.

Operands of the named methods (``plus``, ``compare_to``, ``min`` ...) go through
``Rational.coerce`` which accepts Rational, int, Decimal, Fraction or text.
Python operators accept the numeric kinds only (no text).

# Alignment notes:
# - quotient()/remainder() work on the stored pair, so "-2.5" (= -25/10) gives
#   quotient -2 and remainder -5, not the remainder against the reduced 2.
# - power() raises numerator and denominator separately by repeated squaring.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from math import gcd
from typing import Callable, Dict, Tuple, Union

from .constants import (
    DECIMAL_BASE,
    FINITE_DECIMAL_FACTORS,
    FRACTION_SEPARATOR,
    RATIONAL_PATTERN,
)
from .exc import (
    DivisionByZeroError,
    InvalidArgumentError,
    NotIntegralError,
    NumberFormatError,
    RoundingNecessaryError,
)
from .fmt import decimal_to_components, exact_decimal, strip_trailing_zeros
from .integers import (
    IntegerLike,
    digits_to_int,
    exact_div,
    excerpt,
    parse_integer,
    pow_by_squaring,
    sign_of,
    strip_factor,
    trunc_divmod,
)
from .result import Outcome, attempt

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


RationalLike = Union["Rational", int, str, Decimal, Fraction]

# Process-wide singletons (zero/one/ten), created on first use.
_SINGLETONS: Dict[int, "Rational"] = {}
_SINGLETON_LOCK = threading.Lock()


def _rebuild(text: str) -> "Rational":
    """Pickle hook: rebuild a Rational from its serialized text."""
    return Rational.deserialize(text)


@dataclass(frozen=True, eq=False)
class Rational:
    """Exact rational number ``numerator / denominator`` (denominator > 0)."""
    numerator: int
    denominator: int

    def __post_init__(self):
        n, d = self.numerator, self.denominator
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"numerator must be int, got {type(n).__name__}")
        if isinstance(d, bool) or not isinstance(d, int):
            raise TypeError(f"denominator must be int, got {type(d).__name__}")
        if d == 0:
            raise DivisionByZeroError("The denominator must not be zero.")
        if d < 0:
            object.__setattr__(self, "numerator", -n)
            object.__setattr__(self, "denominator", -d)

    # ------------- constructors -------------

    @classmethod
    def _unchecked(cls, numerator: int, denominator: int) -> "Rational":
        # Caller guarantees denominator > 0.
        obj = object.__new__(cls)
        object.__setattr__(obj, "numerator", numerator)
        object.__setattr__(obj, "denominator", denominator)
        return obj

    @classmethod
    def from_integers(cls, numerator: IntegerLike, denominator: IntegerLike) -> "Rational":
        """Build ``numerator/denominator``; each side is an int or integer text.

        A negative denominator moves its sign to the numerator. Not reduced.
        """
        return cls(parse_integer(numerator), parse_integer(denominator))

    @classmethod
    def from_integer(cls, value: IntegerLike) -> "Rational":
        return cls._unchecked(parse_integer(value), 1)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Rational":
        """Exact value of a finite Decimal, e.g. Decimal('1.50') -> 150/100."""
        n, d = decimal_to_components(value)
        return cls._unchecked(n, d)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        return cls._unchecked(value.numerator, value.denominator)

    @classmethod
    def of(cls, value: RationalLike, denominator: IntegerLike = None) -> "Rational":
        """``of(n, d)`` is ``from_integers``; ``of(x)`` is ``coerce``."""
        if denominator is not None:
            return cls.from_integers(value, denominator)
        return cls.coerce(value)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse ``[+-]digits`` optionally followed by ``.digits``, ``/digits`` or ``e[+-]digits``.

        '1.125'  -> 1125/1000
        '123e4'  -> 1230000
        '-10e-1' -> -10/10
        '2/0'    -> DivisionByZeroError
        """
        if not isinstance(text, str):
            raise TypeError(f"parse() expects str, got {type(text).__name__}")
        m = RATIONAL_PATTERN.fullmatch(text)
        if m is None:
            raise NumberFormatError(f"invalid rational string representation: {excerpt(text)}")

        integral = m.group("integral")
        fraction = m.group("fraction")
        denominator = m.group("denominator")
        exponent = m.group("exponent")

        if fraction is not None:
            return cls._unchecked(digits_to_int(integral + fraction), DECIMAL_BASE ** len(fraction))
        if denominator is not None:
            return cls(digits_to_int(integral), digits_to_int(denominator))
        if exponent is not None:
            e = digits_to_int(exponent)
            if e >= 0:
                return cls._unchecked(digits_to_int(integral) * DECIMAL_BASE ** e, 1)
            return cls._unchecked(digits_to_int(integral), DECIMAL_BASE ** (-e))
        return cls._unchecked(digits_to_int(integral), 1)

    @classmethod
    def coerce(cls, value: RationalLike) -> "Rational":
        """Normalise any supported operand to a Rational (floats are rejected)."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not accepted as a rational operand")
        if isinstance(value, int):
            return cls._unchecked(value, 1)
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        raise TypeError(f"cannot convert {type(value).__name__} to Rational exactly")

    @staticmethod
    def _singleton(value: int) -> "Rational":
        r = _SINGLETONS.get(value)
        if r is None:
            with _SINGLETON_LOCK:
                r = _SINGLETONS.get(value)
                if r is None:
                    r = Rational._unchecked(value, 1)
                    _SINGLETONS[value] = r
        return r

    @staticmethod
    def zero() -> "Rational":
        return Rational._singleton(0)

    @staticmethod
    def one() -> "Rational":
        return Rational._singleton(1)

    @staticmethod
    def ten() -> "Rational":
        return Rational._singleton(10)

    # ------------- arithmetic (no reduction) -------------

    def plus(self, that: RationalLike) -> "Rational":
        that = Rational.coerce(that)
        n = self.numerator * that.denominator + that.numerator * self.denominator
        return Rational._unchecked(n, self.denominator * that.denominator)

    def minus(self, that: RationalLike) -> "Rational":
        that = Rational.coerce(that)
        n = self.numerator * that.denominator - that.numerator * self.denominator
        return Rational._unchecked(n, self.denominator * that.denominator)

    def multiplied_by(self, that: RationalLike) -> "Rational":
        that = Rational.coerce(that)
        return Rational._unchecked(
            self.numerator * that.numerator,
            self.denominator * that.denominator,
        )

    def divided_by(self, that: RationalLike) -> "Rational":
        """Raises DivisionByZeroError if ``that`` is zero."""
        that = Rational.coerce(that)
        if that.is_zero():
            raise DivisionByZeroError("Division by zero.")
        return Rational(
            self.numerator * that.denominator,
            self.denominator * that.numerator,
        )

    def reciprocal(self) -> "Rational":
        """Swap numerator and denominator. Raises DivisionByZeroError for zero."""
        if self.is_zero():
            raise DivisionByZeroError("The reciprocal of zero is undefined.")
        return Rational(self.denominator, self.numerator)

    def abs(self) -> "Rational":
        if self.numerator >= 0:
            return self
        return Rational._unchecked(-self.numerator, self.denominator)

    def negated(self) -> "Rational":
        return Rational._unchecked(-self.numerator, self.denominator)

    def power(self, exponent: int) -> "Rational":
        """Raise to an integer power; ``x.power(0)`` is one() for every x, zero included."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent == 0:
            return Rational.one()
        if exponent < 0:
            if self.is_zero():
                raise DivisionByZeroError("Zero cannot be raised to a negative power.")
            return self.power(-exponent).reciprocal()
        if exponent == 1:
            return self
        _dbg(f"power: n_bits={self.numerator.bit_length()}, d_bits={self.denominator.bit_length()}, e={exponent}")
        return Rational._unchecked(
            pow_by_squaring(self.numerator, exponent),
            pow_by_squaring(self.denominator, exponent),
        )

    # ------------- simplification & classification -------------

    def simplified(self) -> "Rational":
        """Lowest terms; zero becomes 0/1."""
        if self.numerator == 0:
            return Rational.zero()
        g = gcd(self.numerator, self.denominator)
        _dbg(f"simplified: gcd_bits={g.bit_length()}")
        if g == 1:
            return self
        return Rational._unchecked(
            exact_div(self.numerator, g),
            exact_div(self.denominator, g),
        )

    def _decimal_profile(self) -> Tuple["Rational", int, int]:
        """Return (simplified, leftover denominator, minimal decimal scale)."""
        s = self.simplified()
        d = s.denominator
        scale = 0
        for factor in FINITE_DECIMAL_FACTORS:
            d, count = strip_factor(d, factor)
            scale = max(scale, count)
        _dbg(f"decimal_profile: d_bits={s.denominator.bit_length()}, finite={d == 1}, scale={scale}")
        return s, d, scale

    def is_finite_decimal(self) -> bool:
        """True when the value has a terminating decimal expansion."""
        return self._decimal_profile()[1] == 1

    def is_integral(self) -> bool:
        return self.simplified().denominator == 1

    # ------------- relational -------------

    def compare_to(self, that: RationalLike) -> int:
        """Return -1, 0 or 1. Valid unreduced because denominators are positive."""
        return self.minus(that).sign()

    def is_equal_to(self, that: RationalLike) -> bool:
        return self.compare_to(that) == 0

    def is_less_than(self, that: RationalLike) -> bool:
        return self.compare_to(that) < 0

    def is_less_than_or_equal_to(self, that: RationalLike) -> bool:
        return self.compare_to(that) <= 0

    def is_greater_than(self, that: RationalLike) -> bool:
        return self.compare_to(that) > 0

    def is_greater_than_or_equal_to(self, that: RationalLike) -> bool:
        return self.compare_to(that) >= 0

    def sign(self) -> int:
        return sign_of(self.numerator)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_negative(self) -> bool:
        return self.numerator < 0

    def is_negative_or_zero(self) -> bool:
        return self.numerator <= 0

    def is_positive(self) -> bool:
        return self.numerator > 0

    def is_positive_or_zero(self) -> bool:
        return self.numerator >= 0

    @classmethod
    def _select(cls, values: tuple, keep: Callable[[int], bool], name: str) -> "Rational":
        if not values:
            raise InvalidArgumentError(f"{name}() expects at least one value.")
        best = None
        for value in values:
            candidate = cls.coerce(value)
            # Strict comparison: on ties the earliest value stays.
            if best is None or keep(candidate.compare_to(best)):
                best = candidate
        return best

    @classmethod
    def min(cls, *values: RationalLike) -> "Rational":
        """Smallest of one or more values; the first one wins ties."""
        return cls._select(values, lambda c: c < 0, "min")

    @classmethod
    def max(cls, *values: RationalLike) -> "Rational":
        """Largest of one or more values; the first one wins ties."""
        return cls._select(values, lambda c: c > 0, "max")

    # ------------- conversions -------------

    def quotient(self) -> int:
        """Truncating quotient of the stored (unreduced) pair."""
        return trunc_divmod(self.numerator, self.denominator)[0]

    def remainder(self) -> int:
        """``numerator - quotient * denominator``; sign follows the numerator."""
        return trunc_divmod(self.numerator, self.denominator)[1]

    def quotient_and_remainder(self) -> Tuple[int, int]:
        return trunc_divmod(self.numerator, self.denominator)

    def to_integer(self) -> int:
        s = self.simplified()
        if s.denominator != 1:
            raise NotIntegralError("This rational number cannot be represented as an integer value.")
        return s.numerator

    def to_decimal(self) -> Decimal:
        """Exact Decimal at the minimal scale; raises RoundingNecessaryError otherwise."""
        s, leftover, scale = self._decimal_profile()
        if leftover != 1:
            raise RoundingNecessaryError("This rational number cannot be represented as a finite decimal number.")
        return strip_trailing_zeros(exact_decimal(s.numerator, s.denominator, scale))

    def as_fraction(self) -> Fraction:
        """Exact (reduced) ``fractions.Fraction`` of this value."""
        return Fraction(self.numerator, self.denominator)

    # ------------- typed-result variants -------------

    @classmethod
    def try_parse(cls, text: str) -> Outcome:
        return attempt(cls.parse, text)

    def try_divided_by(self, that: RationalLike) -> Outcome:
        return attempt(self.divided_by, that)

    def try_reciprocal(self) -> Outcome:
        return attempt(self.reciprocal)

    def try_power(self, exponent: int) -> Outcome:
        return attempt(self.power, exponent)

    def try_to_integer(self) -> Outcome:
        return attempt(self.to_integer)

    def try_to_decimal(self) -> Outcome:
        return attempt(self.to_decimal)

    # ------------- text & persistence -------------

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}{FRACTION_SEPARATOR}{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational('{self}')"

    def serialize(self) -> str:
        return str(self)

    @classmethod
    def deserialize(cls, text: str) -> "Rational":
        """Rebuild from ``serialize()`` output: ``<integer>[/<integer>]``."""
        if not isinstance(text, str):
            raise TypeError(f"deserialize() expects str, got {type(text).__name__}")
        parts = text.split(FRACTION_SEPARATOR)
        if len(parts) == 1:
            return cls.from_integers(parts[0], 1)
        if len(parts) == 2:
            return cls.from_integers(parts[0], parts[1])
        raise NumberFormatError(f"invalid serialized rational: {excerpt(text)}")

    def __reduce__(self):
        return (_rebuild, (self.serialize(),))

    # ------------- Python numeric protocol -------------

    @staticmethod
    def _operand(other):
        """Rational for numeric operands, None for anything else (text, NaN, Infinity)."""
        if isinstance(other, Decimal) and not other.is_finite():
            return None
        if isinstance(other, (Rational, Decimal, Fraction)):
            return Rational.coerce(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational._unchecked(other, 1)
        return None

    def __eq__(self, other: object) -> bool:
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) == 0

    def __hash__(self) -> int:
        return hash(self.as_fraction())

    def __lt__(self, other: "Rational") -> bool:
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) < 0

    def __le__(self, other: "Rational") -> bool:
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) <= 0

    def __gt__(self, other: "Rational") -> bool:
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) > 0

    def __ge__(self, other: "Rational") -> bool:
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.compare_to(that) >= 0

    def __add__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.plus(that)

    def __radd__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return that.plus(self)

    def __sub__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.minus(that)

    def __rsub__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return that.minus(self)

    def __mul__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.multiplied_by(that)

    def __rmul__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return that.multiplied_by(self)

    def __truediv__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return self.divided_by(that)

    def __rtruediv__(self, other) -> "Rational":
        that = self._operand(other)
        if that is None:
            return NotImplemented
        return that.divided_by(self)

    def __pow__(self, exponent) -> "Rational":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> "Rational":
        return self.negated()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()


__all__ = [
    "Rational",
    "RationalLike",
]
