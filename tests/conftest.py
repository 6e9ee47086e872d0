from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from typing import List

import pytest

# Import project primitives
from bigrational import Rational


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

#: Values mixing reduced/unreduced pairs, signs, integers and big magnitudes.
SAMPLE_TEXTS: List[str] = [
    "0",
    "0/7",
    "1",
    "-1",
    "1/2",
    "2/4",
    "-3/4",
    "7/36",
    "-2.5",
    "1.125",
    "123e4",
    "-10e-1",
    "1000/3",
    "-98765432109876543210/12345678901234567890",
    "489798742123504998877665/387590928349859112233445",
]


def assert_pair(r: Rational, numerator: int, denominator: int) -> None:
    """Assert the stored (unreduced) pair, not just the value."""
    assert (r.numerator, r.denominator) == (numerator, denominator), f"got {r.numerator}/{r.denominator}"


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sample_rationals() -> List[Rational]:
    return [Rational.parse(t) for t in SAMPLE_TEXTS]


@pytest.fixture()
def nonzero_rationals(sample_rationals) -> List[Rational]:
    return [r for r in sample_rationals if not r.is_zero()]


@pytest.fixture()
def mixed_operands() -> list:
    """One operand of every supported kind, all equal to one half."""
    return [Rational.of(1, 2), "1/2", "0.5", "5e-1", Decimal("0.50"), Fraction(1, 2)]
