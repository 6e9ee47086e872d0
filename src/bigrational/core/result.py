"""
Typed results for expected failure conditions.

``Outcome`` carries either a value or an ``ErrorKind`` with its message, so a
caller can branch on failures like "not a finite decimal" without a try/except
around every call. ``attempt`` adapts any raising operation of the core;
only ``RationalError`` is mapped, other exceptions (TypeError etc.) propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .exc import ErrorKind, RationalError, error_class_for

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either ``value`` (error is None) or ``error`` + ``message``."""
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> "Outcome[T]":
        return cls(error=kind, message=message)

    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the exception class matching ``error``."""
        if self.error is not None:
            raise error_class_for(self.error)(self.message)
        return self.value

    def value_or(self, default: T) -> T:
        return self.value if self.error is None else default


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Run ``fn`` and capture a RationalError as a failed Outcome."""
    try:
        return Outcome.success(fn(*args, **kwargs))
    except RationalError as e:
        return Outcome.failure(e.kind, str(e))


__all__ = [
    "Outcome",
    "attempt",
]
