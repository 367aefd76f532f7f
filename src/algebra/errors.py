"""Exception types for the `algebra` primitives.

Every operation raises one of these on a contract violation. Each class maps
to exactly one `MathErrorKind` and also derives from the closest builtin, so
callers may catch either ``AlgebraError`` or e.g. ``ZeroDivisionError``.

``evaluate()`` in ``engine.py`` turns them into ``MathResult`` values for
callers that prefer result inspection over exceptions.
"""

from __future__ import annotations

from .types import MathErrorKind


class AlgebraError(Exception):
    """Base class; ``kind`` identifies the failure."""

    kind: MathErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


class DivisionByZeroError(AlgebraError, ZeroDivisionError):
    """Raised when a divisor operand is zero."""

    kind = MathErrorKind.DIVISION_BY_ZERO


class PositiveIntegerRequiredError(AlgebraError, ValueError):
    """Raised when an operand must be non-negative but is not."""

    kind = MathErrorKind.POSITIF_INTEGER_REQUIRED


class IntegerOverflowError(AlgebraError, OverflowError):
    """Raised when an operand or result does not fit the integer width."""

    kind = MathErrorKind.OVERFLOW


class OutOfRangeError(AlgebraError, ValueError):
    """Raised when an operand is outside the operation's domain."""

    kind = MathErrorKind.OUT_OF_RANGE


_BY_KIND: dict[MathErrorKind, type[AlgebraError]] = {
    cls.kind: cls
    for cls in (DivisionByZeroError, PositiveIntegerRequiredError, IntegerOverflowError, OutOfRangeError)
}


def error_for(kind: MathErrorKind, message: str | None = None) -> AlgebraError:
    """Build the exception matching *kind*."""
    return _BY_KIND[kind](message)
