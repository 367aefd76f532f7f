"""Data types for the `algebra` primitives.

All types are enums or frozen dataclasses (immutable).

Conventions:
- operands and results are plain Python ints bounded by an `IntWidth`,
- the error vocabulary is the closed `MathErrorKind` enumeration,
- `MathResult` is the non-raising "value or classified error" channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique


@unique
class IntWidth(Enum):
    """Signed integer widths an operation can be evaluated in."""
    I32 = 32
    I64 = 64

    @property
    def bits(self) -> int:
        return self.value

    @property
    def min_value(self) -> int:
        return -(1 << (self.value - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.value - 1)) - 1

    def contains(self, x: int) -> bool:
        """True when *x* is representable in this width."""
        return self.min_value <= x <= self.max_value


@unique
class MathErrorKind(Enum):
    """One member per failure an operation can report. Values are display messages."""
    DIVISION_BY_ZERO = "Division by zero"
    POSITIF_INTEGER_REQUIRED = "Positif integer required"
    OVERFLOW = "Overflow"
    OUT_OF_RANGE = "Out of range"


@unique
class Operation(Enum):
    """One member per public operation, keyed by function name."""
    GCD = "gcd"
    GCD_ABS = "gcd_abs"
    GCD_SECURE = "gcd_secure"
    LCM = "lcm"
    IS_PRIME_NUMBER = "is_prime_number"


@dataclass(frozen=True)
class MathResult:
    """Result of a single evaluation.

    `value` is None both on rejection and for a composite primality test;
    check `ok` first.
    """

    ok: bool
    value: int | None = None
    error: MathErrorKind | None = None
    message: str | None = None
