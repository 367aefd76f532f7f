"""`algebra`: elementary number theory over fixed-width signed integers.

- pure, stateless functions on plain Python ints,
- operands and results bounded by a signed width (64-bit unless configured),
- contract violations raise typed exceptions from one closed error taxonomy.

Public API:
- `gcd(a, b)`, `gcd_abs(a, b)`, `gcd_secure(a, b)`
- `lcm(a, b)`
- `is_prime_number(a) -> int | None`
- `evaluate(op, *operands) -> MathResult`
- `evaluate_or_raise(op, *operands)` (raises on rejection)
"""

from .config import AlgebraConfig, default_width, load_config
from .engine import evaluate, evaluate_or_raise
from .errors import (
    AlgebraError,
    DivisionByZeroError,
    IntegerOverflowError,
    OutOfRangeError,
    PositiveIntegerRequiredError,
    error_for,
)
from .gcd import gcd, gcd_abs, gcd_secure
from .lcm import lcm
from .prime import is_prime_number
from .types import IntWidth, MathErrorKind, MathResult, Operation

__all__ = [
    "gcd",
    "gcd_abs",
    "gcd_secure",
    "lcm",
    "is_prime_number",
    "evaluate",
    "evaluate_or_raise",
    "AlgebraConfig",
    "default_width",
    "load_config",
    "IntWidth",
    "MathErrorKind",
    "MathResult",
    "Operation",
    "AlgebraError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "OutOfRangeError",
    "PositiveIntegerRequiredError",
    "error_for",
]
