"""
Greatest common divisor via Euclid's algorithm.

Three flavors share one reduction (``a, b -> b, a mod b`` until the remainder
is zero), run as an explicit loop over operand magnitudes:

- `gcd`: result carries the sign of the first operand,
- `gcd_abs`: result is the non-negative magnitude,
- `gcd_secure`: same result as `gcd_abs`, but the reduction uses the remainder
  operation only, so no quotient ever exists in the computation.

Algorithm Design:
- Time Complexity: O(log(min(|a|, |b|))) reduction steps
- Space Complexity: O(1)
- Invariant: gcd_abs(a, b) == gcd_secure(a, b) == abs(gcd(a, b))
"""

from __future__ import annotations

from typing import Optional

from .bounds import abs_val, require_in_width, require_result
from .config import resolve_width
from .errors import DivisionByZeroError
from .types import IntWidth


def _check_operands(a: int, b: int, width: IntWidth) -> None:
    require_in_width("a", a, width)
    require_in_width("b", b, width)
    # Later divisors are non-zero remainders, so one check suffices.
    if b == 0:
        raise DivisionByZeroError()


def _euclid(a: int, b: int) -> int:
    """Return the gcd magnitude; *b* must be non-zero."""
    x, y = abs_val(a), abs_val(b)
    while True:
        _, r = divmod(x, y)
        if r == 0:
            return y
        x, y = y, r


def gcd(a: int, b: int, *, width: Optional[IntWidth] = None) -> int:
    """
    Greatest common divisor with the sign of *a*.

        gcd(48, 88) == 8        gcd(48, -88) == 8
        gcd(-48, 88) == -8      gcd(-48, -88) == -8
        gcd(0, -5) == 5

    Raises:
        DivisionByZeroError: if b == 0
        IntegerOverflowError: if an operand does not fit the width, or for
            gcd(0, MIN) whose positive magnitude is one past the maximum
    """
    w = resolve_width(width)
    _check_operands(a, b, w)
    g = _euclid(a, b)
    return require_result(-g if a < 0 else g, w)


def gcd_abs(a: int, b: int, *, width: Optional[IntWidth] = None) -> int:
    """
    Greatest common divisor, always non-negative.

    Raises:
        DivisionByZeroError: if b == 0
        IntegerOverflowError: if an operand does not fit the width, or for
            gcd_abs(MIN, MIN) and gcd_abs(0, MIN), whose magnitude is one
            past the maximum
    """
    w = resolve_width(width)
    _check_operands(a, b, w)
    g = _euclid(a, b)
    return require_result(g, w)


def gcd_secure(a: int, b: int, *, width: Optional[IntWidth] = None) -> int:
    """Non-negative GCD computed from remainders and divisors only.

    Same contract and result as `gcd_abs`. Nothing here may be logged.
    """
    w = resolve_width(width)
    _check_operands(a, b, w)
    x, y = abs_val(a), abs_val(b)
    r = x % y
    while r != 0:
        x, y = y, r
        r = x % y
    return require_result(y, w)
