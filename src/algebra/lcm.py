"""
Least common multiple over non-negative fixed-width integers.

    lcm(a, b) = (a // gcd_abs(a, b)) * b

Dividing first keeps the intermediate no larger than `a`; the final multiply
is the only step that can leave the width and goes through `checked_mul`.

Invariant: lcm(a, b) * gcd_abs(a, b) == a * b whenever no overflow occurs.
"""

from __future__ import annotations

from typing import Optional

from .bounds import checked_mul, require_in_width
from .config import resolve_width
from .errors import PositiveIntegerRequiredError
from .gcd import gcd_abs
from .types import IntWidth


def lcm(a: int, b: int, *, width: Optional[IntWidth] = None) -> int:
    """
    Least common multiple of two non-negative integers; 0 if either is 0.

    Raises:
        PositiveIntegerRequiredError: if a < 0 or b < 0
        IntegerOverflowError: if an operand or the result does not fit the width
    """
    w = resolve_width(width)
    require_in_width("a", a, w)
    require_in_width("b", b, w)
    if a < 0 or b < 0:
        raise PositiveIntegerRequiredError(f"lcm operands must be non-negative: ({a}, {b})")

    if a == 0 or b == 0:
        return 0

    a_reduced = a // gcd_abs(a, b, width=w)
    return checked_mul(a_reduced, b, w)
