"""Wilson's-theorem primality test.

`a >= 2` is prime iff ``(a - 1)! ≡ -1 (mod a)``. The factorial is reduced
modulo `a` after every multiplication, so intermediates stay below ``a * a``.
O(a) multiplications: a reference test, not meant for large inputs.
"""

from __future__ import annotations

from typing import Optional

from .bounds import require_in_width
from .config import resolve_width
from .errors import OutOfRangeError
from .types import IntWidth


def is_prime_number(a: int, *, width: Optional[IntWidth] = None) -> Optional[int]:
    """Return *a* when it is prime, None when it is composite.

    Raises:
        OutOfRangeError: if a < 2
        IntegerOverflowError: if a does not fit the width
    """
    w = resolve_width(width)
    require_in_width("a", a, w)
    if a < 2:
        raise OutOfRangeError(f"primality requires a >= 2: {a}")

    factorial = 1
    for i in range(1, a):
        factorial = (factorial * i) % a

    if (factorial + 1) % a == 0:
        return a
    return None
