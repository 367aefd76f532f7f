"""Fixed-width integer helpers shared by every operation.

Python ints never overflow, so the width is enforced explicitly: operands are
validated on entry and the only result-growing step (the LCM multiply) goes
through ``checked_mul``.
"""

from __future__ import annotations

from .errors import IntegerOverflowError
from .types import IntWidth


def abs_val(x: int) -> int:
    """Absolute value of *x*."""
    return x if x >= 0 else -x


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_in_width(name: str, value: int, width: IntWidth) -> None:
    """Type- and range-check one operand."""
    require_int(name, value)
    if not width.contains(value):
        raise IntegerOverflowError(
            f"{name} does not fit in i{width.bits}: [{width.min_value}, {width.max_value}]"
        )


def require_result(value: int, width: IntWidth) -> int:
    if not width.contains(value):
        raise IntegerOverflowError(f"result does not fit in i{width.bits}")
    return value


def checked_mul(x: int, y: int, width: IntWidth) -> int:
    """``x * y``, raising ``IntegerOverflowError`` instead of leaving *width*.

    Both factors must already be in range. The bound is tested on magnitudes
    before multiplying, so an out-of-range product is never materialized.
    """
    if x == 0 or y == 0:
        return 0
    negative = (x < 0) != (y < 0)
    limit = -width.min_value if negative else width.max_value
    if abs_val(x) > limit // abs_val(y):
        raise IntegerOverflowError(f"{x} * {y} overflows i{width.bits}")
    return x * y
