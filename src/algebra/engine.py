"""Dispatch-table evaluation for the `algebra` operations.

``evaluate(op, *operands)`` is the non-raising entry point. It:

1. Resolves the operation (an ``Operation`` or its string value).
2. Checks the operand count against the dispatch table.
3. Runs the operation, mapping any ``AlgebraError`` to its ``MathErrorKind``.
4. Returns a ``MathResult`` (ok with a value, or rejected with a reason).

Programming errors propagate: ``TypeError`` from operand type checks and
``ValueError`` for a ``width`` that is not an ``IntWidth``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from .errors import AlgebraError, error_for
from .gcd import gcd, gcd_abs, gcd_secure
from .lcm import lcm
from .prime import is_prime_number
from .types import IntWidth, MathResult, Operation

logger = logging.getLogger(__name__)

OperationFn = Callable[..., Optional[int]]

_DISPATCH: dict[Operation, tuple[OperationFn, int]] = {
    Operation.GCD: (gcd, 2),
    Operation.GCD_ABS: (gcd_abs, 2),
    Operation.GCD_SECURE: (gcd_secure, 2),
    Operation.LCM: (lcm, 2),
    Operation.IS_PRIME_NUMBER: (is_prime_number, 1),
}


def _resolve_operation(op: Union[Operation, str]) -> Optional[Operation]:
    if isinstance(op, Operation):
        return op
    try:
        return Operation(op)
    except ValueError:
        return None


def evaluate(
    op: Union[Operation, str],
    *operands: int,
    width: Optional[IntWidth] = None,
) -> MathResult:
    """Run one operation.

    Returns ``MathResult`` with ``ok=True`` on success, or ``ok=False`` with
    ``error`` set to the failure kind. Unknown operations and wrong operand
    counts are rejected with ``error=None`` and a ``message`` reason.

    Raises:
        TypeError: an operand is not an int.
        ValueError: *width* is not an ``IntWidth`` or None.
    """
    operation = _resolve_operation(op)
    if operation is None:
        return MathResult(ok=False, message=f"unknown_operation:{op}")

    fn, arity = _DISPATCH[operation]
    if len(operands) != arity:
        return MathResult(ok=False, message=f"arity:{operation.value}")

    try:
        value = fn(*operands, width=width)
    except AlgebraError as exc:
        logger.debug(f"{operation.value} rejected: {exc.kind.name}")
        return MathResult(ok=False, error=exc.kind, message=str(exc))
    return MathResult(ok=True, value=value)


def evaluate_or_raise(
    op: Union[Operation, str],
    *operands: int,
    width: Optional[IntWidth] = None,
) -> Optional[int]:
    """Like ``evaluate()`` but returns the bare value or raises.

    Raises:
        AlgebraError: the subclass matching the failure kind.
        TypeError: wrong number of operands.
        ValueError: unknown operation.
    """
    result = evaluate(op, *operands, width=width)
    if result.ok:
        return result.value

    if result.error is not None:
        raise error_for(result.error, result.message)
    reason = result.message or ""
    if reason.startswith("arity:"):
        raise TypeError(reason)
    raise ValueError(reason)
