"""
Environment-driven defaults for the `algebra` primitives.

Recognized variables:
- ALGEBRA_INT_WIDTH: signed integer width in bits, 32 or 64 (default 64).

Values are read on every call; nothing is cached at module level, so tests and
long-running callers can change the environment without reloading.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .types import IntWidth

logger = logging.getLogger(__name__)

ENV_INT_WIDTH = "ALGEBRA_INT_WIDTH"
DEFAULT_INT_WIDTH = IntWidth.I64


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _env_width(name: str, default: IntWidth) -> IntWidth:
    raw = _env_str(name, str(default.bits))
    try:
        return IntWidth(int(raw))
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: expected one of 32, 64; using {default.bits}")
        return default


@dataclass(frozen=True)
class AlgebraConfig:
    int_width: IntWidth = DEFAULT_INT_WIDTH


def load_config() -> AlgebraConfig:
    return AlgebraConfig(int_width=_env_width(ENV_INT_WIDTH, DEFAULT_INT_WIDTH))


def default_width() -> IntWidth:
    """Width used when an operation is called without ``width=``."""
    return load_config().int_width


def resolve_width(width: Optional[IntWidth]) -> IntWidth:
    if width is None:
        return default_width()
    if not isinstance(width, IntWidth):
        raise ValueError(f"width must be an IntWidth: {width!r}")
    return width
