"""Counting and power-of-two helpers, plus common numeric constants."""

from __future__ import annotations

import math
import sys

__all__ = [
    "PI",
    "E",
    "TAU",
    "PI_HALF",
    "PI_QUARTER",
    "FOUR_OVER_PI",
    "SQRT_TWO",
    "SQRT_HALF_TWO",
    "EPSILON",
    "MAX",
    "MIN",
    "clamp_available",
    "nextpow2",
    "nextpow2above",
    "ispow2",
]

PI = math.pi
E = math.e
TAU = 2 * math.pi
PI_HALF = math.pi / 2
PI_QUARTER = math.pi / 4
FOUR_OVER_PI = 4 / math.pi
SQRT_TWO = math.sqrt(2.0)
SQRT_HALF_TWO = math.sqrt(2.0) / 2
EPSILON = sys.float_info.epsilon
MAX = sys.float_info.max
MIN = sys.float_info.min


def _require_unsigned(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} cannot be negative")


def clamp_available(position: int, size: int, available: int) -> int:
    """How many of ``available`` samples fit before reaching ``size`` from ``position``.

    Useful for doing a task every ``size`` samples over variably sized blocks.
    """
    _require_unsigned(position=position, size=size, available=available)
    if position > size:
        raise ValueError("position cannot lie beyond size")
    return min(available, size - position)


def nextpow2(current: int) -> int:
    """The smallest power of two that is at least ``current``."""
    _require_unsigned(current=current)
    p = 1
    while p < current:
        p <<= 1
    return p


def nextpow2above(current: int) -> int:
    """The smallest power of two strictly greater than ``current``."""
    _require_unsigned(current=current)
    p = 1
    while p <= current:
        p <<= 1
    return p


def ispow2(value: int) -> bool:
    """Whether ``value`` is a power of two; zero counts as one, as with bit tests."""
    _require_unsigned(value=value)
    if value == 0:
        return True
    return value & (value - 1) == 0