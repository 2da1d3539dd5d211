"""Interpolation of signals at fractional positions.

A signal is any callable taking an integer index and returning a sample.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from apekit.dsp import lanczos, sinc

__all__ = [
    "lanczos_filter",
    "sinc_filter",
    "hermite4",
    "hermite4_at",
    "linear",
    "linear_at",
    "lagrange",
    "lagrange5",
]

Signal = Callable[[int], float]


def _window(x: float, wsize: int) -> range:
    start = math.floor(x)
    return range(start - wsize + 1, start + wsize + 1)


def lanczos_filter(signal: Signal, x: float, wsize: int) -> float:
    """Lanczos-interpolate ``signal`` at ``x`` with a kernel of ``wsize`` lobes."""
    return sum(signal(i) * lanczos(x - i, wsize) for i in _window(x, wsize))


def sinc_filter(signal: Signal, x: float, wsize: int) -> float:
    """Sinc-interpolate ``signal`` at ``x`` over ``2 * wsize`` taps."""
    return sum(signal(i) * sinc(x - i) for i in _window(x, wsize))


def hermite4(offset: float, ym1: float, y0: float, y1: float, y2: float) -> float:
    """Four-point hermite interpolation between ``y0`` and ``y1``."""
    c = (y1 - ym1) * 0.5
    v = y0 - y1
    w = c + v
    a = w + v + (y2 - y0) * 0.5
    b_neg = w + a
    return (((a * offset) - b_neg) * offset + c) * offset + y0


def hermite4_at(signal: Signal, x: float) -> float:
    """Hermite-interpolate ``signal`` at position ``x``."""
    x0 = math.floor(x)
    return hermite4(x - x0, signal(x0 - 1), signal(x0), signal(x0 + 1), signal(x0 + 2))


def linear(offset: float, y0: float, y1: float) -> float:
    """Linear interpolation between ``y0`` and ``y1``."""
    return y0 * (1 - offset) + y1 * offset


def linear_at(signal: Signal, x: float) -> float:
    """Linearly interpolate ``signal`` at position ``x``."""
    x0 = math.floor(x)
    return linear(x - x0, signal(x0), signal(x0 + 1))


def _lagrange_term(value: float, offset: float, k: int, order: int) -> float:
    ks = -(order // 2)
    for i in range(order):
        j = i - k
        if j:
            value *= (i + ks - offset) * (1.0 / j)
    return value


def lagrange(signal: Signal, position: float, order: int) -> float:
    """Lagrange interpolation of ``signal`` at ``position`` with ``order`` terms."""
    if order < 1:
        raise ValueError("lagrange order must be at least 1")
    start = int(position)
    offset = position - start
    ks = -(order // 2)
    return sum(
        _lagrange_term(signal(ks + start + k), offset, k, order) for k in range(order)
    )


def lagrange5(
    offset: float, ym2: float, ym1: float, y0: float, y1: float, y2: float
) -> float:
    """Five-term Lagrange interpolation around ``y0``."""
    points = (ym2, ym1, y0, y1, y2)
    return sum(_lagrange_term(y, offset, k, 5) for k, y in enumerate(points))