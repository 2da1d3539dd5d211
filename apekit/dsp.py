"""Small DSP helpers: decibel conversion, kernels and vector utilities."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import chain, islice, repeat

__all__ = [
    "db_from",
    "db_to",
    "lanczos",
    "sinc",
    "to_complex",
    "normalize",
    "accumulate_norm",
    "multiply",
]


def db_from(arg: float) -> float:
    """Convert a value in decibels to a linear scalar."""
    return 10.0 ** (arg / 20.0)


def db_to(arg: float) -> float:
    """Convert a linear scalar to decibels."""
    return 20.0 * math.log10(arg)


def lanczos(x: float, size: int) -> float:
    """Evaluate a Lanczos kernel of ``size`` lobes at ``x``; 1 at ``x == 0``."""
    if not x:
        return 1.0
    px = math.pi * x
    return (size * math.sin(px) * math.sin(px / size)) / (px * px)


def sinc(x: float) -> float:
    """Evaluate the normalised sinc function at ``x``; 1 at ``x == 0``."""
    if not x:
        return 1.0
    px = math.pi * x
    return math.sin(px) / px


def to_complex(values: Iterable[float], size: int | None = None) -> list[complex]:
    """Convert ``values`` to complex numbers.

    With ``size`` given, the result is truncated or zero-padded to that length.
    """
    if size is None:
        return [complex(v) for v in values]
    padded = chain((complex(v) for v in values), repeat(0j))
    return list(islice(padded, size))


def accumulate_norm(values: Iterable[complex]) -> float:
    """Sum the squared magnitudes of ``values``."""
    return sum(v.real * v.real + v.imag * v.imag for v in values)


def normalize(
    values: Sequence[complex], scale: float, threshold: float = 1e-8
) -> list[complex]:
    """Scale every element by ``1 / sqrt(scale)``.

    Values are returned unchanged when ``scale`` is below ``threshold``.
    """
    if scale < threshold:
        return list(values)
    factor = 1.0 / math.sqrt(scale)
    return [v * factor for v in values]


def multiply(values: Iterable[complex], scale: complex) -> list[complex]:
    """Multiply every element by ``scale``."""
    return [v * scale for v in values]