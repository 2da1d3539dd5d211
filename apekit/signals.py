"""Infinitely indexable signals, an owned sample matrix and cyclic iteration."""

from __future__ import annotations

import numbers
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import chain, islice, repeat
from typing import TypeVar

from apekit.interpolation import hermite4_at

__all__ = [
    "CircularSignal",
    "WindowedSignal",
    "SampleMatrix",
    "cyclic",
    "clear",
]

T = TypeVar("T")


class CircularSignal:
    """A read-only signal that repeats its source forever in both directions.

    Integer indices wrap around the source; fractional indices are
    hermite-interpolated.
    """

    def __init__(self, source: Sequence[float]) -> None:
        if not len(source):
            raise ValueError("a circular signal needs a non-empty source")
        self._source = source

    def __call__(self, x: float) -> float:
        if isinstance(x, numbers.Integral):
            return self._source[int(x) % len(self._source)]
        return hermite4_at(self, float(x))

    def __len__(self) -> int:
        return len(self._source)


class WindowedSignal:
    """A read-only signal that is zero outside the bounds of its source.

    Integer indices address the source directly; fractional indices are
    hermite-interpolated.
    """

    def __init__(self, source: Sequence[float]) -> None:
        self._source = source

    def __call__(self, x: float) -> float:
        if isinstance(x, numbers.Integral):
            index = int(x)
            if 0 <= index < len(self._source):
                return self._source[index]
            return 0.0
        return hermite4_at(self, float(x))

    def __len__(self) -> int:
        return len(self._source)


class SampleMatrix:
    """An owned rectangular matrix of samples, one row per channel."""

    def __init__(self, channels: int = 0, samples: int = 0) -> None:
        self._rows: list[list[float]] = []
        self.resize(channels, samples)

    def resize(self, channels: int, samples: int) -> None:
        """Change the dimensions, re-laying the flat contents row by row.

        Existing samples are kept in their flat (row-major) order; new
        space is filled with zeros.
        """
        if channels < 0 or samples < 0:
            raise ValueError("matrix dimensions cannot be negative")
        flat = chain.from_iterable(self._rows)
        padded = iter(list(islice(chain(flat, repeat(0.0)), channels * samples)))
        self._rows = [list(islice(padded, samples)) for _ in range(channels)]

    def clear(self, offset: int = 0) -> None:
        """Zero every channel from ``offset`` onwards."""
        for row in self._rows[offset:]:
            clear(row)

    @property
    def channels(self) -> int:
        """Number of channels (rows)."""
        return len(self._rows)

    @property
    def samples(self) -> int:
        """Number of samples (columns) per channel."""
        return len(self._rows[0]) if self._rows else 0

    def __getitem__(self, channel: int) -> list[float]:
        return self._rows[channel]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)


def cyclic(seq: Sequence[T], offset: int, length: int) -> Iterator[T]:
    """Yield ``length`` items of ``seq`` starting at ``offset``, wrapping around."""
    size = len(seq)
    if length > 0 and not size:
        raise ValueError("cannot cycle over an empty sequence")
    for step in range(length):
        yield seq[(offset + step) % size]


def clear(values: MutableSequence | SampleMatrix) -> None:
    """Reset every element of ``values`` in place to its type's default value."""
    if isinstance(values, SampleMatrix):
        values.clear()
        return
    values[:] = [type(v)() for v in values]