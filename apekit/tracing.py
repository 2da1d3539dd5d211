"""Tracing of expression values per block, and source rewriting to trace lines."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "TRACE_HEADER",
    "Trace",
    "Tracer",
    "trace_value",
    "TraceLineError",
    "transform_source",
]

TRACE_HEADER = "#include <trace.h>\n"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class Trace:
    """A reusable buffer of traced values that grows by doubling."""

    index: int = 0
    data: list[float] = field(default_factory=list)

    def reset(self) -> None:
        """Start over; the buffer's capacity is kept."""
        self.index = 0

    def enqueue(self, value: float) -> None:
        """Append ``value``, doubling the buffer when it is full."""
        if self.index >= len(self.data):
            grown = max(1, len(self.data) * 2)
            self.data.extend([0.0] * (grown - len(self.data)))
        self.data[self.index] = value
        self.index += 1

    @property
    def values(self) -> list[float]:
        """The values enqueued since the last reset."""
        return self.data[: self.index]


class Tracer:
    """A collection of traces keyed by expression and element name."""

    def __init__(self) -> None:
        self._traces: dict[tuple[str, str | None], Trace] = {}

    def get_trace(self, name: str, element: str | None = None) -> Trace:
        """The trace for ``name`` (and ``element``), created on first use."""
        return self._traces.setdefault((name, element), Trace())

    def reset(self) -> None:
        """Reset every trace for a new block."""
        for trace in self._traces.values():
            trace.reset()

    def __iter__(self) -> Iterator[tuple[tuple[str, ...], list[float]]]:
        """Yield ``(names, values)`` for each trace, as presented to a host."""
        for (name, element), trace in self._traces.items():
            names = (name, element) if element is not None else (name,)
            yield names, trace.values

    def __len__(self) -> int:
        return len(self._traces)


def trace_value(tracer: Tracer, identifier: str, value: Any) -> Any:
    """Record ``value`` under ``identifier`` and return it unchanged.

    Complex values are recorded as separate "real" and "imag" traces.
    """
    if isinstance(value, complex):
        tracer.get_trace(identifier, "real").enqueue(float(value.real))
        tracer.get_trace(identifier, "imag").enqueue(float(value.imag))
    else:
        tracer.get_trace(identifier, None).enqueue(float(value))
    return value


class TraceLineError(ValueError):
    """Raised when a traced line does not hold a single statement."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            "Breakpoints can only be set at single statements, at line "
            f"{line_number}:\n {line}"
        )
        self.line_number = line_number
        self.line = line


def transform_source(source: str, trace_lines: Iterable[int]) -> str:
    """Wrap the statements on the zero-based ``trace_lines`` in ``TRC(...)``.

    Without trace lines the source is returned unchanged. Otherwise the
    tracing header is prepended, line breaks are normalised to ``\\n`` and
    only terminated lines are kept.
    """
    wanted = set(trace_lines)
    if not wanted:
        return source

    pieces = [TRACE_HEADER]
    for number, line in enumerate(_LINE_BREAK.split(source)[:-1]):
        if number in wanted:
            terminal = line.find(";")
            if terminal < 0:
                raise TraceLineError(number + 1, line)
            pieces.append(f"TRC({line[:terminal]}){line[terminal:]}\n")
        else:
            pieces.append(line + "\n")
    return "".join(pieces)