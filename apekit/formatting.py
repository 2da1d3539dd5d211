"""Positional "%" formatting and live labels built on shared values."""

from __future__ import annotations

from typing import Any

__all__ = [
    "FormatError",
    "PRINT_BUFFER_SIZE",
    "format_value",
    "sprint",
    "type_designator",
    "SharedValue",
    "Label",
    "label_format",
]

PRINT_BUFFER_SIZE = 4096
_FORMAT_ERROR_TEXT = "<format error>"


class FormatError(ValueError):
    """Raised when a format string does not match its argument list."""


def format_value(value: Any) -> str:
    """Render one argument the way :func:`sprint` substitutes it."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, complex):
        return "(%f, %fi)" % (value.real, value.imag)
    if isinstance(value, float):
        return "%f" % value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, SharedValue):
        return format_value(value.value)
    try:
        return str(value)
    except Exception:
        return _FORMAT_ERROR_TEXT


def sprint(fmt: str, *args: Any) -> str:
    """Replace the n-th lone "%" in ``fmt`` with the n-th argument.

    A doubled "%%" produces a single "%". The argument count must match
    the number of lone "%" characters exactly. Output is limited to the
    size of the print buffer.
    """
    pieces: list[str] = []
    remaining = iter(args)
    consumed = 0
    i = 0
    length = len(fmt)
    while i < length:
        char = fmt[i]
        if char == "%":
            if i + 1 < length and fmt[i + 1] == "%":
                pieces.append("%")
                i += 2
                continue
            if consumed >= len(args):
                raise FormatError("too few arguments for print()")
            pieces.append(format_value(next(remaining)))
            consumed += 1
        else:
            pieces.append(char)
        i += 1
    if consumed < len(args):
        raise FormatError("too many arguments provided to print()")
    return "".join(pieces)[: PRINT_BUFFER_SIZE - 1]


def type_designator(value: Any) -> str:
    """The printf conversion used to display ``value`` in a label."""
    if isinstance(value, SharedValue):
        value = value.value
    if isinstance(value, bool) or isinstance(value, int):
        return "d"
    if isinstance(value, float):
        return "lf"
    if isinstance(value, str):
        return "s"
    raise TypeError(f"no label designator for values of type {type(value).__name__}")


class SharedValue:
    """An assignable value displayed by any :class:`Label` it is bound to."""

    def __init__(self, value: Any = 0) -> None:
        self.designator = type_designator(value)
        self._kind = type(value)
        self.value = value

    @property
    def value(self) -> Any:
        """The current value."""
        return self._value

    @value.setter
    def value(self, new: Any) -> None:
        self._value = self._kind(new)

    def __repr__(self) -> str:
        return f"SharedValue({self._value!r})"


def label_format(fmt: str, *args: Any) -> str:
    """Build a printf format string from a label's "%" placeholders.

    Each lone "%" receives the designator of the matching argument; "%%"
    is kept as an escaped percent sign.
    """
    designators = [type_designator(arg) for arg in args]
    pieces: list[str] = []
    used = 0
    i = 0
    length = len(fmt)
    while i < length:
        char = fmt[i]
        pieces.append(char)
        if char == "%":
            if i + 1 < length and fmt[i + 1] == "%":
                pieces.append("%")
                i += 2
                continue
            if used >= len(designators):
                raise FormatError("Invalid format specifier + argument list combination")
            pieces.append(designators[used])
            used += 1
        i += 1
    return "".join(pieces)


class Label:
    """A titled format string whose text follows its shared values."""

    def __init__(self, name: str, fmt: str, *args: SharedValue) -> None:
        if not all(isinstance(arg, SharedValue) for arg in args):
            raise TypeError("label arguments must be SharedValue instances")
        self.name = name
        self.values = args
        self.format = label_format(fmt, *args)

    @property
    def text(self) -> str:
        """The label rendered with the current shared values."""
        return self.format % tuple(value.value for value in self.values)

    def __str__(self) -> str:
        return self.text