"""A zero-initialising allocator that tracks and frees its blocks together."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Hashable

__all__ = ["DoubleFreeError", "Block", "Allocator", "END_MARKER", "HEADER_SIZE", "END_SIZE"]

END_MARKER = 0xBADC0DE
HEADER_SIZE = 32
END_SIZE = 4


class DoubleFreeError(RuntimeError):
    """Raised when freeing a block that is not live in this allocator."""


@dataclass(eq=False)
class Block:
    """A zeroed block of memory with its bookkeeping."""

    label: Hashable
    data: bytearray
    total_size: int
    marker: int = field(default=END_MARKER)

    def __len__(self) -> int:
        return len(self.data)


class Allocator:
    """Hands out zeroed blocks and releases all of them on :meth:`clear`.

    Usable as a context manager; leaving the context frees every block.
    """

    def __init__(self, alignment: int) -> None:
        if alignment <= 0:
            raise ValueError("alignment must be positive")
        self.alignment = alignment
        self._blocks: list[Block] = []
        self._lock = threading.Lock()

    def alloc(self, label: Hashable, size: int) -> Block:
        """Allocate a zeroed block of at least ``size`` bytes."""
        if size < 0:
            raise ValueError("allocation size cannot be negative")
        total = HEADER_SIZE + size + END_SIZE
        remainder = total % self.alignment
        if remainder:
            size += remainder
            total = HEADER_SIZE + size + END_SIZE
        block = Block(label=label, data=bytearray(size), total_size=total)
        with self._lock:
            self._blocks.append(block)
        return block

    def free(self, block: Block | None) -> None:
        """Release ``block``; ``None`` is ignored."""
        if block is None:
            return
        with self._lock:
            if block.marker != END_MARKER or not any(b is block for b in self._blocks):
                raise DoubleFreeError(f"double free of block {id(block):#x}")
            self._blocks = [b for b in self._blocks if b is not block]
            block.marker = 0

    def clear(self) -> None:
        """Release every live block."""
        with self._lock:
            for block in self._blocks:
                block.marker = 0
            self._blocks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)

    def __enter__(self) -> Allocator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()