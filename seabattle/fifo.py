"""Fixed-size byte ring buffer used to queue received serial data."""

from __future__ import annotations

FIFO_SIZE = 64


class FifoFullError(Exception):
    """Raised when a byte is put into a full FIFO."""


class FifoEmptyError(Exception):
    """Raised when a byte is taken from an empty FIFO."""


class Fifo:
    """Ring buffer of ``size`` slots holding at most ``size - 1`` bytes.

    One slot always stays free, so a full buffer can be told apart
    from an empty one by its head and tail positions alone.
    """

    def __init__(self, size: int = FIFO_SIZE) -> None:
        if size < 2:
            raise ValueError("FIFO size must be at least 2")
        self.size = size
        self._buffer = bytearray(size)
        self._head = 0
        self._tail = 0

    def is_empty(self) -> bool:
        """Return True when there is nothing to read."""
        return self._head == self._tail

    def is_full(self) -> bool:
        """Return True when advancing the head would meet the tail."""
        return (self._head + 1) % self.size == self._tail

    def put(self, data: int) -> None:
        """Append one byte; raise FifoFullError if there is no room."""
        if not 0 <= data <= 0xFF:
            raise ValueError(f"not a byte value: {data}")
        if self.is_full():
            raise FifoFullError("FIFO is full")
        self._buffer[self._head] = data
        self._head = (self._head + 1) % self.size

    def get(self) -> int:
        """Remove and return the oldest byte; raise FifoEmptyError if none."""
        if self.is_empty():
            raise FifoEmptyError("FIFO is empty")
        data = self._buffer[self._tail]
        self._tail = (self._tail + 1) % self.size
        return data

    def __len__(self) -> int:
        return (self._head - self._tail) % self.size