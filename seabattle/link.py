"""Line-oriented serial link: received bytes are queued and split into lines."""

from __future__ import annotations

from typing import BinaryIO

from .fifo import FIFO_SIZE, Fifo, FifoEmptyError, FifoFullError

DEFAULT_MAX_LEN = 32
_ENCODING = "latin-1"


class LineReader:
    """Assembles lines one byte at a time.

    Carriage returns are ignored, a newline completes the line, and
    bytes beyond ``max_len - 1`` characters are dropped.
    """

    def __init__(self, max_len: int = DEFAULT_MAX_LEN) -> None:
        if max_len < 1:
            raise ValueError("max_len must be at least 1")
        self.max_len = max_len
        self._pending = bytearray()

    def feed(self, byte: int) -> str | None:
        """Take one byte; return the finished line (possibly empty) or None."""
        if byte == ord("\r"):
            return None
        if byte == ord("\n"):
            line = self._pending.decode(_ENCODING)
            self._pending.clear()
            return line
        if len(self._pending) < self.max_len - 1:
            self._pending.append(byte)
        return None

    def feed_bytes(self, data: bytes) -> list[str]:
        """Feed every byte of ``data`` and return the lines it completed."""
        lines = []
        for byte in data:
            line = self.feed(byte)
            if line is not None:
                lines.append(line)
        return lines


class Link:
    """A serial connection with a receive queue and a transmit stream.

    Bytes arrive either through :meth:`receive` or, when the queue runs
    dry, from ``rx_stream``. Outgoing text goes to ``tx_stream``.
    """

    def __init__(
        self,
        rx_stream: BinaryIO | None = None,
        tx_stream: BinaryIO | None = None,
        max_len: int = DEFAULT_MAX_LEN,
    ) -> None:
        if max_len < 1:
            raise ValueError("max_len must be at least 1")
        self.rx_stream = rx_stream
        self.tx_stream = tx_stream
        self.max_len = max_len
        self._rx = Fifo(FIFO_SIZE)
        self._reader = LineReader(max_len)

    def receive(self, data: bytes) -> int:
        """Queue received bytes, dropping those that do not fit.

        Returns the number of bytes that were queued.
        """
        stored = 0
        for byte in data:
            try:
                self._rx.put(byte)
            except FifoFullError:
                continue
            stored += 1
        return stored

    def write(self, text: str) -> int:
        """Send ``text`` and return the number of bytes written."""
        if self.tx_stream is None:
            raise ValueError("link has no transmit stream")
        payload = text.encode(_ENCODING)
        self.tx_stream.write(payload)
        self.tx_stream.flush()
        return len(payload)

    def _next_byte(self) -> int | None:
        try:
            return self._rx.get()
        except FifoEmptyError:
            pass
        if self.rx_stream is None:
            return None
        chunk = self.rx_stream.read(1)
        if not chunk:
            return None
        return chunk[0]

    def read_line(self) -> str:
        """Read a whole line, waiting on the receive stream as needed.

        Stops at a newline or after ``max_len - 1`` characters. Raises
        EOFError if input ends before any character was read; a partial
        line at end of input is returned as is.
        """
        collected = bytearray()
        got_any = False
        while len(collected) < self.max_len - 1:
            byte = self._next_byte()
            if byte is None:
                if not got_any:
                    raise EOFError("no more input")
                break
            got_any = True
            if byte == ord("\r"):
                continue
            if byte == ord("\n"):
                break
            collected.append(byte)
        return collected.decode(_ENCODING)

    def poll_line(self) -> str | None:
        """Consume at most one byte and return a line if it completed one.

        With no queued bytes and no receive stream, returns None at once.
        With a receive stream, one byte is read from it; EOFError is
        raised when the stream is exhausted.
        """
        byte = self._next_byte()
        if byte is None:
            if self.rx_stream is not None:
                raise EOFError("no more input")
            return None
        return self._reader.feed(byte)