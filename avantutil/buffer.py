"""Growable byte buffer read from the front."""

from __future__ import annotations

__all__ = ["ByteBuffer"]


class ByteBuffer:
    """Bytes appended at the back and consumed from the front."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._reserved = 0

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Add bytes to the end of the buffer."""
        self._data += data

    def consume(self, n: int) -> bytes:
        """Remove and return up to *n* bytes from the front."""
        if n < 0:
            raise ValueError("cannot consume a negative number of bytes")
        taken = bytes(self._data[:n])
        del self._data[:n]
        return taken

    def reserve(self, size: int) -> None:
        """Record a capacity hint; ignored unless larger than both size and earlier hints."""
        if size <= len(self._data) or size <= self._reserved:
            return
        self._reserved = size

    @property
    def capacity(self) -> int:
        """The larger of the current size and the largest reserve hint."""
        return max(len(self._data), self._reserved)

    def clear(self) -> None:
        """Drop all buffered bytes."""
        self._data.clear()

    def view(self) -> bytes:
        """Return a copy of the unread bytes."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)