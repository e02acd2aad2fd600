"""Incremental SHA-1 digests as hex strings."""

from __future__ import annotations

import hashlib
import string
from typing import BinaryIO, IO

__all__ = ["SHA1"]

_BLOCK_BYTES = 64
_HEX_DIGITS = frozenset(string.hexdigits)


def _parse_hex_prefix(text: str) -> int:
    """Parse the leading hexadecimal number of *text*, or 0 if there is none."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if char not in _HEX_DIGITS:
            break
        digits += char
    return sign * int(digits, 16) if digits else 0


class SHA1:
    """Accumulates data and produces its SHA-1 digest as lowercase hex."""

    def __init__(self) -> None:
        self._hash = hashlib.sha1()

    def update(self, data: bytes | bytearray | memoryview | str) -> None:
        """Feed more data; text is encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._hash.update(data)

    def update_from(self, stream: BinaryIO | IO[str]) -> None:
        """Feed everything that can be read from *stream*."""
        while True:
            chunk = stream.read(_BLOCK_BYTES)
            if not chunk:
                return
            self.update(chunk)

    def final(self) -> str:
        """Return the hex digest of all data fed so far, then start afresh."""
        digest = self._hash.hexdigest()
        self._hash = hashlib.sha1()
        return digest

    @classmethod
    def from_file(cls, filename: str) -> str:
        """Return the hex digest of a file's contents.

        Raises OSError if the file cannot be opened.
        """
        checksum = cls()
        with open(filename, "rb") as stream:
            checksum.update_from(stream)
        return checksum.final()

    @staticmethod
    def to_binary(hex_digest: str) -> bytes:
        """Convert hex text, two characters per byte, to raw bytes.

        A pair that does not start with a hex number becomes a zero byte.
        """
        return bytes(
            _parse_hex_prefix(hex_digest[start : start + 2]) & 0xFF
            for start in range(0, len(hex_digest), 2)
        )