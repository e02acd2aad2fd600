"""Base64 encoding and lenient decoding, with URL-safe and line-wrapped variants."""

from __future__ import annotations

import base64 as _stdlib_base64
import string

__all__ = ["Base64Error", "encode", "encode_pem", "encode_mime", "decode"]

_PEM_LINE_LENGTH = 64
_MIME_LINE_LENGTH = 76
_PADDING = "=."


class Base64Error(ValueError):
    """Raised when input is not valid base64-encoded data."""


def _build_positions() -> dict[str, int]:
    standard = string.ascii_uppercase + string.ascii_lowercase + string.digits
    positions = {char: index for index, char in enumerate(standard)}
    # Accept both the standard and the URL-safe characters for 62 and 63.
    positions.update({"+": 62, "-": 62, "/": 63, "_": 63})
    return positions


_POSITIONS = _build_positions()


def _position(char: str) -> int:
    try:
        return _POSITIONS[char]
    except KeyError:
        raise Base64Error("Input is not valid base64-encoded data.") from None


def _to_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(data: bytes | bytearray | memoryview | str, url: bool = False) -> str:
    """Encode *data* as base64.

    With *url* set, the URL-safe alphabet is used and padding is ``.``
    instead of ``=``. Text is encoded as UTF-8 first.
    """
    raw = _to_bytes(data)
    if url:
        return _stdlib_base64.urlsafe_b64encode(raw).decode("ascii").replace("=", ".")
    return _stdlib_base64.b64encode(raw).decode("ascii")


def _wrap(text: str, width: int) -> str:
    return "\n".join(text[start : start + width] for start in range(0, len(text), width))


def encode_pem(data: bytes | bytearray | memoryview | str) -> str:
    """Encode *data* as base64 broken into lines of 64 characters."""
    return _wrap(encode(data), _PEM_LINE_LENGTH)


def encode_mime(data: bytes | bytearray | memoryview | str) -> str:
    """Encode *data* as base64 broken into lines of 76 characters."""
    return _wrap(encode(data), _MIME_LINE_LENGTH)


def decode(encoded: str | bytes | bytearray, remove_linebreaks: bool = False) -> bytes:
    """Decode base64 text, accepting both alphabets and missing padding.

    Padding may be ``=`` or ``.``. With *remove_linebreaks* set, newline
    characters are dropped before decoding. Raises :class:`Base64Error`
    on characters outside the alphabet or a dangling final character.
    """
    if isinstance(encoded, (bytes, bytearray)):
        encoded = encoded.decode("latin-1")
    if remove_linebreaks:
        encoded = encoded.replace("\n", "")

    out = bytearray()
    for start in range(0, len(encoded), 4):
        chunk = encoded[start : start + 4]
        if len(chunk) < 2:
            raise Base64Error("Input is not valid base64-encoded data.")
        second = _position(chunk[1])
        first = _position(chunk[0])
        out.append(((first << 2) + ((second & 0x30) >> 4)) & 0xFF)

        if len(chunk) > 2 and chunk[2] not in _PADDING:
            third = _position(chunk[2])
            out.append(((second & 0x0F) << 4) + ((third & 0x3C) >> 2))

            if len(chunk) > 3 and chunk[3] not in _PADDING:
                out.append(((third & 0x03) << 6) + _position(chunk[3]))

    return bytes(out)