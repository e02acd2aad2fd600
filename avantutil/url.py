"""Parse URLs into their parts, with default ports for well-known schemes."""

from __future__ import annotations

import functools
import string

__all__ = ["Url", "unescape_path"]

_DEFAULT_PORTS: dict[str, int] = {
    "https": 443,
    "http": 80,
    "ssh": 22,
    "ftp": 21,
    "mysql": 3306,
    "mongo": 27017,
    "mongo+srv": 27017,
    "kafka": 9092,
    "postgres": 5432,
    "postgresql": 5432,
    "redis": 6379,
    "zookeeper": 2181,
    "ldap": 389,
    "ldaps": 636,
}

_PATH_PUNCTUATION = frozenset("-_.!~*'():@&=+$,/;")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_HEX = frozenset(string.hexdigits)
_HASH = "#"


def _unescape(text: str) -> tuple[str, bool]:
    """Decode percent escapes; return the text decoded so far and whether all of it was valid."""
    out = bytearray()
    ok = True
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "%":
            pair = text[pos + 1 : pos + 3]
            if len(pair) < 2 or not all(digit in _HEX for digit in pair):
                ok = False
                break
            out.append(int(pair, 16))
            pos += 3
            continue
        if char not in _PATH_PUNCTUATION and char not in _ALNUM:
            ok = False
            break
        out += char.encode("ascii")
        pos += 1
    return out.decode("utf-8", errors="surrogateescape"), ok


def unescape_path(text: str) -> str:
    """Decode percent escapes in a URL path.

    Raises ValueError on a malformed escape or a character that may not
    appear unescaped in a path.
    """
    decoded, ok = _unescape(text)
    if not ok:
        raise ValueError(f"invalid character or escape in path: {text!r}")
    return decoded


def _leading_int(text: str) -> int:
    """Parse the leading decimal integer of *text* the way atoi does, or 0."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit() or not char.isascii():
            break
        digits += char
    return sign * int(digits) if digits else 0


class _Cursor:
    """Scans forward through a string for any of a set of delimiter characters."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.left = 0

    def _find(self, delimiters: str) -> int:
        for index in range(self.left, len(self.text)):
            if self.text[index] in delimiters:
                return index
        return -1

    def capture(self, delimiters: str, error: str | None = None) -> str:
        index = self._find(delimiters)
        if index < 0:
            if error:
                raise ValueError(error)
            return self.text[self.left :]
        return self.text[self.left : index]

    def move_before(self, delimiters: str) -> bool:
        index = self._find(delimiters)
        if index < 0:
            return False
        self.left = index
        return True

    def exists(self, delimiters: str) -> bool:
        return self._find(delimiters) >= 0


@functools.total_ordering
class Url:
    """A URL split into scheme, credentials, host, port, path, query and fragment."""

    def __init__(self, text: str | None = None) -> None:
        self._reset()
        if text is not None:
            self.from_string(text)

    def _reset(self) -> None:
        self.scheme = ""
        self.authority = ""
        self.user_info = ""
        self.username = ""
        self.password = str()
        self.host = ""
        self.port_text = ""
        self.raw_path = ""
        self.query = ""
        self.fragment = ""
        self._secure = False
        self._ipv6 = False
        self._text = ""

    def from_string(self, text: str) -> None:
        """Parse *text*, replacing everything held before.

        Raises ValueError if there is no scheme separator or an IPv6 host
        is not closed.
        """
        self._reset()
        self._text = text
        cursor = _Cursor(text)

        self.scheme = cursor.capture(":", "Expected : in url").lower()
        cursor.left += len(self.scheme) + 1

        if cursor.move_before("/"):
            cursor.left += 2
            self.authority = cursor.capture("/")
            cursor.move_before("/")
            if cursor.exists("?"):
                self.raw_path = cursor.capture("?")
                cursor.move_before("?")
                cursor.left += 1
                if cursor.exists(_HASH):
                    self.query = cursor.capture(_HASH)
                    cursor.move_before(_HASH)
                    cursor.left += 1
                    self.fragment = cursor.capture(_HASH)
                else:
                    self.query = cursor.capture(_HASH)
            elif cursor.exists(_HASH):
                self.raw_path = cursor.capture(_HASH)
                cursor.move_before(_HASH)
                cursor.left += 1
                self.fragment = cursor.capture(_HASH)
            else:
                self.raw_path = cursor.capture(_HASH)
        else:
            self.raw_path = cursor.capture(_HASH)

        self._parse_authority()
        self._parse_user_info()

        if self.scheme in ("ssh", "https") or self.port_text == "443":
            self._secure = True
        if self.scheme in ("postgres", "postgresql") and "ssl=true" in self.query:
            self._secure = True

    def _parse_authority(self) -> None:
        cursor = _Cursor(self.authority)
        if cursor.exists("@"):
            self.user_info = cursor.capture("@")
            cursor.move_before("@")
            cursor.left += 1

        if cursor.exists("["):
            cursor.left += 1
            self.host = cursor.capture("]", "malformed ipv6")
            self._ipv6 = True
        elif cursor.exists(":"):
            self.host = cursor.capture(":")
            cursor.move_before(":")
            cursor.left += 1
            self.port_text = cursor.capture(_HASH)
        else:
            self.host = cursor.capture(":")

    def _parse_user_info(self) -> None:
        cursor = _Cursor(self.user_info)
        if cursor.exists(":"):
            self.username = cursor.capture(":")
            cursor.move_before(":")
            cursor.left += 1
            self.password = cursor.capture(_HASH)
        else:
            self.username = cursor.capture(":")

    @property
    def port(self) -> int:
        """The explicit port, else the scheme's well-known port, else 0."""
        if self.port_text:
            return _leading_int(self.port_text) & 0xFFFF
        return _DEFAULT_PORTS.get(self.scheme, 0)

    @property
    def path(self) -> str:
        """The path with percent escapes decoded, up to any invalid part."""
        return _unescape(self.raw_path)[0]

    def full_path(self) -> str:
        """Path, then ``?query`` and ``#fragment`` where present."""
        result = self.path
        if self.query:
            result += "?" + self.query
        if self.fragment:
            result += _HASH + self.fragment
        return result

    def is_ipv6(self) -> bool:
        """Whether the host was given in brackets."""
        return self._ipv6

    def set_secure(self, secure: bool) -> None:
        """Mark the URL as secure or not."""
        self._secure = secure

    def is_secure(self) -> bool:
        """Whether the URL names a secure transport."""
        return self._secure

    def _key(self) -> tuple[str, ...]:
        return (
            self.scheme,
            self.username,
            self.password,
            self.host,
            self.port_text,
            self.raw_path,
            self.query,
            self.fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Url) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Url({self._text!r})"