from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import MalformedHeader
from ..raster import Encoding

logger = logging.getLogger(__name__)

INPUT_ENCODINGS = (Encoding.ASCII_COLOR, Encoding.BINARY_COLOR)
HEADER_CHARSET = "latin-1"
_WHITESPACE = b" \t\n\r\x0b\x0c"


class ByteScanner:
    """Cursor over an in-memory byte buffer with stream-extraction style reads."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def peek(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        return self._data[self._pos]

    def skip_byte(self) -> None:
        if self._pos < len(self._data):
            self._pos += 1

    def skip_whitespace(self) -> None:
        data = self._data
        pos = self._pos
        while pos < len(data) and data[pos] in _WHITESPACE:
            pos += 1
        self._pos = pos

    def token(self) -> Optional[bytes]:
        """Return the next whitespace-delimited token, or None at end of data."""
        self.skip_whitespace()
        data = self._data
        start = pos = self._pos
        while pos < len(data) and data[pos] not in _WHITESPACE:
            pos += 1
        self._pos = pos
        if pos == start:
            return None
        return data[start:pos]

    def line(self) -> bytes:
        """Return bytes up to the next newline, consuming the newline itself."""
        end = self._data.find(b"\n", self._pos)
        if end < 0:
            end = len(self._data)
        chunk = self._data[self._pos : end]
        self._pos = min(end + 1, len(self._data))
        return chunk

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, count: int) -> bytes:
        chunk = self._data[self._pos : self._pos + count]
        self._pos += len(chunk)
        return chunk


def parse_int(token: bytes) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits; anything else gives None."""
    digits = token[1:] if token[:1] in (b"+", b"-") else token
    if not digits.isdigit():
        return None
    return int(token)


@dataclass
class Header:
    encoding: Encoding
    width: int
    height: int
    max_value: str
    comment: str = ""


def _dimension(token: Optional[bytes], name: str) -> int:
    if token is None:
        raise MalformedHeader(f"Missing {name} in header")
    value = parse_int(token)
    if value is None:
        raise MalformedHeader(f"Invalid {name} in header: {token.decode(HEADER_CHARSET)!r}")
    if value <= 0:
        raise MalformedHeader(f"{name.capitalize()} must be greater than zero, got {value}")
    return value


def read_header(scanner: ByteScanner) -> Header:
    """Parse signature, comment block, dimensions and max value.

    Leaves the scanner on the first byte of pixel data: exactly one separator
    byte is consumed after the max value.
    """
    token = scanner.token()
    if token is None:
        raise MalformedHeader("Empty input, expected a P3 or P6 signature")
    signature = token.decode(HEADER_CHARSET)
    encoding = Encoding.from_signature(signature)
    if encoding not in INPUT_ENCODINGS:
        raise MalformedHeader(f"Unsupported signature: {signature!r} (expected P3 or P6)")
    scanner.skip_byte()

    lines = []
    while scanner.peek() == ord("#"):
        lines.append(scanner.line().decode(HEADER_CHARSET))
    comment = "\n".join(lines)

    width = _dimension(scanner.token(), "width")
    height = _dimension(scanner.token(), "height")
    max_token = scanner.token()
    if max_token is None:
        raise MalformedHeader("Missing max value in header")
    if not max_token.isdigit():
        raise MalformedHeader(f"Invalid max value in header: {max_token.decode(HEADER_CHARSET)!r}")
    scanner.skip_byte()

    header = Header(encoding, width, height, max_token.decode(HEADER_CHARSET), comment)
    logger.debug(
        "Read %s header: %dx%d, max value %s, %d comment line(s)",
        signature,
        width,
        height,
        header.max_value,
        len(lines),
    )
    return header


def format_header(encoding: Encoding, width: int, height: int, max_value: str, comment: str = "") -> bytes:
    """Build the header bytes; the comment already carries its own # markers."""
    parts = [encoding.signature, "\n"]
    if comment:
        parts += [comment, "\n"]
    parts += [f"{width} {height}", "\n", max_value, "\n"]
    return "".join(parts).encode(HEADER_CHARSET)
