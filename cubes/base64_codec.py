"""Base64 encoding and decoding in the standard and the URL-safe alphabet.

The URL-safe variant uses ``-`` and ``_`` for the last two symbols and ``.``
as the padding character. Decoding accepts both alphabets and both padding
characters, and does not require padding at all.
"""

from __future__ import annotations

import base64

PEM_LINE_LENGTH = 64
MIME_LINE_LENGTH = 76

_INVALID_INPUT = "Input is not valid base64-encoded data."
_PADDING = frozenset("=.")


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _position_of(char: str) -> int:
    if "A" <= char <= "Z":
        return ord(char) - ord("A")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 26
    if "0" <= char <= "9":
        return ord(char) - ord("0") + 52
    if char in "+-":
        return 62
    if char in "/_":
        return 63
    raise ValueError(_INVALID_INPUT)


def _insert_linebreaks(text: str, distance: int) -> str:
    return "\n".join(text[start:start + distance] for start in range(0, len(text), distance))


def encode(data: bytes | bytearray | memoryview | str, url: bool = False) -> str:
    """Encode bytes (or UTF-8 text) as base64, URL-safe with ``.`` padding if ``url``."""
    raw = _as_bytes(data)
    if url:
        return base64.urlsafe_b64encode(raw).decode("ascii").replace("=", ".")
    return base64.b64encode(raw).decode("ascii")


def encode_pem(data: bytes | bytearray | memoryview | str) -> str:
    """Encode as standard base64 broken into lines of 64 characters."""
    return _insert_linebreaks(encode(data), PEM_LINE_LENGTH)


def encode_mime(data: bytes | bytearray | memoryview | str) -> str:
    """Encode as standard base64 broken into lines of 76 characters."""
    return _insert_linebreaks(encode(data), MIME_LINE_LENGTH)


def decode(text: str | bytes, remove_linebreaks: bool = False) -> bytes:
    """Decode base64 text in either alphabet; raise ValueError on invalid input.

    With ``remove_linebreaks`` every ``\\n`` is dropped before decoding.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    if not text:
        return b""
    if remove_linebreaks:
        text = text.replace("\n", "")

    length = len(text)
    out = bytearray()
    for pos in range(0, length, 4):
        if pos + 1 >= length:
            raise ValueError(_INVALID_INPUT)
        first = _position_of(text[pos])
        second = _position_of(text[pos + 1])
        out.append(((first << 2) + ((second & 0x30) >> 4)) & 0xFF)

        if pos + 2 < length and text[pos + 2] not in _PADDING:
            third = _position_of(text[pos + 2])
            out.append((((second & 0x0F) << 4) + ((third & 0x3C) >> 2)) & 0xFF)

            if pos + 3 < length and text[pos + 3] not in _PADDING:
                fourth = _position_of(text[pos + 3])
                out.append((((third & 0x03) << 6) + fourth) & 0xFF)
    return bytes(out)