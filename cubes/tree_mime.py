"""Drag-and-drop payload for tree items: a text and a point per item.

The payload is a sequence of records, each a length-prefixed UTF-16
big-endian string (a length of ``0xFFFFFFFF`` marks a missing string)
followed by two signed 32-bit big-endian coordinates.
"""

from __future__ import annotations

import struct
from typing import Iterable

MIME_TYPE = "application/x-dnditemdata"

_LENGTH = struct.Struct(">I")
_POINT = struct.Struct(">ii")
_NULL_LENGTH = 0xFFFFFFFF

Item = tuple["str | None", tuple[int, int]]


def mime_types() -> list[str]:
    """Return the MIME types a tree model offers for dragging."""
    return [MIME_TYPE]


def _encode_text(text: str | None) -> bytes:
    if text is None:
        return _LENGTH.pack(_NULL_LENGTH)
    raw = text.encode("utf-16-be")
    return _LENGTH.pack(len(raw)) + raw


def encode_items(items: Iterable[tuple[str | None, tuple[int, int]]]) -> bytes:
    """Serialise (text, (x, y)) pairs into a drag payload."""
    chunks = []
    for text, (x, y) in items:
        try:
            point = _POINT.pack(x, y)
        except struct.error as exc:
            raise ValueError(f"point out of range: ({x}, {y})") from exc
        chunks.append(_encode_text(text))
        chunks.append(point)
    return b"".join(chunks)


def _take(data: bytes, offset: int, size: int) -> tuple[bytes, int]:
    end = offset + size
    if end > len(data):
        raise ValueError("truncated item data")
    return data[offset:end], end


def decode_items(data: bytes) -> list[tuple[str | None, tuple[int, int]]]:
    """Parse a drag payload back into (text, (x, y)) pairs; ValueError if malformed."""
    data = bytes(data)
    items = []
    offset = 0
    while offset < len(data):
        chunk, offset = _take(data, offset, _LENGTH.size)
        (length,) = _LENGTH.unpack(chunk)
        if length == _NULL_LENGTH:
            text = None
        else:
            if length % 2:
                raise ValueError("string length is not a whole number of UTF-16 units")
            raw, offset = _take(data, offset, length)
            text = raw.decode("utf-16-be")
        chunk, offset = _take(data, offset, _POINT.size)
        items.append((text, _POINT.unpack(chunk)))
    return items