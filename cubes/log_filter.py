"""Filtering and ordering of log messages for display."""

from __future__ import annotations

from dataclasses import fields
from functools import cmp_to_key
from typing import Iterable

from cubes.log_types import Message, MessageType, source_type_to_string

_COLUMNS = frozenset(f.name for f in fields(Message))


def _column_text(message: Message, column: str) -> str:
    if column not in _COLUMNS:
        raise ValueError(f"unknown column: {column!r}")
    if column == "source":
        return source_type_to_string(message.source)
    value = getattr(message, column)
    return "" if value is None else str(value)


class LogFilter:
    """Keeps messages whose type is in the filter and orders them by a column.

    A column is the name of a Message field. The "type" column orders by
    message type; every other column orders by its text.
    """

    def __init__(self, message_types: Iterable[MessageType] = ()) -> None:
        self.message_types: set[MessageType] = set(message_types)

    def set_filter(self, message_types: Iterable[MessageType]) -> None:
        """Replace the accepted message types."""
        self.message_types = set(message_types)

    def add_to_filter(self, message_type: MessageType) -> None:
        """Accept one more message type."""
        self.message_types.add(message_type)

    def remove_from_filter(self, message_type: MessageType) -> None:
        """Stop accepting a message type."""
        self.message_types.discard(message_type)

    def accepts(self, message: Message) -> bool:
        """Return whether the message passes the filter."""
        return message.type in self.message_types

    def less_than(self, column: str, left: Message, right: Message) -> bool:
        """Return whether ``left`` sorts before ``right`` in the given column."""
        if column == "type":
            return int(left.type) < int(right.type)
        return _column_text(left, column) < _column_text(right, column)

    def apply(self, messages: Iterable[Message], column: str | None = None) -> list[Message]:
        """Return the accepted messages, stably sorted by ``column`` if given."""
        accepted = [message for message in messages if self.accepts(message)]
        if column is None:
            return accepted
        if column != "type" and column not in _COLUMNS:
            raise ValueError(f"unknown column: {column!r}")

        def compare(a: Message, b: Message) -> int:
            if self.less_than(column, a, b):
                return -1
            if self.less_than(column, b, a):
                return 1
            return 0

        return sorted(accepted, key=cmp_to_key(compare))