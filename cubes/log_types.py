"""Message, source and code types shared by everything that writes to the log."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import IntEnum
from functools import cache
from types import MappingProxyType
from typing import Mapping

SUCCESS_ERROR_CODE = 0
DEFAULT_DESCRIPTION = ""
DEFAULT_DETAILS = ""


class SourceType(IntEnum):
    """Component that produced a log message."""

    UNKNOWN = 0
    TOP_MANAGER = 1
    FILE_MANAGER = 2
    FILE_ITEM = 3
    PROPERTIES_MANAGER = 4
    PROPERTIES_ITEM = 5
    XML_HELPER = 6
    XML_PARSER = 7
    XML_WRITER = 8
    FILE_ANALYSIS = 9
    PROPERTIES_ANALYSIS = 10


class MessageType(IntEnum):
    """Severity of a log message."""

    INFORMATION = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class SourceTypeDescription:
    """Display name, code prefix and code offset of a source type."""

    name: str
    prefix: str
    offset: int


@dataclass
class Variable:
    """A named value attached to a log message."""

    name: str
    value: str


@dataclass
class Message:
    """A single log entry."""

    type: MessageType
    code: str
    source: SourceType
    description: str = DEFAULT_DESCRIPTION
    details: str = DEFAULT_DETAILS
    variables: list[Variable] = field(default_factory=list)
    tag: int | None = None


class LogManager(abc.ABC):
    """Receiver of log messages."""

    @abc.abstractmethod
    def add_message(self, message: Message) -> None:
        """Store or display one message."""


def get_source_type_code_offset(source_type: SourceType) -> int:
    """Return the numeric code offset reserved for a source type."""
    if source_type == SourceType.UNKNOWN:
        return 0
    return 10000 + 1000 * int(source_type)


_NAMES_AND_PREFIXES = {
    SourceType.UNKNOWN: ("-", "U"),
    SourceType.TOP_MANAGER: ("Top Manager", "TM"),
    SourceType.FILE_MANAGER: ("File Manager", "FM"),
    SourceType.FILE_ITEM: ("File Item", "FI"),
    SourceType.PROPERTIES_MANAGER: ("Properties Manager", "PM"),
    SourceType.PROPERTIES_ITEM: ("Properties Item", "PI"),
    SourceType.XML_HELPER: ("XML Helper", "XH"),
    SourceType.XML_PARSER: ("XML Parser", "XP"),
    SourceType.XML_WRITER: ("XML Writer", "XW"),
    SourceType.FILE_ANALYSIS: ("File Analysis", "FA"),
    SourceType.PROPERTIES_ANALYSIS: ("Properties Analysis", "PA"),
}


@cache
def get_source_type_descriptions() -> Mapping[SourceType, SourceTypeDescription]:
    """Return the read-only table of descriptions for every source type."""
    descriptions = {
        source_type: SourceTypeDescription(name, prefix, get_source_type_code_offset(source_type))
        for source_type, (name, prefix) in _NAMES_AND_PREFIXES.items()
    }
    assert len(descriptions) == len(SourceType)
    return MappingProxyType(descriptions)


def get_source_type_description(source_type: SourceType | int) -> SourceTypeDescription:
    """Return the description of a source type, or that of UNKNOWN if none exists."""
    descriptions = get_source_type_descriptions()
    return descriptions.get(source_type, descriptions[SourceType.UNKNOWN])


def source_type_to_string(source_type: SourceType | int) -> str:
    """Return the display name of a source type."""
    return get_source_type_description(source_type).name


def get_source_type_prefix(source_type: SourceType | int) -> str:
    """Return the code prefix of a source type."""
    return get_source_type_description(source_type).prefix


_MESSAGE_TYPE_PREFIXES = {
    MessageType.INFORMATION: "I",
    MessageType.WARNING: "W",
    MessageType.ERROR: "E",
}


def get_message_type_prefix(message_type: MessageType | int) -> str:
    """Return the single-letter prefix of a message type, or its number if unknown."""
    return _MESSAGE_TYPE_PREFIXES.get(message_type, str(int(message_type)))


def create_code(message_type: MessageType, source_type: SourceType, code: int) -> str:
    """Build a message code such as ``"E" + "FA" + "7"``."""
    return f"{get_message_type_prefix(message_type)}{get_source_type_prefix(source_type)}{code}"