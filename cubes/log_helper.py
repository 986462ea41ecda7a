"""Convenience wrapper that builds log messages for one source."""

from __future__ import annotations

from typing import Iterable, Mapping

from cubes.log_types import (
    LogManager,
    Message,
    MessageType,
    SourceType,
    Variable,
    create_code,
)


class LogHelper:
    """Builds messages for one source type and hands them to a log manager.

    Descriptions, details and message types registered per error code are
    used whenever a call does not supply its own.
    """

    def __init__(
        self,
        log_manager: LogManager | None,
        source_type: SourceType,
        descriptions: Mapping[int, str] | None = None,
        details: Mapping[int, str] | None = None,
        types: Mapping[int, MessageType] | None = None,
    ) -> None:
        self.log_manager = log_manager
        self.source_type = source_type
        self.descriptions = dict(descriptions or {})
        self.details = dict(details or {})
        self.types = dict(types or {})

    def _emit(
        self,
        message_type: MessageType,
        error_code: int,
        description: str,
        details: str,
        variables: Iterable[Variable],
        tag: int | None,
    ) -> Message | None:
        if self.log_manager is None:
            return None
        if not description:
            description = self.descriptions.get(error_code, description)
        if not details:
            details = self.details.get(error_code, details)
        message = Message(
            type=message_type,
            code=create_code(message_type, self.source_type, error_code),
            source=self.source_type,
            description=description,
            details=details,
            variables=list(variables),
            tag=tag,
        )
        self.log_manager.add_message(message)
        return message

    def log_information(self, error_code, description="", details="", variables=(), tag=None):
        """Send an information message; returns it, or None without a manager."""
        return self._emit(MessageType.INFORMATION, error_code, description, details, variables, tag)

    def log_warning(self, error_code, description="", details="", variables=(), tag=None):
        """Send a warning message; returns it, or None without a manager."""
        return self._emit(MessageType.WARNING, error_code, description, details, variables, tag)

    def log_error(self, error_code, description="", details="", variables=(), tag=None):
        """Send an error message; returns it, or None without a manager."""
        return self._emit(MessageType.ERROR, error_code, description, details, variables, tag)

    def log(self, error_code, description="", details="", variables=(), tag=None):
        """Send a message whose type is registered for the code, error by default."""
        message_type = self.types.get(error_code, MessageType.ERROR)
        return self._emit(message_type, error_code, description, details, variables, tag)