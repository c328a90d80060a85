"""
Response envelopes — uniform success/error wrappers for tool calls and resource reads

Every tools/call and resources/read produces exactly one envelope. Failures
are ordinary envelopes with is_error=True, never exceptions.
"""

import json
from typing import Any, Dict

from wpmcp.server.protocol import (
    resource_contents,
    resource_read_result,
    text_content,
    tool_result_content,
)

PLAIN_TEXT = "text/plain"


def to_display_text(value: Any) -> str:
    """Strings verbatim; anything else as canonical JSON (sorted keys, 2-space indent)."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


def error_message(exc: BaseException) -> str:
    """Human-readable message for a handler failure."""
    message = str(exc)
    return message if message else type(exc).__name__


class ToolEnvelope:
    """Result of one tools/call."""

    __slots__ = ("payload", "is_error")

    def __init__(self, payload: str, is_error: bool = False):
        self.payload = payload
        self.is_error = is_error

    @classmethod
    def not_found(cls, name: str) -> "ToolEnvelope":
        return cls(f"Tool not found: {name}", is_error=True)

    @classmethod
    def failure(cls, exc: BaseException) -> "ToolEnvelope":
        return cls(f"Error: {error_message(exc)}", is_error=True)

    def to_result(self) -> Dict[str, Any]:
        """MCP tools/call result."""
        return tool_result_content([text_content(self.payload)], is_error=self.is_error)

    def __eq__(self, other):
        if not isinstance(other, ToolEnvelope):
            return NotImplemented
        return (self.payload, self.is_error) == (other.payload, other.is_error)

    def __repr__(self):
        return f"ToolEnvelope(is_error={self.is_error}, payload={self.payload[:40]!r})"


class ResourceEnvelope:
    """Result of one resources/read."""

    __slots__ = ("uri", "mime_type", "payload", "is_error")

    def __init__(self, uri: str, mime_type: str, payload: str, is_error: bool = False):
        self.uri = uri
        self.mime_type = mime_type
        self.payload = payload
        self.is_error = is_error

    @classmethod
    def not_found(cls, uri: str) -> "ResourceEnvelope":
        return cls(uri, PLAIN_TEXT, f"Resource not found: {uri}", is_error=True)

    @classmethod
    def failure(cls, uri: str, exc: BaseException) -> "ResourceEnvelope":
        return cls(uri, PLAIN_TEXT, f"Error: {error_message(exc)}", is_error=True)

    def to_result(self) -> Dict[str, Any]:
        """MCP resources/read result."""
        return resource_read_result(
            [resource_contents(self.uri, self.mime_type, self.payload)],
            is_error=self.is_error,
        )

    def __eq__(self, other):
        if not isinstance(other, ResourceEnvelope):
            return NotImplemented
        return (self.uri, self.mime_type, self.payload, self.is_error) == (
            other.uri, other.mime_type, other.payload, other.is_error,
        )

    def __repr__(self):
        return f"ResourceEnvelope(uri={self.uri!r}, is_error={self.is_error})"
