"""
Errors raised while dispatching a tool call.

The string form of every error is the exact text returned to the host in
the error envelope.
"""

from typing import Any


class ToolError(Exception):
    """Base class for failures that become an error envelope."""


class UnknownToolError(ToolError):
    """The invocation names a tool outside the declared set."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class LocalConstructionError(ToolError):
    """Arguments could not be turned into a request path."""

    def __init__(self, tool_name: str, details: str):
        self.tool_name = tool_name
        self.details = details
        super().__init__(f"Invalid arguments for {tool_name}: {details}")


class RemoteHttpError(ToolError):
    """The remote API answered with a non-success status."""

    def __init__(self, status_code: int, body: Any, body_text: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {status_code} - {body_text}")


class TransportError(ToolError):
    """No response was obtained (DNS, connection, timeout)."""

    def __init__(self, message: str):
        super().__init__(f"Request failed: {message}")
