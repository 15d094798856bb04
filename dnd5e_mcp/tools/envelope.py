"""
Response envelope returned for every tool call.

A tool call always yields exactly one text block: the pretty-printed JSON
payload on success, or a readable error message with ``is_error`` set.
"""

import json
from typing import Any

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


def format_payload(data: Any) -> str:
    """Pretty-print a decoded JSON payload, two-space indented."""
    return json.dumps(data, indent=2, ensure_ascii=False)


class ResponseEnvelope(BaseModel):
    """
    Uniform success/error wrapper for tool results.

    Example:
        >>> ResponseEnvelope.success({"index": "fireball"}).text
        '{\\n  "index": "fireball"\\n}'
    """

    text: str = Field(description="Pretty-printed JSON payload or error message")
    is_error: bool = Field(default=False, description="True when the call failed")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def success(cls, data: Any) -> "ResponseEnvelope":
        return cls(text=format_payload(data))

    @classmethod
    def failure(cls, error: Exception | str) -> "ResponseEnvelope":
        return cls(text=str(error), is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        """Convert to the MCP result shape sent back to the host."""
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )
