"""
Unit tests for ResponseEnvelope.
"""

from mcp import types

from dnd5e_mcp.tools.envelope import ResponseEnvelope, format_payload
from dnd5e_mcp.tools.errors import TransportError


class TestResponseEnvelope:
    def test_success_pretty_prints_json(self):
        envelope = ResponseEnvelope.success({"index": "fireball", "level": 3})
        assert envelope.is_error is False
        assert envelope.text == '{\n  "index": "fireball",\n  "level": 3\n}'

    def test_success_keeps_non_ascii(self):
        """Text is emitted as-is rather than as \\u escapes."""
        envelope = ResponseEnvelope.success({"name": "Mordenkainen’s Sword"})
        assert "Mordenkainen’s Sword" in envelope.text

    def test_formatting_is_deterministic(self):
        data = {"count": 2, "results": [{"index": "a"}, {"index": "b"}]}
        assert format_payload(data) == format_payload(dict(data))

    def test_failure_from_exception(self):
        envelope = ResponseEnvelope.failure(TransportError("timed out"))
        assert envelope.is_error is True
        assert envelope.text == "Request failed: timed out"

    def test_failure_from_text(self):
        envelope = ResponseEnvelope.failure("Internal error: boom")
        assert envelope.text == "Internal error: boom"

    def test_to_call_tool_result(self):
        result = ResponseEnvelope.failure("Unknown tool: x").to_call_tool_result()
        assert isinstance(result, types.CallToolResult)
        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "Unknown tool: x"
