"""
MCP server exposing the D&D 5e API tools over stdio.

The server is a thin layer: it advertises the adapter's tool manifest and
forwards every tool call to the adapter, converting the returned envelope
into an MCP ``CallToolResult``.
"""

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from dnd5e_mcp.config.logging import get_logger
from dnd5e_mcp.config.settings import ServerSettings, Settings
from dnd5e_mcp.tools.base import ToolAdapter
from dnd5e_mcp.tools.dispatcher import RequestDispatcher

logger = get_logger(__name__)


def create_server(adapter: ToolAdapter, settings: ServerSettings | None = None) -> Server:
    """
    Build an MCP server bound to a tool adapter.

    Args:
        adapter: Adapter that lists and executes the tools
        settings: Server identity; defaults to ServerSettings()

    Returns:
        Configured low-level MCP server, not yet running
    """
    settings = settings or ServerSettings()
    server = Server(settings.name, version=settings.version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return adapter.list_tools()

    # Arguments are validated by the adapter so that bad input comes back
    # as a regular error envelope.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        envelope = await adapter.call(name, arguments)
        return envelope.to_call_tool_result()

    return server


async def serve(settings: Settings) -> None:
    """Run the MCP server on stdin/stdout until the host disconnects."""
    async with RequestDispatcher(settings.api) as dispatcher:
        server = create_server(dispatcher, settings.server)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("D&D 5e API MCP Server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
