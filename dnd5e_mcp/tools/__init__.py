"""
Tool Integration Layer.

Declares the D&D 5e API tools advertised to the MCP host and dispatches
tool calls to the remote REST service.
"""

from dnd5e_mcp.tools.dispatcher import RequestDispatcher
from dnd5e_mcp.tools.envelope import ResponseEnvelope
from dnd5e_mcp.tools.manifest import list_tools

__all__ = ["RequestDispatcher", "ResponseEnvelope", "list_tools"]
