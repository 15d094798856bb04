"""
Base class for tool adapters.

Provides the abstract interface the MCP server talks to: list the tools an
adapter offers and call one of them by name.
"""

from abc import ABC, abstractmethod
from typing import Any

from mcp import types

from dnd5e_mcp.tools.envelope import ResponseEnvelope


class ToolAdapter(ABC):
    """
    Abstract base class for tool adapters.

    Adapters own whatever connection they need to reach their backing
    service. ``call`` must never raise: every failure comes back as an
    error envelope.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the tool adapter.

        This may involve opening connection pools or other resources that
        are shared across calls.
        """
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Cleanly shut down the tool adapter and release its resources.
        """
        pass

    @abstractmethod
    async def call(self, tool_name: str, arguments: dict[str, Any] | None) -> ResponseEnvelope:
        """
        Call a tool with the given arguments.

        Args:
            tool_name: Name of the tool to invoke
            arguments: Tool-specific arguments as delivered by the host

        Returns:
            Success envelope with the tool output, or an error envelope
        """
        pass

    @abstractmethod
    def list_tools(self) -> list[types.Tool]:
        """
        List all tools offered by this adapter.

        Returns:
            MCP tool descriptors with name, description and input schema.
        """
        pass

    async def __aenter__(self):
        """Context manager entry - initialize the adapter."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - shutdown the adapter."""
        await self.shutdown()
        return False
