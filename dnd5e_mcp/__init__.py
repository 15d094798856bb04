"""
dnd5e-mcp - MCP server for the D&D 5th edition SRD REST API.

Exposes read-only lookups against https://www.dnd5eapi.co as tools that an
AI agent host can list and call over the Model Context Protocol.
"""

__version__ = "1.0.0"
