"""
Tool manifest advertised to the MCP host.

Each descriptor carries the tool name, a description for the agent and a
JSON Schema for its arguments. The schemas mirror the argument models in
``dnd5e_mcp.tools.arguments``.
"""

from mcp import types

from dnd5e_mcp.tools.endpoints import list_categories


def _endpoint_property(description: str) -> dict:
    categories = list(list_categories())
    return {
        "type": "string",
        "description": f"{description} Available: {', '.join(categories)}",
        "enum": categories,
    }


def list_tools() -> list[types.Tool]:
    """Return the tool descriptors in their advertised order."""
    return [
        types.Tool(
            name="list_endpoints",
            description="Get a list of all available D&D 5e API endpoints and their URLs",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        types.Tool(
            name="list_resources",
            description=(
                "Get a list of all available resources for a specific endpoint "
                "(e.g., all spells, all monsters)"
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "endpoint": _endpoint_property("The endpoint to list resources from."),
                },
                "required": ["endpoint"],
            },
        ),
        types.Tool(
            name="get_resource",
            description=(
                "Get detailed information about a specific resource by its index "
                "(e.g., a specific spell, monster, or class)"
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "endpoint": _endpoint_property("The endpoint type."),
                    "index": {
                        "type": "string",
                        "description": (
                            "The index/ID of the resource (e.g., 'fireball' for a spell, "
                            "'ancient-red-dragon' for a monster)"
                        ),
                    },
                },
                "required": ["endpoint", "index"],
            },
        ),
        types.Tool(
            name="search_spells",
            description="Search for spells with optional filters (level, school, class)",
            inputSchema={
                "type": "object",
                "properties": {
                    "level": {
                        "type": "number",
                        "description": "Filter by spell level (0-9)",
                        "minimum": 0,
                        "maximum": 9,
                    },
                    "school": {
                        "type": "string",
                        "description": (
                            "Filter by magic school (e.g., evocation, abjuration, conjuration)"
                        ),
                    },
                    "class": {
                        "type": "string",
                        "description": "Filter by class (e.g., wizard, cleric, bard)",
                    },
                },
            },
        ),
        types.Tool(
            name="search_monsters",
            description="Search for monsters with optional filters (challenge rating, type)",
            inputSchema={
                "type": "object",
                "properties": {
                    "challenge_rating": {
                        "type": "number",
                        "description": "Filter by challenge rating (CR)",
                    },
                    "type": {
                        "type": "string",
                        "description": "Filter by monster type (e.g., dragon, undead, humanoid)",
                    },
                },
            },
        ),
        types.Tool(
            name="get_class_levels",
            description="Get level progression details for a specific class",
            inputSchema={
                "type": "object",
                "properties": {
                    "class_index": {
                        "type": "string",
                        "description": "The class index (e.g., 'wizard', 'fighter', 'cleric')",
                    },
                    "level": {
                        "type": "number",
                        "description": "Optional: Get details for a specific level (1-20)",
                        "minimum": 1,
                        "maximum": 20,
                    },
                },
                "required": ["class_index"],
            },
        ),
        types.Tool(
            name="get_class_spells",
            description="Get all spells available to a specific class",
            inputSchema={
                "type": "object",
                "properties": {
                    "class_index": {
                        "type": "string",
                        "description": "The class index (e.g., 'wizard', 'cleric', 'bard')",
                    },
                },
                "required": ["class_index"],
            },
        ),
    ]
