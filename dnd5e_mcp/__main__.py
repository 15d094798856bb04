"""
dnd5e-mcp CLI entry point.

Runs the MCP server over stdio and provides a few utility commands for
inspecting the tool manifest and calling tools by hand.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dnd5e_mcp import __version__
from dnd5e_mcp.config.logging import get_logger, setup_logging
from dnd5e_mcp.config.settings import Settings, load_settings
from dnd5e_mcp.tools.dispatcher import RequestDispatcher
from dnd5e_mcp.tools.manifest import list_tools


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="dnd5e-mcp",
        description="MCP server for the D&D 5th edition SRD API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dnd5e-mcp {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "serve",
        help="Run the MCP server on stdio (default)",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    subparsers.add_parser(
        "tools",
        help="Print the tool manifest as JSON",
    )

    call_parser = subparsers.add_parser(
        "call",
        help="Call a single tool and print its result",
    )
    call_parser.add_argument(
        "tool",
        help='Tool name, e.g. "get_resource"',
    )
    call_parser.add_argument(
        "--arg",
        dest="args",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Tool argument; repeatable. VALUE is parsed as JSON when possible, "
             "e.g. --arg endpoint=spells --arg level=3",
    )

    return parser


def parse_tool_arguments(pairs: list[str]) -> dict[str, Any]:
    """
    Turn KEY=VALUE strings into a tool argument mapping.

    Values that parse as JSON keep their JSON type (numbers, booleans);
    anything else is kept as a plain string.

    Raises:
        ValueError: If an entry has no "=" or an empty key
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got: {pair!r}")
        try:
            value = json.loads(raw)
        except ValueError:
            value = raw
        arguments[key] = value
    return arguments


def cmd_config(settings: Settings) -> int:
    """Display current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== dnd5e-mcp Configuration ===\n")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nServer Name: {settings.server.name}")
    logger.info(f"Server Version: {settings.server.version}")
    logger.info(f"\nAPI Timeout: {settings.api.timeout or 'disabled'}")
    logger.info(f"API User-Agent: {settings.api.user_agent}")

    return 0


def cmd_tools() -> int:
    """Print the tool manifest."""
    manifest = [
        tool.model_dump(mode="json", by_alias=True, exclude_none=True)
        for tool in list_tools()
    ]
    print(json.dumps(manifest, indent=2))
    return 0


async def cmd_call(args, settings: Settings) -> int:
    """Call one tool and print the envelope text."""
    logger = get_logger(__name__)

    try:
        arguments = parse_tool_arguments(args.args)
    except ValueError as e:
        logger.error(str(e))
        return 1

    async with RequestDispatcher(settings.api) as dispatcher:
        envelope = await dispatcher.call(args.tool, arguments)

    if envelope.is_error:
        print(envelope.text, file=sys.stderr)
        return 1

    print(envelope.text)
    return 0


async def cmd_serve(settings: Settings) -> int:
    """Run the stdio MCP server."""
    from dnd5e_mcp.server import serve

    logger = get_logger(__name__)
    try:
        await serve(settings)
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1
    return 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "tools":
        return cmd_tools()
    elif args.command == "call":
        return asyncio.run(cmd_call(args, settings))
    else:
        # Default: serve on stdio
        return asyncio.run(cmd_serve(settings))


if __name__ == "__main__":
    sys.exit(main())
