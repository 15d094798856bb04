"""
Logging configuration and setup.

All console output goes to stderr: stdout carries the MCP stdio transport
and must only ever contain protocol messages.
"""

import logging
import sys
from pathlib import Path

from dnd5e_mcp.config.settings import Settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> None:
    """
    Configure the ``dnd5e_mcp`` logger from settings.

    Args:
        settings: Application settings containing log configuration
    """
    level = getattr(logging, settings.log_level)
    package_logger = logging.getLogger("dnd5e_mcp")
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")
    )
    package_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt=DATE_FORMAT,
        ))
        package_logger.addHandler(file_handler)

    package_logger.propagate = False
    package_logger.debug(f"Logging initialized - Level: {settings.log_level}")


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``dnd5e_mcp`` namespace."""
    if name == "dnd5e_mcp" or name.startswith("dnd5e_mcp."):
        return logging.getLogger(name)
    return logging.getLogger(f"dnd5e_mcp.{name}")
