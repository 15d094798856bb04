"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd5e_mcp import __version__


class ApiSettings(BaseSettings):
    """Outbound D&D 5e API client configuration."""

    timeout: float | None = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for the remote API before giving up. "
                    "None disables the timeout.",
    )
    user_agent: str = Field(
        default=f"dnd5e-mcp/{__version__}",
        description="User-Agent header sent with every request",
    )

    model_config = SettingsConfigDict(env_prefix="API_")


class ServerSettings(BaseSettings):
    """MCP server identity reported to the host during initialization."""

    name: str = Field(default="dnd5e-api-server", description="MCP server name")
    version: str = Field(default=__version__, description="MCP server version")

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class Settings(BaseSettings):
    """Main application settings."""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    api: ApiSettings = Field(default_factory=ApiSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
