"""
Request dispatcher for the D&D 5e API tools.

Turns a tool call into a single GET against the remote API and maps the
outcome into a ResponseEnvelope. Calls are independent of each other; the
only shared resource is the optional HTTP connection pool opened by
``initialize()``.
"""

import json
from typing import Any

import httpx
from mcp import types

from dnd5e_mcp.config.logging import get_logger
from dnd5e_mcp.config.settings import ApiSettings, get_settings
from dnd5e_mcp.tools.base import ToolAdapter
from dnd5e_mcp.tools.envelope import ResponseEnvelope
from dnd5e_mcp.tools.errors import RemoteHttpError, ToolError, TransportError
from dnd5e_mcp.tools.manifest import list_tools
from dnd5e_mcp.tools.routes import build_path

API_BASE_URL = "https://www.dnd5eapi.co/api"

logger = get_logger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """Decode a success body; non-JSON bodies pass through as text."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _describe_error_body(response: httpx.Response) -> tuple[Any, str]:
    """Return the decoded error body and its compact JSON text.

    Falls back to the raw body text when the remote error is not JSON.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text, response.text
    return body, json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class RequestDispatcher(ToolAdapter):
    """
    Tool adapter backed by the public D&D 5e REST API.

    Can be used as an async context manager to share one ``httpx.AsyncClient``
    across calls. Without ``initialize()`` every call opens a short-lived
    client of its own.
    """

    def __init__(
        self,
        settings: ApiSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            settings: API client settings. Defaults to the global settings.
            transport: Optional httpx transport, mainly for tests.
        """
        self._settings = settings if settings is not None else get_settings().api
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            },
            follow_redirects=True,
            transport=self._transport,
        )

    async def initialize(self) -> None:
        """Open the shared HTTP client."""
        if self._client is None:
            self._client = self._new_client()

    async def shutdown(self) -> None:
        """Close the shared HTTP client, if any."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def list_tools(self) -> list[types.Tool]:
        return list_tools()

    async def call(self, tool_name: str, arguments: dict[str, Any] | None) -> ResponseEnvelope:
        """Run one tool call. Never raises; failures become error envelopes."""
        try:
            path = build_path(tool_name, arguments)
            logger.debug(f"{tool_name} -> GET {path}")
            data = await self.fetch(path)
        except ToolError as e:
            logger.warning(f"Tool {tool_name} failed: {e}")
            return ResponseEnvelope.failure(e)
        except Exception as e:
            logger.error(f"Unexpected error in tool {tool_name}: {e}", exc_info=True)
            return ResponseEnvelope.failure(f"Internal error: {e}")

        return ResponseEnvelope.success(data)

    async def fetch(self, path: str) -> Any:
        """
        GET a path relative to the API base URL and decode the body.

        Args:
            path: Path beginning with "/", optionally with a query string

        Returns:
            The decoded JSON body

        Raises:
            RemoteHttpError: If the API responds with a non-2xx status
            TransportError: If no response could be obtained
        """
        url = f"{API_BASE_URL}{path}"
        if self._client is not None:
            return await self._get(self._client, url)

        async with self._new_client() as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> Any:
        try:
            response = await client.get(url)
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            body, body_text = _describe_error_body(response)
            raise RemoteHttpError(response.status_code, body, body_text)

        return _decode_body(response)
