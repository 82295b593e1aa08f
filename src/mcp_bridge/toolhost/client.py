"""Async client for an MCP tool-hosting server.

This module wraps the MCP SDK's ``ClientSession`` running over the
streamable-HTTP transport. One client owns one connection; it is created
per assistant request and closed when the request finishes.
"""

import logging
from contextlib import AsyncExitStack
from typing import Any

import anyio
import httpx
from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client

from mcp_bridge.errors import UpstreamUnavailableError
from mcp_bridge.toolhost.types import ToolDescriptor, ToolInvocationResult

logger = logging.getLogger(__name__)

# Failures meaning the server can no longer be reached, as opposed to
# protocol or tool errors reported by a live server
CONNECTION_ERRORS = (
    httpx.TransportError,
    anyio.ClosedResourceError,
    anyio.BrokenResourceError,
    anyio.EndOfStream,
    ConnectionError,
)


def _content_item_to_dict(item: Any) -> dict[str, Any]:
    """Convert an MCP content block into a plain dict."""
    if isinstance(item, dict):
        return item
    if hasattr(item, "model_dump"):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {"type": "unknown", "value": str(item)}


class McpToolClient:
    """Client for listing and calling tools on one MCP server.

    Attributes:
        server_url: The MCP server's streamable-HTTP endpoint
        _stack: Exit stack holding the transport and session contexts
        _session: The initialized ClientSession, None until connected
    """

    def __init__(self, server_url: str) -> None:
        self.server_url = server_url
        self._stack: AsyncExitStack | None = None
        self._session: ClientSession | None = None

    @property
    def connected(self) -> bool:
        return self._session is not None

    async def connect(self) -> None:
        """Open the transport, start a session and run the MCP handshake.

        Raises:
            UpstreamUnavailableError: If the server cannot be reached or the
                handshake fails
        """
        stack = AsyncExitStack()
        self._stack = stack
        try:
            read_stream, write_stream, _ = await stack.enter_async_context(
                streamablehttp_client(self.server_url)
            )
            session = await stack.enter_async_context(
                ClientSession(read_stream, write_stream)
            )
            await session.initialize()
        except Exception as e:
            logger.error(f"Failed to connect to MCP server {self.server_url}: {e}")
            raise UpstreamUnavailableError("MCP server unavailable") from e

        self._session = session
        logger.info(f"Connected to MCP server: {self.server_url}")

    def _require_session(self) -> ClientSession:
        if self._session is None:
            raise RuntimeError("McpToolClient is not connected")
        return self._session

    async def list_tools(self) -> list[ToolDescriptor]:
        """Fetch the server's tool catalog."""
        session = self._require_session()
        try:
            result = await session.list_tools()
        except CONNECTION_ERRORS as e:
            logger.error(f"Lost connection to MCP server while listing tools: {e}")
            raise UpstreamUnavailableError("MCP server unavailable") from e
        tools = [ToolDescriptor.from_mcp_tool(tool) for tool in result.tools]
        logger.debug(f"MCP server advertised {len(tools)} tools")
        return tools

    async def call_tool(
        self, name: str, arguments: dict[str, Any]
    ) -> ToolInvocationResult:
        """Invoke a named tool.

        Connection-level failures raise UpstreamUnavailableError; any other
        error raised by the SDK propagates unchanged.
        """
        session = self._require_session()
        try:
            result = await session.call_tool(name, arguments)
        except CONNECTION_ERRORS as e:
            logger.error(f"Lost connection to MCP server calling '{name}': {e}")
            raise UpstreamUnavailableError("MCP server unavailable") from e
        return ToolInvocationResult(
            content=[_content_item_to_dict(item) for item in result.content or []],
            is_error=bool(getattr(result, "isError", False)),
        )

    async def close(self) -> None:
        """Tear down the session and transport.

        Safe to call before connect() or more than once; only the first call
        after a connect attempt does any work.
        """
        stack, self._stack = self._stack, None
        self._session = None
        if stack is None:
            return
        await stack.aclose()
        logger.debug(f"MCP connection closed: {self.server_url}")
