"""AssistantSession: one assistant request from prompt to answer.

This module provides the AssistantSession class which handles:
- Validating that both upstream endpoints are configured
- Opening the MCP connection and guaranteeing it is closed afterwards
- Fetching the tool catalog and running the agent loop
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from mcp_bridge.agents.loop import AgentLoop
from mcp_bridge.agents.types import RunOutcome
from mcp_bridge.chat.client import ChatClient
from mcp_bridge.config import McpBridgeSettings
from mcp_bridge.errors import ConfigurationError
from mcp_bridge.toolhost.client import McpToolClient
from mcp_bridge.tools.schema import to_openai_tools

logger = logging.getLogger(__name__)


class AssistantSession:
    """Runs a single prompt against the configured MCP server and chat proxy.

    A new session is created for every request. Nothing is shared between
    sessions except the stateless chat client.
    """

    def __init__(
        self,
        settings: McpBridgeSettings,
        chat_client: ChatClient,
        tool_client_factory: Callable[[str], McpToolClient] | None = None,
    ):
        """Initialize an AssistantSession.

        Args:
            settings: Resolved application settings
            chat_client: Shared chat-completion client
            tool_client_factory: Builds a tool client from the MCP server URL
                (default: McpToolClient)
        """
        self.settings = settings
        self.chat_client = chat_client
        self.tool_client_factory = tool_client_factory or McpToolClient

    def _require_configuration(self) -> str:
        """Return the MCP server URL, or raise if any endpoint is missing."""
        if not self.settings.mcp_server_url or not self.settings.openai_proxy_url:
            logger.error(
                "Missing endpoint configuration: "
                f"mcp_server_url={'set' if self.settings.mcp_server_url else 'unset'}, "
                f"openai_proxy_url={'set' if self.settings.openai_proxy_url else 'unset'}"
            )
            raise ConfigurationError()
        return self.settings.mcp_server_url

    @asynccontextmanager
    async def _connected_tool_client(self, server_url: str) -> AsyncIterator[McpToolClient]:
        """Yield a connected tool client and always close it afterwards.

        Errors raised while closing are logged and dropped, so they never
        replace the result or the exception of the enclosed block.
        """
        tool_client = self.tool_client_factory(server_url)
        try:
            await tool_client.connect()
            yield tool_client
        finally:
            try:
                await tool_client.close()
            except Exception as e:
                logger.warning(f"Failed to close MCP connection: {e}")

    async def run(self, prompt: str) -> RunOutcome:
        """Answer a prompt, calling MCP tools as the model requests.

        Args:
            prompt: The user's request

        Returns:
            RunOutcome: The final answer and the number of tool calls made

        Raises:
            ConfigurationError: If either endpoint URL is missing
            TransportError: If the chat proxy or MCP server fails
        """
        server_url = self._require_configuration()

        async with self._connected_tool_client(server_url) as tool_client:
            catalog = await tool_client.list_tools()
            tools = to_openai_tools(catalog)
            logger.info(f"Loaded {len(tools)} tools from MCP server")

            loop = AgentLoop(
                chat_client=self.chat_client,
                tool_client=tool_client,
                model=self.settings.openai_model,
                max_rounds=self.settings.max_rounds,
            )
            return await loop.run(prompt, tools)
