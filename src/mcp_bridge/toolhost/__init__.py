"""MCP tool-hosting client and types.

This package connects to an MCP server over streamable HTTP, lists its
tools and invokes them on behalf of the agent loop.
"""

from mcp_bridge.toolhost.client import McpToolClient
from mcp_bridge.toolhost.types import ToolDescriptor, ToolInvocationResult

__all__ = ["McpToolClient", "ToolDescriptor", "ToolInvocationResult"]
