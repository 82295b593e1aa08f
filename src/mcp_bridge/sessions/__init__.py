"""Per-request assistant sessions.

This package owns the lifecycle of one assistant run: configuration checks,
the MCP connection and its teardown.
"""

from mcp_bridge.sessions.session import AssistantSession

__all__ = ["AssistantSession"]
