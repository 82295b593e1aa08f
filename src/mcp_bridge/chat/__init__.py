"""Chat-completion client and conversation types.

This package talks to an OpenAI-compatible ``/v1/chat/completions`` endpoint.
"""

from mcp_bridge.chat.client import ChatClient
from mcp_bridge.chat.types import (
    AssistantMessage,
    Message,
    SystemMessage,
    ToolCallRequest,
    ToolMessage,
    UserMessage,
)

__all__ = [
    "ChatClient",
    "Message",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "ToolCallRequest",
]
