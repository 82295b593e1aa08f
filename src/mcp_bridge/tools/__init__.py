"""Tool schema conversion, argument decoding and result normalization.

These helpers sit between the MCP tool catalog and the chat-completion
function-calling format. All of them are pure functions.
"""

from mcp_bridge.tools.arguments import parse_tool_arguments
from mcp_bridge.tools.results import tool_result_text
from mcp_bridge.tools.schema import to_openai_tool, to_openai_tools

__all__ = [
    "parse_tool_arguments",
    "tool_result_text",
    "to_openai_tool",
    "to_openai_tools",
]
