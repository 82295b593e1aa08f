"""Conversion of MCP tool descriptors into function-calling schemas."""

from typing import Any, Iterable

from mcp_bridge.toolhost.types import ToolDescriptor


def to_openai_tool(tool: ToolDescriptor) -> dict[str, Any]:
    """Convert one ToolDescriptor to OpenAI function-calling format.

    MCP: {"name": "foo", "description": "...", "inputSchema": {...}}
    OpenAI: {"type": "function", "function": {"name": "foo", "description": "...", "parameters": {...}}}

    ``description`` is left out when the tool has none, and ``parameters``
    falls back to an empty schema.
    """
    function: dict[str, Any] = {"name": tool.name}
    if tool.description is not None:
        function["description"] = tool.description
    function["parameters"] = dict(tool.input_schema) if tool.input_schema else {}

    return {"type": "function", "function": function}


def to_openai_tools(tools: Iterable[ToolDescriptor]) -> list[dict[str, Any]]:
    """Convert a tool catalog, preserving order."""
    return [to_openai_tool(tool) for tool in tools]
