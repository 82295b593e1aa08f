"""Type definitions for the tool-hosting (MCP) integration."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolDescriptor:
    """A tool advertised by the MCP server.

    Attributes:
        name: Tool name, unique within one catalog
        description: Optional human-readable description
        input_schema: Optional JSON Schema describing the arguments
    """

    name: str
    description: str | None = None
    input_schema: dict[str, Any] | None = None

    @staticmethod
    def from_mcp_tool(tool: Any) -> "ToolDescriptor":
        """Create a ToolDescriptor from an MCP ``Tool`` object or dict."""

        def get_value(obj: Any, key: str, default: Any = None) -> Any:
            if isinstance(obj, dict):
                return obj.get(key, default)
            return getattr(obj, key, default)

        input_schema = get_value(tool, "inputSchema")
        if not isinstance(input_schema, dict):
            input_schema = None

        return ToolDescriptor(
            name=get_value(tool, "name", ""),
            description=get_value(tool, "description"),
            input_schema=input_schema,
        )


@dataclass
class ToolInvocationResult:
    """The outcome of one ``call_tool`` request.

    Attributes:
        content: Content items as plain dicts, each tagged by ``type``
        is_error: Whether the server flagged the call as failed
    """

    content: list[dict[str, Any]] = field(default_factory=list)
    is_error: bool = False
