"""mcp-bridge: Headless FastAPI server that lets a chat model call MCP tools.

The server accepts a prompt, forwards it to an OpenAI-compatible
chat-completion proxy together with the tool catalog of an MCP server, and
runs the model's tool calls against that server until it produces an answer.
"""

__version__ = "0.1.0"

from mcp_bridge.app import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
