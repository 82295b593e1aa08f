"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator, always "ok" while the server responds.
        version: The version of mcp-bridge.
        configured: Whether both upstream endpoint URLs are set.
        mcp_server_url: The configured MCP server URL, if any.
        openai_proxy_url: The configured chat proxy URL, if any.
        model: The model identifier sent to the chat proxy.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of mcp-bridge")
    configured: bool = Field(
        ..., description="Whether MCP server and chat proxy URLs are configured"
    )
    mcp_server_url: str | None = Field(default=None, description="MCP server URL")
    openai_proxy_url: str | None = Field(
        default=None, description="Chat-completion proxy base URL"
    )
    model: str = Field(..., description="Model identifier used for chat completions")
