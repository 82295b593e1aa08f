"""Pydantic models for API request and response schemas."""

from mcp_bridge.models.assistant import AssistantRequest, AssistantResponse
from mcp_bridge.models.health import HealthResponse

__all__ = [
    "AssistantRequest",
    "AssistantResponse",
    "HealthResponse",
]
