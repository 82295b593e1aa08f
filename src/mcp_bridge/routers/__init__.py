"""FastAPI routers for API endpoints.

Each router module defines endpoints for a specific domain.
"""

from mcp_bridge.routers import assistant, health

__all__ = [
    "assistant",
    "health",
]
