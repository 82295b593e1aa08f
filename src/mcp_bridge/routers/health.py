"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from mcp_bridge.config import McpBridgeSettings
from mcp_bridge.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Reports the service version and whether the upstream endpoints are
    configured. No connection to either upstream is attempted.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and configuration summary.
    """
    from mcp_bridge import __version__

    settings: McpBridgeSettings = request.app.state.settings
    logger.debug(f"Health check: configured={settings.is_configured}")

    return HealthResponse(
        status="ok",
        version=__version__,
        configured=settings.is_configured,
        mcp_server_url=settings.mcp_server_url,
        openai_proxy_url=settings.openai_proxy_url,
        model=settings.openai_model,
    )
