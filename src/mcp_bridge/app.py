"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mcp_bridge.chat import ChatClient
from mcp_bridge.config import McpBridgeSettings
from mcp_bridge.routers import assistant, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The chat client is created once at startup and stored in app.state for
    reuse across all requests. MCP connections are not opened here; each
    request opens and closes its own.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: McpBridgeSettings = app.state.settings
    app.state.chat_client = ChatClient(
        base_url=settings.openai_proxy_url or "",
        timeout=settings.request_timeout,
    )

    if settings.is_configured:
        logger.info(
            f"Configured with MCP server {settings.mcp_server_url} "
            f"and chat proxy {settings.openai_proxy_url} (model: {settings.openai_model})"
        )
    else:
        logger.warning(
            "MCP_SERVER_URL and/or OPENAI_PROXY_URL not set - "
            "assistant requests will fail until configured"
        )

    yield

    if hasattr(app.state, "chat_client"):
        await app.state.chat_client.close()
        logger.info("Chat client closed")


def create_app(settings: McpBridgeSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional McpBridgeSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    from mcp_bridge import __version__

    if settings is None:
        from mcp_bridge.dependencies import get_settings

        settings = get_settings()

    logging.getLogger("mcp_bridge").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="mcp-bridge",
        description="Headless FastAPI server that lets a chat model call MCP tools",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan and dependency access
    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(assistant.router)

    return app
