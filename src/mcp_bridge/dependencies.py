"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
routers to inject settings, the shared chat client and per-request sessions.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from mcp_bridge.chat.client import ChatClient
from mcp_bridge.config import McpBridgeSettings
from mcp_bridge.sessions.session import AssistantSession


@lru_cache
def get_settings() -> McpBridgeSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    and an optional .env file.

    Returns:
        McpBridgeSettings: The application configuration settings.
    """
    return McpBridgeSettings()


def get_chat_client(request: Request) -> ChatClient:
    """Get the chat-completion client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ChatClient: The shared chat client instance.

    Raises:
        HTTPException: If the chat client is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "chat_client"):
        raise HTTPException(
            status_code=503,
            detail="Chat client not initialized",
        )
    return request.app.state.chat_client


def get_assistant_session(request: Request) -> AssistantSession:
    """Create a fresh AssistantSession for this request.

    Args:
        request: The FastAPI request object.

    Returns:
        AssistantSession: A new session bound to the app settings.
    """
    # Use settings from app.state instead of cached get_settings()
    # This ensures tests can use their own isolated settings
    settings = request.app.state.settings
    return AssistantSession(settings=settings, chat_client=get_chat_client(request))
