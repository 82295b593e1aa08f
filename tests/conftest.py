"""Pytest configuration and shared fixtures for mcp-bridge tests.

This module provides common fixtures used across all test modules,
including test settings, app creation and async client setup.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mcp_bridge import create_app
from mcp_bridge.config import McpBridgeSettings


@pytest.fixture
def test_settings():
    """Create test settings pointing at fake upstream endpoints.

    Returns:
        McpBridgeSettings: Settings instance configured for testing.
    """
    return McpBridgeSettings(
        _env_file=None,
        host="127.0.0.1",
        port=8000,
        mcp_server_url="http://mcp.test/mcp",
        openai_proxy_url="http://proxy.test",
        openai_model="gpt-4o",
        max_rounds=6,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


def _chat_response(content=None, tool_calls=None):
    message = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {"choices": [{"index": 0, "message": message}]}


def _tool_call(call_id, name, arguments="{}"):
    return {
        "id": call_id,
        "type": "function",
        "function": {"name": name, "arguments": arguments},
    }


@pytest.fixture
def make_chat_response():
    """Factory for chat-completion response bodies with a single choice."""
    return _chat_response


@pytest.fixture
def make_tool_call():
    """Factory for ``tool_calls`` entries as sent by the model."""
    return _tool_call
