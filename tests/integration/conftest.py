"""Pytest configuration for integration tests.

This module provides integration-test-specific fixtures that replace the
chat proxy and MCP server clients, so API tests run without network access.
"""

from unittest.mock import AsyncMock, patch

import pytest

from mcp_bridge.toolhost import ToolDescriptor, ToolInvocationResult


@pytest.fixture(autouse=True)
def mock_chat_client():
    """Mock ChatClient for all integration tests.

    This fixture patches the ChatClient class before the app is created,
    ensuring the lifespan uses our mock instead of creating a real client.
    """
    with patch("mcp_bridge.app.ChatClient") as mock_client_class:
        mock_instance = AsyncMock()
        mock_client_class.return_value = mock_instance
        yield mock_instance


@pytest.fixture(autouse=True)
def mock_tool_client():
    """Mock McpToolClient for all integration tests.

    Every assistant request gets this same instance, pre-loaded with a small
    calendar tool catalog.
    """
    with patch("mcp_bridge.sessions.session.McpToolClient") as mock_client_class:
        mock_instance = AsyncMock()
        mock_instance.list_tools.return_value = [
            ToolDescriptor(
                name="listEvents",
                description="List calendar events",
                input_schema={
                    "type": "object",
                    "properties": {"date": {"type": "string"}},
                },
            ),
            ToolDescriptor(
                name="createEvent",
                description="Create a calendar event",
                input_schema={
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "start": {"type": "string"},
                    },
                    "required": ["title", "start"],
                },
            ),
        ]
        mock_instance.call_tool.return_value = ToolInvocationResult(
            content=[{"type": "text", "text": "No events"}]
        )
        mock_client_class.return_value = mock_instance
        mock_instance.factory = mock_client_class

        yield mock_instance
