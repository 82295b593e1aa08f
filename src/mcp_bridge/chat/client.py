"""Async client for OpenAI-compatible chat-completion endpoints.

This module wraps ``httpx.AsyncClient`` to issue a single
``POST <base_url>/v1/chat/completions`` request per call. The client holds no
per-conversation state, so one instance is created at startup and shared by
all requests.
"""

import logging
from typing import Any, Sequence

import httpx

from mcp_bridge.chat.types import Message
from mcp_bridge.errors import TransportError, UpstreamUnavailableError

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class ChatClient:
    """Async client for a chat-completion proxy.

    Attributes:
        base_url: The proxy base URL (e.g., "http://localhost:4000")
        _client: The underlying httpx.AsyncClient instance
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            base_url: The proxy base URL
            timeout: Request timeout in seconds, None for no timeout
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        logger.info(f"ChatClient initialized with base URL: {self.base_url}")

    @property
    def completions_url(self) -> str:
        """Full URL of the chat-completions endpoint."""
        return f"{self.base_url}{CHAT_COMPLETIONS_PATH}"

    async def chat_completion(
        self,
        model: str,
        messages: Sequence[Message],
        tools: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Request the next assistant turn for a conversation.

        Args:
            model: The model identifier to request
            messages: The full conversation so far
            tools: Function-calling schema list offered to the model

        Returns:
            dict: The decoded response body, ``{"choices": [{"message": ...}]}``

        Raises:
            UpstreamUnavailableError: If the proxy cannot be reached
            TransportError: If the proxy answers with a non-success status
                or a body that is not JSON
        """
        payload = {
            "model": model,
            "messages": [message.to_openai() for message in messages],
            "tools": tools,
            "tool_choice": "auto",
        }
        logger.debug(
            f"Requesting chat completion: model={model}, "
            f"messages={len(messages)}, tools={len(tools)}"
        )

        try:
            response = await self._client.post(self.completions_url, json=payload)
        except httpx.TransportError as e:
            logger.error(f"Chat completion request failed: {e}")
            raise UpstreamUnavailableError("OpenAI proxy unavailable") from e

        if response.is_error:
            excerpt = response.text[:200]
            logger.error(
                f"Chat completion returned HTTP {response.status_code}: {excerpt}"
            )
            raise TransportError(
                f"Chat completion failed with HTTP {response.status_code}: {excerpt}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                "Chat completion returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                "Chat completion returned an unexpected body",
                status_code=response.status_code,
            )
        return data

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
        logger.debug("ChatClient closed")
