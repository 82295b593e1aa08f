"""Data types for chat-completion conversations.

This module defines the message and tool-call structures exchanged with an
OpenAI-compatible chat-completion endpoint. Every type knows how to render
itself in the wire format expected by ``/v1/chat/completions``.
"""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ToolCallRequest:
    """A single tool call requested by the assistant.

    ``arguments`` holds the raw JSON string produced by the model. It is
    decoded lazily by the agent loop, never here.
    """

    id: str = ""
    name: str = ""
    arguments: str = ""

    @staticmethod
    def from_openai(data: Any) -> "ToolCallRequest":
        """Build a ToolCallRequest from an untyped ``tool_calls`` entry.

        Missing or malformed fields become empty strings rather than errors.
        """
        if not isinstance(data, dict):
            return ToolCallRequest()

        function = data.get("function")
        if not isinstance(function, dict):
            function = {}

        arguments = function.get("arguments")
        if arguments is None:
            arguments = ""
        elif not isinstance(arguments, str):
            # Some proxies hand back already-decoded arguments
            arguments = json.dumps(arguments)

        return ToolCallRequest(
            id=str(data.get("id") or ""),
            name=str(function.get("name") or ""),
            arguments=arguments,
        )

    def to_openai(self) -> dict[str, Any]:
        """Render in chat-completion wire format."""
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


@dataclass
class SystemMessage:
    """A system instruction."""

    role: str = "system"
    content: str = ""

    def __post_init__(self) -> None:
        """Validate role is always 'system'."""
        self.role = "system"

    def to_openai(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class UserMessage:
    """A message from the user."""

    role: str = "user"
    content: str = ""

    def __post_init__(self) -> None:
        """Validate role is always 'user'."""
        self.role = "user"

    def to_openai(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class AssistantMessage:
    """A response from the model.

    ``content`` is ``None`` when the model sent no text alongside its tool
    calls. It is kept as ``None`` (``null`` on the wire), not coerced to "".
    """

    role: str = "assistant"
    content: str | None = None
    tool_calls: list[ToolCallRequest] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate role is always 'assistant'."""
        self.role = "assistant"

    @staticmethod
    def from_openai(data: Any) -> "AssistantMessage | None":
        """Build an AssistantMessage from a response ``message`` object.

        Returns None when *data* is not a mapping.
        """
        if not isinstance(data, dict):
            return None

        content = data.get("content")
        if content is not None and not isinstance(content, str):
            content = str(content)

        raw_calls = data.get("tool_calls") or []
        if not isinstance(raw_calls, list):
            raw_calls = []

        return AssistantMessage(
            content=content,
            tool_calls=[ToolCallRequest.from_openai(call) for call in raw_calls],
        )

    def to_openai(self) -> dict[str, Any]:
        message: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [call.to_openai() for call in self.tool_calls]
        return message


@dataclass
class ToolMessage:
    """A tool execution result, correlated to its request by ``tool_call_id``."""

    role: str = "tool"
    tool_call_id: str = ""
    content: str = ""

    def __post_init__(self) -> None:
        """Validate role is always 'tool'."""
        self.role = "tool"

    def to_openai(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "tool_call_id": self.tool_call_id,
            "content": self.content,
        }


# Union type for all message types
Message = SystemMessage | UserMessage | AssistantMessage | ToolMessage
