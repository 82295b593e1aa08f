"""Unit tests for chat message and tool-call types."""

from mcp_bridge.chat.types import (
    AssistantMessage,
    SystemMessage,
    ToolCallRequest,
    ToolMessage,
    UserMessage,
)


class TestToolCallRequest:
    """Tests for parsing and rendering tool calls."""

    def test_from_openai(self):
        call = ToolCallRequest.from_openai(
            {
                "id": "call_1",
                "type": "function",
                "function": {"name": "listEvents", "arguments": '{"a": 1}'},
            }
        )
        assert call == ToolCallRequest(
            id="call_1", name="listEvents", arguments='{"a": 1}'
        )

    def test_from_openai_missing_fields(self):
        call = ToolCallRequest.from_openai({"id": "call_1"})
        assert call.name == ""
        assert call.arguments == ""

    def test_from_openai_non_dict(self):
        assert ToolCallRequest.from_openai("garbage") == ToolCallRequest()

    def test_from_openai_decoded_arguments_reencoded(self):
        call = ToolCallRequest.from_openai(
            {"id": "c", "function": {"name": "f", "arguments": {"x": 1}}}
        )
        assert call.arguments == '{"x": 1}'

    def test_to_openai(self):
        call = ToolCallRequest(id="call_1", name="listEvents", arguments="{}")
        assert call.to_openai() == {
            "id": "call_1",
            "type": "function",
            "function": {"name": "listEvents", "arguments": "{}"},
        }


class TestMessages:
    """Tests for message roles and wire format."""

    def test_roles_are_fixed(self):
        assert SystemMessage(role="user").role == "system"
        assert UserMessage(role="system").role == "user"
        assert AssistantMessage(role="tool").role == "assistant"
        assert ToolMessage(role="user").role == "tool"

    def test_assistant_null_content_preserved(self):
        message = AssistantMessage(
            content=None,
            tool_calls=[ToolCallRequest(id="c1", name="f", arguments="{}")],
        )
        wire = message.to_openai()
        assert "content" in wire
        assert wire["content"] is None
        assert wire["tool_calls"][0]["id"] == "c1"

    def test_assistant_empty_content_preserved(self):
        assert AssistantMessage(content="").to_openai()["content"] == ""

    def test_assistant_without_tool_calls_has_no_key(self):
        assert "tool_calls" not in AssistantMessage(content="hi").to_openai()

    def test_assistant_from_openai(self):
        message = AssistantMessage.from_openai(
            {
                "role": "assistant",
                "content": None,
                "tool_calls": [
                    {"id": "c1", "function": {"name": "f", "arguments": "{}"}},
                    {"id": "c2", "function": {"name": "g", "arguments": ""}},
                ],
            }
        )
        assert message is not None
        assert message.content is None
        assert [call.id for call in message.tool_calls] == ["c1", "c2"]

    def test_assistant_from_openai_non_dict(self):
        assert AssistantMessage.from_openai(None) is None

    def test_tool_message_wire_format(self):
        message = ToolMessage(tool_call_id="c1", content="No events")
        assert message.to_openai() == {
            "role": "tool",
            "tool_call_id": "c1",
            "content": "No events",
        }
