"""Multi-round tool-calling loop between a chat model and an MCP server.

Each round asks the model for its next turn. A turn without tool calls ends
the run with that turn's text. Otherwise every requested tool is invoked in
order, each result is appended as a ``tool`` message, and the next round
starts. After ``max_rounds`` model calls the run stops with a fixed answer.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from mcp_bridge.agents.prompts import CALENDAR_ASSISTANT_PROMPT, current_time_prompt
from mcp_bridge.agents.types import LoopState, RunOutcome
from mcp_bridge.chat.client import ChatClient
from mcp_bridge.chat.types import (
    AssistantMessage,
    Message,
    SystemMessage,
    ToolCallRequest,
    ToolMessage,
    UserMessage,
)
from mcp_bridge.toolhost.client import McpToolClient
from mcp_bridge.tools.arguments import parse_tool_arguments
from mcp_bridge.tools.results import tool_result_text

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 6
MAX_ROUNDS_ANSWER = "Max tool-call rounds reached without completion."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _first_choice_message(response: dict[str, Any]) -> AssistantMessage | None:
    """Extract ``choices[0].message`` from a chat-completion response."""
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    choice = choices[0]
    if not isinstance(choice, dict):
        return None
    return AssistantMessage.from_openai(choice.get("message"))


class AgentLoop:
    """Drives one conversation until the model answers or the budget runs out.

    An AgentLoop is good for a single run; the conversation it builds is
    exposed as ``messages`` for inspection and discarded with the instance.
    """

    def __init__(
        self,
        chat_client: ChatClient,
        tool_client: McpToolClient,
        model: str,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        system_prompt: str = CALENDAR_ASSISTANT_PROMPT,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the loop.

        Args:
            chat_client: Client for the chat-completion endpoint
            tool_client: Connected client for the MCP server
            model: Model identifier sent with every request
            max_rounds: Maximum number of model calls in one run
            system_prompt: Instruction placed first in the conversation
            clock: Returns the current time for the timestamp message
        """
        self.chat_client = chat_client
        self.tool_client = tool_client
        self.model = model
        self.max_rounds = max_rounds
        self.system_prompt = system_prompt
        self.clock = clock

        self.state = LoopState.AWAITING_MODEL
        self.messages: list[Message] = []
        self.tool_call_count = 0

    def _seed(self, prompt: str) -> None:
        self.messages = [
            SystemMessage(content=self.system_prompt),
            SystemMessage(content=current_time_prompt(self.clock())),
            UserMessage(content=prompt),
        ]

    def _finish(self, answer: str) -> RunOutcome:
        self.state = LoopState.DONE
        logger.info(
            f"Agent loop finished: tool_calls={self.tool_call_count}, "
            f"answer_length={len(answer)}"
        )
        return RunOutcome(answer=answer, tool_calls=self.tool_call_count)

    async def _execute_tool_call(self, call: ToolCallRequest) -> None:
        arguments = parse_tool_arguments(call.arguments, tool_name=call.name)
        logger.info(f"Calling tool '{call.name}' (id={call.id})")
        logger.debug(f"Tool '{call.name}' arguments: {arguments}")

        result = await self.tool_client.call_tool(call.name, arguments)
        self.tool_call_count += 1

        if result.is_error:
            logger.warning(f"Tool '{call.name}' reported an error result")

        self.messages.append(
            ToolMessage(tool_call_id=call.id, content=tool_result_text(result.content))
        )

    async def run(self, prompt: str, tools: list[dict[str, Any]]) -> RunOutcome:
        """Run the loop to completion.

        Args:
            prompt: The user's request
            tools: Function-calling schema list offered to the model

        Returns:
            RunOutcome: The final answer and the number of tool calls made

        Raises:
            Exception: Any chat or tool failure aborts the run unchanged
        """
        self._seed(prompt)
        self.tool_call_count = 0
        self.state = LoopState.AWAITING_MODEL

        for round_number in range(1, self.max_rounds + 1):
            logger.debug(
                f"Round {round_number}/{self.max_rounds}: "
                f"{len(self.messages)} messages in conversation"
            )
            response = await self.chat_client.chat_completion(
                model=self.model,
                messages=self.messages,
                tools=tools,
            )

            assistant_message = _first_choice_message(response)
            if assistant_message is None or not assistant_message.tool_calls:
                answer = ""
                if assistant_message is not None and assistant_message.content:
                    answer = assistant_message.content
                return self._finish(answer)

            self.messages.append(assistant_message)
            self.state = LoopState.EXECUTING_TOOLS
            logger.debug(
                f"Model requested {len(assistant_message.tool_calls)} tool calls: "
                f"{[call.name for call in assistant_message.tool_calls]}"
            )

            for call in assistant_message.tool_calls:
                await self._execute_tool_call(call)

            self.state = LoopState.AWAITING_MODEL

        logger.warning(f"Agent loop hit the round limit ({self.max_rounds})")
        return self._finish(MAX_ROUNDS_ANSWER)
