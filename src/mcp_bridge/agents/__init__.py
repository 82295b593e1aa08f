"""Agent loop orchestration.

This package provides the multi-round loop that lets a chat model call MCP
tools until it produces a final answer.
"""

from mcp_bridge.agents.loop import DEFAULT_MAX_ROUNDS, MAX_ROUNDS_ANSWER, AgentLoop
from mcp_bridge.agents.types import LoopState, RunOutcome

__all__ = [
    "AgentLoop",
    "LoopState",
    "RunOutcome",
    "DEFAULT_MAX_ROUNDS",
    "MAX_ROUNDS_ANSWER",
]
